"""
netstub Matcher Field Indexer

Works out which fields of a route's matcher options hold string matchers,
so the matching engine only pattern-matches the fields a route configures.
Dictionary-valued fields (headers, query) are flattened to one
``field.subkey`` path per configured key.
"""

from typing import Any, Dict, List, Sequence

# Plain string matcher fields, in matching order
STRING_MATCHER_FIELDS = [
    'auth.username',
    'auth.password',
    'hostname',
    'method',
    'path',
    'pathname',
    'url',
]

# Fields whose value maps sub-keys (header names, query params) to matchers
DICT_STRING_MATCHER_FIELDS = [
    'headers',
    'query',
]


def _has_field(options: Dict[str, Any], field: str) -> bool:
    """Check for a field as a literal key first, then as a dotted path."""
    if field in options:
        return True

    current: Any = options
    for part in field.split('.'):
        if not isinstance(current, dict) or part not in current:
            return False
        current = current[part]
    return True


def get_all_string_matcher_fields(
    options: Dict[str, Any],
    string_fields: Sequence[str] = STRING_MATCHER_FIELDS,
    dict_fields: Sequence[str] = DICT_STRING_MATCHER_FIELDS
) -> List[str]:
    """
    List the string matcher field paths configured in a route's options.

    Plain fields come first, in the order of ``string_fields``. They are
    followed by one ``field.subkey`` path per sub-key of each non-empty
    dictionary field, in the order of ``dict_fields``. Empty or missing
    dictionary fields contribute nothing. No deduplication is done.

    Args:
        options: Route matcher options (not modified)
        string_fields: Plain matcher field names
        dict_fields: Dictionary matcher field names

    Returns:
        Ordered list of field paths

    Example:
        get_all_string_matcher_fields({'url': '/users', 'headers': {'accept': 'json'}})
        # -> ['url', 'headers.accept']
    """
    fields = [field for field in string_fields if _has_field(options, field)]

    for field in dict_fields:
        value = options.get(field)
        if value:
            fields.extend(f"{field}.{key}" for key in value)

    return fields
