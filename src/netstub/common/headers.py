"""
Header helpers for netstub.

Descriptor headers arrive as plain dictionaries (from YAML or the driver),
so lookups that must ignore case go through these helpers instead of
relying on the caller's key spelling.
"""

from typing import Mapping, Optional


def case_insensitive_get(headers: Mapping[str, str], lowercase_name: str) -> Optional[str]:
    """
    Look up a header value ignoring the case of the key.

    Keys are compared in iteration order and the first match wins, so a
    mapping carrying both ``Content-Type`` and ``content-type`` returns
    whichever was inserted first.

    Args:
        headers: Header mapping to search (not modified)
        lowercase_name: Header name, already lowercased

    Returns:
        The header value, or None if no key matches

    Example:
        case_insensitive_get({'Content-Type': 'text/html'}, 'content-type')
        # -> 'text/html'
    """
    for key in headers:
        if key.lower() == lowercase_name:
            return headers[key]
    return None


def has_header(headers: Optional[Mapping[str, str]], name: str) -> bool:
    """Check whether a header is present (and non-empty), ignoring case."""
    if not headers:
        return False
    return bool(case_insensitive_get(headers, name.lower()))
