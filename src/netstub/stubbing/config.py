"""
netstub Configuration

Settings for route registration and logging. Values can be given directly
or read from ``NETSTUB_*`` environment variables.
"""

import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

from .matcher_fields import DICT_STRING_MATCHER_FIELDS, STRING_MATCHER_FIELDS


def _split_fields(value: str) -> List[str]:
    return [f.strip() for f in value.split(',') if f.strip()]


@dataclass
class StubbingConfig:
    """Configuration for static response stubbing."""

    # Matcher fields indexed at route registration
    string_matcher_fields: List[str] = field(default_factory=lambda: list(STRING_MATCHER_FIELDS))
    dict_matcher_fields: List[str] = field(default_factory=lambda: list(DICT_STRING_MATCHER_FIELDS))

    # Logging
    log_level: str = "info"

    # YAML file with routes to register on startup
    routes_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'StubbingConfig':
        """
        Build configuration from environment variables.

        Reads NETSTUB_LOG_LEVEL, NETSTUB_ROUTES_FILE and the comma-separated
        NETSTUB_STRING_MATCHER_FIELDS / NETSTUB_DICT_MATCHER_FIELDS. Unset
        variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        config = cls()

        config.log_level = env.get('NETSTUB_LOG_LEVEL', config.log_level)
        config.routes_file = env.get('NETSTUB_ROUTES_FILE') or None

        string_fields = env.get('NETSTUB_STRING_MATCHER_FIELDS', '')
        if string_fields:
            config.string_matcher_fields = _split_fields(string_fields)

        dict_fields = env.get('NETSTUB_DICT_MATCHER_FIELDS', '')
        if dict_fields:
            config.dict_matcher_fields = _split_fields(dict_fields)

        return config
