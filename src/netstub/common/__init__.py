"""
netstub Common Utilities

Shared helpers used across netstub modules.
"""

from .headers import case_insensitive_get, has_header
from .content_type import looks_like_html, parse_content_type

__all__ = [
    'case_insensitive_get',
    'has_header',
    'looks_like_html',
    'parse_content_type',
]
