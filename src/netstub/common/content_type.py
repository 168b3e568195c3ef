"""
Content-type inference for stubbed bodies.

Provides the default inference used when a fixture is served without an
explicit content-type, and the markup check used by the response builder.
"""

import json
import re
from typing import Any

# Only the head of the body is inspected
HTML_SNIFF_LIMIT = 1000

HTML_TAGS = [
    'a', 'abbr', 'address', 'area', 'article', 'aside', 'audio', 'b', 'base',
    'bdi', 'bdo', 'blockquote', 'body', 'br', 'button', 'canvas', 'caption',
    'cite', 'code', 'col', 'colgroup', 'data', 'datalist', 'dd', 'del',
    'details', 'dfn', 'dialog', 'div', 'dl', 'dt', 'em', 'embed', 'fieldset',
    'figcaption', 'figure', 'footer', 'form', 'h1', 'h2', 'h3', 'h4', 'h5',
    'h6', 'head', 'header', 'hgroup', 'hr', 'html', 'i', 'iframe', 'img',
    'input', 'ins', 'kbd', 'label', 'legend', 'li', 'link', 'main', 'map',
    'mark', 'math', 'menu', 'meta', 'meter', 'nav', 'noscript', 'object',
    'ol', 'optgroup', 'option', 'output', 'p', 'param', 'picture', 'pre',
    'progress', 'q', 'rp', 'rt', 'ruby', 's', 'samp', 'script', 'search',
    'section', 'select', 'slot', 'small', 'source', 'span', 'strong', 'style',
    'sub', 'summary', 'sup', 'svg', 'table', 'tbody', 'td', 'template',
    'textarea', 'tfoot', 'th', 'thead', 'time', 'title', 'tr', 'track', 'u',
    'ul', 'var', 'video', 'wbr',
]

_BASIC_HTML_RE = re.compile(r'\s?<!doctype html>|(<html\b[^>]*>|<body\b[^>]*>|<x-[^>]+>)+', re.IGNORECASE)
_FULL_HTML_RE = re.compile('|'.join(rf'<{tag}\b[^>]*>' for tag in HTML_TAGS), re.IGNORECASE)

JSON_CONTENT_TYPE = 'application/json'
HTML_CONTENT_TYPE = 'text/html'
TEXT_CONTENT_TYPE = 'text/plain'


def _as_text(data: Any) -> str:
    if isinstance(data, (bytes, bytearray)):
        return bytes(data).decode('utf-8', errors='replace')
    if isinstance(data, str):
        return data
    return ''


def looks_like_html(body: Any) -> bool:
    """
    Check whether a body looks like HTML markup.

    Args:
        body: Response body (str or bytes; anything else is never markup)

    Returns:
        True if a doctype or a known HTML tag appears near the start
    """
    text = _as_text(body).strip()[:HTML_SNIFF_LIMIT]
    if not text:
        return False
    return bool(_BASIC_HTML_RE.search(text) or _FULL_HTML_RE.search(text))


def _is_json(data: Any) -> bool:
    if not isinstance(data, (str, bytes, bytearray)):
        return data is not None

    text = _as_text(data)
    if not text:
        return False

    try:
        json.loads(text)
        return True
    except (json.JSONDecodeError, ValueError):
        return False


def parse_content_type(data: Any) -> str:
    """
    Infer a MIME type for fixture data.

    Structured values and text that parses as JSON are ``application/json``,
    markup is ``text/html``, everything else is ``text/plain``.
    """
    if _is_json(data):
        return JSON_CONTENT_TYPE
    if looks_like_html(data):
        return HTML_CONTENT_TYPE
    return TEXT_CONTENT_TYPE
