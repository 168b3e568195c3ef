"""
netstub Stubbing Module

Static responses for intercepted requests.

This module provides:
- Matcher field indexing for route matcher options
- Fixture body resolution
- Synthetic mitmproxy responses and body streams
- Driver event forwarding
"""

from .config import StubbingConfig
from .events import emit
from .fixtures import set_body_from_fixture
from .matcher_fields import (
    DICT_STRING_MATCHER_FIELDS,
    STRING_MATCHER_FIELDS,
    get_all_string_matcher_fields
)
from .models import BodyKind, BodyValue, FixtureRef, StaticResponse, StaticResponseError
from .responder import StaticResponder
from .responses import build_synthetic_response, send_static_response
from .routes import StubRoute, load_routes

__all__ = [
    # Config
    'StubbingConfig',

    # Models
    'BodyKind',
    'BodyValue',
    'FixtureRef',
    'StaticResponse',
    'StaticResponseError',

    # Matcher fields
    'STRING_MATCHER_FIELDS',
    'DICT_STRING_MATCHER_FIELDS',
    'get_all_string_matcher_fields',

    # Responses
    'set_body_from_fixture',
    'build_synthetic_response',
    'send_static_response',
    'emit',

    # Routes
    'StubRoute',
    'load_routes',
    'StaticResponder',
]
