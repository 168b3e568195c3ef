"""
netstub Fixture Body Resolver

Fills a static response's body from a fixture, inferring a content-type
when the descriptor does not already carry one.
"""

import logging
from typing import Any, Awaitable, Callable, Optional

from ..common import has_header, parse_content_type
from .models import BodyValue, StaticResponse

logger = logging.getLogger("netstub.stubbing")

# get_fixture(file_path, encoding=...) -> bytes | str | structured value | None
GetFixtureFn = Callable[..., Awaitable[Any]]


async def set_body_from_fixture(
    get_fixture: GetFixtureFn,
    static_response: StaticResponse,
    infer_content_type: Optional[Callable[[Any], str]] = None
) -> None:
    """
    Load a static response's fixture and store it as the body.

    Does nothing when the descriptor has no fixture. A fixture that loads as
    None becomes an empty body with no content-type. Otherwise a
    content-type is inferred unless one is already set (in any case), and
    the data is stored as-is if it is bytes or text, or as JSON if it is
    structured.

    Errors raised by ``get_fixture`` propagate and leave the descriptor
    untouched.

    Args:
        get_fixture: Async fixture loader
        static_response: Descriptor to fill in (modified in place)
        infer_content_type: MIME type inference, defaults to parse_content_type
    """
    fixture = static_response.fixture

    if not fixture:
        return

    data = await get_fixture(fixture.file_path, encoding=fixture.encoding)
    logger.debug(f"Loaded fixture {fixture.file_path} ({type(data).__name__})")

    if data is None:
        static_response.body = ''
        return

    if not has_header(static_response.headers, 'content-type'):
        infer = infer_content_type or parse_content_type
        if static_response.headers is None:
            static_response.headers = {}
        static_response.headers['content-type'] = infer(data)

    static_response.body = BodyValue.classify(data).to_body()
