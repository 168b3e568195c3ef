"""
netstub Static Responses

Turns a static response descriptor into a mitmproxy response plus a body
stream, so response middleware written for real upstream responses can
run unchanged against stubbed data.
"""

import io
import logging
import time
from typing import BinaryIO, Callable, Dict, Optional, Union

from mitmproxy import http
from mitmproxy.net.http import status_codes

from ..common import looks_like_html
from .models import BodyValue, StaticResponse

logger = logging.getLogger("netstub.stubbing")

OnResponseFn = Callable[[http.Response, BinaryIO], None]


def build_synthetic_response(
    status_code: int,
    headers: Dict[str, str],
    body: Union[str, bytes]
) -> http.Response:
    """
    Build a response that looks like one received from a real server.

    The response is a plain mitmproxy message with no connection behind
    it, carrying the same bytes the body stream yields. When no
    content-type key is present and the body looks like HTML,
    ``text/html`` is assumed.

    Args:
        status_code: HTTP status code
        headers: Response headers (not modified)
        body: Body the response will carry

    Returns:
        mitmproxy Response
    """
    headers = dict(headers)

    if not any(str(k).lower() == 'content-type' for k in headers) and looks_like_html(body):
        headers['content-type'] = 'text/html'

    return http.Response(
        http_version=b"HTTP/1.1",
        status_code=status_code,
        reason=status_codes.RESPONSES.get(status_code, "").encode(),
        headers=http.Headers(
            [(str(k).encode('utf-8'), str(v).encode('utf-8')) for k, v in headers.items()]
        ),
        content=BodyValue.classify(body).to_bytes(),
        trailers=None,
        timestamp_start=time.time(),
        timestamp_end=None
    )


def send_static_response(
    flow: http.HTTPFlow,
    static_response: StaticResponse,
    on_response: OnResponseFn,
    body_stream: Optional[BinaryIO] = None
) -> None:
    """
    Answer a flow with a static response.

    With ``force_network_error`` set the flow is killed, which resets the
    client connection, and ``on_response`` is never called. Otherwise
    ``on_response`` is called once with the synthetic response and a body
    stream.

    Args:
        flow: Intercepted flow being answered
        static_response: Descriptor, with any fixture already resolved
        on_response: Called with (response, body stream)
        body_stream: Optional readable stream used as the body; when given,
            the descriptor's body is ignored
    """
    if static_response.force_network_error:
        logger.warning(f"Forcing network error for {flow.request.method} {flow.request.pretty_url}")
        if flow.killable:
            flow.kill()
        return

    status_code = static_response.status_code or 200
    headers = static_response.headers or {}
    body = '' if body_stream is not None else (static_response.body or '')

    response = build_synthetic_response(status_code, headers, body)

    if body_stream is None:
        body_stream = io.BytesIO()
        if body:
            body_stream.write(BodyValue.classify(body).to_bytes())
        body_stream.seek(0)

    logger.debug(f"Sending static response {status_code} for {flow.request.method} {flow.request.pretty_url}")
    on_response(response, body_stream)
