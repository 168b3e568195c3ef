"""
Tests for synthetic responses and the static response dispatcher.

Tests build_synthetic_response() and send_static_response() using mocked
flows in place of live mitmproxy flows.
"""

import io
from unittest.mock import Mock

import pytest
from mitmproxy import http

from netstub.stubbing.models import StaticResponse
from netstub.stubbing.responses import build_synthetic_response, send_static_response


@pytest.fixture
def flow():
    """Mocked intercepted flow."""
    flow = Mock()
    flow.request.method = 'GET'
    flow.request.pretty_url = 'https://api.example.com/users'
    flow.killable = True
    return flow


@pytest.fixture
def on_response():
    return Mock()


class TestBuildSyntheticResponse:
    """Test build_synthetic_response()."""

    def test_response_shape(self):
        response = build_synthetic_response(201, {'X-Id': '7'}, '')

        assert isinstance(response, http.Response)
        assert response.status_code == 201
        assert response.reason == 'Created'
        assert response.http_version == 'HTTP/1.1'
        assert response.headers['x-id'] == '7'

    def test_content_matches_body(self):
        """Test that the message carries the body bytes."""
        response = build_synthetic_response(200, {}, 'text')

        assert response.raw_content == b'text'
        assert response.text == 'text'

    def test_empty_content_type_value_kept(self):
        """Test that a present but empty content-type is not duplicated."""
        response = build_synthetic_response(200, {'Content-Type': ''}, '<p>hi</p>')

        assert response.headers.get_all('content-type') == ['']

    def test_html_content_type_inferred(self):
        response = build_synthetic_response(200, {}, '<p>hi</p>')

        assert response.headers['content-type'] == 'text/html'

    def test_existing_content_type_kept(self):
        response = build_synthetic_response(200, {'Content-Type': 'text/plain'}, '<p>hi</p>')

        assert response.headers.get_all('content-type') == ['text/plain']

    def test_non_markup_gets_no_content_type(self):
        response = build_synthetic_response(200, {}, '{"id": 1}')

        assert 'content-type' not in response.headers

    def test_caller_headers_not_mutated(self):
        headers = {}

        build_synthetic_response(200, headers, '<html></html>')

        assert headers == {}

    def test_unknown_status_has_empty_reason(self):
        assert build_synthetic_response(299, {}, '').reason == ''


class TestForceNetworkError:
    """Test forced network errors."""

    def test_flow_killed_and_no_callback(self, flow, on_response):
        send_static_response(flow, StaticResponse(force_network_error=True), on_response)

        flow.kill.assert_called_once()
        on_response.assert_not_called()

    def test_other_fields_ignored(self, flow, on_response):
        static_response = StaticResponse(
            status_code=200,
            body='<p>ignored</p>',
            force_network_error=True
        )

        send_static_response(flow, static_response, on_response, io.BytesIO(b'x'))

        flow.kill.assert_called_once()
        on_response.assert_not_called()

    def test_dead_flow_not_killed_again(self, flow, on_response):
        flow.killable = False

        send_static_response(flow, StaticResponse(force_network_error=True), on_response)

        flow.kill.assert_not_called()
        on_response.assert_not_called()


class TestSendStaticResponse:
    """Test send_static_response() with well-formed responses."""

    def test_html_body(self, flow, on_response):
        """Test status, inferred content-type and exact stream bytes."""
        static_response = StaticResponse(status_code=201, headers={}, body='<p>hi</p>')

        send_static_response(flow, static_response, on_response)

        on_response.assert_called_once()
        response, stream = on_response.call_args[0]
        assert response.status_code == 201
        assert response.headers['content-type'] == 'text/html'
        body = stream.read()
        assert body == b'<p>hi</p>'
        assert response.content == body

    def test_defaults(self, flow, on_response):
        send_static_response(flow, StaticResponse(), on_response)

        response, stream = on_response.call_args[0]
        assert response.status_code == 200
        assert len(response.headers) == 0
        assert stream.read() == b''

    def test_bytes_body(self, flow, on_response):
        send_static_response(flow, StaticResponse(body=b'\x00\xff'), on_response)

        _, stream = on_response.call_args[0]
        assert stream.read() == b'\x00\xff'

    def test_structured_body_written_as_json(self, flow, on_response):
        send_static_response(flow, StaticResponse(body={'ok': True}), on_response)

        _, stream = on_response.call_args[0]
        assert stream.read() == b'{"ok":true}'

    def test_descriptor_headers_not_mutated(self, flow, on_response):
        headers = {'X-Id': '1'}

        send_static_response(flow, StaticResponse(headers=headers, body='<p>x</p>'), on_response)

        assert headers == {'X-Id': '1'}

    def test_fresh_stream_per_call(self, flow):
        streams = []
        static_response = StaticResponse(body='abc')

        send_static_response(flow, static_response, lambda r, s: streams.append(s))
        send_static_response(flow, static_response, lambda r, s: streams.append(s))

        assert streams[0] is not streams[1]
        assert [s.read() for s in streams] == [b'abc', b'abc']


class TestExplicitBodyStream:
    """Test caller-supplied body streams."""

    def test_stream_passed_through(self, flow, on_response):
        body_stream = io.BytesIO(b'streamed')

        send_static_response(flow, StaticResponse(), on_response, body_stream)

        response, stream = on_response.call_args[0]
        assert stream is body_stream
        assert stream.read() == b'streamed'

    def test_descriptor_body_ignored(self, flow, on_response):
        """Test that a non-empty descriptor body is ignored when a stream is given."""
        body_stream = io.BytesIO(b'from stream')
        static_response = StaticResponse(body='<p>ignored</p>')

        send_static_response(flow, static_response, on_response, body_stream)

        response, stream = on_response.call_args[0]
        assert 'content-type' not in response.headers
        assert response.content == b''
        assert stream.read() == b'from stream'
        on_response.assert_called_once()

    def test_stream_not_read_by_dispatcher(self, flow, on_response):
        body_stream = io.BytesIO(b'untouched')

        send_static_response(flow, StaticResponse(status_code=204), on_response, body_stream)

        assert body_stream.tell() == 0
