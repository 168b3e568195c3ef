"""
netstub Static Response Models

Descriptor types for canned responses and the tagged body value used to
turn arbitrary fixture data into something that can go on the wire.
"""

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


def _finite_json(value: Any) -> Any:
    """Replace NaN and infinities with None, which JSON can carry."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite_json(v) for v in value]
    return value


class StaticResponseError(ValueError):
    """Raised when a static response descriptor cannot be parsed."""


class BodyKind(Enum):
    """How a body value is carried."""

    RAW = 'raw'
    TEXT = 'text'
    STRUCTURED = 'structured'


@dataclass(frozen=True)
class BodyValue:
    """
    A body value tagged with its kind.

    Raw bytes and text are sent as they are; anything else is structured
    data and is serialized to compact JSON.
    """

    kind: BodyKind
    value: Any

    @classmethod
    def classify(cls, value: Any) -> 'BodyValue':
        """Tag a value as raw bytes, text or structured data."""
        if isinstance(value, (bytes, bytearray)):
            return cls(BodyKind.RAW, bytes(value))
        if isinstance(value, str):
            return cls(BodyKind.TEXT, value)
        return cls(BodyKind.STRUCTURED, value)

    def to_body(self) -> Union[bytes, str]:
        """Return the value to store as a descriptor body."""
        if self.kind is BodyKind.STRUCTURED:
            return json.dumps(_finite_json(self.value), separators=(',', ':'), allow_nan=False)
        return self.value

    def to_bytes(self) -> bytes:
        """Return the bytes written to a body stream."""
        body = self.to_body()
        if isinstance(body, str):
            return body.encode('utf-8')
        return body


@dataclass(frozen=True)
class FixtureRef:
    """Reference to an on-disk fixture used as a response body."""

    file_path: str
    encoding: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FixtureRef':
        """Create FixtureRef from its wire shape (``filePath``, ``encoding``)."""
        if not isinstance(data, dict) or not data.get('filePath'):
            raise StaticResponseError(f"Fixture reference requires a 'filePath': {data!r}")

        return cls(file_path=data['filePath'], encoding=data.get('encoding'))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to wire shape."""
        return {'filePath': self.file_path, 'encoding': self.encoding}


@dataclass
class StaticResponse:
    """
    Declarative description of a stubbed response.

    Only one of ``body``, ``fixture`` and ``force_network_error`` is used at a
    time. When ``force_network_error`` is set every other field is ignored.
    """

    status_code: Optional[int] = None
    headers: Optional[Dict[str, str]] = None
    body: Any = None
    fixture: Optional[FixtureRef] = None
    force_network_error: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StaticResponse':
        """
        Create StaticResponse from its wire shape.

        Args:
            data: Mapping with optional ``statusCode``, ``headers``, ``body``,
                ``fixture`` and ``forceNetworkError`` keys

        Returns:
            Parsed StaticResponse

        Raises:
            StaticResponseError: If a field has the wrong type
        """
        if not isinstance(data, dict):
            raise StaticResponseError(f"Static response must be a mapping, got {type(data).__name__}")

        status_code = data.get('statusCode')
        if status_code is not None and (isinstance(status_code, bool) or not isinstance(status_code, int)):
            raise StaticResponseError(f"'statusCode' must be an integer, got {status_code!r}")

        headers = data.get('headers')
        if headers is not None:
            if not isinstance(headers, dict):
                raise StaticResponseError(f"'headers' must be a mapping, got {type(headers).__name__}")
            headers = {str(k): str(v) for k, v in headers.items()}

        fixture = data.get('fixture')

        return cls(
            status_code=status_code,
            headers=headers,
            body=data.get('body'),
            fixture=FixtureRef.from_dict(fixture) if fixture is not None else None,
            force_network_error=bool(data.get('forceNetworkError', False))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to wire shape, leaving out unset fields."""
        result: Dict[str, Any] = {}
        if self.status_code is not None:
            result['statusCode'] = self.status_code
        if self.headers is not None:
            result['headers'] = dict(self.headers)
        if self.body is not None:
            result['body'] = self.body
        if self.fixture is not None:
            result['fixture'] = self.fixture.to_dict()
        if self.force_network_error:
            result['forceNetworkError'] = True
        return result
