"""
netstub Stub Routes

YAML route definitions pairing matcher options with a static response.

Example file:

    routes:
      - id: users
        matcher:
          method: GET
          url: /api/users
          headers:
            accept: application/json
        staticResponse:
          statusCode: 200
          fixture:
            filePath: users.json
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

import yaml

from .models import StaticResponse, StaticResponseError


@dataclass
class StubRoute:
    """A registered route: what to match and how to answer."""

    id: str
    matcher: Dict[str, Any]
    static_response: StaticResponse
    matcher_fields: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StubRoute':
        """Create StubRoute from dictionary."""
        if not isinstance(data, dict):
            raise StaticResponseError(f"Route must be a mapping, got {type(data).__name__}")
        if 'id' not in data:
            raise StaticResponseError(f"Route is missing an 'id': {data!r}")

        matcher = data.get('matcher') or {}
        if not isinstance(matcher, dict):
            raise StaticResponseError(f"Route '{data['id']}' matcher must be a mapping")

        return cls(
            id=str(data['id']),
            matcher=matcher,
            static_response=StaticResponse.from_dict(data.get('staticResponse') or {})
        )


def load_routes(yaml_path: str) -> List[StubRoute]:
    """
    Load routes from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        StaticResponseError: If the file or a route is malformed
    """
    with open(yaml_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict) or not isinstance(data.get('routes', []), list):
        raise StaticResponseError(
            f"Unexpected format in {yaml_path}. Expected a mapping with a 'routes' list."
        )

    return [StubRoute.from_dict(route) for route in data.get('routes', [])]
