"""
netstub Static Responder

Holds registered stub routes and answers intercepted flows from static
response descriptors: resolve the fixture, then dispatch.
"""

import copy
import logging
from typing import Any, BinaryIO, Callable, Dict, List, Optional

from mitmproxy import http

from .config import StubbingConfig
from .fixtures import GetFixtureFn, set_body_from_fixture
from .matcher_fields import get_all_string_matcher_fields
from .models import StaticResponse
from .responses import OnResponseFn, send_static_response
from .routes import StubRoute, load_routes


class StaticResponder:
    """
    Registry of stub routes plus the resolve-then-dispatch entry point.

    Matcher fields are computed once per route, when it is registered.
    Responding never mutates a registered route's descriptor; each request
    works on its own copy.

    Example:
        responder = StaticResponder(fixtures.get)
        responder.load_routes('routes.yaml')

        route = responder.get_route('users')
        await responder.respond(flow, route.static_response, on_response)
    """

    def __init__(
        self,
        get_fixture: GetFixtureFn,
        config: Optional[StubbingConfig] = None,
        infer_content_type: Optional[Callable[[Any], str]] = None
    ):
        """
        Initialize responder.

        Args:
            get_fixture: Async fixture loader, called as get_fixture(path, encoding=...)
            config: Optional StubbingConfig
            infer_content_type: Optional MIME type inference for fixture data
        """
        self.get_fixture = get_fixture
        self.config = config or StubbingConfig()
        self.infer_content_type = infer_content_type
        self.routes: Dict[str, StubRoute] = {}

        self.logger = logging.getLogger("netstub.stubbing")
        self.logger.setLevel(getattr(logging, self.config.log_level.upper()))

        if self.config.routes_file:
            self.load_routes(self.config.routes_file)

    def add_route(self, route: StubRoute) -> StubRoute:
        """Register a route, replacing any route with the same id."""
        route.matcher_fields = get_all_string_matcher_fields(
            route.matcher,
            self.config.string_matcher_fields,
            self.config.dict_matcher_fields
        )
        self.routes[route.id] = route
        self.logger.info(f"Registered route {route.id} (matcher fields: {route.matcher_fields})")
        return route

    def load_routes(self, yaml_path: str) -> List[StubRoute]:
        """Register every route in a YAML file."""
        routes = [self.add_route(route) for route in load_routes(yaml_path)]
        self.logger.info(f"Loaded {len(routes)} routes from {yaml_path}")
        return routes

    def get_route(self, route_id: str) -> Optional[StubRoute]:
        """Get a registered route by id."""
        return self.routes.get(route_id)

    async def respond(
        self,
        flow: http.HTTPFlow,
        static_response: StaticResponse,
        on_response: OnResponseFn,
        body_stream: Optional[BinaryIO] = None
    ) -> None:
        """
        Resolve a descriptor's fixture and answer the flow with it.

        Fixture load errors propagate before ``on_response`` is called.
        """
        static_response = copy.deepcopy(static_response)

        await set_body_from_fixture(self.get_fixture, static_response, self.infer_content_type)
        send_static_response(flow, static_response, on_response, body_stream)
