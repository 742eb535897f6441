"""Exact-match router.

Routes are registered during setup and frozen into an immutable lookup
structure when the app starts serving. Matching is a single dict lookup
on the request path: no parameters, no wildcards, no prefix matching.
"""

import logging
from types import MappingProxyType

from mockroute.errors import NotFound
from mockroute.routing.route import RenderedRoute

logger = logging.getLogger("mockroute.routing")


class Router:
    """Route table keyed by URI.

    Usage::

        router = Router()
        router.add(RenderedRoute.from_descriptor(RouteDescriptor("/ping")))
        router.compile()
        route = router.match("/ping")

    Adding a URI that is already registered replaces the earlier route
    (last registration wins).
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: dict[str, RenderedRoute] = {}
        self._compiled = False

    def add(self, route: RenderedRoute) -> None:
        """Add a route to the router. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)

        if route.uri in self._routes:
            logger.warning("Route %r registered twice; the later definition wins", route.uri)
        self._routes[route.uri] = route

    @property
    def routes(self) -> list[RenderedRoute]:
        """Return all registered routes in first-registration order."""
        return list(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, uri: object) -> bool:
        return uri in self._routes

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._routes = MappingProxyType(dict(self._routes))  # type: ignore[assignment]
        self._compiled = True

    def match(self, path: str) -> RenderedRoute:
        """Return the route registered for exactly *path*.

        Raises ``NotFound`` if no route is registered.
        """
        route = self._routes.get(path)
        if route is None:
            raise NotFound()
        return route
