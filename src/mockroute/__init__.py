"""mockroute — a configuration-driven HTTP mock server.

Serves a declarative list of routes (status, headers, JSON body, simulated
latency) as static endpoints for integration testing.

Basic usage::

    from mockroute import Latency, MockServer, RouteDescriptor

    app = MockServer()
    app.register(
        RouteDescriptor(
            uri="/api/ping",
            status_code=200,
            body={"message": "pong"},
            latency=Latency(average=50, delta=20),
        )
    )
    app.run()

From the command line::

    mockroute -f mocks.json -h 127.0.0.1:9527
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "HTTPError",
    "Latency",
    "MockRouteError",
    "MockServer",
    "NotFound",
    "Response",
    "RouteDescriptor",
    "Router",
    "ServerConfig",
    "load_routes",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import mockroute`` fast while providing a clean top-level API.
    """
    if name == "MockServer":
        from mockroute.app import MockServer

        return MockServer

    if name == "ServerConfig":
        from mockroute.config import ServerConfig

        return ServerConfig

    if name == "Latency":
        from mockroute.latency import Latency

        return Latency

    if name == "RouteDescriptor":
        from mockroute.routing.route import RouteDescriptor

        return RouteDescriptor

    if name == "Router":
        from mockroute.routing.router import Router

        return Router

    if name == "Response":
        from mockroute.http.response import Response

        return Response

    if name == "load_routes":
        from mockroute.loader import load_routes

        return load_routes

    if name in ("ConfigurationError", "HTTPError", "MockRouteError", "NotFound"):
        from mockroute import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
