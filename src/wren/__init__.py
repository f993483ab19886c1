"""Wren — a small htmx fragment server.

Serves HTML as full pages or fragments, rendered from typed components,
with a thread-safe in-memory record store behind the routes.

Basic usage::

    from wren import App

    app = App()

    @app.route("/hello/{name}")
    def hello(name: str):
        return f"Hello, {name}!"

    app.run()
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "BadRequest",
    "Component",
    "Counter",
    "HTTPError",
    "MethodNotAllowed",
    "NotFound",
    "Record",
    "RecordStore",
    "Repeat",
    "Request",
    "Response",
    "WrenError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for the public API.

    Keeps ``import wren`` fast (kida is only imported when components are).
    """
    if name == "App":
        from wren.app import App

        return App

    if name == "AppConfig":
        from wren.config import AppConfig

        return AppConfig

    if name == "Request":
        from wren.http.request import Request

        return Request

    if name == "Response":
        from wren.http.response import Response

        return Response

    if name in ("Component", "Repeat"):
        from wren import components as _components

        return getattr(_components, name)

    if name in ("Record", "RecordStore"):
        from wren import store as _store

        return getattr(_store, name)

    if name == "Counter":
        from wren.counter import Counter

        return Counter

    if name in ("BadRequest", "HTTPError", "MethodNotAllowed", "NotFound", "WrenError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
