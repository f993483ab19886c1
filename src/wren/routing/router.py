"""Ordered router: first structural match wins.

Each route compiles to one anchored regex. Matching walks the table in
registration order, so the result never depends on anything but the
order routes were declared in.
"""

import re
from dataclasses import dataclass

from wren.errors import ConfigurationError, MethodNotAllowed, NotFound
from wren.routing.params import CONVERTERS
from wren.routing.route import PathSegment, Route, RouteMatch


def parse_path(path: str) -> list[PathSegment]:
    """Parse a route path string into segments.

    Examples::

        "/todos"          -> [PathSegment("todos")]
        "/todos/{id:int}" -> [PathSegment("todos"), PathSegment("{id:int}", is_param=True, ...)]
        "/counter/+"      -> [PathSegment("counter"), PathSegment("+")]
    """
    segments: list[PathSegment] = []
    for part in path.strip("/").split("/"):
        if not part:
            continue
        if part.startswith("<") and part.endswith(">"):
            msg = (
                f"Route {path!r} uses <param> syntax. "
                "Wren path parameters are written as {param} or {param:int}."
            )
            raise ConfigurationError(msg)
        if part.startswith("{") and part.endswith("}"):
            inner = part[1:-1]
            param_name, _, param_type = inner.partition(":")
            param_type = param_type or "str"
            if param_type not in CONVERTERS:
                msg = f"Unknown converter {param_type!r} in route {path!r}"
                raise ConfigurationError(msg)
            segments.append(
                PathSegment(
                    value=part,
                    is_param=True,
                    param_name=param_name,
                    param_type=param_type,
                )
            )
        else:
            segments.append(PathSegment(value=part))
    return segments


def compile_pattern(segments: list[PathSegment]) -> re.Pattern[str]:
    """Build an anchored regex with one named group per parameter."""
    parts: list[str] = []
    for seg in segments:
        if seg.is_param:
            pattern, _ = CONVERTERS[seg.param_type]
            parts.append(f"(?P<{seg.param_name}>{pattern})")
        else:
            parts.append(re.escape(seg.value))
    return re.compile("^/" + "/".join(parts) + "$")


@dataclass(frozen=True, slots=True)
class _CompiledRoute:
    route: Route
    regex: re.Pattern[str]


class Router:
    """Ordered route table.

    Usage::

        router = Router()
        router.add(Route("/todos", handler, frozenset({"GET"})))
        router.add(Route("/todos/{id:int}", handler, frozenset({"PUT"})))
        router.compile()
        match = router.match("PUT", "/todos/42")
    """

    __slots__ = ("_compiled", "_table")

    def __init__(self) -> None:
        self._table: list[_CompiledRoute] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Append a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        regex = compile_pattern(parse_path(route.path))
        self._table.append(_CompiledRoute(route, regex))

    @property
    def routes(self) -> list[Route]:
        """All registered routes, in registration order."""
        return [entry.route for entry in self._table]

    def compile(self) -> None:
        """Freeze the router. No more routes can be added."""
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Match a request against the table, first to last.

        Returns the first route whose method and path both match.
        Raises ``MethodNotAllowed`` if only other methods matched the path,
        and ``NotFound`` if nothing matched the path at all.
        """
        normalized = "/" + "/".join(p for p in path.split("/") if p)
        allowed: set[str] = set()

        for entry in self._table:
            found = entry.regex.match(normalized)
            if found is None:
                continue
            if method in entry.route.methods:
                return RouteMatch(route=entry.route, path_params=found.groupdict())
            allowed.update(entry.route.methods)

        if allowed:
            raise MethodNotAllowed(frozenset(allowed))
        raise NotFound(f"No route matches {method} {path!r}")
