"""ASGI handler — translates ASGI scope/messages to wren types.

The only component that touches raw ASGI directly. Converts scope dicts
to typed Request objects, dispatches through routing, and sends the
Response back through ASGI send().
"""

import inspect
from collections.abc import Callable
from typing import Any

from wren._internal.asgi import Receive, Scope, Send
from wren._internal.invoke import invoke
from wren.errors import BadRequest, HTTPError
from wren.extraction import ExtractionError, extract_dataclass, is_extractable_dataclass
from wren.http.request import Request
from wren.http.response import Response
from wren.routing.params import convert_param
from wren.routing.route import RouteMatch
from wren.routing.router import Router
from wren.server.errors import handle_http_error, handle_internal_error
from wren.server.negotiation import negotiate
from wren.server.sender import send_response


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
    max_body: int | None = None,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive, max_body=max_body)

    try:
        match = router.match(request.method, request.path)
        response = await _invoke_handler(match, request)
    except HTTPError as exc:
        response = await handle_http_error(exc, request, error_handlers, debug)
    except Exception as exc:
        response = await handle_internal_error(exc, request, error_handlers, debug)

    await send_response(response, send)


async def _invoke_handler(match: RouteMatch, request: Request) -> Response:
    """Call the matched route handler, converting path params and return value."""
    handler = match.route.handler
    request = request.with_path_params(match.path_params)

    kwargs = await _build_handler_kwargs(handler, request, match.path_params)

    result = await invoke(handler, **kwargs)
    return negotiate(result)


async def _build_handler_kwargs(
    handler: Callable[..., Any],
    request: Request,
    path_params: dict[str, str],
) -> dict[str, Any]:
    """Inspect handler signature and build kwargs from request + path params.

    Resolution order:
    1. ``request`` parameter (by name or ``Request`` annotation)
    2. Path parameters (by name, converted to the annotated type)
    3. Typed extraction (dataclass annotation -> form body)
    """
    sig = inspect.signature(handler, eval_str=True)
    kwargs: dict[str, Any] = {}

    for name, param in sig.parameters.items():
        if name == "request" or param.annotation is Request:
            kwargs[name] = request
        elif name in path_params:
            kwargs[name] = _convert_path_param(path_params[name], param.annotation)
        elif is_extractable_dataclass(param.annotation):
            form = await request.form()
            try:
                kwargs[name] = extract_dataclass(param.annotation, form.to_lists())
            except ExtractionError as exc:
                raise BadRequest(str(exc)) from exc

    return kwargs


def _convert_path_param(value: str, annotation: Any) -> Any:
    """Convert a captured segment using the handler's annotation.

    The router has already checked the segment against its converter
    regex, so a failure here means the annotation and the pattern
    disagree; that is a 400, not a 500.
    """
    if annotation is inspect.Parameter.empty or annotation is str:
        return value
    if annotation is int:
        try:
            return convert_param(value, "int")
        except ValueError as exc:
            raise BadRequest(f"Invalid path parameter: {value!r}") from exc
    return value
