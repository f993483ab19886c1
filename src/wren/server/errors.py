"""Error handling pipeline for wren requests.

Maps HTTPError exceptions and unexpected failures to Response objects,
using registered error handlers or plain defaults.
"""

import html
import inspect
import logging
from collections.abc import Callable
from typing import Any

from wren.errors import HTTPError
from wren.http.request import Request
from wren.http.response import Response
from wren.server.negotiation import negotiate

logger = logging.getLogger("wren.server")


def default_fragment_error(status: int, detail: str) -> str:
    """Minimal HTML snippet for fragment error responses."""
    return f'<div class="wren-error" data-status="{status}">{html.escape(detail)}</div>'


def _with_htmx_error_headers(response: Response, request: Request) -> Response:
    """Send fragment errors to a dedicated ``#wren-error`` container."""
    if not request.is_fragment:
        return response
    return response.with_hx_retarget("#wren-error").with_hx_reswap("innerHTML")


async def call_error_handler(
    handler: Callable[..., Any],
    request: Request,
    exc: Exception,
) -> Response:
    """Invoke a user-registered error handler with introspected arguments.

    Error handlers may accept zero, one (request), or two (request, exc) args.
    Supports both sync and async error handlers.
    """
    params = list(inspect.signature(handler).parameters.values())

    if len(params) >= 2:
        result = handler(request, exc)
    elif len(params) == 1:
        result = handler(request)
    else:
        result = handler()

    if inspect.isawaitable(result):
        result = await result

    return negotiate(result)


async def handle_http_error(
    exc: HTTPError,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> Response:
    """Map an HTTPError to a Response using registered error handlers."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    handler = error_handlers.get(type(exc)) or error_handlers.get(exc.status)
    if handler is not None:
        response = await call_error_handler(handler, request, exc)
        # Keep the exception's status unless the handler chose its own
        if response.status == 200:
            response = response.with_status(exc.status)
        return response

    detail = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        detail = f"{exc.status}: {exc.detail}"

    body = default_fragment_error(exc.status, detail) if request.is_fragment else detail
    content_type = "text/html; charset=utf-8" if request.is_fragment else "text/plain; charset=utf-8"

    resp = Response(body=body, status=exc.status, content_type=content_type)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return _with_htmx_error_headers(resp, request)


async def handle_internal_error(
    exc: Exception,
    request: Request,
    error_handlers: dict[int | type, Callable[..., Any]],
    debug: bool,
) -> Response:
    """Turn an unexpected exception into a 500 for this request only."""
    logger.exception("500 %s %s", request.method, request.path)

    handler = error_handlers.get(500) or error_handlers.get(type(exc))
    if handler is not None:
        response = await call_error_handler(handler, request, exc)
        if response.status == 200:
            response = response.with_status(500)
        return response

    detail = f"{type(exc).__name__}: {exc}" if debug else "Internal Server Error"

    if request.is_fragment:
        resp = Response(body=default_fragment_error(500, detail), status=500)
        return _with_htmx_error_headers(resp, request)

    return Response(body=detail, status=500, content_type="text/plain; charset=utf-8")
