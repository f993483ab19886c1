"""Content negotiation — maps handler return values to Response objects.

isinstance-based dispatch, no magic, fully predictable.
"""

from typing import Any

from wren.components import Component
from wren.http.response import Response


def negotiate(value: Any) -> Response:
    """Convert a route handler's return value to a Response.

    Dispatch order:

    1. ``Response``         -> pass through
    2. ``Component``        -> render -> 200, text/html
    3. ``str``              -> 200, text/html
    4. ``bytes``            -> 200, application/octet-stream
    5. ``None``             -> 200, empty body
    6. ``(value, int)``     -> negotiate value, override status
    """
    match value:
        case Response():
            return value
        case Component():
            return Response(body=value.render())
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case None:
            return Response(body="")
        case (inner, int() as status):
            return negotiate(inner).with_status(status)
        case _:
            msg = (
                f"Cannot convert {type(value).__name__} to a response. "
                f"Return str, bytes, a Component, a Response, or (value, status)."
            )
            raise TypeError(msg)
