"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Immutable by convention,
built incrementally by design.
"""

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status and headers. Each call returns a new ``Response``.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str = "text/html; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    # -- Chainable transformations --

    def with_status(self, status: int) -> "Response":
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> "Response":
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> "Response":
        """Return a new Response with additional headers."""
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str) -> "Response":
        return replace(self, content_type=content_type)

    # -- htmx response headers --

    def with_hx_retarget(self, selector: str) -> "Response":
        """Override the target element for this response (``HX-Retarget``)."""
        return self.with_header("HX-Retarget", selector)

    def with_hx_reswap(self, strategy: str) -> "Response":
        """Override the swap strategy for this response (``HX-Reswap``)."""
        return self.with_header("HX-Reswap", strategy)

    def with_hx_trigger(self, event: str | dict[str, Any]) -> "Response":
        """Trigger a client-side event after the response is received.

        Accepts a plain event name or a dict for events with payloads::

            .with_hx_trigger("todoAdded")
            .with_hx_trigger({"showToast": {"message": "Saved!"}})
        """
        value = event if isinstance(event, str) else json_module.dumps(event)
        return self.with_header("HX-Trigger", value)

    # -- Body helpers --

    @property
    def body_bytes(self) -> bytes:
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), or None."""
        wanted = name.lower()
        for key, value in self.headers:
            if key.lower() == wanted:
                return value
        return None
