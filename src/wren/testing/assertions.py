"""Fragment assertion helpers for wren tests.

Each assertion produces a clear error message on failure.
"""

from wren.http.response import Response


def assert_is_fragment(response: Response, *, status: int = 200) -> None:
    """Assert the response is a non-empty fragment, not a full page."""
    assert response.status == status, (
        f"Expected status {status}, got {response.status}"
    )
    lower = response.text.lower()
    assert "<html>" not in lower, "Response contains full page <html> wrapper"
    assert "</html>" not in lower, "Response contains full page </html> wrapper"
    assert len(response.text.strip()) > 0, "Fragment body is empty"


def assert_fragment_contains(response: Response, text: str) -> None:
    """Assert the fragment response body contains the given text."""
    assert text in response.text, (
        f"Fragment does not contain {text!r}.\n"
        f"Response body: {response.text[:500]}"
    )


def assert_fragment_not_contains(response: Response, text: str) -> None:
    """Assert the fragment response body does **not** contain the given text."""
    assert text not in response.text, (
        f"Fragment unexpectedly contains {text!r}.\n"
        f"Response body: {response.text[:500]}"
    )


def assert_is_error_fragment(response: Response, *, status: int | None = None) -> None:
    """Assert the response is a wren error snippet (``class="wren-error"``)."""
    assert 'class="wren-error"' in response.text, (
        "Response is not a wren error fragment (missing class=\"wren-error\").\n"
        f"Response body: {response.text[:500]}"
    )
    if status is not None:
        assert response.status == status, (
            f"Expected status {status}, got {response.status}"
        )
        assert f'data-status="{status}"' in response.text, (
            f"Error fragment missing data-status=\"{status}\".\n"
            f"Response body: {response.text[:500]}"
        )
