"""Test utilities for wren applications.

Provides an in-process ASGI test client and fragment assertions::

    from wren.testing import TestClient, assert_is_fragment
"""

from wren.testing.assertions import (
    assert_fragment_contains,
    assert_fragment_not_contains,
    assert_is_error_fragment,
    assert_is_fragment,
)
from wren.testing.client import TestClient

__all__ = [
    "TestClient",
    "assert_fragment_contains",
    "assert_fragment_not_contains",
    "assert_is_error_fragment",
    "assert_is_fragment",
]
