"""Process-wide counter.

A single signed integer guarded by its own lock. The value behaves as a
64-bit two's-complement integer: stepping past ``MAX_VALUE`` wraps to
``MIN_VALUE`` and vice versa. Python ints never overflow on their own,
so the wrap is applied explicitly on every step.
"""

import logging
import threading

logger = logging.getLogger("wren.counter")

BITS = 64
MIN_VALUE = -(2 ** (BITS - 1))
MAX_VALUE = 2 ** (BITS - 1) - 1


def wrap(value: int) -> int:
    """Fold *value* into the signed 64-bit range."""
    return (value - MIN_VALUE) % (2**BITS) + MIN_VALUE


class Counter:
    """Thread-safe signed counter.

    ``increment`` and ``decrement`` return the value as of their own step,
    so concurrent callers each see the result of exactly one change and
    the net effect always equals the net number of calls.
    """

    __slots__ = ("_lock", "_value")

    def __init__(self, value: int = 0) -> None:
        self._lock = threading.Lock()
        self._value = wrap(value)

    def __repr__(self) -> str:
        return f"Counter({self.value})"

    @property
    def value(self) -> int:
        with self._lock:
            return self._value

    def increment(self) -> int:
        return self._step(1)

    def decrement(self) -> int:
        return self._step(-1)

    def reset(self, value: int = 0) -> None:
        with self._lock:
            self._value = wrap(value)

    def _step(self, delta: int) -> int:
        with self._lock:
            self._value = wrap(self._value + delta)
            value = self._value
        if value == MIN_VALUE and delta > 0 or value == MAX_VALUE and delta < 0:
            logger.info("counter wrapped to %d", value)
        return value
