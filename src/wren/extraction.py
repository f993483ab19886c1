"""Typed extraction of form body data into dataclasses.

A handler parameter annotated with a user dataclass is populated from
the request's URL-encoded body before the handler runs. Extraction is
strict: the body must carry every field exactly once, values must
convert to the annotated type, and unknown fields are refused. Any
mismatch is an ``ExtractionError``, which the handler layer reports as
400 Bad Request rather than silently defaulting.

Supported field types: ``str``, ``int`` (unsigned ASCII digits).
"""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Mapping
from typing import Any, get_type_hints

from wren.components import Component
from wren.errors import WrenError

_UNSIGNED = re.compile(r"[0-9]+")

_FRAMEWORK_MODULES = ("wren.http", "wren.routing", "wren.testing")


class ExtractionError(WrenError):
    """Raised when request data does not fit the target dataclass.

    Attributes:
        errors: Field name -> list of human-readable problems.
    """

    def __init__(self, errors: dict[str, list[str]]) -> None:
        self.errors = errors
        fields = ", ".join(sorted(errors))
        super().__init__(f"Could not decode fields: {fields}")


def is_extractable_dataclass(annotation: Any) -> bool:
    """Return True if *annotation* is a dataclass meant to carry request data.

    Framework dataclasses (``Request``, ``Response``, route types) and
    components, wherever they are defined, are never extracted from
    request data.
    """
    if not isinstance(annotation, type) or not dataclasses.is_dataclass(annotation):
        return False
    if issubclass(annotation, Component):
        return False
    module = getattr(annotation, "__module__", "") or ""
    return not module.startswith(_FRAMEWORK_MODULES)


def extract_dataclass[T](cls: type[T], data: Mapping[str, list[str]]) -> T:
    """Create a *cls* instance from multi-valued request data.

    Args:
        cls: Dataclass type to instantiate.
        data: Field name -> every value received under that name
            (``FormData.to_lists()``).

    Raises:
        ExtractionError: On a missing, repeated, unconvertible, or
            unexpected field.
    """
    hints = get_type_hints(cls)
    known = {f.name for f in dataclasses.fields(cls)}  # type: ignore[arg-type]
    errors: dict[str, list[str]] = {}
    kwargs: dict[str, Any] = {}

    for name in known:
        values = data.get(name, [])
        if not values:
            errors.setdefault(name, []).append(f"{name} is required.")
            continue
        if len(values) > 1:
            errors.setdefault(name, []).append(f"{name} was sent more than once.")
            continue
        try:
            kwargs[name] = _convert(values[0], hints.get(name, str))
        except ValueError:
            errors.setdefault(name, []).append(
                f"Invalid value for {name}: {values[0]!r}."
            )

    for name in data:
        if name not in known:
            errors.setdefault(name, []).append(f"Unexpected field {name}.")

    if errors:
        raise ExtractionError(errors)
    return cls(**kwargs)


def _convert(value: str, target_type: Any) -> Any:
    """Convert a raw string to *target_type*; raise ValueError on mismatch."""
    if target_type is int:
        if not _UNSIGNED.fullmatch(value):
            msg = f"not an unsigned integer: {value!r}"
            raise ValueError(msg)
        return int(value)
    if target_type is str:
        return value
    msg = f"unsupported field type {target_type!r}"
    raise ValueError(msg)
