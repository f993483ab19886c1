"""URL-encoded form parsing.

htmx submits forms and ``hx-vals`` as ``application/x-www-form-urlencoded``,
which the stdlib parses without any extra dependency. Other encodings are
rejected with a 400 rather than guessed at.
"""

from collections.abc import Iterator, Mapping
from urllib.parse import parse_qs

from wren.errors import BadRequest


class FormData(Mapping[str, str]):
    """Immutable parsed form data.

    ``__getitem__`` returns the first value for a key.
    ``get_list`` returns all values, which body extraction uses to
    reject fields that were sent more than once.
    """

    __slots__ = ("_data",)

    def __init__(self, data: dict[str, list[str]]) -> None:
        object.__setattr__(self, "_data", data)

    def __getitem__(self, key: str) -> str:
        return self._data[key][0]

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        items = ", ".join(f"{k!r}: {self[k]!r}" for k in self)
        return f"FormData({{{items}}})"

    def get(self, key: str, default: str | None = None) -> str | None:  # type: ignore[override]
        values = self._data.get(key)
        if values:
            return values[0]
        return default

    def get_list(self, key: str) -> list[str]:
        return list(self._data.get(key, []))

    def to_lists(self) -> Mapping[str, list[str]]:
        """Every field with all of its values."""
        return {key: list(values) for key, values in self._data.items()}


def parse_form_data(body: bytes, content_type: str) -> FormData:
    """Parse a form body into ``FormData``.

    Raises:
        BadRequest: If the content type is not URL-encoded or the body
            is not valid UTF-8.
    """
    ct_lower = content_type.lower().split(";")[0].strip()
    if ct_lower != "application/x-www-form-urlencoded":
        raise BadRequest(f"Unsupported form content type: {content_type!r}")

    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise BadRequest("Form body is not valid UTF-8") from exc

    return FormData(parse_qs(text, keep_blank_values=True))
