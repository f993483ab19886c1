"""Tests for wren.extraction — strict form body to dataclass extraction."""

from dataclasses import dataclass

import pytest

from wren.components import Text
from wren.demo.components import TodoItem
from wren.extraction import ExtractionError, extract_dataclass, is_extractable_dataclass
from wren.http.request import Request
from wren.http.response import Response
from wren.store import Record


@dataclass(frozen=True)
class Note:
    title: str
    priority: int


class TestIsExtractable:
    def test_user_dataclass(self) -> None:
        assert is_extractable_dataclass(Note) is True

    def test_record(self) -> None:
        assert is_extractable_dataclass(Record) is True

    @pytest.mark.parametrize("annotation", [Text, TodoItem])
    def test_components_excluded(self, annotation: type) -> None:
        assert is_extractable_dataclass(annotation) is False

    @pytest.mark.parametrize("annotation", [Request, Response])
    def test_framework_types_excluded(self, annotation: type) -> None:
        assert is_extractable_dataclass(annotation) is False

    @pytest.mark.parametrize("annotation", [int, str, "Note", None])
    def test_non_dataclasses(self, annotation: object) -> None:
        assert is_extractable_dataclass(annotation) is False


class TestExtractDataclass:
    def test_valid(self) -> None:
        note = extract_dataclass(Note, {"title": ["Hi"], "priority": ["3"]})
        assert note == Note(title="Hi", priority=3)

    def test_record(self) -> None:
        record = extract_dataclass(Record, {"id": ["0"], "text": [""]})
        assert record == Record(0, "")

    def test_missing_field(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            extract_dataclass(Note, {"title": ["Hi"]})
        assert "priority" in exc_info.value.errors

    def test_empty_body(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            extract_dataclass(Record, {})
        assert set(exc_info.value.errors) == {"id", "text"}

    def test_repeated_field(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            extract_dataclass(Record, {"id": ["1", "2"], "text": ["a"]})
        assert exc_info.value.errors["id"] == ["id was sent more than once."]

    @pytest.mark.parametrize("value", ["abc", "-1", "1.5", "", " 1", "٣"])
    def test_invalid_int(self, value: str) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            extract_dataclass(Record, {"id": [value], "text": ["a"]})
        assert "id" in exc_info.value.errors

    def test_unexpected_field(self) -> None:
        with pytest.raises(ExtractionError) as exc_info:
            extract_dataclass(Record, {"id": ["1"], "text": ["a"], "done": ["yes"]})
        assert list(exc_info.value.errors) == ["done"]

    def test_message_lists_fields(self) -> None:
        with pytest.raises(ExtractionError, match="id, text"):
            extract_dataclass(Record, {})

    def test_large_int(self) -> None:
        record = extract_dataclass(Record, {"id": ["18446744073709551615"], "text": ["x"]})
        assert record.id == 2**64 - 1
