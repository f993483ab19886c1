"""Tests for wren.routing.params — path parameter converters."""

import pytest

from wren.routing.params import CONVERTERS, convert_param


class TestConvertParam:
    def test_str(self) -> None:
        assert convert_param("hello", "str") == "hello"

    def test_int(self) -> None:
        assert convert_param("42", "int") == 42

    def test_int_invalid(self) -> None:
        with pytest.raises(ValueError):
            convert_param("abc", "int")

    def test_unknown_converter(self) -> None:
        with pytest.raises(KeyError):
            convert_param("x", "uuid")

    def test_registered(self) -> None:
        assert set(CONVERTERS) == {"str", "int"}
