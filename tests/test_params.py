"""Tests for perch.routing.params: segment converters."""

import pytest

from perch.routing.params import CONVERTERS, accepts


class TestAccepts:
    def test_str_any_segment(self) -> None:
        assert accepts("str", "alice")
        assert accepts("str", "42")

    def test_str_rejects_empty(self) -> None:
        assert not accepts("str", "")

    def test_str_accepts_decoded_slash(self) -> None:
        assert accepts("str", "a/b")

    def test_int_digits_only(self) -> None:
        assert accepts("int", "42")
        assert not accepts("int", "4x2")
        assert not accepts("int", "-1")

    def test_path_matches_anything(self) -> None:
        assert accepts("path", "")
        assert accepts("path", "a/b/c")

    def test_unknown_type(self) -> None:
        with pytest.raises(KeyError):
            accepts("uuid", "x")

    def test_registered(self) -> None:
        assert set(CONVERTERS) == {"str", "int", "path"}
