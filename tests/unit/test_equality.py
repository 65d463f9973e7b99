"""Tests for helperkit.equality."""
from decimal import Decimal
from typing import Any

import pytest

from helperkit.equality import is_empty, loose_equals, strict_equals


@pytest.mark.parametrize(
    "value",
    [None, False, 0, 0.0, Decimal("0"), 0j, "", b"", [], (), {}, set()],
    ids=["none", "false", "int", "float", "decimal", "complex", "str", "bytes",
         "list", "tuple", "dict", "set"],
)
def test_is_empty_true(value: Any) -> None:
    """Test that null, false, zero and empty containers are empty."""
    assert is_empty(value) is True


@pytest.mark.parametrize(
    "value",
    ["0", " ", True, 1, -0.5, [0], {"a": None}, object()],
    ids=["string_zero", "space", "true", "one", "negative", "list_of_zero", "dict", "object"],
)
def test_is_empty_false(value: Any) -> None:
    """Test that anything else counts as filled."""
    assert is_empty(value) is False


class TestLooseEquals:
    """Tests for loose_equals()."""

    @pytest.mark.parametrize(
        "a,b",
        [
            ("2", 2),
            (2, "2.0"),
            ("1e1", "10"),
            (1, 1.0),
            (None, ""),
            (None, 0),
            (None, []),
            (True, "abc"),
            (False, ""),
            (False, None),
            (False, "0"),
            ({"a": "1"}, {"a": 1}),
            ([1, "2"], ["1", 2]),
        ],
    )
    def test_equal(self, a: Any, b: Any) -> None:
        assert loose_equals(a, b)
        assert loose_equals(b, a)

    @pytest.mark.parametrize(
        "a,b",
        [
            ("abc", 0),
            ("2", 3),
            ("1", "01a"),
            (None, "x"),
            (True, 0),
            (True, "0"),
            (None, "0"),
            ({"a": 1}, {"b": 1}),
            ([1], [1, 2]),
        ],
    )
    def test_not_equal(self, a: Any, b: Any) -> None:
        assert not loose_equals(a, b)


class TestStrictEquals:
    """Tests for strict_equals()."""

    def test_same_type_and_value(self) -> None:
        assert strict_equals("a", "a")
        assert strict_equals(2, 2)

    @pytest.mark.parametrize("a,b", [("2", 2), (1, 1.0), (1, True), (None, "")])
    def test_different_types(self, a: Any, b: Any) -> None:
        assert not strict_equals(a, b)

    def test_mapping_order_matters(self) -> None:
        assert strict_equals({"a": 1, "b": 2}, {"a": 1, "b": 2})
        assert not strict_equals({"a": 1, "b": 2}, {"b": 2, "a": 1})

    def test_nested_values_strict(self) -> None:
        assert not strict_equals([1, 2], [1, 2.0])
