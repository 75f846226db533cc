"""Tests for paramstore.coerce."""

import math

import pytest

from paramstore.coerce import (
    CoercedList,
    to_boolean,
    to_byte,
    to_character,
    to_double,
    to_float,
    to_integer,
    to_long,
    to_short,
    to_string,
)
from paramstore.errors import EmptyValueError, TypeCoercionError
from paramstore.values import Empty, VList, VScalar


# ---------------------------------------------------------------------------
# to_string
# ---------------------------------------------------------------------------

def test_to_string_scalar():
    assert to_string(VScalar("Sam")) == "Sam"

def test_to_string_list_never_raises():
    assert to_string(VList([VScalar("x"), VScalar("y")])) == "[x, y]"

def test_to_string_empty():
    assert to_string(Empty) == ""


# ---------------------------------------------------------------------------
# Integers
# ---------------------------------------------------------------------------

class TestIntegers:
    def test_integer(self):
        assert to_integer(VScalar("42")) == 42

    def test_integer_signs(self):
        assert to_integer("-7") == -7
        assert to_integer("+7") == 7

    def test_integer_invalid(self):
        with pytest.raises(TypeCoercionError) as info:
            to_integer(VScalar("abc"), key="age")
        assert info.value.text == "abc"
        assert info.value.target == "integer"
        assert info.value.key == "age"

    def test_coercion_error_is_value_error(self):
        with pytest.raises(ValueError):
            to_integer("abc")

    def test_integer_rejects_decimal(self):
        with pytest.raises(TypeCoercionError):
            to_integer("4.2")

    def test_integer_rejects_whitespace_and_underscores(self):
        with pytest.raises(TypeCoercionError):
            to_integer(" 42")
        with pytest.raises(TypeCoercionError):
            to_integer("1_000")

    def test_integer_rejects_trailing_newline(self):
        with pytest.raises(TypeCoercionError):
            to_integer("42\n")
        with pytest.raises(TypeCoercionError):
            to_byte("7\n")

    def test_integer_range(self):
        assert to_integer("2147483647") == 2**31 - 1
        with pytest.raises(TypeCoercionError):
            to_integer("2147483648")

    def test_byte_range(self):
        assert to_byte("-128") == -128
        assert to_byte("127") == 127
        with pytest.raises(TypeCoercionError):
            to_byte("128")

    def test_short_range(self):
        assert to_short("32767") == 32767
        with pytest.raises(TypeCoercionError):
            to_short("-32769")

    def test_long_range(self):
        assert to_long("9223372036854775807") == 2**63 - 1
        with pytest.raises(TypeCoercionError):
            to_long("9223372036854775808")

    def test_empty_text_fails(self):
        with pytest.raises(TypeCoercionError):
            to_integer(Empty)

    def test_list_fails(self):
        with pytest.raises(TypeCoercionError):
            to_integer(VList([VScalar("1")]))


# ---------------------------------------------------------------------------
# Floating point
# ---------------------------------------------------------------------------

class TestFloating:
    def test_double(self):
        assert to_double("3.14") == 3.14

    def test_double_invalid(self):
        with pytest.raises(TypeCoercionError):
            to_double("pi")

    def test_floating_rejects_underscores(self):
        with pytest.raises(TypeCoercionError):
            to_double("1_000")
        with pytest.raises(TypeCoercionError) as info:
            to_float("1_000.5")
        assert info.value.target == "float"

    def test_float_single_precision(self):
        assert to_float("1.5") == 1.5
        assert to_float("0.1") != 0.1
        assert to_float("0.1") == pytest.approx(0.1)

    def test_float_overflow_is_infinite(self):
        assert math.isinf(to_float("1e300"))
        assert to_float("-1e300") < 0

    def test_float_invalid(self):
        with pytest.raises(TypeCoercionError) as info:
            to_float("x")
        assert info.value.target == "float"


# ---------------------------------------------------------------------------
# Boolean / character
# ---------------------------------------------------------------------------

@pytest.mark.parametrize(
    "text, expected",
    [("true", True), ("TRUE", True), ("True", True), ("false", False), ("xyz", False), ("", False)],
)
def test_to_boolean(text, expected):
    assert to_boolean(VScalar(text)) is expected

def test_to_character():
    assert to_character(VScalar("yes")) == "y"

def test_to_character_empty():
    with pytest.raises(EmptyValueError):
        to_character(VScalar(""))

def test_to_character_empty_is_index_error():
    with pytest.raises(IndexError):
        to_character(Empty)


# ---------------------------------------------------------------------------
# CoercedList
# ---------------------------------------------------------------------------

class TestCoercedList:
    def test_lazy_validation(self):
        view = CoercedList([VScalar("1"), VScalar("x")], to_integer)
        assert len(view) == 2
        assert view[0] == 1
        with pytest.raises(TypeCoercionError):
            view[1]

    def test_iteration(self):
        view = CoercedList([VScalar("1"), VScalar("2")], to_integer)
        assert list(view) == [1, 2]
        assert view == [1, 2]

    def test_slice_returns_view(self):
        view = CoercedList([VScalar("1"), VScalar("x"), VScalar("3")], to_integer)
        tail = view[2:]
        assert isinstance(tail, CoercedList)
        assert tail.to_list() == [3]

    def test_key_passed_to_errors(self):
        view = CoercedList([VScalar("x")], to_long, key="ids")
        with pytest.raises(TypeCoercionError) as info:
            view.to_list()
        assert info.value.key == "ids"

    def test_nested_list_element(self):
        view = CoercedList([VList([VScalar("a")])], to_string)
        assert view[0] == "[a]"
