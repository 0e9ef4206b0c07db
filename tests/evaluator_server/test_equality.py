"""Tests for abstract (==) and strict (===) equality."""

import math

import pytest

from jscoerce.evaluator_server.semantics import (
    FALSE,
    NULL,
    TRUE,
    UNDEFINED,
    NoPrimitiveRepresentation,
    ObjectHandle,
    PrimitiveValue,
    abstract_equals,
    abstract_not_equals,
    strict_equals,
    strict_not_equals,
)


def num(value):
    return PrimitiveValue.number(value)


def s(value):
    return PrimitiveValue.string(value)


def assert_loose(a, b, expected):
    """Check both operand orders."""
    assert abstract_equals(a, b) is expected
    assert abstract_equals(b, a) is expected


class TestAbstractEqualsSameKind:
    """Test rule 1: same primitive kind."""

    def test_nan_never_equal(self):
        """Test that NaN is not equal to itself."""
        nan = num(math.nan)
        assert abstract_equals(nan, nan) is False

    def test_signed_zeros_equal(self):
        """Test that +0 and -0 are equal."""
        assert_loose(num(0.0), num(-0.0), True)

    def test_strings_by_code_units(self):
        """Test string comparison is exact."""
        assert_loose(s("abc"), s("abc"), True)
        assert_loose(s("abc"), s("ABC"), False)
        assert_loose(s(""), s(" "), False)

    def test_booleans(self):
        """Test boolean identity."""
        assert_loose(TRUE, TRUE, True)
        assert_loose(TRUE, FALSE, False)


class TestAbstractEqualsNullish:
    """Test rule 2: null and undefined."""

    def test_null_equals_undefined(self):
        """Test null == undefined."""
        assert_loose(NULL, UNDEFINED, True)
        assert_loose(NULL, NULL, True)
        assert_loose(UNDEFINED, UNDEFINED, True)

    @pytest.mark.parametrize("other", [num(0), s(""), FALSE, s("null"), num(math.nan)])
    def test_nullish_equals_nothing_else(self, other):
        """Test that null and undefined equal no other kind."""
        assert_loose(NULL, other, False)
        assert_loose(UNDEFINED, other, False)

    def test_nullish_never_equals_object(self):
        """Test that objects are never compared with null through hooks."""
        calls = []
        handle = ObjectHandle(value_of=lambda: calls.append("valueOf") or NULL)
        assert_loose(NULL, handle, False)
        assert calls == []


class TestAbstractEqualsCoercion:
    """Test rules 3 to 5."""

    def test_number_string(self):
        """Test number/string comparisons go through ToNumber."""
        assert_loose(num(42), s("42"), True)
        assert_loose(num(42), s(" 0x2A "), True)
        assert_loose(num(0), s(""), True)
        assert_loose(num(0), s("  "), True)
        assert_loose(num(1), s("abc"), False)

    def test_boolean_coerced_to_number(self):
        """Test booleans become numbers before comparing."""
        assert_loose(TRUE, num(1), True)
        assert_loose(FALSE, num(0), True)
        assert_loose(TRUE, s("1"), True)
        assert_loose(FALSE, s("0"), True)
        assert_loose(FALSE, s(""), True)
        assert_loose(TRUE, s("true"), False)
        assert_loose(TRUE, num(2), False)

    def test_object_vs_boolean_scenario(self):
        """Test object with valueOf 1 equals true."""
        handle = ObjectHandle(value_of=lambda: num(1))
        assert_loose(handle, TRUE, True)

    def test_object_vs_number_and_string(self):
        """Test objects are reduced with ToPrimitive."""
        array_like = ObjectHandle(to_string=lambda: s("1,2"))
        assert_loose(array_like, s("1,2"), True)
        assert_loose(array_like, num(12), False)

        empty_array = ObjectHandle(to_string=lambda: s(""))
        assert_loose(empty_array, num(0), True)
        assert_loose(empty_array, FALSE, True)

    def test_default_hint_prefers_value_of(self):
        """Test that rule 5 uses valueOf before toString."""
        handle = ObjectHandle(value_of=lambda: num(7), to_string=lambda: s("seven"))
        assert_loose(handle, num(7), True)
        assert_loose(handle, s("seven"), False)

    def test_object_failure_propagates(self):
        """Test that ToPrimitive failure surfaces from ==."""
        with pytest.raises(NoPrimitiveRepresentation):
            abstract_equals(ObjectHandle(), num(1))
        with pytest.raises(NoPrimitiveRepresentation):
            abstract_equals(s("x"), ObjectHandle())


class TestAbstractEqualsObjects:
    """Test rule 6: identity."""

    def test_identity(self):
        """Test that structurally equal objects are not equal."""
        first = ObjectHandle(value_of=lambda: num(1))
        second = ObjectHandle(value_of=lambda: num(1))

        assert abstract_equals(first, first) is True
        assert_loose(first, second, False)

    def test_hooks_not_called_for_object_pair(self):
        """Test that comparing objects never reduces them."""
        calls = []
        first = ObjectHandle(value_of=lambda: calls.append(1) or num(1))
        second = ObjectHandle(value_of=lambda: calls.append(2) or num(1))

        abstract_equals(first, second)
        assert calls == []

    def test_not_equals(self):
        """Test that != negates ==."""
        assert abstract_not_equals(num(1), s("2")) is True
        assert abstract_not_equals(NULL, UNDEFINED) is False
        assert abstract_not_equals(num(math.nan), num(math.nan)) is True


class TestStrictEquals:
    """Test === and !==."""

    def test_no_coercion(self):
        """Test that different kinds are never strictly equal."""
        assert strict_equals(num(1), s("1")) is False
        assert strict_equals(NULL, UNDEFINED) is False
        assert strict_equals(TRUE, num(1)) is False

    def test_numbers(self):
        """Test numeric strict equality."""
        assert strict_equals(num(0.0), num(-0.0)) is True
        assert strict_equals(num(math.nan), num(math.nan)) is False

    def test_objects(self):
        """Test objects by identity without hooks."""
        handle = ObjectHandle(value_of=lambda: num(1))
        assert strict_equals(handle, handle) is True
        assert strict_equals(handle, num(1)) is False
        assert strict_not_equals(handle, ObjectHandle()) is True
