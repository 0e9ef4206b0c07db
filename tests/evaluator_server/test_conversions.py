"""Tests for ToPrimitive, ToNumber, ToString and ToBoolean."""

import math

import pytest

from jscoerce.evaluator_server.semantics import (
    FALSE,
    NULL,
    TRUE,
    UNDEFINED,
    Hint,
    NoPrimitiveRepresentation,
    NotCallableOrNoPrimitive,
    ObjectHandle,
    PrimitiveValue,
    string_to_number,
    to_boolean,
    to_int32,
    to_number,
    to_primitive,
    to_string,
)


def num(value):
    return PrimitiveValue.number(value)


def s(value):
    return PrimitiveValue.string(value)


class CountingHook:
    """Hook returning a fixed result and counting its calls."""

    def __init__(self, result):
        self.result = result
        self.calls = 0

    def __call__(self):
        self.calls += 1
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class TestToPrimitive:
    """Test ToPrimitive hook selection."""

    def test_primitive_returned_unchanged(self):
        """Test that primitives pass through as the same object."""
        value = s("abc")
        assert to_primitive(value, Hint.NUMBER) is value
        assert to_primitive(NULL, Hint.STRING) is NULL

    def test_number_hint_prefers_value_of(self):
        """Test that the number hint tries valueOf first."""
        value_of = CountingHook(num(1))
        to_str = CountingHook(s("one"))
        handle = ObjectHandle(value_of=value_of, to_string=to_str)

        assert to_primitive(handle, Hint.NUMBER) == num(1)
        assert value_of.calls == 1
        assert to_str.calls == 0

    def test_string_hint_prefers_to_string(self):
        """Test that the string hint tries toString first."""
        value_of = CountingHook(num(1))
        to_str = CountingHook(s("one"))
        handle = ObjectHandle(value_of=value_of, to_string=to_str)

        assert to_primitive(handle, Hint.STRING).value == "one"
        assert to_str.calls == 1
        assert value_of.calls == 0

    def test_default_hint_behaves_like_number(self):
        """Test that the default hint tries valueOf first."""
        handle = ObjectHandle(value_of=lambda: num(5), to_string=lambda: s("five"))
        assert to_primitive(handle).value == 5.0

    def test_falls_back_when_hook_returns_object(self):
        """Test fallback to the second hook when the first returns an object."""
        value_of = CountingHook(ObjectHandle())
        to_str = CountingHook(s("fallback"))
        handle = ObjectHandle(value_of=value_of, to_string=to_str)

        assert to_primitive(handle, Hint.NUMBER).value == "fallback"
        assert value_of.calls == 1
        assert to_str.calls == 1

    def test_falls_back_when_hook_signals_no_primitive(self):
        """Test fallback when the first hook raises NotCallableOrNoPrimitive."""
        handle = ObjectHandle(
            value_of=CountingHook(NotCallableOrNoPrimitive("nope")),
            to_string=lambda: s("ok"),
        )
        assert to_primitive(handle, Hint.NUMBER).value == "ok"

    def test_missing_hook_is_skipped(self):
        """Test that an absent hook is not counted as tried."""
        handle = ObjectHandle(to_string=lambda: s("only"))
        assert to_primitive(handle, Hint.NUMBER).value == "only"

    def test_no_hooks_fails(self):
        """Test failure for a handle without hooks."""
        with pytest.raises(NoPrimitiveRepresentation) as exc_info:
            to_primitive(ObjectHandle(label="bare"), Hint.NUMBER)
        assert exc_info.value.tried == []
        assert exc_info.value.hint == Hint.NUMBER

    def test_each_hook_called_at_most_once_on_failure(self):
        """Test that failing hooks are not retried."""
        value_of = CountingHook(ObjectHandle())
        to_str = CountingHook(ObjectHandle())
        handle = ObjectHandle(value_of=value_of, to_string=to_str)

        with pytest.raises(NoPrimitiveRepresentation) as exc_info:
            to_primitive(handle, Hint.STRING)

        assert value_of.calls == 1
        assert to_str.calls == 1
        assert exc_info.value.tried == ["toString", "valueOf"]

    def test_other_hook_exceptions_propagate(self):
        """Test that unrelated hook exceptions are not swallowed."""
        handle = ObjectHandle(value_of=CountingHook(RuntimeError("boom")), to_string=lambda: s("x"))
        with pytest.raises(RuntimeError, match="boom"):
            to_primitive(handle, Hint.NUMBER)

    def test_rejects_foreign_values(self):
        """Test that plain Python values are rejected."""
        with pytest.raises(TypeError):
            to_primitive(42)


class TestToNumber:
    """Test ToNumber."""

    def test_non_string_primitives(self):
        """Test the fixed conversions."""
        assert math.isnan(to_number(UNDEFINED))
        assert to_number(NULL) == 0.0
        assert to_number(TRUE) == 1.0
        assert to_number(FALSE) == 0.0
        assert to_number(num(-2.5)) == -2.5

    def test_empty_and_whitespace_strings(self):
        """Test that empty and whitespace-only strings are zero."""
        assert to_number(s("")) == 0.0
        assert to_number(s("  \n\t ")) == 0.0
        assert to_number(s("\u00a0\u2003\ufeff\u3000")) == 0.0

    def test_decimal_literals(self):
        """Test decimal string parsing."""
        assert to_number(s("42")) == 42.0
        assert to_number(s("  -3.5  ")) == -3.5
        assert to_number(s("+1e3")) == 1000.0
        assert to_number(s(".5")) == 0.5
        assert to_number(s("5.")) == 5.0
        assert to_number(s("2E-2")) == 0.02

    def test_leading_zeros_are_decimal(self):
        """Test that a leading zero never means octal."""
        assert to_number(s("010")) == 10.0
        assert to_number(s("0009")) == 9.0

    def test_prefixed_integers(self):
        """Test hex, binary and octal prefixes."""
        assert to_number(s("0x1F")) == 31.0
        assert to_number(s("0XfF")) == 255.0
        assert to_number(s("0b101")) == 5.0
        assert to_number(s("0o17")) == 15.0

    def test_signed_prefixed_integers_are_nan(self):
        """Test that a sign before a prefixed literal is rejected."""
        assert math.isnan(to_number(s("-0x10")))
        assert math.isnan(to_number(s("+0b1")))

    def test_infinity(self):
        """Test Infinity spellings."""
        assert to_number(s("Infinity")) == math.inf
        assert to_number(s("-Infinity")) == -math.inf
        assert math.isnan(to_number(s("infinity")))
        assert math.isnan(to_number(s("inf")))

    def test_unparseable_strings_are_nan(self):
        """Test strings outside the numeric grammar."""
        for text in ["abc", "1a", "1 2", "1_000", "nan", "0x", "0b2", "--1", "1e", "."]:
            assert math.isnan(to_number(s(text))), text

    def test_huge_values_overflow_to_infinity(self):
        """Test that out-of-range literals become Infinity."""
        assert to_number(s("1e400")) == math.inf
        assert string_to_number("0x" + "f" * 300) == math.inf

    def test_object_uses_number_hint(self):
        """Test that objects go through ToPrimitive with the number hint."""
        handle = ObjectHandle(value_of=lambda: s(" 7 "), to_string=lambda: s("8"))
        assert to_number(handle) == 7.0

    def test_object_failure_propagates(self):
        """Test that ToPrimitive failure propagates."""
        with pytest.raises(NoPrimitiveRepresentation):
            to_number(ObjectHandle())


class TestToString:
    """Test ToString for non-number values."""

    def test_fixed_names(self):
        """Test the literal names."""
        assert to_string(UNDEFINED) == "undefined"
        assert to_string(NULL) == "null"
        assert to_string(TRUE) == "true"
        assert to_string(FALSE) == "false"

    def test_string_identity(self):
        """Test that strings are returned unchanged."""
        assert to_string(s("  x ")) == "  x "

    def test_numbers(self):
        """Test representative numbers."""
        assert to_string(num(-0.0)) == "0"
        assert to_string(num(math.nan)) == "NaN"
        assert to_string(num(-math.inf)) == "-Infinity"
        assert to_string(num(1.5)) == "1.5"

    def test_object_uses_string_hint(self):
        """Test that objects go through ToPrimitive with the string hint."""
        handle = ObjectHandle(value_of=lambda: num(1), to_string=lambda: s("[object Object]"))
        assert to_string(handle) == "[object Object]"

    def test_object_result_is_stringified(self):
        """Test that a non-string primitive from a hook is converted."""
        handle = ObjectHandle(value_of=lambda: num(0.1))
        assert to_string(handle) == "0.1"

    def test_object_failure_propagates(self):
        """Test that ToPrimitive failure propagates."""
        with pytest.raises(NoPrimitiveRepresentation):
            to_string(ObjectHandle(value_of=lambda: ObjectHandle()))


class TestToBoolean:
    """Test ToBoolean."""

    def test_falsy_values(self):
        """Test the complete falsy list."""
        for value in [UNDEFINED, NULL, FALSE, num(0), num(-0.0), num(math.nan), s("")]:
            assert to_boolean(value) is False, value

    def test_truthy_values(self):
        """Test values that are often mistaken for falsy."""
        for value in [TRUE, num(-1), num(math.inf), s("0"), s("false"), s(" "), s("''")]:
            assert to_boolean(value) is True, value

    def test_objects_always_truthy_without_hooks_running(self):
        """Test that objects are truthy and their hooks never run."""
        value_of = CountingHook(FALSE)
        to_str = CountingHook(s(""))
        assert to_boolean(ObjectHandle(value_of=value_of, to_string=to_str)) is True
        assert to_boolean(ObjectHandle()) is True
        assert value_of.calls == 0
        assert to_str.calls == 0

    @pytest.mark.parametrize("number", [0.0, -0.0, math.nan, 1.0, -1.0, 1e-300, math.inf, -math.inf])
    def test_number_truthiness(self, number):
        """Test that a number is falsy exactly for +0, -0 and NaN."""
        expected = not (number == 0 or math.isnan(number))
        assert to_boolean(num(number)) is expected


class TestToInt32:
    """Test ToInt32."""

    def test_wrapping(self):
        """Test modular wrapping into the signed 32-bit range."""
        assert to_int32(num(2**32 + 5)) == 5
        assert to_int32(num(2**31)) == -(2**31)
        assert to_int32(num(-1)) == -1
        assert to_int32(num(3.9)) == 3
        assert to_int32(num(-3.9)) == -3

    def test_non_finite_is_zero(self):
        """Test NaN and Infinity map to zero."""
        assert to_int32(num(math.nan)) == 0
        assert to_int32(num(math.inf)) == 0
        assert to_int32(s("abc")) == 0
