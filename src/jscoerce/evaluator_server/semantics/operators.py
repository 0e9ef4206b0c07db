"""Operators built on the abstract conversions: typeof, +, unary -, !, ~ and ?:."""

from collections.abc import Callable

from .conversions import to_boolean, to_int32, to_number, to_primitive, to_string
from .values import Hint, JSValue, ObjectHandle, PrimitiveValue, ValueKind


def type_of(value: JSValue) -> str:
    """Implement ``typeof``. Null reports ``"object"``."""
    if isinstance(value, ObjectHandle):
        return "function" if value.callable else "object"
    if value.kind == ValueKind.NULL:
        return "object"
    return value.kind.value


def add(a: JSValue, b: JSValue) -> PrimitiveValue:
    """Implement binary ``+``.

    Both operands are reduced with the DEFAULT hint (left first). If either
    primitive is a String the result is the concatenation of both ToString
    results, otherwise the numeric sum.
    """
    left = to_primitive(a, Hint.DEFAULT)
    right = to_primitive(b, Hint.DEFAULT)

    if left.kind == ValueKind.STRING or right.kind == ValueKind.STRING:
        return PrimitiveValue.string(to_string(left) + to_string(right))
    return PrimitiveValue.number(to_number(left) + to_number(right))


def unary_plus(value: JSValue) -> float:
    return to_number(value)


def unary_minus(value: JSValue) -> float:
    return -to_number(value)


def logical_not(value: JSValue) -> bool:
    return not to_boolean(value)


def bitwise_not(value: JSValue) -> int:
    """Implement ``~``: ``-(ToInt32(value) + 1)``."""
    return ~to_int32(value)


def conditional(
    test: Callable[[], JSValue],
    consequent: Callable[[], JSValue],
    alternate: Callable[[], JSValue],
) -> JSValue:
    """Implement ``test ? consequent : alternate`` evaluating exactly one branch."""
    if to_boolean(test()):
        return consequent()
    return alternate()
