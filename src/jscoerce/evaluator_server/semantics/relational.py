"""Abstract relational comparison (``<``) and the operators derived from it.

``<=``, ``>`` and ``>=`` are defined in terms of ``less_than`` with swapped
operands and negation, never as independent comparisons. With NaN involved
this makes ``<=`` and ``>=`` true while ``<`` and ``>`` are false.
"""

import math

from .conversions import to_number, to_primitive
from .values import Hint, JSValue, ValueKind


def code_units(text: str) -> bytes:
    """Encode ``text`` as big-endian UTF-16 so byte order matches code-unit order."""
    return text.encode("utf-16-be", "surrogatepass")


def less_than(a: JSValue, b: JSValue) -> bool:
    """Implement ``a < b``.

    Both operands are reduced with the NUMBER hint, left operand first. Two
    strings compare by UTF-16 code units (not locale-aware); everything else
    compares numerically, with NaN on either side giving False.

    Raises:
        NoPrimitiveRepresentation: If an object operand cannot be reduced
    """
    left = to_primitive(a, Hint.NUMBER)
    right = to_primitive(b, Hint.NUMBER)

    if left.kind == ValueKind.STRING and right.kind == ValueKind.STRING:
        return code_units(left.value) < code_units(right.value)

    left_number = to_number(left)
    right_number = to_number(right)
    if math.isnan(left_number) or math.isnan(right_number):
        return False
    return left_number < right_number


def less_equal(a: JSValue, b: JSValue) -> bool:
    """Implement ``a <= b`` as ``not (b < a)``."""
    return not less_than(b, a)


def greater_than(a: JSValue, b: JSValue) -> bool:
    """Implement ``a > b`` as ``b < a``."""
    return less_than(b, a)


def greater_equal(a: JSValue, b: JSValue) -> bool:
    """Implement ``a >= b`` as ``not (a < b)``."""
    return not less_than(a, b)
