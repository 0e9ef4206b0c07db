"""Value-selecting short-circuit operators.

Operands are thunks so that evaluation order and laziness are preserved:
the left thunk runs exactly once, the right thunk at most once and only when
the left value does not decide the result. The selected operand value is
returned as-is, never collapsed to a boolean.
"""

from collections.abc import Callable

from .conversions import to_boolean
from .values import JSValue

Thunk = Callable[[], JSValue]


def logical_or(left: Thunk, right: Thunk) -> JSValue:
    """Implement ``left || right``."""
    left_value = left()
    if to_boolean(left_value):
        return left_value
    return right()


def logical_and(left: Thunk, right: Thunk) -> JSValue:
    """Implement ``left && right``."""
    left_value = left()
    if not to_boolean(left_value):
        return left_value
    return right()
