"""Abstract (``==``) and strict (``===``) equality."""

from .conversions import to_number, to_primitive
from .values import Hint, JSValue, ObjectHandle, PrimitiveValue, ValueKind

_NULLISH = (ValueKind.UNDEFINED, ValueKind.NULL)


def _same_kind_equals(a: PrimitiveValue, b: PrimitiveValue) -> bool:
    # Float comparison already gives NaN != NaN and +0 == -0
    return a.value == b.value


def abstract_equals(a: JSValue, b: JSValue) -> bool:
    """Implement the ``==`` comparison.

    Rules are applied in order, first match wins:

    1. Same primitive kind: compare payloads
    2. Null and Undefined equal each other and nothing else
    3. Number vs String: ToNumber the string
    4. Boolean vs anything: ToNumber the boolean and recurse
    5. Number or String vs object: ToPrimitive (default hint) and recurse
    6. Object vs object: identity
    7. Anything else: not equal

    Raises:
        NoPrimitiveRepresentation: If rule 5 cannot reduce the object
    """
    if isinstance(a, ObjectHandle) and isinstance(b, ObjectHandle):
        return a is b

    if isinstance(a, PrimitiveValue) and isinstance(b, PrimitiveValue):
        if a.kind == b.kind:
            return _same_kind_equals(a, b)

        if a.kind in _NULLISH or b.kind in _NULLISH:
            return a.kind in _NULLISH and b.kind in _NULLISH

        if a.kind == ValueKind.NUMBER and b.kind == ValueKind.STRING:
            return a.value == to_number(b)
        if a.kind == ValueKind.STRING and b.kind == ValueKind.NUMBER:
            return to_number(a) == b.value

    if isinstance(a, PrimitiveValue) and a.kind == ValueKind.BOOLEAN:
        return abstract_equals(PrimitiveValue.number(to_number(a)), b)
    if isinstance(b, PrimitiveValue) and b.kind == ValueKind.BOOLEAN:
        return abstract_equals(a, PrimitiveValue.number(to_number(b)))

    if isinstance(b, ObjectHandle) and a.kind in (ValueKind.NUMBER, ValueKind.STRING):
        return abstract_equals(a, to_primitive(b, Hint.DEFAULT))
    if isinstance(a, ObjectHandle) and b.kind in (ValueKind.NUMBER, ValueKind.STRING):
        return abstract_equals(to_primitive(a, Hint.DEFAULT), b)

    return False


def abstract_not_equals(a: JSValue, b: JSValue) -> bool:
    """Implement ``!=``."""
    return not abstract_equals(a, b)


def strict_equals(a: JSValue, b: JSValue) -> bool:
    """Implement ``===``: no coercion, objects by identity."""
    if isinstance(a, ObjectHandle) or isinstance(b, ObjectHandle):
        return a is b
    if a.kind != b.kind:
        return False
    return _same_kind_equals(a, b)


def strict_not_equals(a: JSValue, b: JSValue) -> bool:
    """Implement ``!==``."""
    return not strict_equals(a, b)
