"""Abstract conversion operations: ToPrimitive, ToNumber, ToString, ToBoolean.

All conversions accept either a PrimitiveValue or an ObjectHandle. Object
handles are reduced through their hooks; each hook runs at most once per
conversion call.
"""

import logging
import math
import re
from decimal import Decimal

from .errors import NoPrimitiveRepresentation, NotCallableOrNoPrimitive
from .values import Hint, JSValue, ObjectHandle, PrimitiveValue, ValueKind

logger = logging.getLogger(__name__)

# WhiteSpace and LineTerminator code points trimmed from numeric strings
JS_WHITESPACE = (
    "\u0009\u000a\u000b\u000c\u000d\u0020\u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|Infinity)")
_PREFIXED_LITERAL = re.compile(r"0(?:[xX](?P<hex>[0-9a-fA-F]+)|[bB](?P<bin>[01]+)|[oO](?P<oct>[0-7]+))")

_RADIX = {"hex": 16, "bin": 2, "oct": 8}


def _check_value(value: JSValue) -> None:
    if not isinstance(value, PrimitiveValue | ObjectHandle):
        raise TypeError(f"Expected PrimitiveValue or ObjectHandle, got {type(value).__name__}")


def to_primitive(value: JSValue, hint: Hint = Hint.DEFAULT) -> PrimitiveValue:
    """Reduce a value to a primitive.

    Primitives are returned unchanged. For an ObjectHandle the hooks are tried
    in hint order (valueOf first for NUMBER and DEFAULT, toString first for
    STRING) and the first primitive result wins.

    Raises:
        NoPrimitiveRepresentation: If no hook yields a primitive
    """
    _check_value(value)
    if isinstance(value, PrimitiveValue):
        return value

    tried = []
    for name, hook in value.hooks_for(hint):
        if hook is None or not callable(hook):
            continue

        tried.append(name)
        logger.debug(f"Invoking {name} on {value!r} (hint: {hint.value})")
        try:
            result = hook()
        except NotCallableOrNoPrimitive as e:
            logger.debug(f"{name} on {value!r} produced no primitive: {e}")
            continue

        if isinstance(result, PrimitiveValue):
            return result

    logger.debug(f"ToPrimitive failed for {value!r} (hint: {hint.value}, tried: {tried})")
    raise NoPrimitiveRepresentation(value, hint, tried)


def string_to_number(text: str) -> float:
    """Parse a string with the StringNumericLiteral grammar.

    Leading zeros are decimal, never octal. Unparseable input gives NaN.
    """
    literal = text.strip(JS_WHITESPACE)
    if not literal:
        return 0.0

    if _DECIMAL_LITERAL.fullmatch(literal):
        return float(literal)

    match = _PREFIXED_LITERAL.fullmatch(literal)
    if match:
        group = next(name for name, digits in match.groupdict().items() if digits)
        integer = int(match.group(group), _RADIX[group])
        try:
            return float(integer)
        except OverflowError:
            return math.inf

    return math.nan


def to_number(value: JSValue) -> float:
    """Convert a value to a Number (a Python float, possibly NaN)."""
    _check_value(value)
    if isinstance(value, ObjectHandle):
        value = to_primitive(value, Hint.NUMBER)

    if value.kind == ValueKind.UNDEFINED:
        return math.nan
    elif value.kind == ValueKind.NULL:
        return 0.0
    elif value.kind == ValueKind.BOOLEAN:
        return 1.0 if value.value else 0.0
    elif value.kind == ValueKind.NUMBER:
        return value.value
    else:
        return string_to_number(value.value)


def _shortest_digits(number: float) -> tuple[str, int]:
    """Return (digits, n) such that number == 0.digits * 10**n.

    ``repr`` yields the shortest decimal string that round-trips to the same
    double, which is the digit string Number::toString requires.
    """
    _, digit_tuple, exponent = Decimal(repr(number)).as_tuple()
    raw = "".join(str(d) for d in digit_tuple)
    digits = raw.rstrip("0")
    exponent += len(raw) - len(digits)
    return digits, len(digits) + exponent


def number_to_string(number: float) -> str:
    """Render a Number the way Number::toString does for radix 10."""
    if math.isnan(number):
        return "NaN"
    if number == 0:
        return "0"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number < 0:
        return "-" + number_to_string(-number)

    digits, n = _shortest_digits(number)
    k = len(digits)

    if k <= n <= 21:
        return digits + "0" * (n - k)
    if 0 < n <= 21:
        return digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return "0." + "0" * -n + digits

    exponent = n - 1
    sign = "+" if exponent >= 0 else "-"
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{mantissa}e{sign}{abs(exponent)}"


def to_string(value: JSValue) -> str:
    """Convert a value to a String."""
    _check_value(value)
    if isinstance(value, ObjectHandle):
        value = to_primitive(value, Hint.STRING)

    if value.kind == ValueKind.UNDEFINED:
        return "undefined"
    elif value.kind == ValueKind.NULL:
        return "null"
    elif value.kind == ValueKind.BOOLEAN:
        return "true" if value.value else "false"
    elif value.kind == ValueKind.NUMBER:
        return number_to_string(value.value)
    else:
        return value.value


def to_boolean(value: JSValue) -> bool:
    """Convert a value to a Boolean. Total; object hooks are never invoked."""
    _check_value(value)
    if isinstance(value, ObjectHandle):
        return True

    if value.kind in (ValueKind.UNDEFINED, ValueKind.NULL):
        return False
    elif value.kind == ValueKind.BOOLEAN:
        return value.value
    elif value.kind == ValueKind.NUMBER:
        return not (value.value == 0 or math.isnan(value.value))
    else:
        return len(value.value) > 0


def to_int32(value: JSValue) -> int:
    """Convert a value to a signed 32-bit integer (ToInt32)."""
    number = to_number(value)
    if math.isnan(number) or math.isinf(number):
        return 0

    wrapped = int(number) % 2**32
    return wrapped - 2**32 if wrapped >= 2**31 else wrapped
