"""JavaScript abstract value-conversion and comparison semantics."""

from .conversions import (
    number_to_string,
    string_to_number,
    to_boolean,
    to_int32,
    to_number,
    to_primitive,
    to_string,
)
from .equality import abstract_equals, abstract_not_equals, strict_equals, strict_not_equals
from .errors import (
    CoercionError,
    ConversionResult,
    NoPrimitiveRepresentation,
    NotCallableOrNoPrimitive,
    ValueEncodingError,
    attempt,
)
from .logical import logical_and, logical_or
from .operators import add, bitwise_not, conditional, logical_not, type_of, unary_minus, unary_plus
from .relational import greater_equal, greater_than, less_equal, less_than
from .values import (
    FALSE,
    NAN,
    NULL,
    TRUE,
    UNDEFINED,
    Hint,
    JSValue,
    ObjectHandle,
    PrimitiveValue,
    ValueKind,
    from_python,
)

__all__ = [
    # Values
    "FALSE",
    "NAN",
    "NULL",
    "TRUE",
    "UNDEFINED",
    "Hint",
    "JSValue",
    "ObjectHandle",
    "PrimitiveValue",
    "ValueKind",
    "from_python",
    # Errors
    "CoercionError",
    "ConversionResult",
    "NoPrimitiveRepresentation",
    "NotCallableOrNoPrimitive",
    "ValueEncodingError",
    "attempt",
    # Conversions
    "number_to_string",
    "string_to_number",
    "to_boolean",
    "to_int32",
    "to_number",
    "to_primitive",
    "to_string",
    # Comparisons
    "abstract_equals",
    "abstract_not_equals",
    "strict_equals",
    "strict_not_equals",
    "greater_equal",
    "greater_than",
    "less_equal",
    "less_than",
    # Logical and other operators
    "logical_and",
    "logical_or",
    "add",
    "bitwise_not",
    "conditional",
    "logical_not",
    "type_of",
    "unary_minus",
    "unary_plus",
]
