"""Apply the coercing unary and binary operators (+, -, !, ~, typeof)."""

from typing import Any

from ..codec import encode_value
from ..config import EvaluatorServerConfig
from ..models import OperatorResponse
from ..semantics import (
    PrimitiveValue,
    add,
    bitwise_not,
    logical_not,
    type_of,
    unary_minus,
    unary_plus,
)
from .envelope import data_response, exception_response, hook_calls, new_decoder

UNARY_OPERATORS = {
    "+": lambda v: encode_value(PrimitiveValue.number(unary_plus(v))),
    "-": lambda v: encode_value(PrimitiveValue.number(unary_minus(v))),
    "!": lambda v: encode_value(PrimitiveValue.boolean(logical_not(v))),
    "~": lambda v: encode_value(PrimitiveValue.number(bitwise_not(v))),
    "typeof": type_of,
}

BINARY_OPERATORS = {
    "+": lambda a, b: encode_value(add(a, b)),
}


def apply_operator_impl(
    operator: str, operands: list[Any], config: EvaluatorServerConfig | None = None
) -> dict[str, Any]:
    """Apply ``operator`` to one operand (unary) or two operands (binary)."""
    try:
        if len(operands) == 1:
            table = UNARY_OPERATORS
        elif len(operands) == 2:
            table = BINARY_OPERATORS
        else:
            raise ValueError(f"operands must hold one or two values, got {len(operands)}")

        apply = table.get(operator)
        if apply is None:
            arity = "unary" if len(operands) == 1 else "binary"
            raise ValueError(f"{operator!r} is not a supported {arity} operator; use one of {list(table)}")

        decoder = new_decoder(config)
        values = [decoder.decode(operand) for operand in operands]

        result = apply(*values)
        return data_response(OperatorResponse(operator=operator, result=result, hook_calls=hook_calls(decoder)))

    except Exception as e:
        return exception_response(e, f"apply operator {operator}")
