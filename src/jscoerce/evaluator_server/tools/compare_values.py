"""Compare two values with the equality and relational operators."""

from typing import Any

from ..config import EvaluatorServerConfig
from ..models import ComparisonResponse
from ..semantics import (
    abstract_equals,
    abstract_not_equals,
    greater_equal,
    greater_than,
    less_equal,
    less_than,
    strict_equals,
    strict_not_equals,
)
from .envelope import data_response, exception_response, hook_calls, new_decoder

COMPARISON_OPERATORS = {
    "==": abstract_equals,
    "!=": abstract_not_equals,
    "===": strict_equals,
    "!==": strict_not_equals,
    "<": less_than,
    "<=": less_equal,
    ">": greater_than,
    ">=": greater_equal,
}


def compare_values_impl(
    left: Any, right: Any, operator: str, config: EvaluatorServerConfig | None = None
) -> dict[str, Any]:
    """Evaluate ``left <operator> right``.

    Both operands are decoded with one decoder, so objects sharing an id are
    the same object.
    """
    try:
        comparison = COMPARISON_OPERATORS.get(operator)
        if comparison is None:
            raise ValueError(f"operator must be one of {list(COMPARISON_OPERATORS)}, got {operator!r}")

        decoder = new_decoder(config)
        left_value = decoder.decode(left)
        right_value = decoder.decode(right)

        result = comparison(left_value, right_value)
        return data_response(ComparisonResponse(operator=operator, result=result, hook_calls=hook_calls(decoder)))

    except Exception as e:
        return exception_response(e, f"compare values with {operator}")
