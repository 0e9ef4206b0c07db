"""Evaluate the value-selecting ``&&`` / ``||`` operators."""

from typing import Any

from ..codec import encode_value
from ..config import EvaluatorServerConfig
from ..models import LogicalSelectionResponse
from ..semantics import logical_and, logical_or
from .envelope import data_response, exception_response, hook_calls, new_decoder

LOGICAL_OPERATORS = {"&&": logical_and, "||": logical_or}


def select_logical_impl(
    left: Any, right: Any, operator: str, config: EvaluatorServerConfig | None = None
) -> dict[str, Any]:
    """Evaluate ``left <operator> right`` with short-circuiting.

    The right operand is only decoded when the operator needs it, so an
    invalid right operand goes unnoticed when the left operand decides.
    """
    try:
        selector = LOGICAL_OPERATORS.get(operator)
        if selector is None:
            raise ValueError(f"operator must be one of {list(LOGICAL_OPERATORS)}, got {operator!r}")

        decoder = new_decoder(config)
        evaluated = []

        def right_thunk():
            evaluated.append("right")
            return decoder.decode(right)

        result = selector(lambda: decoder.decode(left), right_thunk)

        return data_response(
            LogicalSelectionResponse(
                operator=operator,
                result=encode_value(result),
                selected="right" if evaluated else "left",
                right_evaluated=bool(evaluated),
                hook_calls=hook_calls(decoder),
            )
        )

    except Exception as e:
        return exception_response(e, f"evaluate {operator}")
