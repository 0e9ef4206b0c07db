"""Evaluator server tools implementations."""

from typing import Any

from ...utils.json_parameter_middleware import json_convert
from ..config import EvaluatorServerConfig, get_config
from .apply_operator import apply_operator_impl
from .coerce_value import coerce_value_impl
from .compare_values import compare_values_impl
from .inspect_value import inspect_value_impl
from .select_logical import select_logical_impl

# Encoded values arrive as tagged dicts, bare JSON scalars, or JSON text
EncodedValue = dict[str, Any] | str | float | bool | None


def register_evaluator_tools(mcp, config: EvaluatorServerConfig | None = None):
    """Register evaluator tools with the MCP server."""
    config = config or get_config()

    @mcp.tool
    @json_convert
    def coerce_value(value: EncodedValue, target: str, hint: str | None = None) -> dict[str, Any]:
        """Convert a value with one of the abstract conversion operations.

        Use this tool when:
        - Checking what a value becomes under ToNumber, ToString or ToBoolean
        - Seeing which valueOf/toString hook ToPrimitive picks for a hint
        - Explaining surprising implicit coercions

        Args:
            value: Encoded value. Bare JSON scalars map to boolean/number/string/null;
                tagged form: {"type": "undefined"}, {"type": "number", "value": "NaN"},
                {"type": "object", "id": "o", "valueOf": 1, "toString": "x"}
            target: One of "primitive", "number", "string", "boolean"
            hint: ToPrimitive hint for the "primitive" target: "number", "string" or "default"

        Example:
            coerce_value({"type": "object", "valueOf": 42}, "string")
            → {"data": {"target": "string", "result": {"type": "string", "value": "42"}, ...}}

        Note: An object without hooks cannot be reduced and returns the NO_PRIMITIVE error.
        """
        return coerce_value_impl(value, target, hint, config)

    @mcp.tool
    @json_convert
    def compare_values(left: EncodedValue, right: EncodedValue, operator: str) -> dict[str, Any]:
        """Compare two values with ==, !=, ===, !==, <, <=, > or >=.

        Use this tool when:
        - Predicting the result of loose equality between different kinds
        - Checking relational comparisons involving strings, NaN or objects

        Args:
            left: Encoded left operand
            right: Encoded right operand
            operator: Comparison operator

        Example:
            compare_values({"type": "null"}, {"type": "undefined"}, "==")
            → {"data": {"operator": "==", "result": true, "hook_calls": []}}

        Note: Objects are equal only when they share the same "id".
        """
        return compare_values_impl(left, right, operator, config)

    @mcp.tool
    @json_convert
    def select_logical(left: EncodedValue, right: EncodedValue, operator: str) -> dict[str, Any]:
        """Evaluate && or || and return the selected operand.

        Use this tool when:
        - Showing that && and || return an operand, not a boolean
        - Checking whether the right operand would be evaluated at all

        Args:
            left: Encoded left operand
            right: Encoded right operand, only decoded when needed
            operator: "&&" or "||"

        Example:
            select_logical("", "fallback", "||")
            → {"data": {"result": {"type": "string", "value": "fallback"}, "selected": "right", ...}}
        """
        return select_logical_impl(left, right, operator, config)

    @mcp.tool
    @json_convert
    def inspect_value(value: EncodedValue) -> dict[str, Any]:
        """Describe a value: typeof, truthiness, ToNumber, ToString and ToPrimitive per hint.

        Use this tool when:
        - Getting an overview of how a value behaves in every coercion context

        Args:
            value: Encoded value

        Example:
            inspect_value("  0x1F ")
            → {"data": {"typeof": "string", "truthy": true, "number": 31, "string": "  0x1F ", ...}}
        """
        return inspect_value_impl(value, config)

    @mcp.tool
    @json_convert
    def apply_operator(operator: str, operands: list[Any]) -> dict[str, Any]:
        """Apply a coercing operator: binary +, unary +, -, !, ~ or typeof.

        Args:
            operator: Operator symbol, or "typeof"
            operands: One operand for unary operators, two for binary +

        Examples:
            apply_operator("+", [1, "2"])
            → {"data": {"operator": "+", "result": {"type": "string", "value": "12"}, ...}}

            apply_operator("typeof", [null])
            → {"data": {"operator": "typeof", "result": "object", ...}}
        """
        return apply_operator_impl(operator, operands, config)
