"""Dataclass models for evaluator MCP tool output schemas."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class HookCall:
    """One invocation of an object hook during a tool call."""

    object_id: str
    hook: str  # "valueOf" | "toString"
    result: Any  # Encoded value the hook returned


@dataclass
class CoercionResponse:
    """Response schema for coerce_value tool."""

    target: str  # "primitive" | "number" | "string" | "boolean"
    result: Any  # Encoded value
    hint: str | None = None  # Only meaningful for the primitive target
    hook_calls: list[HookCall] = field(default_factory=list)


@dataclass
class ComparisonResponse:
    """Response schema for compare_values tool."""

    operator: str
    result: bool
    hook_calls: list[HookCall] = field(default_factory=list)


@dataclass
class LogicalSelectionResponse:
    """Response schema for select_logical tool."""

    operator: str  # "&&" | "||"
    result: Any  # Encoded selected operand
    selected: str  # "left" | "right"
    right_evaluated: bool
    hook_calls: list[HookCall] = field(default_factory=list)


@dataclass
class InspectionResponse:
    """Response schema for inspect_value tool."""

    typeof: str
    truthy: bool
    number: Any = None  # Encoded ToNumber result, None when it failed
    string: str | None = None
    primitive: dict[str, Any] = field(default_factory=dict)  # hint -> encoded result
    errors: dict[str, str] = field(default_factory=dict)  # conversion -> message
    hook_calls: list[HookCall] = field(default_factory=list)


@dataclass
class OperatorResponse:
    """Response schema for apply_operator tool."""

    operator: str
    result: Any  # Encoded value, or a plain string for typeof
    hook_calls: list[HookCall] = field(default_factory=list)
