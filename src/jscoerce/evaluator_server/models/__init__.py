"""Models for the evaluator server: wire encodings and tool responses."""

from .tool_models import (
    CoercionResponse,
    ComparisonResponse,
    HookCall,
    InspectionResponse,
    LogicalSelectionResponse,
    OperatorResponse,
)
from .value_models import NUMBER_SPELLINGS, ValueSpec

__all__ = [
    "ValueSpec",
    "NUMBER_SPELLINGS",
    "HookCall",
    "CoercionResponse",
    "ComparisonResponse",
    "LogicalSelectionResponse",
    "InspectionResponse",
    "OperatorResponse",
]
