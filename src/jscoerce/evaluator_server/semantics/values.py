"""Value model for the coercion evaluator.

Two kinds of values exist:

    PrimitiveValue  - Undefined, Null, Boolean, Number or String
    ObjectHandle    - an opaque composite value exposing optional
                      ``valueOf`` / ``toString`` hooks

Both are immutable. Boxed primitives are not modelled.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Primitive kinds."""

    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"


class Hint(Enum):
    """Preferred type passed to ToPrimitive."""

    NUMBER = "number"
    STRING = "string"
    DEFAULT = "default"


@dataclass(frozen=True)
class PrimitiveValue:
    """A tagged primitive value.

    Numbers are always stored as Python floats so that signed zero, NaN and
    Infinity behave as IEEE-754 doubles.
    """

    kind: ValueKind
    value: bool | float | str | None = None

    def __post_init__(self):
        if not isinstance(self.kind, ValueKind):
            raise TypeError(f"kind must be ValueKind, got {type(self.kind).__name__}")

        if self.kind in (ValueKind.UNDEFINED, ValueKind.NULL):
            if self.value is not None:
                raise TypeError(f"{self.kind.value} carries no payload")
        elif self.kind == ValueKind.BOOLEAN:
            if not isinstance(self.value, bool):
                raise TypeError(f"boolean payload must be bool, got {type(self.value).__name__}")
        elif self.kind == ValueKind.NUMBER:
            if isinstance(self.value, bool) or not isinstance(self.value, int | float):
                raise TypeError(f"number payload must be int or float, got {type(self.value).__name__}")
            try:
                number = float(self.value)
            except OverflowError:
                # Integers beyond the double range round to a signed Infinity
                number = math.inf if self.value > 0 else -math.inf
            # Frozen dataclass: widen ints through object.__setattr__
            object.__setattr__(self, "value", number)
        elif self.kind == ValueKind.STRING:
            if not isinstance(self.value, str):
                raise TypeError(f"string payload must be str, got {type(self.value).__name__}")

    @classmethod
    def number(cls, value: int | float) -> "PrimitiveValue":
        return cls(ValueKind.NUMBER, value)

    @classmethod
    def string(cls, value: str) -> "PrimitiveValue":
        return cls(ValueKind.STRING, value)

    @classmethod
    def boolean(cls, value: bool) -> "PrimitiveValue":
        return TRUE if value else FALSE

    @property
    def is_nan(self) -> bool:
        return self.kind == ValueKind.NUMBER and math.isnan(self.value)

    def __repr__(self):
        if self.kind in (ValueKind.UNDEFINED, ValueKind.NULL):
            return f"PrimitiveValue({self.kind.value})"
        return f"PrimitiveValue({self.kind.value}, {self.value!r})"


UNDEFINED = PrimitiveValue(ValueKind.UNDEFINED)
NULL = PrimitiveValue(ValueKind.NULL)
TRUE = PrimitiveValue(ValueKind.BOOLEAN, True)
FALSE = PrimitiveValue(ValueKind.BOOLEAN, False)
NAN = PrimitiveValue(ValueKind.NUMBER, math.nan)

Hook = Callable[[], Any]


@dataclass(frozen=True, eq=False)
class ObjectHandle:
    """An opaque composite value (object, array or function analog).

    Equality and hashing are by identity: two handles with identical hooks are
    still different objects.

    Attributes:
        value_of: Optional zero-argument hook standing in for ``valueOf``
        to_string: Optional zero-argument hook standing in for ``toString``
        label: Free-form name used in diagnostics only
        callable: Whether the handle models a function (affects ``typeof``)
    """

    value_of: Hook | None = None
    to_string: Hook | None = None
    label: str | None = None
    callable: bool = False

    def hooks_for(self, hint: Hint) -> list[tuple[str, Hook | None]]:
        """Return the hooks in the order ToPrimitive tries them for ``hint``."""
        if hint == Hint.STRING:
            return [("toString", self.to_string), ("valueOf", self.value_of)]
        return [("valueOf", self.value_of), ("toString", self.to_string)]

    def __repr__(self):
        name = self.label or hex(id(self))
        return f"ObjectHandle({name})"


JSValue = PrimitiveValue | ObjectHandle


def from_python(value: Any) -> JSValue:
    """Wrap a plain Python scalar as a primitive.

    ``None`` maps to Null; use ``UNDEFINED`` explicitly for Undefined.
    Values that are already ``PrimitiveValue`` or ``ObjectHandle`` pass through.
    """
    if isinstance(value, PrimitiveValue | ObjectHandle):
        return value
    if value is None:
        return NULL
    if isinstance(value, bool):
        return PrimitiveValue.boolean(value)
    if isinstance(value, int | float):
        return PrimitiveValue.number(value)
    if isinstance(value, str):
        return PrimitiveValue.string(value)
    raise TypeError(f"Cannot represent {type(value).__name__} as a primitive value")
