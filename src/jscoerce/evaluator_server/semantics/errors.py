"""Error kinds raised by the coercion evaluator."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


class CoercionError(Exception):
    """Base class for evaluator failures."""

    pass


class NoPrimitiveRepresentation(CoercionError):
    """Raised when ToPrimitive finds no hook that yields a primitive."""

    def __init__(self, handle: Any, hint: Any, tried: list[str] | None = None):
        self.handle = handle
        self.hint = hint
        self.tried = tried or []
        hint_name = getattr(hint, "value", hint)
        tried_desc = ", ".join(self.tried) if self.tried else "no callable hooks"
        super().__init__(f"Cannot convert {handle!r} to a primitive (hint: {hint_name}; tried: {tried_desc})")


class NotCallableOrNoPrimitive(CoercionError):
    """Raised by a hook to signal it cannot produce a primitive value."""

    pass


class ValueEncodingError(CoercionError):
    """Raised when a JSON-encoded value cannot be decoded."""

    pass


@dataclass(frozen=True)
class ConversionResult:
    """Explicit success/failure union for callers that prefer values over exceptions."""

    value: Any = None
    error: CoercionError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value or re-raise the captured error."""
        if self.error is not None:
            raise self.error
        return self.value


def attempt(operation: Callable[..., Any], *args: Any, **kwargs: Any) -> ConversionResult:
    """Run ``operation`` and capture evaluator failures as a ConversionResult.

    Only ``CoercionError`` is captured; exceptions raised by hooks for other
    reasons propagate.
    """
    try:
        return ConversionResult(value=operation(*args, **kwargs))
    except CoercionError as e:
        return ConversionResult(error=e)
