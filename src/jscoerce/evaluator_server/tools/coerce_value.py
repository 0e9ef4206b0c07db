"""Coerce a value with ToPrimitive, ToNumber, ToString or ToBoolean."""

from typing import Any

from ..codec import encode_value
from ..config import EvaluatorServerConfig
from ..models import CoercionResponse
from ..semantics import Hint, PrimitiveValue, to_boolean, to_number, to_primitive, to_string
from .envelope import data_response, exception_response, hook_calls, new_decoder

COERCION_TARGETS = ("primitive", "number", "string", "boolean")


def parse_hint(hint: str | None) -> Hint:
    if hint is None:
        return Hint.DEFAULT
    try:
        return Hint(hint)
    except ValueError:
        raise ValueError(f"hint must be one of {[h.value for h in Hint]}, got {hint!r}") from None


def coerce_value_impl(
    value: Any, target: str, hint: str | None = None, config: EvaluatorServerConfig | None = None
) -> dict[str, Any]:
    """Decode ``value`` and convert it to ``target``."""
    try:
        if target not in COERCION_TARGETS:
            raise ValueError(f"target must be one of {list(COERCION_TARGETS)}, got {target!r}")
        resolved_hint = parse_hint(hint)

        decoder = new_decoder(config)
        decoded = decoder.decode(value)

        if target == "primitive":
            result = encode_value(to_primitive(decoded, resolved_hint))
        elif target == "number":
            result = encode_value(PrimitiveValue.number(to_number(decoded)))
        elif target == "string":
            result = encode_value(PrimitiveValue.string(to_string(decoded)))
        else:
            result = encode_value(PrimitiveValue.boolean(to_boolean(decoded)))

        return data_response(
            CoercionResponse(
                target=target,
                result=result,
                hint=resolved_hint.value if target == "primitive" else None,
                hook_calls=hook_calls(decoder),
            )
        )

    except Exception as e:
        return exception_response(e, f"coerce value to {target}")
