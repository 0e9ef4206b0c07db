"""JSON encoding of evaluator values.

Decoding accepts bare JSON scalars (``true``, ``1.5``, ``"x"``, ``null``) and
the tagged form validated by ``ValueSpec``. Objects that share an ``id`` in
one decoder decode to the same ObjectHandle, which is how callers express
identity for ``==`` and ``===``.
"""

import logging
import math
from dataclasses import asdict
from typing import Any

from pydantic import ValidationError

from .models import HookCall, ValueSpec
from .semantics import NULL, UNDEFINED, JSValue, ObjectHandle, PrimitiveValue, ValueEncodingError, ValueKind

logger = logging.getLogger(__name__)

_NUMBER_FROM_SPELLING = {
    "NaN": math.nan,
    "Infinity": math.inf,
    "-Infinity": -math.inf,
    "-0": -0.0,
}


def encode_number(number: float) -> float | int | str:
    """Encode a double for JSON, spelling out values JSON cannot carry."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if number == 0 and math.copysign(1.0, number) < 0:
        return "-0"
    if number.is_integer() and abs(number) < 2**53:
        return int(number)
    return number


def encode_value(value: JSValue) -> dict[str, Any]:
    """Encode a value in the tagged form."""
    if isinstance(value, ObjectHandle):
        encoded = {"type": "object", "id": value.label or f"0x{id(value):x}"}
        if value.callable:
            encoded["callable"] = True
        return encoded

    if value.kind in (ValueKind.UNDEFINED, ValueKind.NULL):
        return {"type": value.kind.value}
    if value.kind == ValueKind.NUMBER:
        return {"type": "number", "value": encode_number(value.value)}
    return {"type": value.kind.value, "value": value.value}


class HookCallLog:
    """Ordered record of hook invocations made while evaluating one request."""

    def __init__(self):
        self.calls: list[HookCall] = []

    def record(self, object_id: str, hook: str, result: JSValue) -> None:
        self.calls.append(HookCall(object_id=object_id, hook=hook, result=encode_value(result)))

    def as_list(self) -> list[dict[str, Any]]:
        return [asdict(call) for call in self.calls]


class ValueDecoder:
    """Decodes wire values into PrimitiveValue / ObjectHandle instances.

    One decoder corresponds to one request: it owns the id -> handle table and
    the optional hook call log.
    """

    def __init__(self, max_depth: int = 32, hook_log: HookCallLog | None = None):
        self.max_depth = max_depth
        self.hook_log = hook_log
        self._objects: dict[str, ObjectHandle] = {}
        self._anonymous_count = 0

    def decode(self, raw: Any, depth: int = 0) -> JSValue:
        """Decode one wire value.

        Raises:
            ValueEncodingError: If the encoding is invalid or nested too deeply
        """
        if depth > self.max_depth:
            raise ValueEncodingError(f"Value nesting exceeds max depth of {self.max_depth}")

        if raw is None:
            return NULL
        if isinstance(raw, bool):
            return PrimitiveValue.boolean(raw)
        if isinstance(raw, int | float):
            return PrimitiveValue.number(raw)
        if isinstance(raw, str):
            return PrimitiveValue.string(raw)
        if isinstance(raw, dict):
            try:
                spec = ValueSpec.model_validate(raw)
            except ValidationError as e:
                raise ValueEncodingError(f"Invalid value encoding {raw!r}: {e}") from e
            return self._decode_spec(spec, depth)

        raise ValueEncodingError(f"Unsupported value encoding of type {type(raw).__name__}")

    def _decode_spec(self, spec: ValueSpec, depth: int) -> JSValue:
        if spec.type == "undefined":
            return UNDEFINED
        elif spec.type == "null":
            return NULL
        elif spec.type == "boolean":
            return PrimitiveValue.boolean(spec.value)
        elif spec.type == "number":
            if isinstance(spec.value, str):
                return PrimitiveValue.number(_NUMBER_FROM_SPELLING[spec.value])
            return PrimitiveValue.number(spec.value)
        elif spec.type == "string":
            return PrimitiveValue.string(spec.value)
        return self._decode_object(spec, depth)

    def _decode_object(self, spec: ValueSpec, depth: int) -> ObjectHandle:
        if spec.id is not None and spec.id in self._objects:
            # First definition of an id wins
            return self._objects[spec.id]

        if spec.id is None:
            self._anonymous_count += 1
            object_id = f"#{self._anonymous_count}"
        else:
            object_id = spec.id

        # Hook results are filled in after the handle is registered so that a
        # hook may return its own object by id.
        results: dict[str, JSValue] = {}
        handle = ObjectHandle(
            value_of=self._make_hook(object_id, "valueOf", results) if spec.has_value_of else None,
            to_string=self._make_hook(object_id, "toString", results) if spec.has_to_string else None,
            label=object_id,
            callable=spec.callable,
        )
        if spec.id is not None:
            self._objects[spec.id] = handle

        if spec.has_value_of:
            results["valueOf"] = self.decode(spec.value_of, depth + 1)
        if spec.has_to_string:
            results["toString"] = self.decode(spec.to_string, depth + 1)

        return handle

    def _make_hook(self, object_id: str, name: str, results: dict[str, JSValue]):
        def hook() -> JSValue:
            result = results[name]
            logger.debug(f"{object_id}.{name}() -> {result!r}")
            if self.hook_log is not None:
                self.hook_log.record(object_id, name, result)
            return result

        return hook
