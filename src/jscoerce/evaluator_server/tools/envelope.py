"""Shared response envelope helpers for evaluator tools."""

import logging
from dataclasses import asdict, is_dataclass
from typing import Any

from ..codec import HookCallLog, ValueDecoder
from ..config import EvaluatorServerConfig, get_config
from ..semantics import NoPrimitiveRepresentation, ValueEncodingError

logger = logging.getLogger(__name__)


def data_response(payload: Any) -> dict[str, Any]:
    if is_dataclass(payload):
        payload = asdict(payload)
    return {"data": payload}


def error_response(code: str, message: str) -> dict[str, Any]:
    return {"error": {"code": code, "message": message}}


def exception_response(error: Exception, action: str) -> dict[str, Any]:
    """Map an exception raised while serving a tool to the error envelope."""
    if isinstance(error, ValueEncodingError | ValueError):
        logger.warning(f"Invalid input while trying to {action}: {error}")
        return error_response("INVALID_INPUT", str(error))
    if isinstance(error, NoPrimitiveRepresentation):
        logger.warning(f"No primitive representation while trying to {action}: {error}")
        return error_response("NO_PRIMITIVE", str(error))

    logger.exception(f"Failed to {action}")
    return error_response("OPERATION_FAILED", f"Failed to {action}: {error}")


def new_decoder(config: EvaluatorServerConfig | None = None) -> ValueDecoder:
    """Create a per-request decoder honouring the configured limits."""
    config = config or get_config()
    hook_log = HookCallLog() if config.record_hook_calls else None
    return ValueDecoder(max_depth=config.max_value_depth, hook_log=hook_log)


def hook_calls(decoder: ValueDecoder) -> list:
    return list(decoder.hook_log.calls) if decoder.hook_log is not None else []
