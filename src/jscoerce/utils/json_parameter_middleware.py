"""JSON Parameter Middleware for FastMCP.

MCP clients frequently send structured arguments (encoded values, operand
lists) as JSON text instead of native objects. The ``json_convert`` decorator
inspects a tool's type hints and parses such strings before the tool runs,
returning the standard ``INVALID_INPUT`` error envelope when parsing fails.
"""

import functools
import inspect
import json
import logging
import types
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

_COLLECTIONS = (list, dict, tuple)


class JSONParameterMiddleware:
    """
    Converts JSON string parameters to the collection types a tool declares.

    Strings are never parsed for a parameter that accepts ``str``: a tool
    declaring ``dict[str, Any] | str`` receives ``'{"type": "null"}'`` as the
    string it is, while ``list[Any]`` parameters get ``'[1, 2]'`` as a list.

    Usage:
        middleware = JSONParameterMiddleware()

        @mcp.tool
        @middleware.convert
        def compare_values(left: dict[str, Any] | str, ...) -> dict:
            ...
    """

    def __init__(self, debug: bool = False):
        self.debug = debug

    def _should_try_json_parse(self, value: Any, expected_type: Any) -> bool:
        """Return True when ``value`` is a string that may hold JSON for ``expected_type``."""
        if not isinstance(value, str):
            return False
        if expected_type is str:
            return False

        origin = get_origin(expected_type)
        if origin in _COLLECTIONS or expected_type in _COLLECTIONS:
            return True

        if origin and isinstance(origin, type) and issubclass(origin, Mapping | Sequence):
            return True

        stripped = value.strip()
        return stripped.startswith(("[", "{", '"')) and stripped.endswith(("]", "}", '"'))

    def _matches(self, parsed: Any, expected_type: Any) -> bool:
        origin = get_origin(expected_type) or expected_type
        if origin is Any:
            return True
        if origin in (list, tuple) or (isinstance(origin, type) and issubclass(origin, Sequence) and origin is not str):
            return isinstance(parsed, list)
        if origin is dict or (isinstance(origin, type) and issubclass(origin, Mapping)):
            return isinstance(parsed, dict)
        if isinstance(origin, type):
            return isinstance(parsed, origin) and not (origin is not bool and isinstance(parsed, bool))
        return False

    def _convert_value(self, value: Any, expected_type: Any, param_name: str) -> Any:
        """
        Convert a value to the expected type, parsing JSON if necessary.

        Raises:
            ValueError: If the value is malformed JSON or parses to the wrong type
        """
        if value is None:
            return None

        origin = get_origin(expected_type)

        if origin is types.UnionType or origin is Union:
            if isinstance(value, str) and str in get_args(expected_type):
                return value

            last_error = None
            for arg_type in get_args(expected_type):
                if arg_type is type(None):
                    continue
                try:
                    converted = self._convert_value(value, arg_type, param_name)
                except ValueError as e:
                    last_error = e
                    continue
                if converted is not value or self._matches(value, arg_type):
                    return converted
            if last_error and not any(self._matches(value, t) for t in get_args(expected_type)):
                raise last_error
            return value

        if not self._should_try_json_parse(value, expected_type):
            return value

        try:
            parsed = json.loads(value)
        except json.JSONDecodeError as e:
            if origin in _COLLECTIONS or expected_type in _COLLECTIONS:
                raise ValueError(f"Invalid JSON in parameter '{param_name}': {e}") from e
            return value

        if self.debug:
            logger.debug(f"Converted {param_name} from JSON string to {type(parsed).__name__}")

        if self._matches(parsed, expected_type):
            return tuple(parsed) if (origin or expected_type) is tuple else parsed

        expected_name = getattr(origin or expected_type, "__name__", str(expected_type))
        raise ValueError(f"Parameter '{param_name}' must be a {expected_name}, got {type(parsed).__name__} from JSON")

    def _convert_arguments(self, sig: inspect.Signature, type_hints: dict[str, Any], args, kwargs):
        bound_args = sig.bind(*args, **kwargs)
        bound_args.apply_defaults()

        converted_kwargs = {}
        for param_name, param_value in bound_args.arguments.items():
            if param_name not in type_hints:
                converted_kwargs[param_name] = param_value
                continue
            converted_kwargs[param_name] = self._convert_value(param_value, type_hints[param_name], param_name)
        return converted_kwargs

    def convert(self, func: F) -> F:
        """Wrap ``func`` so its JSON string parameters are converted before the call."""
        sig = inspect.signature(func)
        type_hints = get_type_hints(func)

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs):
                try:
                    converted_kwargs = self._convert_arguments(sig, type_hints, args, kwargs)
                except ValueError as e:
                    return {"error": {"code": "INVALID_INPUT", "message": str(e)}}
                return await func(**converted_kwargs)

            return async_wrapper  # type: ignore

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                converted_kwargs = self._convert_arguments(sig, type_hints, args, kwargs)
            except ValueError as e:
                return {"error": {"code": "INVALID_INPUT", "message": str(e)}}
            return func(**converted_kwargs)

        return wrapper  # type: ignore


_default_middleware = JSONParameterMiddleware()


def json_convert(func: F) -> F:
    """
    Apply JSON parameter conversion with the shared middleware instance.

    Usage:
        @mcp.tool
        @json_convert
        def apply_operator(operator: str, operands: list[Any]) -> dict:
            return {"count": len(operands)}
    """
    return _default_middleware.convert(func)
