"""Report every conversion of a single value at once."""

from typing import Any

from ..codec import encode_number, encode_value
from ..config import EvaluatorServerConfig
from ..models import InspectionResponse
from ..semantics import Hint, attempt, to_boolean, to_number, to_primitive, to_string, type_of
from .envelope import data_response, exception_response, hook_calls, new_decoder


def inspect_value_impl(value: Any, config: EvaluatorServerConfig | None = None) -> dict[str, Any]:
    """Describe ``value``: typeof, truthiness, ToNumber, ToString and ToPrimitive per hint.

    Conversion failures are reported per conversion instead of failing the
    whole inspection.
    """
    try:
        decoder = new_decoder(config)
        decoded = decoder.decode(value)

        response = InspectionResponse(typeof=type_of(decoded), truthy=to_boolean(decoded))

        number = attempt(to_number, decoded)
        if number.ok:
            response.number = encode_number(number.value)
        else:
            response.errors["number"] = str(number.error)

        string = attempt(to_string, decoded)
        if string.ok:
            response.string = string.value
        else:
            response.errors["string"] = str(string.error)

        for hint in Hint:
            primitive = attempt(to_primitive, decoded, hint)
            if primitive.ok:
                response.primitive[hint.value] = encode_value(primitive.value)
            else:
                response.errors[f"primitive:{hint.value}"] = str(primitive.error)

        response.hook_calls = hook_calls(decoder)
        return data_response(response)

    except Exception as e:
        return exception_response(e, "inspect value")
