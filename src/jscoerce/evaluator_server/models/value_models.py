"""Pydantic models for the JSON value encoding accepted by evaluator tools."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

NUMBER_SPELLINGS = {"NaN", "Infinity", "-Infinity", "-0"}


class ValueSpec(BaseModel):
    """Tagged encoding of a single value.

    Hook entries (``valueOf`` / ``toString``) hold the value the hook returns,
    in either the tagged form or as a bare JSON scalar. An absent key means the
    hook does not exist; an explicit ``null`` means the hook returns Null.
    """

    type: Literal["undefined", "null", "boolean", "number", "string", "object"] = Field(
        ..., description="Value kind"
    )
    value: Any = Field(default=None, description="Payload for boolean, number and string kinds")
    id: str | None = Field(default=None, description="Object identity shared within one request")
    value_of: Any = Field(default=None, alias="valueOf", description="Result returned by the valueOf hook")
    to_string: Any = Field(default=None, alias="toString", description="Result returned by the toString hook")
    callable: bool = Field(default=False, description="Whether the object models a function")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @property
    def has_value_of(self) -> bool:
        return "value_of" in self.model_fields_set

    @property
    def has_to_string(self) -> bool:
        return "to_string" in self.model_fields_set

    @model_validator(mode="after")
    def check_payload(self) -> "ValueSpec":
        if self.type != "object" and (
            self.id is not None or self.has_value_of or self.has_to_string or self.callable
        ):
            raise ValueError(f"{self.type} values cannot carry id, hooks or callable")

        if self.type in ("undefined", "null", "object"):
            if self.value is not None:
                raise ValueError(f"{self.type} values carry no 'value'")
        elif self.type == "boolean":
            if not isinstance(self.value, bool):
                raise ValueError("boolean values require a true/false 'value'")
        elif self.type == "number":
            if isinstance(self.value, str):
                if self.value not in NUMBER_SPELLINGS:
                    raise ValueError(f"number strings must be one of {sorted(NUMBER_SPELLINGS)}")
            elif isinstance(self.value, bool) or not isinstance(self.value, int | float):
                raise ValueError("number values require a numeric 'value'")
        elif self.type == "string":
            if not isinstance(self.value, str):
                raise ValueError("string values require a string 'value'")

        return self
