from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from lavacharts.exceptions import InvalidElementId, InvalidLabel


class StringValue(BaseModel):
    """Immutable, trimmed, non-empty string identifier."""

    model_config = ConfigDict(frozen=True)
    value: str

    def __init__(self, value: Any, **kwargs):
        super().__init__(value=value, **kwargs)

    def __str__(self) -> str:
        return self.value


class Label(StringValue):
    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v):
        if isinstance(v, Label):
            return v.value
        if not isinstance(v, str) or not v.strip():
            raise InvalidLabel(v)
        return v.strip()


class ElementId(StringValue):
    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v):
        if isinstance(v, ElementId):
            return v.value
        if not isinstance(v, str) or not v.strip():
            raise InvalidElementId(v)
        return v.strip()
