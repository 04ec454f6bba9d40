import re
from typing import Any
from uuid import UUID
from pydantic import BaseModel, model_validator

INVISIBLE_CHARS_PATTERN = re.compile(
    r'[\u200e\u200f\u202a-\u202e\u2066-\u2069\ufeff]')


def deep_clean(value: Any):
    """Recursively strip strings, drop invisible chars and turn blanks into None."""

    if isinstance(value, dict):
        return {k: deep_clean(v) for k, v in value.items()}

    if isinstance(value, list):
        return [deep_clean(v) for v in value]

    if isinstance(value, str):
        cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
        return None if cleaned == "" else cleaned

    if isinstance(value, UUID):
        return value

    return value


class EmptyStringModel(BaseModel):
    """Input model that treats "" the same as a missing value.

    Forms post empty strings for untouched optional fields; cleaning them up
    front lets optional dates, UUIDs and numbers validate as None.
    """

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
        "use_enum_values": True,
    }

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        if isinstance(values, dict):
            cleaned = deep_clean(values)
            # a blank optional field is "not provided", not "set to null"
            return {k: v for k, v in cleaned.items() if v is not None or values.get(k) is None}
        return values
