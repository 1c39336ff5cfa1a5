import re
from typing import Any, ClassVar, Tuple
from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel

INVISIBLE_CHARS_PATTERN = re.compile(
    r'[\u200e\u200f\u202a-\u202e\u2066-\u2069\ufeff]')


def deep_clean(value: Any):
    """Recursively strip strings, turn blank strings into None and drop blank list entries."""

    # 1️⃣ Handle dictionaries
    if isinstance(value, dict):
        return {k: deep_clean(v) for k, v in value.items()}

    # 2️⃣ Handle lists
    if isinstance(value, list):
        cleaned = (deep_clean(v) for v in value)
        return [v for v in cleaned if v is not None]

    # 3️⃣ Handle strings
    if isinstance(value, str):
        cleaned = INVISIBLE_CHARS_PATTERN.sub("", value).strip()
        return None if cleaned == "" else cleaned

    return value


class EmptyStringModel(BaseModel):
    """Base for every wire model: camelCase aliases plus inbound cleanup."""

    model_config = {
        "populate_by_name": True,
        "from_attributes": True,
        "alias_generator": to_camel,
    }

    # fields that may be omitted on a partial update but never set to null
    NON_NULLABLE: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def clean_input(cls, values):
        if isinstance(values, dict):
            return deep_clean(values)
        return values

    @model_validator(mode="after")
    def reject_null_required(self):
        for field_name in self.NON_NULLABLE:
            if field_name in self.model_fields_set and getattr(self, field_name) is None:
                alias = type(self).model_fields[field_name].alias or field_name
                raise ValueError(f"{alias} cannot be empty")
        return self
