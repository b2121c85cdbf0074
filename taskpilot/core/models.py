"""Strict and lax Pydantic base models used throughout taskpilot.

Input contracts are strict: no coercion, no unknown fields, immutable.
Response contracts are lax: they accept what a model returns as long as
it has the required shape, coercing well-known cases such as numeric
strings.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class StrictBaseModel(BaseModel):
    """Base model with strict validation.

    It enforces:
    - strict=True: Type coercion is disabled, inputs must match exact types
    - extra="forbid": No additional fields allowed
    - frozen=True: Immutable once constructed

    Field names are exposed on the wire in camelCase; snake_case is
    accepted as well so Python callers can use attribute names.
    """

    model_config = ConfigDict(
        strict=True,              # No type coercion - fail fast on wrong types
        extra="forbid",           # No extra fields - fail fast on unknown keys
        validate_assignment=True,
        frozen=True,
        validate_default=True,
        use_enum_values=False,    # Preserve enum objects for their methods
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Dump the model using its camelCase wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ResponseModel(BaseModel):
    """Base model for payloads produced by the external model.

    Coerces well-known cases (numeric strings, integral floats) and ignores
    unknown keys, but still rejects missing required fields and values
    outside closed enumerations.
    """

    model_config = ConfigDict(
        strict=False,
        extra="ignore",
        frozen=True,
        use_enum_values=False,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict:
        """Dump the model using its camelCase wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    "StrictBaseModel",
    "ResponseModel",
]
