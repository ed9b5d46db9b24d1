"""Shared base for API models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class ApiModel(BaseModel):
    """Frozen model that reads a JSON ``null`` as the field's default.

    Required fields keep rejecting ``null``.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @field_validator("*", mode="before")
    @classmethod
    def _null_as_default(cls, value: object, info: ValidationInfo) -> object:
        if value is None and info.field_name is not None:
            field = cls.model_fields[info.field_name]
            if not field.is_required():
                return field.get_default(call_default_factory=True)
        return value
