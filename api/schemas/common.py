"""Common Pydantic schemas shared across the API."""

from datetime import date, datetime
from typing import Any, ClassVar, Optional, get_args
from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for every API schema.

    The wire format is camelCase; snake_case keys are accepted too so
    internal callers can build models with Python names.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _is_date_annotation(annotation: Any) -> bool:
    candidates = get_args(annotation) or (annotation,)
    return any(isinstance(arg, type) and issubclass(arg, date) for arg in candidates)


class UpdateModel(CamelModel):
    """
    Partial-update body. Only keys present in the request are applied.

    Columns that are NOT NULL in the database may be omitted but not sent as
    null; subclasses list them in ``non_nullable``.
    """

    non_nullable: ClassVar[tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def drop_blank_dates(cls, data: Any) -> Any:
        """Empty date strings count as not sent, so the stored value is kept."""
        if not isinstance(data, dict):
            return data
        date_keys = set()
        for name, field in cls.model_fields.items():
            if _is_date_annotation(field.annotation):
                date_keys.update({name, field.alias or name})
        return {
            key: value
            for key, value in data.items()
            if not (key in date_keys and isinstance(value, str) and not value.strip())
        }

    @model_validator(mode="after")
    def reject_null_for_required_columns(self):
        for name in self.non_nullable:
            if name in self.model_fields_set and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> dict[str, Any]:
        """Fields the client actually sent, as plain Python values."""
        return self.model_dump(exclude_unset=True)


class FilterModel(BaseModel):
    """Base for list filters. Unknown keys are a programming error."""

    model_config = ConfigDict(extra="forbid")


def blank_to_none(value: Any) -> Any:
    """Treat empty or whitespace-only strings as an absent value."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


class TimestampMixin(CamelModel):
    """Mixin for timestamp fields."""

    created_at: datetime = Field(description="Timestamp when the resource was created")
    updated_at: datetime = Field(description="Timestamp when the resource was last updated")


class MessageResponse(CamelModel):
    """Plain acknowledgement."""

    message: str


class ErrorDetail(CamelModel):
    field: str = Field(description="Dotted path of the offending field")
    message: str
    type: str


class ErrorResponse(CamelModel):
    """Error response model."""

    message: str = Field(description="Human readable error message")
    errors: Optional[list[ErrorDetail]] = Field(
        None, description="Per-field validation errors"
    )
