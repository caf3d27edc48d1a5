"""Pydantic schemas for runtime validation of converter options."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from value_converter.types import Adjustment, Base


class FormattingOptions(BaseModel):
    """Validated formatting options passed to a converter."""

    model_config = ConfigDict(extra="forbid")

    base: Base | None = None
    width: int | None = Field(default=None, ge=0)
    fill: str | None = None
    adjustment: Adjustment | None = None
    uppercase: bool | None = None
    show_base: bool | None = None
    skip_whitespace: bool | None = None

    @field_validator("base", "adjustment", mode="before")
    @classmethod
    def _normalize_case(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @field_validator("fill", mode="before")
    @classmethod
    def _fill_from_digit(cls, value: object) -> object:
        # "--option fill=0" arrives as the integer 0.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("fill")
    @classmethod
    def _validate_fill(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError("fill must be exactly one character.")
        return value


class PluginResolutionConfig(BaseModel):
    """Validated input for converter registry resolution."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    options: dict[str, object] = Field(default_factory=dict)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("converter name cannot be blank.")
        return stripped
