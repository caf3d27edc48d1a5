"""Typed formatting options shared across converters."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace

from value_converter.types import Adjustment, Base, OptionValue


@dataclass(frozen=True)
class FormattingConfig:
    """Formatting configuration interpreted by converters.

    ``None`` marks an option as unset; converters fill unset options from
    their own defaults through :meth:`merged`.
    """

    base: Base | None = None
    width: int | None = None
    fill: str | None = None
    adjustment: Adjustment | None = None
    uppercase: bool | None = None
    show_base: bool | None = None
    skip_whitespace: bool | None = None

    def updated(self, **options: OptionValue) -> FormattingConfig:
        """Return a copy with ``options`` applied."""
        return replace(self, **options)

    def merged(self, defaults: FormattingConfig) -> FormattingConfig:
        """Return a copy where unset options are taken from ``defaults``."""
        return FormattingConfig(
            **{
                item.name: (
                    getattr(self, item.name)
                    if getattr(self, item.name) is not None
                    else getattr(defaults, item.name)
                )
                for item in fields(self)
            }
        )

    def explicit(self) -> dict[str, OptionValue]:
        """Return only the options that were set."""
        return {
            item.name: getattr(self, item.name)
            for item in fields(self)
            if getattr(self, item.name) is not None
        }


OPTION_NAMES = frozenset(item.name for item in fields(FormattingConfig))

DEFAULT_FORMATTING = FormattingConfig(
    base=Base.DEC,
    width=0,
    fill=" ",
    adjustment=Adjustment.RIGHT,
    uppercase=False,
    show_base=False,
    skip_whitespace=True,
)
