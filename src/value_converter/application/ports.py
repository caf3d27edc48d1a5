"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from value_converter.application.options import FormattingConfig
from value_converter.application.results import ConversionResult


@runtime_checkable
class Converter(Protocol):
    """Back-end that turns one representation of a value into another.

    Implementations hold their own :class:`FormattingConfig` and report a
    failed conversion as an empty :class:`ConversionResult`. A converter may
    raise instead of reporting failure; callers get that exception unchanged.
    """

    name: str

    @property
    def config(self) -> FormattingConfig:
        """Formatting configuration currently held by the converter."""

    def supports(self, source: type, target: type) -> bool:
        """Check whether the ``source -> target`` pair can be converted."""

    def attempt[T](self, value: object, target: type[T]) -> ConversionResult[T]:
        """Convert ``value`` into ``target`` or return an empty result."""
