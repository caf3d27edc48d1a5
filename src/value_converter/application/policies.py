"""Extraction policies applied to conversion results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from value_converter.application.results import ConversionResult


class ExtractionPolicy[T](Protocol):
    """Turn a conversion result into a plain value."""

    def extract(self, result: ConversionResult[T]) -> T:
        """Return the value, or raise/substitute according to the policy."""


@dataclass(frozen=True)
class ValueOrRaise[T]:
    """Raise ``BadAccess`` for empty results."""

    def extract(self, result: ConversionResult[T]) -> T:
        return result.value()

    def __call__(self, result: ConversionResult[T]) -> T:
        return self.extract(result)


@dataclass(frozen=True)
class ValueOrDefault[T]:
    """Substitute ``default`` for empty results."""

    default: T

    def extract(self, result: ConversionResult[T]) -> T:
        return result.value_or(self.default)

    def __call__(self, result: ConversionResult[T]) -> T:
        return self.extract(result)
