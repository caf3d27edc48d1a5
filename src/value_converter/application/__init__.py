"""Application-layer use-cases, ports and option objects."""

from __future__ import annotations

from value_converter.application.options import DEFAULT_FORMATTING, FormattingConfig
from value_converter.application.policies import (
    ExtractionPolicy,
    ValueOrDefault,
    ValueOrRaise,
)
from value_converter.application.ports import Converter
from value_converter.application.results import ConversionResult
from value_converter.application.use_cases import (
    Conversion,
    conversion,
    convert,
    convert_all,
)

__all__ = [
    "DEFAULT_FORMATTING",
    "FormattingConfig",
    "ExtractionPolicy",
    "ValueOrDefault",
    "ValueOrRaise",
    "Converter",
    "ConversionResult",
    "Conversion",
    "conversion",
    "convert",
    "convert_all",
]
