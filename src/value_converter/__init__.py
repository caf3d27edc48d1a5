"""Configurable string-to-value and value-to-string conversion."""

from __future__ import annotations

from collections.abc import Iterable

from value_converter.adapters.converters import (
    LexicalCastConverter,
    StreamConverter,
    StreamState,
    StrtolConverter,
    lexical_cast,
)
from value_converter.application import (
    Conversion,
    ConversionResult,
    Converter,
    FormattingConfig,
    ValueOrDefault,
    ValueOrRaise,
    conversion,
    convert,
    convert_all,
)
from value_converter.errors import (
    BadAccess,
    BadLexicalCast,
    ConversionError,
    ConverterError,
    PluginError,
    RoundTripError,
    UnsupportedConversionError,
    ValueConverterError,
)
from value_converter.types import INT_MAX, INT_MIN, Adjustment, Base

__version__ = "0.1.0"


def parse_integers(
    texts: list[str],
    *,
    converter: str = "stream",
    default: int | None = None,
    plugin_modules: Iterable[str] | None = None,
    **options: object,
) -> list[int]:
    """Parse texts into integers through a registered converter.

    Parameters
    ----------
    texts : list[str]
        Texts to parse, in order.
    converter : str, default="stream"
        Registered converter name.
    default : int | None, default=None
        Substitute for unparsable texts. When omitted, the first failure
        raises :class:`BadAccess`.
    plugin_modules : Iterable[str] | None, default=None
        Extra plugin modules (import paths or file paths) loaded into the
        registry before ``converter`` is resolved.
    **options : object
        Formatting options applied to the converter.

    Returns
    -------
    list[int]
        Parsed integers, one per text.
    """
    from .api import parse_integers as _impl

    return _impl(
        texts,
        converter=converter,
        default=default,
        plugin_modules=plugin_modules,
        **options,
    )


def format_integers(
    values: list[int],
    *,
    converter: str = "stream",
    verify: bool = False,
    plugin_modules: Iterable[str] | None = None,
    **options: object,
) -> list[str]:
    """Render integers as text through a registered converter.

    Parameters
    ----------
    values : list[int]
        Integers to render, in order.
    converter : str, default="stream"
        Registered converter name.
    verify : bool, default=False
        Parse every rendered text back and raise on mismatch.
    plugin_modules : Iterable[str] | None, default=None
        Extra plugin modules (import paths or file paths) loaded into the
        registry before ``converter`` is resolved.
    **options : object
        Formatting options applied to the converter.

    Returns
    -------
    list[str]
        Rendered texts, one per value.
    """
    from .api import format_integers as _impl

    return _impl(
        values,
        converter=converter,
        verify=verify,
        plugin_modules=plugin_modules,
        **options,
    )


__all__ = [
    "INT_MAX",
    "INT_MIN",
    "Adjustment",
    "Base",
    "BadAccess",
    "BadLexicalCast",
    "Conversion",
    "ConversionError",
    "ConversionResult",
    "Converter",
    "ConverterError",
    "FormattingConfig",
    "LexicalCastConverter",
    "PluginError",
    "RoundTripError",
    "StreamConverter",
    "StreamState",
    "StrtolConverter",
    "UnsupportedConversionError",
    "ValueConverterError",
    "ValueOrDefault",
    "ValueOrRaise",
    "conversion",
    "convert",
    "convert_all",
    "format_integers",
    "lexical_cast",
    "parse_integers",
]
