"""Exception hierarchy for value conversion."""

from __future__ import annotations


class ValueConverterError(Exception):
    """Base error for the package.

    Attributes
    ----------
    exit_code : int
        Process exit code used by the CLI when this error aborts a command.
    """

    exit_code: int = 1


class ConversionError(ValueConverterError):
    """Raised when a conversion outcome cannot be delivered to the caller."""


class BadAccess(ConversionError, LookupError):
    """Raised when the value of an empty conversion result is requested."""


class BadLexicalCast(ConversionError, ValueError):
    """Raised by the strict cast when input text is malformed."""


class RoundTripError(ConversionError):
    """Raised when a rendered value does not parse back to itself."""


class ConverterError(ValueConverterError):
    """Raised for invalid converter configuration or converter misuse."""

    exit_code = 2


class UnsupportedConversionError(ConverterError, TypeError):
    """Raised when a converter cannot handle the requested type pair."""


class PluginError(ValueConverterError):
    """Raised when a converter plugin cannot be resolved or loaded."""

    exit_code = 2
