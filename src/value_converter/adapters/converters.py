"""Converter back-ends implementing the application ``Converter`` port."""

from __future__ import annotations

import copy
import io
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from enum import StrEnum
from typing import Any, ClassVar, Self, cast

from pydantic import ValidationError

from value_converter.adapters.numeric import (
    C_WHITESPACE,
    in_int_range,
    pad,
    render_digits,
    scan_integer,
)
from value_converter.application.options import (
    DEFAULT_FORMATTING,
    OPTION_NAMES,
    FormattingConfig,
)
from value_converter.application.results import ConversionResult
from value_converter.errors import BadLexicalCast, ConverterError, UnsupportedConversionError
from value_converter.schemas import FormattingOptions
from value_converter.types import Adjustment, Base, OptionValue

TEXT_TO_INT = (str, int)
INT_TO_TEXT = (int, str)


def validate_options(
    converter_name: str,
    supported: frozenset[str],
    options: Mapping[str, object],
) -> dict[str, OptionValue]:
    """Validate raw formatting options for one converter.

    Parameters
    ----------
    converter_name : str
        Converter name used in error messages.
    supported : frozenset[str]
        Option names the converter understands.
    options : Mapping[str, object]
        Raw options supplied by the caller.

    Returns
    -------
    dict[str, OptionValue]
        Validated options, restricted to the keys the caller supplied.

    Raises
    ------
    ConverterError
        If an option is unknown to the converter or has an invalid value.
    """
    unsupported = sorted(set(options) - supported)
    if unsupported:
        allowed = ", ".join(sorted(supported)) or "<none>"
        raise ConverterError(
            f"Converter '{converter_name}' does not support option(s) "
            f"{', '.join(unsupported)}. Supported options: {allowed}."
        )
    try:
        parsed = FormattingOptions.model_validate(dict(options))
    except ValidationError as exc:
        raise ConverterError(
            f"Invalid options for converter '{converter_name}': {exc}"
        ) from exc
    return cast(dict[str, OptionValue], parsed.model_dump(exclude_unset=True))


class ConfigurableConverter(ABC):
    """Shared configuration builder for the built-in converters.

    Calling a converter with keyword options validates them, stores the
    updated configuration and returns the same converter, so options can be
    chained: ``cnv(base="hex")(width=4)``.
    """

    name: ClassVar[str] = "configurable"
    supported_options: ClassVar[frozenset[str]] = frozenset()
    supported_pairs: ClassVar[frozenset[tuple[type, type]]] = frozenset(
        {TEXT_TO_INT, INT_TO_TEXT}
    )
    defaults: ClassVar[FormattingConfig] = DEFAULT_FORMATTING

    def __init__(self, **options: object) -> None:
        self._config = FormattingConfig()
        if options:
            self(**options)

    @property
    def config(self) -> FormattingConfig:
        """Options explicitly set on this converter."""
        return self._config

    @property
    def effective_config(self) -> FormattingConfig:
        """Options with converter defaults filled in."""
        return self._config.merged(self.defaults)

    def __call__(self, **options: object) -> Self:
        validated = validate_options(self.name, self.supported_options, options)
        self._config = self._config.updated(**validated)
        return self

    def with_options(self, **options: object) -> Self:
        """Return an independent copy of this converter with ``options`` applied."""
        clone = copy.copy(self)
        return clone(**options)

    def supports(self, source: type, target: type) -> bool:
        return (source, target) in self.supported_pairs

    def attempt[T](self, value: object, target: type[T]) -> ConversionResult[T]:
        if target is int:
            return cast(ConversionResult[T], self._parse(cast(str, value)))
        if target is str:
            return cast(ConversionResult[T], self._render(cast(int, value)))
        raise UnsupportedConversionError(
            f"Converter '{self.name}' cannot produce {target.__name__}."
        )

    @abstractmethod
    def _parse(self, text: str) -> ConversionResult[int]:
        """Parse ``text`` into an integer, or return an empty result."""

    @abstractmethod
    def _render(self, value: int) -> ConversionResult[str]:
        """Render ``value`` as text, or return an empty result."""

    def __repr__(self) -> str:
        options = ", ".join(f"{key}={value!r}" for key, value in self._config.explicit().items())
        return f"{type(self).__name__}({options})"


class StreamState(StrEnum):
    """Error state of the buffer behind a :class:`StreamConverter`."""

    GOOD = "good"
    FAIL = "fail"
    BAD = "bad"


_STREAM_PATTERNS = {
    Base.DEC: re.compile(r"[+-]?[0-9]+"),
    Base.HEX: re.compile(r"[+-]?(?:0[xX])?[0-9a-fA-F]+"),
    Base.OCT: re.compile(r"[+-]?[0-7]+"),
}


class StreamConverter(ConfigurableConverter):
    """Convert through a text stream buffer using format-spec rendering.

    Notes
    -----
    The converter owns a live ``io.StringIO`` buffer and cannot be copied.
    Share one instance by reference across a batch of conversions; concurrent
    use needs external locking. A failed conversion leaves ``state`` at
    ``FAIL`` until the next call clears it. After :meth:`close` the state is
    ``BAD`` and every conversion returns an empty result.

    With ``show_base`` octal output carries a single leading ``0``
    (``010``), not the ``0o`` prefix of Python literals.
    """

    name = "stream"
    supported_options = OPTION_NAMES

    def __init__(self, stream: io.StringIO | None = None, **options: object) -> None:
        self._stream = stream if stream is not None else io.StringIO()
        self._state = StreamState.BAD if self._stream.closed else StreamState.GOOD
        super().__init__(**options)

    @property
    def state(self) -> StreamState:
        """State left behind by the last conversion."""
        return self._state

    def clear(self) -> None:
        """Reset a ``FAIL`` state. A ``BAD`` stream cannot be recovered."""
        if self._state is not StreamState.BAD:
            self._state = StreamState.GOOD

    def close(self) -> None:
        """Close the underlying buffer."""
        self._stream.close()
        self._state = StreamState.BAD

    def attempt[T](self, value: object, target: type[T]) -> ConversionResult[T]:
        if self._stream.closed:
            self._state = StreamState.BAD
            return ConversionResult.empty()
        self.clear()
        result = super().attempt(value, target)
        if not result.has_value():
            self._state = StreamState.FAIL
        return result

    def _load(self, text: str) -> str:
        self._stream.seek(0)
        self._stream.truncate()
        self._stream.write(text)
        return self._stream.getvalue()

    def _parse(self, text: str) -> ConversionResult[int]:
        config = self.effective_config
        buffered = self._load(text)
        if config.skip_whitespace:
            buffered = buffered.lstrip(C_WHITESPACE)
        base = cast(Base, config.base)
        if not _STREAM_PATTERNS[base].fullmatch(buffered):
            return ConversionResult.empty()
        value = int(buffered, base.radix)
        if not in_int_range(value):
            return ConversionResult.empty()
        return ConversionResult.of(value)

    def _render(self, value: int) -> ConversionResult[str]:
        if not in_int_range(value):
            return ConversionResult.empty()
        config = self.effective_config
        if config.base is Base.OCT and config.show_base and value != 0:
            sign = "-" if value < 0 else ""
            text = format(f"{sign}0{abs(value):o}", self._padding_spec())
        else:
            text = format(value, self.format_spec())
        return ConversionResult.of(self._load(text))

    def _padding_spec(self) -> str:
        config = self.effective_config
        align = "<" if config.adjustment is Adjustment.LEFT else ">"
        width = str(config.width) if config.width else ""
        return f"{config.fill}{align}{width}"

    def format_spec(self) -> str:
        """Build the format-spec string equivalent to the current options.

        Octal ``show_base`` has no format-spec equivalent and is applied
        when rendering.
        """
        config = self.effective_config
        kind = {
            Base.DEC: "d",
            Base.HEX: "X" if config.uppercase else "x",
            Base.OCT: "o",
        }[cast(Base, config.base)]
        align = "<" if config.adjustment is Adjustment.LEFT else ">"
        alternate = "#" if config.show_base and config.base is Base.HEX else ""
        width = str(config.width) if config.width else ""
        return f"{config.fill}{align}{alternate}{width}{kind}"

    def __copy__(self) -> StreamConverter:
        raise TypeError(
            "StreamConverter wraps a live stream and cannot be copied; share it by reference."
        )

    def __deepcopy__(self, memo: dict[int, Any]) -> StreamConverter:
        return self.__copy__()


class StrtolConverter(ConfigurableConverter):
    """Convert with C-library style integer scanning.

    Parsing always skips leading whitespace and tolerates trailing
    whitespace. Rendering supports base, width, fill and adjustment; hex
    digits are upper-case and no base prefix is emitted.
    """

    name = "strtol"
    supported_options = frozenset({"base", "width", "fill", "adjustment"})

    def _parse(self, text: str) -> ConversionResult[int]:
        base = cast(Base, self.effective_config.base)
        scanned = scan_integer(text, base.radix)
        if scanned.end == 0 or text[scanned.end :].strip(C_WHITESPACE):
            return ConversionResult.empty()
        if not in_int_range(scanned.value):
            return ConversionResult.empty()
        return ConversionResult.of(scanned.value)

    def _render(self, value: int) -> ConversionResult[str]:
        if not in_int_range(value):
            return ConversionResult.empty()
        config = self.effective_config
        digits = render_digits(value, cast(Base, config.base).radix)
        return ConversionResult.of(
            pad(
                digits,
                cast(int, config.width),
                cast(str, config.fill),
                cast(Adjustment, config.adjustment),
            )
        )


_DECIMAL = re.compile(r"[+-]?[0-9]+")


def lexical_cast[T](value: object, target: type[T]) -> T:
    """Strictly convert between decimal text and integers.

    Parameters
    ----------
    value : object
        Text to parse or integer to render.
    target : type
        ``int`` or ``str``.

    Returns
    -------
    T
        Converted value.

    Raises
    ------
    BadLexicalCast
        If ``value`` is not a plain decimal integer in the 32-bit range.
    UnsupportedConversionError
        If ``target`` is neither ``int`` nor ``str``.
    """
    if target is int:
        if isinstance(value, str) and _DECIMAL.fullmatch(value):
            parsed = int(value)
            if in_int_range(parsed):
                return cast(T, parsed)
        raise BadLexicalCast(f"bad lexical cast: {value!r} cannot be converted to int")
    if target is str:
        if isinstance(value, int) and not isinstance(value, bool) and in_int_range(value):
            return cast(T, str(value))
        raise BadLexicalCast(f"bad lexical cast: {value!r} cannot be converted to str")
    raise UnsupportedConversionError(f"lexical_cast cannot produce {target.__name__}.")


class LexicalCastConverter(ConfigurableConverter):
    """Converter around the strict :func:`lexical_cast`.

    It accepts no formatting options. By default malformed input raises
    :class:`BadLexicalCast` straight through the dispatcher; pass
    ``raising=False`` to report it as an empty result instead.
    """

    name = "lexical_cast"

    def __init__(self, *, raising: bool = True, **options: object) -> None:
        if not isinstance(raising, bool):
            raise ConverterError(
                f"Option 'raising' of converter '{self.name}' must be a bool, got {raising!r}."
            )
        self.raising = raising
        super().__init__(**options)

    def _parse(self, text: str) -> ConversionResult[int]:
        return ConversionResult.of(lexical_cast(text, int))

    def _render(self, value: int) -> ConversionResult[str]:
        return ConversionResult.of(lexical_cast(value, str))

    def attempt[T](self, value: object, target: type[T]) -> ConversionResult[T]:
        try:
            return super().attempt(value, target)
        except BadLexicalCast:
            if self.raising:
                raise
            return ConversionResult.empty()
