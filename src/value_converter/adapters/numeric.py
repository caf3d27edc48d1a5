"""Integer text scanning and rendering helpers used by converters."""

from __future__ import annotations

from typing import NamedTuple

from value_converter.types import INT_MAX, INT_MIN, Adjustment

DIGITS = "0123456789ABCDEF"

C_WHITESPACE = " \t\n\v\f\r"


class ScanResult(NamedTuple):
    """Outcome of a C-style integer scan.

    ``end`` is the index just past the last consumed character, or ``0`` when
    nothing could be converted.
    """

    value: int
    end: int


def in_int_range(value: int) -> bool:
    """Check whether ``value`` fits a 32-bit signed integer."""
    return INT_MIN <= value <= INT_MAX


def _digit_value(char: str, radix: int) -> int | None:
    index = DIGITS.find(char.upper())
    if index < 0 or index >= radix:
        return None
    return index


def scan_integer(text: str, radix: int) -> ScanResult:
    """Scan a leading integer from ``text`` the way ``strtol`` does.

    Leading whitespace is skipped, an optional sign is honored and, for base
    16, an optional ``0x``/``0X`` prefix is consumed when a hex digit follows.

    Parameters
    ----------
    text : str
        Input text.
    radix : int
        Numeric base (8, 10 or 16).

    Returns
    -------
    ScanResult
        Parsed value and end index. ``end == 0`` means no conversion.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in C_WHITESPACE:
        pos += 1

    negative = False
    if pos < length and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1

    if (
        radix == 16
        and text[pos : pos + 2] in {"0x", "0X"}
        and pos + 2 < length
        and _digit_value(text[pos + 2], radix) is not None
    ):
        pos += 2

    start = pos
    value = 0
    while pos < length:
        digit = _digit_value(text[pos], radix)
        if digit is None:
            break
        value = value * radix + digit
        pos += 1

    if pos == start:
        return ScanResult(0, 0)
    return ScanResult(-value if negative else value, pos)


def render_digits(value: int, radix: int, *, uppercase: bool = True) -> str:
    """Render ``value`` in ``radix`` with a leading ``-`` for negatives."""
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    remaining = abs(value)
    digits: list[str] = []
    while remaining:
        remaining, digit = divmod(remaining, radix)
        digits.append(DIGITS[digit])
    rendered = "".join(reversed(digits))
    return sign + (rendered if uppercase else rendered.lower())


def pad(text: str, width: int, fill: str, adjustment: Adjustment) -> str:
    """Pad ``text`` with ``fill`` up to ``width`` characters."""
    if adjustment is Adjustment.LEFT:
        return text.ljust(width, fill)
    return text.rjust(width, fill)
