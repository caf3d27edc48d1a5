#!/usr/bin/env python3
"""Examples for batch conversion with converters and extraction policies."""

from __future__ import annotations

from value_converter import (
    INT_MAX,
    BadAccess,
    BadLexicalCast,
    LexicalCastConverter,
    StreamConverter,
    conversion,
    lexical_cast,
)

STRS = [" 5", "0XF", "not an int"]


def example_value_or_default() -> list[int]:
    """Parse hex texts, substituting INT_MAX for failures."""
    cnv = StreamConverter()(base="hex", skip_whitespace=True)
    ints = list(map(conversion(cnv, int).value_or(INT_MAX), STRS))
    print(f"value_or(INT_MAX): {ints}")
    return ints


def example_strict_cast() -> list[int]:
    """Show why a strict cast is a poor fit for batches: nothing converts."""
    ints: list[int] = []
    try:
        for text in STRS:
            ints.append(lexical_cast(text, int))
    except BadLexicalCast as exc:
        print(f"lexical_cast stopped: {exc}")
    return ints


def example_non_raising_cast() -> list[int]:
    """Drive the cast through the dispatcher without raising."""
    cnv = LexicalCastConverter(raising=False)
    ints = [conversion(cnv, int).value_or(INT_MAX)(text) for text in STRS]
    print(f"non-raising cast: {ints}")
    return ints


def example_value_or_raise() -> list[int]:
    """Convert until the first failure, then stop."""
    cnv = StreamConverter()(base="hex", skip_whitespace=True)
    extract = conversion(cnv, int).value()
    ints: list[int] = []
    try:
        for text in STRS:
            ints.append(extract(text))
    except BadAccess:
        print(f"value() stopped after: {ints}")
    return ints


def example_formatting() -> list[str]:
    """Render integers as upper-case hex with a base prefix."""
    cnv = StreamConverter()(base="hex", uppercase=True, show_base=True)
    strs = list(map(conversion(cnv, str).value(), [15, 16, 17, 18]))
    print(f"hex with base: {strs}")
    return strs


if __name__ == "__main__":
    example_value_or_default()
    example_strict_cast()
    example_non_raising_cast()
    example_value_or_raise()
    example_formatting()
