#!/usr/bin/env python3
"""Examples for the strtol converter: width, fill, adjustment and base."""

from __future__ import annotations

from value_converter import StrtolConverter, convert


def example_width() -> list[str]:
    cnv = StrtolConverter()
    out = [
        convert(12, cnv(width=4), str).value(),
        convert(12, cnv(width=5)(fill="*"), str).value(),
        convert(12, cnv(width=5)(fill="x")(adjustment="left"), str).value(),
    ]
    for text in out:
        print(repr(text))
    return out


def example_base() -> list[str]:
    cnv = StrtolConverter()
    out = [convert(255, cnv(base=base), str).value() for base in ("dec", "hex", "oct")]
    print(out)
    return out


def example_parse() -> list[int]:
    cnv = StrtolConverter()
    out = [convert(text, cnv, int).value_or(-1) for text in ("not an int", "-11", "-12")]
    print(out)
    return out


if __name__ == "__main__":
    example_width()
    example_base()
    example_parse()
