"""Shared type aliases, enums and limits for converter modules."""

from __future__ import annotations

from enum import StrEnum

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class Base(StrEnum):
    """Numeric base used to parse and render integers."""

    DEC = "dec"
    HEX = "hex"
    OCT = "oct"

    @property
    def radix(self) -> int:
        return _RADIX[self]


_RADIX = {Base.DEC: 10, Base.HEX: 16, Base.OCT: 8}


class Adjustment(StrEnum):
    """Side on which rendered text is padded up to the configured width."""

    LEFT = "left"
    RIGHT = "right"


type OptionValue = str | int | bool | Base | Adjustment | None
