"""Unit tests for round-trip verification."""

from __future__ import annotations

import pytest

from value_converter.adapters.converters import StreamConverter, StrtolConverter
from value_converter.application.results import ConversionResult
from value_converter.errors import RoundTripError
from value_converter.roundtrip import check_round_trip


class _LossyConverter:
    """Fake converter that renders every value as zero."""

    name = "lossy"
    config = None

    def supports(self, source: type, target: type) -> bool:
        return True

    def attempt(self, value: object, target: type) -> ConversionResult[object]:
        return ConversionResult.of("0" if target is str else 0)


def test_returns_rendered_texts_in_order() -> None:
    cnv = StrtolConverter(base="hex", width=3)
    assert check_round_trip([1, 255, -1], cnv) == ["  1", " FF", " -1"]


def test_render_failure_is_reported() -> None:
    """Raise when a value falls outside the convertible range."""
    with pytest.raises(RoundTripError, match="could not be rendered"):
        check_round_trip([2**31], StreamConverter())


def test_parse_failure_is_reported() -> None:
    """Raise when the padding cannot be read back."""
    with pytest.raises(RoundTripError, match=r"'\*\*12' \(from 12\) could not be parsed back"):
        check_round_trip([12], StreamConverter(width=4, fill="*"))


def test_mismatch_is_reported() -> None:
    with pytest.raises(RoundTripError, match="rendered as '0' parsed back as 0"):
        check_round_trip([0, 7], _LossyConverter())
