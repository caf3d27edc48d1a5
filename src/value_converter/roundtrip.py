"""Round-trip checks between rendered text and parsed integers."""

from __future__ import annotations

from collections.abc import Iterable

from value_converter.application.ports import Converter
from value_converter.application.use_cases import convert
from value_converter.errors import RoundTripError


def check_round_trip(values: Iterable[int], converter: Converter) -> list[str]:
    """Render each integer and parse it back through the same converter.

    Parameters
    ----------
    values : Iterable[int]
        Integers to verify.
    converter : Converter
        Converter used for both directions.

    Returns
    -------
    list[str]
        Rendered text for every value, in order.

    Raises
    ------
    RoundTripError
        On the first value that fails to render, fails to parse back, or
        parses back to a different integer.
    """
    rendered: list[str] = []
    for value in values:
        text = convert(value, converter, str)
        if not text.has_value():
            raise RoundTripError(f"Round trip failed: {value!r} could not be rendered.")
        parsed = convert(text.value(), converter, int)
        if not parsed.has_value():
            raise RoundTripError(
                f"Round trip failed: {text.value()!r} (from {value!r}) could not be parsed back."
            )
        if parsed.value() != value:
            raise RoundTripError(
                f"Round trip failed: {value!r} rendered as {text.value()!r} "
                f"parsed back as {parsed.value()!r}."
            )
        rendered.append(text.value())
    return rendered
