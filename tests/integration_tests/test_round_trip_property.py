"""Property checks: rendered integers parse back to themselves."""

from __future__ import annotations

import os

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from value_converter import INT_MAX, INT_MIN, LexicalCastConverter, StreamConverter, StrtolConverter
from value_converter.roundtrip import check_round_trip

pytestmark = pytest.mark.integration
_HYPOTHESIS_MAX_EXAMPLES = int(os.getenv("HYPOTHESIS_MAX_EXAMPLES", "100"))

ints = st.integers(min_value=INT_MIN, max_value=INT_MAX)
bases = st.sampled_from(["dec", "hex", "oct"])


@pytest.mark.property
@settings(max_examples=_HYPOTHESIS_MAX_EXAMPLES, deadline=None)
@given(
    values=st.lists(ints, max_size=10),
    base=bases,
    uppercase=st.booleans(),
    show_base=st.booleans(),
    width=st.integers(min_value=0, max_value=16),
)
def test_stream_round_trip(
    values: list[int], base: str, uppercase: bool, show_base: bool, width: int
) -> None:
    """Parse back whatever the stream converter renders with blank padding."""
    cnv = StreamConverter(
        base=base, uppercase=uppercase, show_base=show_base, width=width
    )
    assert len(check_round_trip(values, cnv)) == len(values)


@pytest.mark.property
@settings(max_examples=_HYPOTHESIS_MAX_EXAMPLES, deadline=None)
@given(
    values=st.lists(ints, max_size=10),
    base=bases,
    width=st.integers(min_value=0, max_value=16),
    adjustment=st.sampled_from(["left", "right"]),
)
def test_strtol_round_trip(values: list[int], base: str, width: int, adjustment: str) -> None:
    """Tolerate blank padding on either side when parsing back."""
    cnv = StrtolConverter(base=base, width=width, adjustment=adjustment)
    rendered = check_round_trip(values, cnv)
    assert all(len(text) >= width for text in rendered)


@pytest.mark.property
@settings(max_examples=_HYPOTHESIS_MAX_EXAMPLES, deadline=None)
@given(value=ints)
def test_lexical_cast_round_trip(value: int) -> None:
    """Match the built-in decimal text of every in-range integer."""
    assert check_round_trip([value], LexicalCastConverter()) == [str(value)]


@pytest.mark.property
@settings(max_examples=_HYPOTHESIS_MAX_EXAMPLES, deadline=None)
@given(value=st.one_of(st.integers(max_value=INT_MIN - 1), st.integers(min_value=INT_MAX + 1)))
def test_out_of_range_values_never_render(value: int) -> None:
    """Report every out-of-range integer as an empty result."""
    for cnv in (StreamConverter(), StrtolConverter()):
        assert not cnv.attempt(value, str).has_value()
