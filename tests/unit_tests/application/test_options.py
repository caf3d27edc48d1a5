"""Unit tests for formatting configuration objects."""

from __future__ import annotations

import dataclasses

import pytest

from value_converter.application.options import (
    DEFAULT_FORMATTING,
    OPTION_NAMES,
    FormattingConfig,
)
from value_converter.types import Adjustment, Base


def test_default_config_has_every_option_unset() -> None:
    """Leave every option unset until a caller provides it."""
    assert FormattingConfig().explicit() == {}


def test_merged_fills_only_unset_options() -> None:
    """Take unset options from defaults and keep explicit ones."""
    config = FormattingConfig(base=Base.HEX, width=4)
    merged = config.merged(DEFAULT_FORMATTING)
    assert merged.base is Base.HEX
    assert merged.width == 4
    assert merged.fill == " "
    assert merged.adjustment is Adjustment.RIGHT
    assert merged.uppercase is False
    assert merged.skip_whitespace is True


def test_merged_keeps_explicit_false_and_zero() -> None:
    """Treat False and 0 as set values, not as missing."""
    config = FormattingConfig(width=0, skip_whitespace=False)
    defaults = DEFAULT_FORMATTING.updated(width=9)
    merged = config.merged(defaults)
    assert merged.width == 0
    assert merged.skip_whitespace is False


def test_updated_returns_new_config() -> None:
    """Leave the original configuration untouched."""
    config = FormattingConfig(width=3)
    updated = config.updated(fill="*")
    assert config.fill is None
    assert updated == FormattingConfig(width=3, fill="*")
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.width = 5  # type: ignore[misc]


def test_option_names_cover_all_fields() -> None:
    """Expose every configurable option name."""
    assert OPTION_NAMES == {
        "base",
        "width",
        "fill",
        "adjustment",
        "uppercase",
        "show_base",
        "skip_whitespace",
    }


def test_base_radix() -> None:
    """Map bases to their radix."""
    assert [base.radix for base in Base] == [10, 16, 8]
