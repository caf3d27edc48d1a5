"""Shared pytest configuration, fixtures and marker assignment."""

from __future__ import annotations

from pathlib import Path

import pytest

from value_converter import StreamConverter, StrtolConverter

BATCH = [" 5", "0XF", "not an int"]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def hex_stream() -> StreamConverter:
    """Stream converter reading hexadecimal and skipping leading whitespace."""
    return StreamConverter()(base="hex", skip_whitespace=True)


@pytest.fixture
def strtol() -> StrtolConverter:
    """Strtol converter with default options."""
    return StrtolConverter()


@pytest.fixture
def batch() -> list[str]:
    """Mixed batch with two valid hex texts and one invalid text."""
    return list(BATCH)
