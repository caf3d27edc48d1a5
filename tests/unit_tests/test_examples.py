"""Run the example scripts and check what they print and return."""

from __future__ import annotations

import importlib.util
from pathlib import Path
from types import ModuleType

import pytest

from value_converter import INT_MAX

EXAMPLES = Path(__file__).resolve().parents[2] / "examples"


def _load(name: str) -> ModuleType:
    spec = importlib.util.spec_from_file_location(name, EXAMPLES / f"{name}.py")
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_algorithms_example(capsys: pytest.CaptureFixture[str]) -> None:
    example = _load("algorithms_example")
    assert example.example_value_or_default() == [5, 15, INT_MAX]
    assert example.example_strict_cast() == []
    assert example.example_non_raising_cast() == [INT_MAX, INT_MAX, INT_MAX]
    assert example.example_value_or_raise() == [5, 15]
    assert example.example_formatting() == ["0XF", "0X10", "0X11", "0X12"]
    assert "lexical_cast stopped" in capsys.readouterr().out


def test_strtol_example() -> None:
    example = _load("strtol_example")
    assert example.example_width() == ["  12", "***12", "12xxx"]
    assert example.example_base() == ["255", "FF", "377"]
    assert example.example_parse() == [-1, -11, -12]
