"""Unit tests for converter registry resolution and module loading helpers."""

from __future__ import annotations

import logging
import types
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest

from value_converter.adapters.converters import StrtolConverter
from value_converter.errors import PluginError
from value_converter.plugins.registry import (
    PluginRegistry,
    _import_module_or_path,
    _register_from_module,
    create_default_registry,
)


class _Plugin:
    """Simple plugin test double."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.received: list[Mapping[str, Any]] = []

    def create(self, options: Mapping[str, Any]) -> StrtolConverter:
        self.received.append(options)
        return StrtolConverter(**options)


def test_register_requires_non_empty_name() -> None:
    """Reject plugins without a non-empty name."""
    registry = PluginRegistry()
    with pytest.raises(PluginError, match="non-empty 'name'"):
        registry.register(_Plugin(name="  "))


def test_register_replaces_existing_plugin(caplog: pytest.LogCaptureFixture) -> None:
    """Keep the last plugin registered under a name and log the replacement."""
    registry = PluginRegistry()
    first, second = _Plugin("x"), _Plugin("x")
    registry.register(first)
    with caplog.at_level(logging.DEBUG, logger="value_converter.plugins.registry"):
        registry.register(second)
    assert registry.get("x") is second
    assert "replacing converter plugin 'x'" in caplog.text


def test_get_unknown_plugin_lists_available() -> None:
    """Raise clear error naming the registered converters."""
    registry = create_default_registry()
    with pytest.raises(
        PluginError,
        match="Unknown converter 'missing'. Available converters: lexical_cast, stream, strtol",
    ):
        registry.get("missing")


def test_create_passes_options_to_plugin() -> None:
    """Resolve by stripped name and forward options unchanged."""
    registry = PluginRegistry()
    plugin = _Plugin("fake")
    registry.register(plugin)
    cnv = registry.create(" fake ", {"width": 3})
    assert plugin.received == [{"width": 3}]
    assert cnv.attempt(7, str).value() == "  7"


def test_create_wraps_validation_errors() -> None:
    """Wrap pydantic validation errors as PluginError."""
    registry = create_default_registry()
    with pytest.raises(PluginError, match="Invalid converter resolution options"):
        registry.create("   ")


def test_import_module_by_path_and_register_variants(tmp_path: Path) -> None:
    """Load plugin module from file path and register via supported contracts."""
    plugin_file = tmp_path / "plugin_mod.py"
    plugin_file.write_text(
        "from value_converter import StrtolConverter\n"
        "class P:\n"
        "    name = 'p'\n"
        "    def create(self, options):\n"
        "        return StrtolConverter(**options)\n"
        "PLUGIN = P()\n",
        encoding="utf-8",
    )
    module = _import_module_or_path(str(plugin_file))
    registry = PluginRegistry()
    _register_from_module(module, registry)
    assert registry.get("p").name == "p"


def test_import_module_invalid_path_spec_raises(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    """Raise PluginError when file path exists but import spec is invalid."""
    plugin_file = tmp_path / "plugin_mod.py"
    plugin_file.write_text("x = 1\n", encoding="utf-8")
    monkeypatch.setattr(
        "value_converter.plugins.registry.importlib.util.spec_from_file_location",
        lambda *_args, **_kwargs: None,
    )
    with pytest.raises(PluginError, match="Unable to load plugin module"):
        _import_module_or_path(str(plugin_file))


def test_import_module_by_name_failure_raises() -> None:
    """Raise PluginError when import path cannot be imported."""
    with pytest.raises(PluginError, match="Unable to import plugin module"):
        _import_module_or_path("module.that.does.not.exist")


def test_register_from_module_uses_register_plugins() -> None:
    """Prefer register_plugins(registry) hook when available."""
    registry = PluginRegistry()
    module = types.SimpleNamespace(
        register_plugins=lambda r: r.register(_Plugin("hook"))
    )
    _register_from_module(module, registry)
    assert registry.get("hook").name == "hook"


def test_register_from_module_with_plugins_list() -> None:
    """Register all plugins from PLUGINS iterable contract."""
    registry = PluginRegistry()
    module = types.SimpleNamespace(PLUGINS=[_Plugin("a"), _Plugin("b")])
    _register_from_module(module, registry)
    assert registry.names() == ["a", "b"]


def test_register_from_module_requires_contract() -> None:
    """Raise when plugin module exposes no supported registration contract."""
    with pytest.raises(PluginError, match="must expose"):
        _register_from_module(types.SimpleNamespace(), PluginRegistry())


def test_default_registry_loads_extra_modules(tmp_path: Path) -> None:
    """Add external plugins next to the built-in converters."""
    plugin_file = tmp_path / "extra_plugins.py"
    plugin_file.write_text(
        "from value_converter import StrtolConverter\n"
        "class Hex:\n"
        "    name = 'hex'\n"
        "    def create(self, options):\n"
        "        return StrtolConverter(base='hex', **options)\n"
        "PLUGINS = [Hex()]\n",
        encoding="utf-8",
    )
    registry = create_default_registry(extra_modules=[str(plugin_file)])
    assert registry.names() == ["hex", "lexical_cast", "stream", "strtol"]
    assert registry.create("hex").attempt("ff", int).value() == 255
