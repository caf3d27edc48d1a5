"""Converter plugin registry and discovery helpers."""

from __future__ import annotations

import importlib
import importlib.util
import logging
from collections.abc import Iterable
from pathlib import Path
from types import ModuleType

from pydantic import ValidationError

from value_converter.application.ports import Converter
from value_converter.errors import PluginError
from value_converter.plugins.base import ConverterPlugin, PluginOptions
from value_converter.plugins.builtins import BUILTIN_PLUGINS
from value_converter.schemas import PluginResolutionConfig

logger = logging.getLogger(__name__)


class PluginRegistry:
    """Registry of converter plugins keyed by name."""

    def __init__(self) -> None:
        self._plugins: dict[str, ConverterPlugin] = {}

    def register(self, plugin: ConverterPlugin) -> None:
        """Register plugin instance by unique name.

        Parameters
        ----------
        plugin : ConverterPlugin
            Plugin instance to register.

        Raises
        ------
        PluginError
            If plugin does not provide a valid name.
        """
        name = getattr(plugin, "name", "").strip()
        if not name:
            raise PluginError("Plugin must define a non-empty 'name'.")
        if name in self._plugins:
            logger.debug("replacing converter plugin %r", name)
        self._plugins[name] = plugin

    def names(self) -> list[str]:
        """Return registered plugin names, sorted."""
        return sorted(self._plugins.keys())

    def get(self, name: str) -> ConverterPlugin:
        """Get plugin by name.

        Raises
        ------
        PluginError
            If plugin name is not registered.
        """
        try:
            return self._plugins[name]
        except KeyError as exc:
            raise PluginError(
                f"Unknown converter '{name}'. Available converters: {', '.join(self.names())}"
            ) from exc

    def create(self, name: str, options: PluginOptions | None = None) -> Converter:
        """Resolve a plugin and build a configured converter.

        Parameters
        ----------
        name : str
            Plugin name.
        options : Mapping[str, Any] | None, default=None
            Raw converter options.

        Returns
        -------
        Converter
            Converter built by the plugin.

        Raises
        ------
        PluginError
            If the request is malformed or the plugin is unknown.
        ConverterError
            If the plugin rejects the options.
        """
        try:
            payload = PluginResolutionConfig(name=name, options=dict(options or {}))
        except ValidationError as exc:
            raise PluginError(f"Invalid converter resolution options: {exc}") from exc
        return self.get(payload.name).create(payload.options)

    def load_module(self, module_or_path: str) -> None:
        """Load plugin providers from module name or file path.

        .. warning::
            This method executes code from the specified module. Only load plugins
            from trusted sources.
        """
        module = _import_module_or_path(module_or_path)
        _register_from_module(module, self)
        logger.debug("loaded converter plugins from %s", module_or_path)


def _import_module_or_path(module_or_path: str) -> ModuleType:
    """Import module by import path or filesystem path.

    Parameters
    ----------
    module_or_path : str
        Python module path or local file path. Must be from a trusted source.

    Returns
    -------
    ModuleType
        Imported module object.

    Raises
    ------
    PluginError
        If import cannot be completed.
    """
    candidate = Path(module_or_path)
    if candidate.exists():
        spec = importlib.util.spec_from_file_location(candidate.stem, candidate)
        if spec is None or spec.loader is None:
            raise PluginError(f"Unable to load plugin module from {candidate}.")
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    try:
        return importlib.import_module(module_or_path)
    except Exception as exc:
        raise PluginError(
            f"Unable to import plugin module '{module_or_path}': {exc}"
        ) from exc


def _register_from_module(module: ModuleType, registry: PluginRegistry) -> None:
    """Register plugin definitions found in module."""
    if hasattr(module, "register_plugins"):
        module.register_plugins(registry)
        return

    plugins_obj = getattr(module, "PLUGINS", None)
    if plugins_obj is not None:
        for plugin in plugins_obj:
            registry.register(plugin)
        return

    plugin_obj = getattr(module, "PLUGIN", None)
    if plugin_obj is not None:
        registry.register(plugin_obj)
        return

    raise PluginError(
        "Plugin module must expose register_plugins(registry), PLUGINS, or PLUGIN."
    )


def create_default_registry(
    extra_modules: Iterable[str] | None = None,
) -> PluginRegistry:
    """Create a registry holding the built-in converters.

    Parameters
    ----------
    extra_modules : Iterable[str] | None, optional
        Additional plugin modules to load.

    Returns
    -------
    PluginRegistry
        Registry with built-in and external plugins.
    """
    registry = PluginRegistry()
    for plugin in BUILTIN_PLUGINS:
        registry.register(plugin)
    for module in extra_modules or []:
        registry.load_module(module)
    return registry
