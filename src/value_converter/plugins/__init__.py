"""Plugin interfaces and registry for converter back-ends."""

from .base import ConverterPlugin
from .registry import PluginRegistry, create_default_registry

__all__ = ["ConverterPlugin", "PluginRegistry", "create_default_registry"]
