"""Built-in converter plugins."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from value_converter.adapters.converters import (
    ConfigurableConverter,
    LexicalCastConverter,
    StreamConverter,
    StrtolConverter,
)


class _FactoryPlugin:
    """Create a built-in converter and apply options through its builder."""

    name = ""
    factory: type[ConfigurableConverter]

    def create(self, options: Mapping[str, Any]) -> ConfigurableConverter:
        """Build the converter with ``options`` applied.

        Raises
        ------
        ConverterError
            If an option is not supported or has an invalid value.
        """
        return self.factory(**dict(options))


class StreamPlugin(_FactoryPlugin):
    """Stream-buffer converter with the full set of formatting options."""

    name = "stream"
    factory = StreamConverter


class StrtolPlugin(_FactoryPlugin):
    """C-library style scanning converter."""

    name = "strtol"
    factory = StrtolConverter


class LexicalCastPlugin(_FactoryPlugin):
    """Strict cast converter.

    Accepts a ``raising`` option (default ``True``); every other option is
    rejected by the converter itself.
    """

    name = "lexical_cast"
    factory = LexicalCastConverter

    def create(self, options: Mapping[str, Any]) -> LexicalCastConverter:
        remaining = dict(options)
        return LexicalCastConverter(raising=remaining.pop("raising", True), **remaining)


BUILTIN_PLUGINS = (StreamPlugin(), StrtolPlugin(), LexicalCastPlugin())
