"""Plugin protocol for converter back-ends."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from value_converter.application.ports import Converter

PluginOptions = Mapping[str, Any]


@runtime_checkable
class ConverterPlugin(Protocol):
    """Protocol implemented by converter plugins."""

    name: str

    def create(self, options: PluginOptions) -> Converter:
        """Build a configured converter.

        Parameters
        ----------
        options : Mapping[str, Any]
            Raw converter options.

        Returns
        -------
        Converter
            New converter instance.
        """
