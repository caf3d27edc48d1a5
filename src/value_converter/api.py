"""Public batch conversion API (delegates to application use-cases)."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from value_converter.application.policies import ValueOrDefault, ValueOrRaise
from value_converter.application.use_cases import convert_all
from value_converter.plugins.registry import create_default_registry
from value_converter.roundtrip import check_round_trip

logger = logging.getLogger(__name__)


def parse_integers(
    texts: Sequence[str],
    *,
    converter: str = "stream",
    default: Optional[int] = None,
    plugin_modules: Optional[Iterable[str]] = None,
    **options: object,
) -> list[int]:
    """Parse a batch of texts into integers.

    Without ``default`` the first unparsable text raises ``BadAccess``;
    otherwise failed entries are replaced by ``default``.
    """
    registry = create_default_registry(extra_modules=plugin_modules)
    cnv = registry.create(converter, options)
    if default is None:
        return convert_all(texts, cnv, int, ValueOrRaise[int]())

    results = convert_all(texts, cnv, int)
    failed = sum(1 for result in results if not result.has_value())
    if failed:
        logger.debug(
            "%d of %d texts failed to parse with %s; substituted %d",
            failed,
            len(results),
            converter,
            default,
        )
    policy = ValueOrDefault(default)
    return [policy(result) for result in results]


def format_integers(
    values: Sequence[int],
    *,
    converter: str = "stream",
    verify: bool = False,
    plugin_modules: Optional[Iterable[str]] = None,
    **options: object,
) -> list[str]:
    """Render a batch of integers as text.

    With ``verify`` every rendered text is parsed back and compared with its
    source value; a mismatch raises ``RoundTripError``.
    """
    registry = create_default_registry(extra_modules=plugin_modules)
    cnv = registry.create(converter, options)
    if verify:
        return check_round_trip(values, cnv)
    return convert_all(values, cnv, str, ValueOrRaise[str]())
