"""Application-layer result objects."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, cast

from value_converter.errors import BadAccess

_EMPTY: Any = object()


@dataclass(frozen=True, slots=True)
class ConversionResult[T]:
    """Outcome of one conversion attempt: a value or nothing.

    Notes
    -----
    Use :meth:`of` and :meth:`empty` to build instances. Extracting the value
    of an empty result raises :class:`BadAccess`; it never yields a
    placeholder.
    """

    _value: T = _EMPTY

    @classmethod
    def of(cls, value: T) -> ConversionResult[T]:
        """Wrap a successfully converted value."""
        return cls(value)

    @classmethod
    def empty(cls) -> ConversionResult[T]:
        """Build a result that holds no value."""
        return cls()

    def has_value(self) -> bool:
        """Return ``True`` when the result holds a value."""
        return self._value is not _EMPTY

    def value(self) -> T:
        """Return the held value.

        Returns
        -------
        T
            The converted value.

        Raises
        ------
        BadAccess
            If the result is empty.
        """
        if self._value is _EMPTY:
            raise BadAccess("Attempted to access the value of an empty conversion result.")
        return self._value

    def value_or(self, default: T) -> T:
        """Return the held value, or ``default`` when the result is empty."""
        if self._value is _EMPTY:
            return default
        return self._value

    def value_or_eval(self, factory: Callable[[], T]) -> T:
        """Return the held value, or call ``factory`` when the result is empty."""
        if self._value is _EMPTY:
            return factory()
        return self._value

    def __bool__(self) -> bool:
        return self.has_value()

    def __repr__(self) -> str:
        if self._value is _EMPTY:
            return "ConversionResult.empty()"
        return f"ConversionResult.of({cast(object, self._value)!r})"
