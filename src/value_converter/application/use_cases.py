"""Application use-cases dispatching values through converters."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from value_converter.application.policies import ExtractionPolicy
from value_converter.application.ports import Converter
from value_converter.application.results import ConversionResult
from value_converter.errors import UnsupportedConversionError


def ensure_supported(converter: Converter, source: type, target: type) -> None:
    """Reject type pairs the converter cannot handle.

    Raises
    ------
    UnsupportedConversionError
        If ``converter`` does not support ``source -> target``.
    """
    if not converter.supports(source, target):
        raise UnsupportedConversionError(
            f"Converter '{converter.name}' does not support "
            f"{source.__name__} -> {target.__name__} conversion."
        )


def convert[T](value: object, converter: Converter, target: type[T]) -> ConversionResult[T]:
    """Use-case: convert one value through a converter back-end.

    Parameters
    ----------
    value : object
        Source value; its exact type selects the conversion pair.
    converter : Converter
        Back-end that performs the conversion.
    target : type
        Requested result type.

    Returns
    -------
    ConversionResult[T]
        Converted value, or an empty result when the back-end reports failure.

    Raises
    ------
    UnsupportedConversionError
        If the converter does not support ``type(value) -> target``.

    Notes
    -----
    Exceptions raised by the back-end itself are not caught.
    """
    ensure_supported(converter, type(value), target)
    return converter.attempt(value, target)


@dataclass(frozen=True)
class Conversion[T]:
    """Reusable ``value -> ConversionResult`` callable bound to a converter.

    The extraction style is chosen once, when the callable is built:
    ``conversion(cnv, int).value_or(-1)`` substitutes ``-1`` for every failed
    element, ``conversion(cnv, int).value()`` raises on the first one.
    """

    converter: Converter
    target: type[T]

    def __call__(self, value: object) -> ConversionResult[T]:
        return convert(value, self.converter, self.target)

    def value(self) -> Callable[[object], T]:
        return lambda item: self(item).value()

    def value_or(self, default: T) -> Callable[[object], T]:
        return lambda item: self(item).value_or(default)

    def value_or_eval(self, factory: Callable[[], T]) -> Callable[[object], T]:
        return lambda item: self(item).value_or_eval(factory)


def conversion[T](converter: Converter, target: type[T]) -> Conversion[T]:
    """Bind ``converter`` and ``target`` into a reusable conversion callable."""
    return Conversion(converter=converter, target=target)


def convert_all[T](
    values: Iterable[object],
    converter: Converter,
    target: type[T],
    policy: ExtractionPolicy[T] | None = None,
) -> list[ConversionResult[T]] | list[T]:
    """Use-case: convert an ordered batch of values.

    Parameters
    ----------
    values : Iterable[object]
        Source values, converted in order.
    converter : Converter
        Back-end shared by every element.
    target : type
        Requested result type.
    policy : ExtractionPolicy | None, default=None
        When given, each result is extracted through it; otherwise the
        results themselves are returned.

    Returns
    -------
    list
        One entry per input value.

    Raises
    ------
    BadAccess
        If ``policy`` raises on an empty result; later values are not
        converted.
    """
    bound = conversion(converter, target)
    if policy is None:
        return [bound(value) for value in values]
    return [policy.extract(bound(value)) for value in values]
