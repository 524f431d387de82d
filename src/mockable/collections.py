"""Collection mock generation.

All generators validate their inputs before building the first element and
either return the complete list or raise::

    mock_repeated(Car, 5, {"model": "Camry"})          # 5 identical Camrys
    mock_identified(Car, 3, Car.field("id"))           # ids 1, 2, 3
    mock_each(Car, {}, {"model": "Camry"})             # one Car per map
    ListOf(Car).mock_value()                           # [Car.mock_value()]
"""
from __future__ import annotations

import dataclasses
from typing import Any, Generic, TypeVar

from mockable.config import get_settings
from mockable.core import Mockable, OverrideMap
from mockable.errors import InvalidCountError
from mockable.fields import FieldSelector, InjectedValues, resolve_selector
from mockable.identifiers import resolve_caster
from mockable.logging import get_logger

M = TypeVar("M", bound=Mockable)

_log = get_logger(__name__)


def _check_count(number_of_elements: Any) -> int:
    limit = get_settings().max_elements
    if (
        not isinstance(number_of_elements, int)
        or isinstance(number_of_elements, bool)
        or number_of_elements < 0
        or number_of_elements > limit
    ):
        raise InvalidCountError(number_of_elements, limit=limit)
    return number_of_elements


def _key_name(key: FieldSelector[Any, Any] | str) -> str:
    return key.name if isinstance(key, FieldSelector) else key


def mock_repeated(
    element_type: type[M],
    number_of_elements: int,
    injected_values: OverrideMap | None = None,
) -> list[M]:
    """Return *number_of_elements* mocks built from the same override map.

    Raises:
        InvalidCountError: negative, non-int, or above ``max_elements``.
        BadInjectionError: an override does not fit its field.
    """
    count = _check_count(number_of_elements)
    values = InjectedValues(element_type, injected_values)
    result = [element_type.mock_value(values) for _ in range(count)]
    _log.debug(
        "mock.collection_generated",
        strategy="repeated",
        mock_type=element_type.__qualname__,
        count=count,
    )
    return result


def mock_identified(
    element_type: type[M],
    number_of_elements: int,
    id_field: FieldSelector[M, Any] | str,
    injected_values: OverrideMap | None = None,
) -> list[M]:
    """Return *number_of_elements* mocks whose *id_field* is 1, 2, … N.

    Identifiers come from :func:`mockable.identifiers.cast_identifier` for the
    field's declared type. Each element gets a fresh copy of the override map
    with the id set, replacing any id the caller supplied. The caller's map
    is left untouched.

    Raises:
        InvalidCountError: negative, non-int, or above ``max_elements``.
        UnsupportedIdentifierTypeError: the id field's type cannot be cast.
        BadInjectionError: an override does not fit its field, or *id_field* does
            not name a field of *element_type*.
    """
    count = _check_count(number_of_elements)
    selector = resolve_selector(element_type, id_field)
    caster = resolve_caster(selector.field_type)

    base = {
        key: value
        for key, value in (injected_values or {}).items()
        if _key_name(key) != selector.name
    }
    InjectedValues(element_type, base)

    result = [
        element_type.mock_value({**base, selector: caster(sequence_number)})
        for sequence_number in range(1, count + 1)
    ]
    _log.debug(
        "mock.collection_generated",
        strategy="identified",
        mock_type=element_type.__qualname__,
        id_field=selector.name,
        count=count,
    )
    return result


def mock_each(element_type: type[M], *injected_values: OverrideMap) -> list[M]:
    """Return one mock per override map, in the order given."""
    validated = [InjectedValues(element_type, overrides) for overrides in injected_values]
    result = [element_type.mock_value(values) for values in validated]
    _log.debug(
        "mock.collection_generated",
        strategy="each",
        mock_type=element_type.__qualname__,
        count=len(result),
    )
    return result


@dataclasses.dataclass(frozen=True)
class ListOf(Generic[M]):
    """List-level view of a Mockable element type.

    ``ListOf(Car)`` answers the same calls as ``Car`` but always returns lists.
    """

    element_type: type[M]

    def mock_value(self, injected_values: OverrideMap | None = None) -> list[M]:
        """Return ``[element_type.mock_value()]``.

        *injected_values* is accepted for signature parity and ignored: a list
        has no fields of its own to override. Use :meth:`repeated` or
        :meth:`each` to customise elements.
        """
        return [self.element_type.mock_value()]

    def repeated(self, number_of_elements: int, injected_values: OverrideMap | None = None) -> list[M]:
        return mock_repeated(self.element_type, number_of_elements, injected_values)

    def identified(
        self,
        number_of_elements: int,
        id_field: FieldSelector[M, Any] | str,
        injected_values: OverrideMap | None = None,
    ) -> list[M]:
        return mock_identified(self.element_type, number_of_elements, id_field, injected_values)

    def each(self, *injected_values: OverrideMap) -> list[M]:
        return mock_each(self.element_type, *injected_values)


__all__ = ["ListOf", "mock_each", "mock_identified", "mock_repeated"]
