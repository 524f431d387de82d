"""Mockable – types that build default instances of themselves.

Implement :meth:`Mockable.build_mock` and read overrides from the validated
:class:`~mockable.fields.InjectedValues`::

    @dataclasses.dataclass
    class Car(Mockable):
        make: str
        model: str

        @classmethod
        def build_mock(cls, values: InjectedValues["Car"]) -> "Car":
            return cls(
                make=values.get("make", "Toyota"),
                model=values.get("model", "Corolla"),
            )

    Car.mock_value()                                  # Car('Toyota', 'Corolla')
    Car.mock_value({Car.field("model"): "Camry"})     # Car('Toyota', 'Camry')
    Car.mock_value(model="Camry")                     # same

Dataclasses can skip the hook entirely with :class:`DataclassMockable`.
"""
from __future__ import annotations

import abc
import dataclasses
from collections.abc import Mapping
from typing import Any, ClassVar, Self

from mockable.errors import MissingMockDefaultError, UnknownFieldError
from mockable.fields import FieldSelector, InjectedValues
from mockable.logging import get_logger

_log = get_logger(__name__)

OverrideMap = Mapping[FieldSelector[Any, Any] | str, Any]


class Mockable(abc.ABC):
    """Capability: produce a default instance, optionally with fields overridden."""

    @classmethod
    @abc.abstractmethod
    def build_mock(cls, values: InjectedValues[Self]) -> Self:
        """Build an instance, taking each field from *values* when present."""

    # ------------------------------------------------------------------
    # Single element
    # ------------------------------------------------------------------

    @classmethod
    def mock_value(
        cls,
        injected_values: OverrideMap | InjectedValues[Self] | None = None,
        /,
        **field_values: Any,
    ) -> Self:
        """Return a mock, applying *injected_values* then *field_values*.

        Raises:
            BadInjectionError: an override does not fit its field.
        """
        if isinstance(injected_values, InjectedValues) and injected_values.owner is cls and not field_values:
            values = injected_values
        else:
            if isinstance(injected_values, InjectedValues):
                injected_values = injected_values.as_dict()
            values = InjectedValues(cls, {**(injected_values or {}), **field_values})
        instance = cls.build_mock(values)
        _log.debug("mock.generated", mock_type=cls.__qualname__, injected=sorted(values))
        return instance

    @classmethod
    def field(cls, name: str) -> FieldSelector[Self, Any]:
        """Return the selector for field *name*."""
        return FieldSelector.of(cls, name)

    # ------------------------------------------------------------------
    # Collections (see mockable.collections)
    # ------------------------------------------------------------------

    @classmethod
    def mock_values(cls, number_of_elements: int, injected_values: OverrideMap | None = None) -> list[Self]:
        from mockable.collections import mock_repeated

        return mock_repeated(cls, number_of_elements, injected_values)

    @classmethod
    def mock_identified(
        cls,
        number_of_elements: int,
        id_field: FieldSelector[Self, Any] | str,
        injected_values: OverrideMap | None = None,
    ) -> list[Self]:
        from mockable.collections import mock_identified

        return mock_identified(cls, number_of_elements, id_field, injected_values)

    @classmethod
    def mock_each(cls, *injected_values: OverrideMap) -> list[Self]:
        from mockable.collections import mock_each

        return mock_each(cls, *injected_values)


class DataclassMockable(Mockable):
    """Mockable for dataclass targets, driven by ``mock_defaults``.

    Each init field is taken from the injected values, else from
    ``mock_defaults`` (callables are invoked once per mock), else from the
    dataclass default. Injected ``init=False`` fields are set on the built
    instance, frozen or not::

        @dataclasses.dataclass
        class Car(DataclassMockable):
            mock_defaults: ClassVar[dict[str, Any]] = {"make": "Toyota", "model": "Corolla"}

            make: str
            model: str
            id: uuid.UUID = dataclasses.field(default_factory=uuid.uuid4)
    """

    mock_defaults: ClassVar[Mapping[str, Any]] = {}

    @classmethod
    def build_mock(cls, values: InjectedValues[Self]) -> Self:
        init_fields = [f for f in dataclasses.fields(cls) if f.init]  # type: ignore[arg-type]
        names = {f.name for f in init_fields}
        for name in cls.mock_defaults:
            if name not in names:
                raise UnknownFieldError(cls, name)

        kwargs: dict[str, Any] = {}
        for f in init_fields:
            if f.name in values:
                kwargs[f.name] = values.get(f.name)
            elif f.name in cls.mock_defaults:
                default = cls.mock_defaults[f.name]
                kwargs[f.name] = default() if callable(default) else default
            elif f.default is dataclasses.MISSING and f.default_factory is dataclasses.MISSING:
                raise MissingMockDefaultError(cls, f.name)
        instance = cls(**kwargs)

        for name in values:
            if name not in names:
                object.__setattr__(instance, name, values.get(name))
        return instance


__all__ = ["DataclassMockable", "Mockable", "OverrideMap"]
