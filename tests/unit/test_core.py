"""Unit tests for the Mockable capability."""

from __future__ import annotations

import dataclasses
import uuid
from typing import TYPE_CHECKING, Any, ClassVar

import pytest

from mockable import (
    BadInjectionError,
    DataclassMockable,
    FieldSelector,
    InjectedValues,
    MissingMockDefaultError,
    Mockable,
    UnknownFieldError,
)
from mockable.fields import field_types

if TYPE_CHECKING:
    from decimal import Decimal


# ---------------------------------------------------------------------------
# Test domain objects
# ---------------------------------------------------------------------------


@dataclasses.dataclass
class Car(Mockable):
    make: str
    model: str

    @classmethod
    def build_mock(cls, values: InjectedValues[Car]) -> Car:
        return cls(
            make=values.get("make", "Toyota"),
            model=values.get("model", "Corolla"),
        )


@dataclasses.dataclass
class Truck(Car):
    payload_kg: int = 1000

    @classmethod
    def build_mock(cls, values: InjectedValues[Truck]) -> Truck:
        return cls(
            make=values.get("make", "Ford"),
            model=values.get("model", "F-150"),
            payload_kg=values.get("payload_kg", 1000),
        )


@dataclasses.dataclass
class Driver(DataclassMockable):
    mock_defaults: ClassVar[dict[str, Any]] = {
        "name": "Ada",
        "licence": lambda: uuid.uuid4(),
    }

    name: str
    licence: uuid.UUID
    nickname: str | None = None
    tags: list[str] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class Bike(DataclassMockable):
    brand: str
    gears: int


@dataclasses.dataclass
class Misconfigured(DataclassMockable):
    mock_defaults: ClassVar[dict[str, Any]] = {"colour": "red"}

    brand: str = "Trek"


@dataclasses.dataclass
class Invoice(Mockable):
    total: Decimal
    customer: str

    @classmethod
    def build_mock(cls, values: InjectedValues[Invoice]) -> Invoice:
        return cls(total=values.get("total", 0), customer=values.get("customer", "ACME"))


@dataclasses.dataclass
class Row(DataclassMockable):
    name: str = "row"
    checksum: str = dataclasses.field(init=False, default="x")


@dataclasses.dataclass(frozen=True)
class FrozenRow(DataclassMockable):
    name: str = "row"
    checksum: str = dataclasses.field(init=False, default="x")


# ---------------------------------------------------------------------------
# Mockable.mock_value
# ---------------------------------------------------------------------------


class TestMockValue:
    def test_zero_arg_form_returns_defaults(self) -> None:
        assert Car.mock_value() == Car(make="Toyota", model="Corolla")

    def test_empty_map_equals_zero_arg_form(self) -> None:
        assert Car.mock_value({}) == Car.mock_value()

    def test_selector_override(self) -> None:
        car = Car.mock_value({Car.field("model"): "Camry"})
        assert car.model == "Camry"
        assert car.make == "Toyota"

    def test_string_key_override(self) -> None:
        assert Car.mock_value({"make": "Honda"}).make == "Honda"

    def test_keyword_override(self) -> None:
        assert Car.mock_value(model="Yaris") == Car(make="Toyota", model="Yaris")

    def test_keywords_win_over_map(self) -> None:
        car = Car.mock_value({Car.field("model"): "Camry"}, model="Prius")
        assert car.model == "Prius"

    def test_repeated_calls_are_equal(self) -> None:
        overrides = {Car.field("model"): "Camry"}
        assert Car.mock_value(overrides) == Car.mock_value(overrides)

    def test_map_is_not_mutated(self) -> None:
        overrides = {"model": "Camry"}
        Car.mock_value(overrides, make="Kia")
        assert overrides == {"model": "Camry"}

    def test_accepts_prevalidated_values(self) -> None:
        values = InjectedValues(Car, {"make": "Mazda"})
        assert Car.mock_value(values).make == "Mazda"

    def test_base_selector_applies_to_subclass(self) -> None:
        truck = Truck.mock_value({Car.field("make"): "Volvo"})
        assert truck.make == "Volvo"
        assert truck.payload_kg == 1000

    def test_subclass_has_its_own_defaults(self) -> None:
        assert Truck.mock_value() == Truck(make="Ford", model="F-150", payload_kg=1000)


# ---------------------------------------------------------------------------
# Bad injection
# ---------------------------------------------------------------------------


class TestBadInjection:
    def test_wrong_type_raises(self) -> None:
        with pytest.raises(BadInjectionError) as exc_info:
            Car.mock_value({Car.field("model"): 42})
        err = exc_info.value
        assert err.field == "model"
        assert err.expected is str
        assert err.actual is int
        assert err.code == "bad_injection"

    def test_message_names_field_and_types(self) -> None:
        with pytest.raises(BadInjectionError, match="model"):
            Car.mock_value(model=3.5)

    def test_bool_is_not_an_int(self) -> None:
        with pytest.raises(BadInjectionError):
            Truck.mock_value(payload_kg=True)

    def test_unknown_field_raises(self) -> None:
        with pytest.raises(UnknownFieldError):
            Car.mock_value({"colour": "blue"})

    def test_selector_of_unrelated_type_raises(self) -> None:
        with pytest.raises(BadInjectionError, match="does not belong"):
            Car.mock_value({FieldSelector.of(Bike, "brand"): "Trek"})

    def test_subclass_selector_on_base_raises(self) -> None:
        with pytest.raises(BadInjectionError):
            Car.mock_value({Truck.field("make"): "Volvo"})

    def test_none_on_non_optional_field_falls_back_to_default(self) -> None:
        assert Car.mock_value(model=None).model == "Corolla"

    def test_unresolvable_annotation_keeps_other_checks(self) -> None:
        assert field_types(Invoice)["customer"] is str
        with pytest.raises(BadInjectionError) as exc_info:
            Invoice.mock_value(customer=42)
        assert exc_info.value.field == "customer"

    def test_unresolvable_annotation_is_unchecked(self) -> None:
        assert Invoice.mock_value(total="12.50").total == "12.50"


# ---------------------------------------------------------------------------
# DataclassMockable
# ---------------------------------------------------------------------------


class TestDataclassMockable:
    def test_defaults_from_mock_defaults_and_dataclass(self) -> None:
        driver = Driver.mock_value()
        assert driver.name == "Ada"
        assert isinstance(driver.licence, uuid.UUID)
        assert driver.nickname is None
        assert driver.tags == []

    def test_callable_default_invoked_per_mock(self) -> None:
        assert Driver.mock_value().licence != Driver.mock_value().licence

    def test_override(self) -> None:
        licence = uuid.uuid4()
        driver = Driver.mock_value(name="Grace", licence=licence, tags=["night"])
        assert driver == Driver(name="Grace", licence=licence, tags=["night"])

    def test_none_assigned_to_optional_field(self) -> None:
        assert Driver.mock_value(nickname=None).nickname is None

    def test_optional_field_accepts_value(self) -> None:
        assert Driver.mock_value(nickname="Countess").nickname == "Countess"

    def test_parameterised_container_checks_origin(self) -> None:
        with pytest.raises(BadInjectionError):
            Driver.mock_value(tags=("a", "b"))

    def test_missing_default_raises(self) -> None:
        with pytest.raises(MissingMockDefaultError) as exc_info:
            Bike.mock_value(brand="Trek")
        assert exc_info.value.field == "gears"

    def test_all_fields_injected_needs_no_defaults(self) -> None:
        assert Bike.mock_value(brand="Trek", gears=21) == Bike(brand="Trek", gears=21)

    def test_unknown_mock_default_raises(self) -> None:
        with pytest.raises(UnknownFieldError):
            Misconfigured.mock_value()

    def test_class_var_is_not_a_field(self) -> None:
        with pytest.raises(UnknownFieldError):
            Driver.field("mock_defaults")

    def test_non_init_field_override(self) -> None:
        assert Row.mock_value(checksum="override").checksum == "override"
        assert Row.mock_value().checksum == "x"

    def test_non_init_field_override_on_frozen_dataclass(self) -> None:
        row = FrozenRow.mock_value(name="r1", checksum="override")
        assert (row.name, row.checksum) == ("r1", "override")

    def test_non_init_field_override_is_type_checked(self) -> None:
        with pytest.raises(BadInjectionError):
            Row.mock_value(checksum=1)
