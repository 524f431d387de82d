"""Field selectors and validated override maps.

A :class:`FieldSelector` names one annotated field of a type and carries the
field's declared type, so overrides can be checked before a mock is built::

    make = FieldSelector.of(Car, "make")
    values = InjectedValues(Car, {make: "Honda", "model": "Civic"})
    values.get(make, "Toyota")   # 'Honda'

String keys are accepted anywhere a selector is and resolve against the
target type.
"""
from __future__ import annotations

import dataclasses
import functools
import sys
import types
import typing
from collections.abc import Iterator, Mapping
from typing import Any, ClassVar, Generic, TypeVar, Union

from mockable.errors import BadInjectionError, UnknownFieldError

T = TypeVar("T")
V = TypeVar("V")

_NOT_SET: Any = object()


@functools.lru_cache(maxsize=None)
def field_types(owner: type) -> Mapping[str, Any]:
    """Return ``{name: declared type}`` for the public annotated fields of *owner*.

    Each annotation is resolved on its own against the namespace of the class
    that declares it. One that cannot be resolved (a ``TYPE_CHECKING``-only
    import, a name local to a function) stays a string, which
    :func:`is_assignable` treats as unchecked; the other fields keep their
    checks.
    """
    hints: dict[str, Any] = {}
    for klass in reversed(owner.__mro__):
        annotations = klass.__dict__.get("__annotations__", {})
        if not annotations:
            continue
        module_ns = getattr(sys.modules.get(klass.__module__), "__dict__", {})
        class_ns = dict(vars(klass))
        for name, hint in annotations.items():
            hints[name] = _resolve_hint(hint, module_ns, class_ns)
    return types.MappingProxyType({
        name: hint
        for name, hint in hints.items()
        if not name.startswith("_") and not _is_class_var(hint)
    })


def _resolve_hint(hint: Any, module_ns: dict[str, Any], class_ns: dict[str, Any]) -> Any:
    if not isinstance(hint, str):
        return hint
    try:
        # Same lookup order as typing.get_type_hints: module first, then class.
        return eval(hint, class_ns, module_ns)  # noqa: S307
    except (NameError, AttributeError):
        return hint


def _is_class_var(hint: Any) -> bool:
    if isinstance(hint, str):
        return hint.startswith(("ClassVar", "typing.ClassVar"))
    return typing.get_origin(hint) is ClassVar or hint is ClassVar


@dataclasses.dataclass(frozen=True, slots=True)
class FieldSelector(Generic[T, V]):
    """Hashable reference to one named, typed field of ``owner``."""

    owner: type[T]
    name: str
    field_type: Any = dataclasses.field(compare=False, hash=False)

    @classmethod
    def of(cls, owner: type[T], name: str) -> "FieldSelector[T, Any]":
        """Resolve *name* against *owner*'s annotations."""
        try:
            field_type = field_types(owner)[name]
        except KeyError:
            raise UnknownFieldError(owner, name) from None
        return cls(owner, name, field_type)

    def get(self, instance: T) -> V:
        return getattr(instance, self.name)

    def accepts(self, value: Any) -> bool:
        return is_assignable(value, self.field_type)

    def __repr__(self) -> str:
        return f"{self.owner.__qualname__}.{self.name}"


def _number_types(expected: type) -> tuple[type, ...]:
    if expected is float:
        return (float, int)
    if expected is complex:
        return (complex, float, int)
    return (expected,)


def is_assignable(value: Any, expected: Any) -> bool:  # noqa: PLR0911
    """Return ``True`` when *value* may be stored in a field declared as *expected*.

    Parameterised containers are checked on their origin only.
    """
    if expected is Any or isinstance(expected, (TypeVar, str, typing.ForwardRef)):
        return True
    if expected is None or expected is type(None):
        return value is None
    supertype = getattr(expected, "__supertype__", None)
    if supertype is not None:
        return is_assignable(value, supertype)

    origin = typing.get_origin(expected)
    if origin is typing.Annotated:
        return is_assignable(value, typing.get_args(expected)[0])
    if origin is Union or origin is types.UnionType:
        return any(is_assignable(value, arg) for arg in typing.get_args(expected))
    if origin is typing.Literal:
        return value in typing.get_args(expected)
    if origin is type:
        args = typing.get_args(expected)
        bound = args[0] if args and isinstance(args[0], type) else object
        return isinstance(value, type) and issubclass(value, bound)
    if origin is not None:
        expected = origin

    if not isinstance(expected, type):
        return True
    if isinstance(value, bool) and expected in (int, float, complex):
        return False
    try:
        return isinstance(value, _number_types(expected))
    except TypeError:
        # Protocols that are not runtime_checkable cannot be checked.
        return True


def accepts_none(expected: Any) -> bool:
    return is_assignable(None, expected)


def resolve_selector(owner: type[T], key: FieldSelector[Any, Any] | str) -> FieldSelector[T, Any]:
    """Return the selector of *owner* that *key* names.

    Raises:
        UnknownFieldError: *owner* has no such field.
        BadInjectionError: *key* is a selector of an unrelated type, or
            neither a field name nor a selector.
    """
    if isinstance(key, str):
        return FieldSelector.of(owner, key)
    if isinstance(key, FieldSelector):
        if not issubclass(owner, key.owner):
            raise BadInjectionError(
                key.name,
                message=f"Selector {key!r} does not belong to {owner.__qualname__}",
            )
        return FieldSelector.of(owner, key.name)
    raise BadInjectionError(
        repr(key),
        message=f"Fields must be named by a string or FieldSelector, got {type(key).__name__}",
    )


class InjectedValues(Generic[T]):
    """Validated, read-only override map for one mock of ``owner``.

    Every key is resolved to a :class:`FieldSelector` of ``owner`` (or one of
    its bases) and every value is type-checked on construction, so a bad
    injection fails before any instance is built. ``None`` targeting a field
    that does not accept ``None`` is treated as "not injected".
    """

    __slots__ = ("_owner", "_values")

    def __init__(
        self,
        owner: type[T],
        injected_values: Mapping[FieldSelector[Any, Any] | str, Any] | None = None,
    ) -> None:
        self._owner = owner
        self._values: dict[str, Any] = {}
        for key, value in (injected_values or {}).items():
            selector = resolve_selector(owner, key)
            if value is None and not accepts_none(selector.field_type):
                continue
            if not selector.accepts(value):
                raise BadInjectionError(selector.name, expected=selector.field_type, actual=type(value))
            self._values[selector.name] = value

    @property
    def owner(self) -> type[T]:
        return self._owner

    def get(self, field: FieldSelector[Any, V] | str, default: Any = _NOT_SET) -> Any:
        """Return the injected value for *field*, else *default*.

        Without a *default*, a missing override raises :class:`KeyError`.
        """
        name = field if isinstance(field, str) else field.name
        if name in self._values:
            return self._values[name]
        if default is _NOT_SET:
            raise KeyError(name)
        return default

    def as_dict(self) -> dict[str, Any]:
        return dict(self._values)

    def __contains__(self, field: object) -> bool:
        name = field.name if isinstance(field, FieldSelector) else field
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"InjectedValues({self._owner.__qualname__}, {self._values!r})"


__all__ = [
    "FieldSelector",
    "InjectedValues",
    "accepts_none",
    "field_types",
    "is_assignable",
    "resolve_selector",
]
