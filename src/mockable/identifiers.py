"""Identifier casting – derive "the Nth identifier" of a value type.

Built in: ``int`` (the number itself), ``str`` (its decimal text) and
:class:`uuid.UUID` (a fresh ``uuid4``; the sequence number is ignored, so
UUID ids are not reproducible between runs).

Own types opt in by defining a classmethod::

    @dataclasses.dataclass(frozen=True)
    class OrderId:
        value: str

        @classmethod
        def cast_from_sequence_number(cls, n: int) -> "OrderId":
            return cls(f"ord-{n}")

or, for types you do not control, through :func:`register_identifier_type`.
"""
from __future__ import annotations

import types
import typing
import uuid
from collections.abc import Callable
from typing import Any, Protocol, TypeVar, Union, runtime_checkable

from mockable.errors import UnsupportedIdentifierTypeError

V = TypeVar("V")


@runtime_checkable
class IdentifierCastable(Protocol):
    """A type that can build its Nth identifier value."""

    @classmethod
    def cast_from_sequence_number(cls, n: int) -> "IdentifierCastable": ...


def _uuid_from_sequence_number(n: int) -> uuid.UUID:  # noqa: ARG001
    return uuid.uuid4()


_REGISTRY: dict[type, Callable[[int], Any]] = {
    int: lambda n: n,
    str: str,
    uuid.UUID: _uuid_from_sequence_number,
}

# Subclasses of int that must not resolve to the int caster.
_EXCLUDED: frozenset[type] = frozenset({bool})


def register_identifier_type(tp: type[V], caster: Callable[[int], V]) -> None:
    """Make *tp* (and its subclasses) usable as an identity field type.

    Subclasses must accept *caster*'s result as their only constructor argument.
    """
    _REGISTRY[tp] = caster


def unregister_identifier_type(tp: type) -> None:
    """Remove a caster added with :func:`register_identifier_type`."""
    _REGISTRY.pop(tp, None)


def _unwrap(tp: Any) -> Any:
    supertype = getattr(tp, "__supertype__", None)
    if supertype is not None:
        return _unwrap(supertype)
    origin = typing.get_origin(tp)
    if origin is typing.Annotated:
        return _unwrap(typing.get_args(tp)[0])
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in typing.get_args(tp) if arg is not type(None)]
        if len(members) == 1:
            return _unwrap(members[0])
    return tp


def resolve_caster(tp: Any) -> Callable[[int], Any]:
    """Return the function producing identifiers of *tp*.

    ``NewType`` and ``Optional`` wrappers resolve to the underlying type. A
    subclass of a registered type converts the base caster's result with its
    own constructor, so ``TicketNumber(int)`` ids are ``TicketNumber``s.

    Raises:
        UnsupportedIdentifierTypeError: *tp* has no known caster.
    """
    target = _unwrap(tp)
    if not isinstance(target, type) or target in _EXCLUDED:
        raise UnsupportedIdentifierTypeError(tp)
    caster = getattr(target, "cast_from_sequence_number", None)
    if callable(caster):
        return caster
    for klass in target.__mro__:
        if klass in _REGISTRY:
            base_caster = _REGISTRY[klass]
            if klass is target:
                return base_caster
            return lambda n: target(base_caster(n))
    raise UnsupportedIdentifierTypeError(tp)


def is_identifier_castable(tp: Any) -> bool:
    try:
        resolve_caster(tp)
    except UnsupportedIdentifierTypeError:
        return False
    return True


def cast_identifier(tp: type[V], n: int) -> V:
    """Return the identifier of type *tp* for sequence number *n*."""
    return resolve_caster(tp)(n)


__all__ = [
    "IdentifierCastable",
    "cast_identifier",
    "is_identifier_castable",
    "register_identifier_type",
    "resolve_caster",
    "unregister_identifier_type",
]
