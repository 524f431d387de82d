"""Errors raised while building mocks."""

from __future__ import annotations

from typing import Any

from mockable.errors.base import MockableError


def type_name(tp: Any) -> str:
    """Short readable name of a type or typing construct."""
    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp).replace("typing.", "")


class BadInjectionError(MockableError):
    """An injected value does not fit the field it targets."""

    default_code = "bad_injection"

    def __init__(
        self,
        field: str,
        *,
        expected: Any = None,
        actual: Any = None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            message or (
                f"Cannot inject {type_name(actual)} into field '{field}' "
                f"(expected {type_name(expected)})"
            ),
            field=field,
            expected=None if expected is None else type_name(expected),
            actual=None if actual is None else type_name(actual),
        )
        self.field = field
        self.expected = expected
        self.actual = actual


class UnknownFieldError(BadInjectionError):
    """The override map targets a field the mocked type does not declare."""

    default_code = "unknown_field"

    def __init__(self, owner: type, field: str) -> None:
        super().__init__(field, message=f"{owner.__qualname__} has no field '{field}'")
        self.owner = owner


class MissingMockDefaultError(MockableError):
    """A field has neither an injected value nor a mock default."""

    default_code = "missing_mock_default"

    def __init__(self, owner: type, field: str) -> None:
        super().__init__(
            f"No mock default for {owner.__qualname__}.{field}",
            owner=owner.__qualname__,
            field=field,
        )
        self.owner = owner
        self.field = field


class InvalidCountError(MockableError):
    """Requested element count is negative, not an int, or above the limit."""

    default_code = "invalid_count"

    def __init__(self, count: Any, *, limit: int | None = None) -> None:
        if not isinstance(count, int) or isinstance(count, bool):
            msg = f"Element count must be an int, got {type(count).__name__}"
        elif count < 0:
            msg = f"Element count must be >= 0, got {count}"
        else:
            msg = f"Element count {count} exceeds max_elements={limit}"
        super().__init__(msg, count=count, limit=limit)
        self.count = count
        self.limit = limit


class UnsupportedIdentifierTypeError(MockableError):
    """The identity field's type cannot be derived from a sequence number."""

    default_code = "unsupported_identifier_type"

    def __init__(self, identifier_type: Any) -> None:
        super().__init__(
            f"{type_name(identifier_type)} is not identifier-castable",
            identifier_type=type_name(identifier_type),
        )
        self.identifier_type = identifier_type


__all__ = [
    "BadInjectionError",
    "InvalidCountError",
    "MissingMockDefaultError",
    "UnknownFieldError",
    "UnsupportedIdentifierTypeError",
    "type_name",
]
