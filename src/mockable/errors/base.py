"""Root error class for the mockable error hierarchy."""

from __future__ import annotations

from typing import Any


class MockableError(Exception):
    """Root of the error hierarchy.

    Keyword arguments beyond ``code`` and ``cause`` become ``detail``, the
    machine-readable context of the failure (field names, types, counts)::

        raise MockableError("cannot build Car", code="car_error", field="make")
    """

    default_code: str = "mockable_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        cause: BaseException | None = None,
        **detail: Any,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = {k: v for k, v in detail.items() if v is not None}
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for structured logs."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message, **self.detail}
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


__all__ = ["MockableError"]
