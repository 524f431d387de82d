"""Errors raised while loading :class:`mockable.config.MockableSettings`."""

from __future__ import annotations

from typing import Any

from mockable.errors.base import MockableError


class ConfigError(MockableError):
    """The mockable settings could not be loaded."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A ``MOCKABLE_*`` value is present but unusable."""

    default_code = "invalid_setting_value"

    def __init__(
        self,
        setting_name: str,
        value: Any,
        reason: str,
        *,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(
            f"mockable setting {setting_name}={value!r} {reason}",
            cause=cause,
            setting=setting_name,
            value=value,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
