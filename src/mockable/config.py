"""Config – runtime settings for the mock generators.

Settings come from ``MOCKABLE_*`` environment variables, optionally topped up
from a ``.env`` file. ``get_settings()`` loads them once and caches them;
tests use :func:`override_settings` to swap values locally::

    with override_settings(max_elements=3):
        Car.mock_values(4)   # raises InvalidCountError

Variables:
    MOCKABLE_MAX_ELEMENTS: largest list one generation call may build (10000).
    MOCKABLE_LOG_LEVEL: level used by :func:`mockable.logging.configure_logging`.
"""
from __future__ import annotations

import contextlib
import dataclasses
import logging
import os
from collections.abc import Iterator, Mapping
from typing import Any

from dotenv import dotenv_values

from mockable.errors import ConfigError, InvalidSettingValueError

MAX_ELEMENTS_ENV = "MOCKABLE_MAX_ELEMENTS"
LOG_LEVEL_ENV = "MOCKABLE_LOG_LEVEL"


@dataclasses.dataclass
class MockableSettings:
    """Runtime knobs of the library.

    Attributes:
        max_elements: Largest list a single generation call may produce.
        log_level: Level name used by :func:`mockable.logging.configure_logging`.
    """

    max_elements: int = 10_000
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if isinstance(self.max_elements, bool) or not isinstance(self.max_elements, int):
            raise InvalidSettingValueError("max_elements", self.max_elements, "is not an integer")
        if self.max_elements < 0:
            raise InvalidSettingValueError("max_elements", self.max_elements, "must be >= 0")
        self.log_level = str(self.log_level).upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise InvalidSettingValueError("log_level", self.log_level, "is not a logging level name")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str | None] | None = None) -> MockableSettings:
        """Read ``MOCKABLE_*`` variables from *environ* (default ``os.environ``)."""
        if environ is None:
            environ = os.environ
        kwargs: dict[str, Any] = {}

        raw = environ.get(MAX_ELEMENTS_ENV)
        if raw is not None:
            try:
                kwargs["max_elements"] = int(raw)
            except ValueError as exc:
                raise InvalidSettingValueError(MAX_ELEMENTS_ENV, raw, "is not an integer", cause=exc) from exc

        level = environ.get(LOG_LEVEL_ENV)
        if level is not None:
            kwargs["log_level"] = level
        return cls(**kwargs)

    @classmethod
    def from_dotenv(cls, env_file: str | os.PathLike[str] = ".env", *, override: bool = False) -> MockableSettings:
        """Read settings from *env_file* merged with ``os.environ``.

        Process variables win unless *override* is set. ``os.environ`` itself
        is left untouched.
        """
        if not os.path.isfile(env_file):
            raise ConfigError(f"mockable env file {os.fspath(env_file)!r} does not exist", env_file=os.fspath(env_file))
        file_values = {k: v for k, v in dotenv_values(env_file).items() if v is not None}
        if override:
            environ = {**os.environ, **file_values}
        else:
            environ = {**file_values, **os.environ}
        return cls.from_env(environ)


_settings: MockableSettings | None = None


def load_settings(env_file: str | os.PathLike[str] | None = None) -> MockableSettings:
    """(Re)load and cache the settings, from *env_file* too when given."""
    global _settings
    if env_file is None:
        _settings = MockableSettings.from_env()
    else:
        _settings = MockableSettings.from_dotenv(env_file)
    return _settings


def get_settings() -> MockableSettings:
    """Return the cached settings, loading them from the environment on first use."""
    if _settings is None:
        return load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call reloads them."""
    global _settings
    _settings = None


@contextlib.contextmanager
def override_settings(**values: Any) -> Iterator[MockableSettings]:
    """Temporarily replace individual settings fields."""
    global _settings
    previous = _settings
    _settings = dataclasses.replace(get_settings(), **values)
    try:
        yield _settings
    finally:
        _settings = previous


__all__ = [
    "ConfigError",
    "InvalidSettingValueError",
    "MockableSettings",
    "get_settings",
    "load_settings",
    "override_settings",
    "reset_settings",
]
