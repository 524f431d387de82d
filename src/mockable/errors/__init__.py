"""Mockable error hierarchy — public re-export surface.

Hierarchy::

    MockableError                       (base.py)
    ├── BadInjectionError               (generation.py)
    │   └── UnknownFieldError
    ├── MissingMockDefaultError
    ├── InvalidCountError
    ├── UnsupportedIdentifierTypeError
    └── ConfigError                     (settings.py)
        └── InvalidSettingValueError
"""

from mockable.errors.base import MockableError
from mockable.errors.generation import (
    BadInjectionError,
    InvalidCountError,
    MissingMockDefaultError,
    UnknownFieldError,
    UnsupportedIdentifierTypeError,
)
from mockable.errors.settings import ConfigError, InvalidSettingValueError

__all__ = [
    "BadInjectionError",
    "ConfigError",
    "InvalidCountError",
    "InvalidSettingValueError",
    "MissingMockDefaultError",
    "MockableError",
    "UnknownFieldError",
    "UnsupportedIdentifierTypeError",
]
