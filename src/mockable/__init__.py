"""
mockable – default-valued test doubles for your own data types.

Import path convention::

    from mockable import DataclassMockable, Mockable, InjectedValues
    from mockable.collections import ListOf, mock_identified
    from mockable.errors import BadInjectionError
"""

from mockable.collections import ListOf, mock_each, mock_identified, mock_repeated
from mockable.core import DataclassMockable, Mockable, OverrideMap
from mockable.errors import (
    BadInjectionError,
    ConfigError,
    InvalidCountError,
    InvalidSettingValueError,
    MissingMockDefaultError,
    MockableError,
    UnknownFieldError,
    UnsupportedIdentifierTypeError,
)
from mockable.fields import FieldSelector, InjectedValues
from mockable.identifiers import (
    IdentifierCastable,
    cast_identifier,
    is_identifier_castable,
    register_identifier_type,
    unregister_identifier_type,
)

__version__ = "0.1.0"
__all__ = [
    "BadInjectionError",
    "ConfigError",
    "DataclassMockable",
    "FieldSelector",
    "IdentifierCastable",
    "InjectedValues",
    "InvalidCountError",
    "InvalidSettingValueError",
    "ListOf",
    "MissingMockDefaultError",
    "Mockable",
    "MockableError",
    "OverrideMap",
    "UnknownFieldError",
    "UnsupportedIdentifierTypeError",
    "__version__",
    "cast_identifier",
    "is_identifier_castable",
    "mock_each",
    "mock_identified",
    "mock_repeated",
    "register_identifier_type",
    "unregister_identifier_type",
]
