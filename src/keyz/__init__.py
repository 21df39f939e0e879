"""keyz - sortable composite binary keys built from typed values."""

from .components.builder import KeyBuilder, make_key
from .components.conversions import (
    format_rfc3339,
    register_conversion,
    supported_types,
    to_key,
)
from .core.config import KeyConfig
from .core.errors import (
    KeyzError,
    UnsupportedKeyTypeError,
    KeyEncodingError,
    NaiveDatetimeError,
    KeyTooLongError,
    KeyConfigError,
)
from .core.key import Key
from .core.types import KeyBytes, KeyPart, UtcDate
from .interfaces.builder import Builder

__version__ = "0.1.0"

__all__ = [
    "Key",
    "KeyBuilder",
    "make_key",
    "to_key",
    "register_conversion",
    "supported_types",
    "format_rfc3339",
    "KeyConfig",
    "KeyzError",
    "UnsupportedKeyTypeError",
    "KeyEncodingError",
    "NaiveDatetimeError",
    "KeyTooLongError",
    "KeyConfigError",
    "KeyBytes",
    "KeyPart",
    "UtcDate",
    "Builder",
]
