"""Key conversion and composition components."""

from .builder import KeyBuilder, make_key
from .conversions import format_rfc3339, register_conversion, supported_types, to_key

__all__ = [
    "KeyBuilder",
    "make_key",
    "format_rfc3339",
    "register_conversion",
    "supported_types",
    "to_key",
]
