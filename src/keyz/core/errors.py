"""Exception hierarchy for keyz.

Every rule in the default registry is total over its domain; these
exceptions cover values that fall outside it.
"""

from __future__ import annotations


class KeyzError(Exception):
    """Base exception for all keyz errors."""
    pass


class UnsupportedKeyTypeError(KeyzError, TypeError):
    """Raised when no conversion rule is registered for a value's type."""
    pass


class KeyEncodingError(KeyzError, ValueError):
    """Raised when text cannot be encoded as UTF-8."""
    pass


class NaiveDatetimeError(KeyzError, ValueError):
    """Raised when a datetime without a UTC offset is converted."""
    pass


class KeyTooLongError(KeyzError, ValueError):
    """Raised when a built key exceeds the configured byte limit."""
    pass


class KeyConfigError(KeyzError, ValueError):
    """Raised when a KeyConfig holds invalid settings."""
    pass
