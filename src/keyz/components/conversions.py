"""Type-to-Key conversion registry.

Each supported source type has exactly one conversion rule, resolved by
functools.singledispatch on the value's type. New types are added with
register_conversion without touching Key or the builders.

Timestamps are normalized to UTC and rendered as RFC 3339 so that byte
order matches chronological order and equal instants encode identically.
"""

from __future__ import annotations

import datetime
import logging
from functools import singledispatch
from typing import Any, Callable

from ..core.errors import KeyEncodingError, NaiveDatetimeError, UnsupportedKeyTypeError
from ..core.key import Key
from ..core.types import KeyPart, UtcDate

logger = logging.getLogger(__name__)


def format_rfc3339(value: datetime.datetime) -> str:
    """Render an aware datetime in UTC as RFC 3339.

    Whole seconds carry no fraction; whole milliseconds get 3 digits,
    anything finer gets 6.
    """
    utc = value.astimezone(datetime.timezone.utc)
    if utc.microsecond == 0:
        timespec = "seconds"
    elif utc.microsecond % 1000 == 0:
        timespec = "milliseconds"
    else:
        timespec = "microseconds"
    return utc.isoformat(timespec=timespec)


@singledispatch
def _convert(value: Any) -> Key:
    raise UnsupportedKeyTypeError(
        f"No key conversion registered for {type(value).__name__}"
    )


@_convert.register(Key)
def _from_key(value: Key) -> Key:
    return value


@_convert.register(str)
def _from_str(value: str) -> Key:
    try:
        return Key(value.encode("utf-8"))
    except UnicodeEncodeError as e:
        raise KeyEncodingError(f"Text is not encodable as UTF-8: {e}") from e


@_convert.register(bytes)
@_convert.register(bytearray)
@_convert.register(memoryview)
def _from_bytes(value) -> Key:
    return Key(value)


@_convert.register(datetime.datetime)
def _from_datetime(value: datetime.datetime) -> Key:
    if value.tzinfo is None or value.utcoffset() is None:
        raise NaiveDatetimeError(
            f"Cannot build a key from naive datetime {value.isoformat()}; "
            "attach a tzinfo first"
        )
    try:
        text = format_rfc3339(value)
    except OverflowError as e:
        raise KeyEncodingError(
            f"Datetime {value.isoformat()} is out of range once converted to UTC"
        ) from e
    return Key(text.encode("utf-8"))


@_convert.register(UtcDate)
def _from_utc_date(value: UtcDate) -> Key:
    return _from_datetime(value.at_midnight())


@_convert.register(datetime.date)
def _from_date(value: datetime.date) -> Key:
    # No zone attached: the date is read as a UTC day, never shifted.
    return _from_utc_date(UtcDate(value))


def to_key(value: KeyPart) -> Key:
    """Convert a single value to a Key using its registered rule.

    Default rules:
        - str: UTF-8 bytes, no prefix or terminator
        - bytes, bytearray, memoryview: verbatim
        - Key: itself
        - aware datetime: RFC 3339 in UTC, e.g. b"2016-11-08T00:00:00+00:00"
        - UtcDate: midnight UTC on that day, then as a datetime
        - date: assumed to already be a UTC day, then as a UtcDate

    Raises:
        UnsupportedKeyTypeError: No rule for the value's type, or a
            registered rule returned something other than Key or bytes
        KeyEncodingError: Text holds lone surrogates, or a datetime falls
            outside the representable range once shifted to UTC
        NaiveDatetimeError: Datetime has no UTC offset
    """
    result = _convert(value)
    if isinstance(result, Key):
        return result
    if isinstance(result, (bytes, bytearray, memoryview)):
        return Key(result)
    raise UnsupportedKeyTypeError(
        f"Conversion for {type(value).__name__} returned "
        f"{type(result).__name__}, expected Key or bytes"
    )


def register_conversion(cls: type, func: Callable[[Any], Any] | None = None):
    """Register a conversion rule for cls.

    The rule receives one value and returns a Key or a bytes-like object.
    Can be called directly or used as a decorator:

        @register_conversion(MyId)
        def _(value):
            return value.raw
    """
    if not isinstance(cls, type):
        raise TypeError(f"register_conversion expects a class, got {cls!r}")

    def decorator(f: Callable[[Any], Any]) -> Callable[[Any], Any]:
        _convert.register(cls, f)
        logger.debug(f"Registered key conversion for {cls.__qualname__}")
        return f

    if func is None:
        return decorator
    return decorator(func)


def supported_types() -> tuple[type, ...]:
    """Return the types with a registered conversion rule."""
    return tuple(t for t in _convert.registry if t is not object)
