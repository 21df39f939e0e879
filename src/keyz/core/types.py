"""Common type definitions for keyz.

Defines the primitive types shared by the key type, the conversion
registry and the builders.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass
from typing import Union

from .key import Key

# Raw key payloads accepted verbatim
KeyBytes = Union[bytes, bytearray, memoryview]

NAIVE_DATETIME_POLICIES = ("reject", "assume_utc")


@dataclass(frozen=True)
class UtcDate:
    """Calendar date anchored to UTC, with no time of day.

    Plain datetime.date values carry no zone at all; wrapping one in
    UtcDate states that the date is a UTC calendar day.
    """

    date: datetime.date

    def __post_init__(self) -> None:
        if isinstance(self.date, datetime.datetime) or not isinstance(
            self.date, datetime.date
        ):
            raise TypeError(f"UtcDate requires a date, got {type(self.date).__name__}")

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> UtcDate:
        return cls(datetime.date(year, month, day))

    @classmethod
    def today(cls) -> UtcDate:
        """Return the current calendar day in UTC."""
        return cls(datetime.datetime.now(datetime.timezone.utc).date())

    def at_midnight(self) -> datetime.datetime:
        """Return 00:00:00 UTC on this day as an aware datetime."""
        return datetime.datetime.combine(
            self.date, datetime.time(0, 0, 0), tzinfo=datetime.timezone.utc
        )


# Values with a conversion rule in the default registry
KeyPart = Union[str, KeyBytes, datetime.datetime, datetime.date, UtcDate, Key]
