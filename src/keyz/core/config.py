"""Configuration for keyz builders.

Defines the tunable parameters of KeyBuilder. Plain make_key calls use
the defaults and take no configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

from .errors import KeyConfigError
from .types import NAIVE_DATETIME_POLICIES


@dataclass
class KeyConfig:
    """Configuration parameters for KeyBuilder.

    Attributes:
        naive_datetime: "reject" to raise on datetimes without a UTC offset,
            "assume_utc" to read them as UTC without shifting
        max_key_bytes: Maximum length of a built key, or None for no limit
    """

    naive_datetime: str = "reject"
    max_key_bytes: int | None = None

    def __post_init__(self) -> None:
        if self.naive_datetime not in NAIVE_DATETIME_POLICIES:
            raise KeyConfigError(
                f"naive_datetime must be one of {NAIVE_DATETIME_POLICIES}, "
                f"got {self.naive_datetime!r}"
            )
        if self.max_key_bytes is not None and self.max_key_bytes < 0:
            raise KeyConfigError(
                f"max_key_bytes must be non-negative, got {self.max_key_bytes}"
            )
