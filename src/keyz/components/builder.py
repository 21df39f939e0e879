"""Composite key construction.

make_key folds any number of mixed-type values into one Key, strictly
left to right. KeyBuilder performs the same fold incrementally.
"""

from __future__ import annotations

import datetime
import logging
from typing import TYPE_CHECKING

from ..core.config import KeyConfig
from ..core.errors import KeyTooLongError
from ..core.key import Key
from ..core.types import KeyPart
from .conversions import to_key

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)


def make_key(*values: KeyPart) -> Key:
    """Build one key from values in argument order.

    No values gives the empty key, one value gives exactly its
    conversion, and more are joined left to right with no separators:

        >>> make_key("hello", "world")
        Key(b'helloworld')
    """
    if len(values) == 1:
        return to_key(values[0])
    return Key(b"".join(to_key(value).to_bytes() for value in values))


class KeyBuilder:
    """Fluent composite key builder.

    Args:
        config: Builder settings; defaults to KeyConfig()

    Invariants:
        - Parts are concatenated in the order they were added
        - build() does not consume or reset the builder
        - With max_key_bytes set, no built key exceeds that length
    """

    def __init__(self, config: KeyConfig | None = None):
        self.config = config or KeyConfig()
        self._key = Key.empty()
        self._parts = 0

    def add(self, value: KeyPart) -> KeyBuilder:
        """Convert value and append it after the parts added so far."""
        if (
            self.config.naive_datetime == "assume_utc"
            and isinstance(value, datetime.datetime)
            and value.utcoffset() is None
        ):
            logger.warning(f"Assuming UTC for naive datetime {value.isoformat()}")
            value = value.replace(tzinfo=datetime.timezone.utc)

        key = self._key.join(to_key(value))
        limit = self.config.max_key_bytes
        if limit is not None and len(key) > limit:
            raise KeyTooLongError(
                f"Key would be {len(key)} bytes, limit is {limit} bytes"
            )
        self._key = key
        self._parts += 1
        return self

    def extend(self, values: Iterable[KeyPart]) -> KeyBuilder:
        """Add each value in iteration order."""
        for value in values:
            self.add(value)
        return self

    def build(self) -> Key:
        """Return the key built from all parts added so far."""
        logger.debug(f"Built key from {self._parts} parts, {len(self._key)} bytes")
        return self._key

    def reset(self) -> None:
        """Discard all parts added so far."""
        self._key = Key.empty()
        self._parts = 0

    def __len__(self) -> int:
        """Return the number of parts added so far."""
        return self._parts
