"""Key value type.

An immutable, owned byte sequence used as a composite storage key.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .types import KeyBytes


class Key:
    """Ordered byte sequence with byte-wise equality.

    Args:
        data: Initial bytes; copied so the key never aliases caller buffers

    Invariants:
        - Two keys are equal iff their bytes are identical
        - join never mutates either operand
        - No separators, padding or length prefixes are ever inserted
    """

    __slots__ = ("_data",)

    def __init__(self, data: KeyBytes = b""):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(
                f"Key requires bytes, bytearray or memoryview, not {type(data).__name__}"
            )
        self._data = bytes(data)

    @classmethod
    def empty(cls) -> Key:
        """Return a key holding zero bytes."""
        return cls()

    def join(self, other: Key) -> Key:
        """Return a new key of this key's bytes followed by other's."""
        if not isinstance(other, Key):
            raise TypeError(f"can only join Key to Key, not {type(other).__name__}")
        if not other._data:
            return self
        if not self._data:
            return other
        return Key(self._data + other._data)

    def __add__(self, other):
        if not isinstance(other, Key):
            return NotImplemented
        return self.join(other)

    def to_bytes(self) -> bytes:
        """Return the raw bytes for handoff to a storage layer."""
        return self._data

    def __bytes__(self) -> bytes:
        return self._data

    def __len__(self) -> int:
        return len(self._data)

    def __eq__(self, other):
        if not isinstance(other, Key):
            return NotImplemented
        return self._data == other._data

    def __hash__(self):
        return hash((Key, self._data))

    def __repr__(self):
        return f"Key({self._data!r})"

    def __reduce__(self):
        return Key, (self._data,)
