"""Protocol definition for key builders."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..core.key import Key


class Builder(Protocol):
    """Accumulates typed values, in order, into one composite key."""

    def add(self, value: Any) -> Builder:
        """Convert value and append it after the parts added so far."""
        ...

    def extend(self, values: Iterable[Any]) -> Builder:
        """Add each value in iteration order."""
        ...

    def build(self) -> Key:
        """Return the key built from all parts added so far."""
        ...

    def reset(self) -> None:
        """Discard all parts added so far."""
        ...
