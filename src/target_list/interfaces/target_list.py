"""Protocol definition for TargetList."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..components.target import Target
    from ..core.types import Channel, InsertResult, MacAddress


@runtime_checkable
class TargetCollection(Protocol):
    """Sorted, duplicate-free, capacity-bounded chain of targets."""

    def insert(self, from_addr: MacAddress, to_addr: MacAddress, ch: Channel) -> bool:
        """Insert a target in sorted position; False if duplicate or full."""
        ...

    def try_insert(
        self, from_addr: MacAddress, to_addr: MacAddress, ch: Channel
    ) -> InsertResult:
        """Insert a target and report why it was rejected, if it was."""
        ...

    def transfer_prefix_from(self, source: TargetCollection) -> int:
        """Move as many leading targets of source as fit onto the tail."""
        ...

    def reset(self) -> None:
        """Rewind the cursor to the head."""
        ...

    def advance(self) -> Target | None:
        """Return the target under the cursor and step past it."""
        ...

    def has_current(self) -> bool:
        """Return True if the cursor references a target."""
        ...

    def at(self, index: int) -> Target | None:
        """Return the target at index, reusing the cursor when moving forward."""
        ...

    def size(self) -> int:
        """Return the number of targets held."""
        ...

    def is_full(self) -> bool:
        """Return True if a bounded list has reached its capacity."""
        ...

    def clear(self) -> None:
        """Release all targets."""
        ...

    def __iter__(self) -> Iterator[Target]:
        """Iterate targets in ascending order without moving the cursor."""
        ...
