"""Sorted, duplicate-free, capacity-bounded target list.

Time Complexity:
Insert: O(1) at either end, O(n) scan otherwise
Sequential access: O(1) per advance()
Indexed access: amortized O(1) for ascending indices, O(n) rescan backwards
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from ..core.config import TargetListConfig
from ..core.types import Channel, InsertResult, MacAddress
from .target import Target

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


def seek(start: Optional[Target], start_index: int, index: int) -> tuple[Optional[Target], int]:
    """Walk forward from start, which sits at start_index, toward index.

    Returns the node reached and its position. If the chain ends first,
    returns (None, position past the last node). Touches no list state,
    so the same walk can be replayed from any known position.
    """
    node, pos = start, start_index
    while node is not None and pos < index:
        node = node.next
        pos += 1
    return node, pos


class TargetList:
    """Ordered chain of unique targets with an optional size limit.

    Args:
        max_size: Maximum number of targets, 0 for unbounded

    Public API:
        - insert(from_addr, to_addr, ch): Sorted insert, False if rejected
        - try_insert(from_addr, to_addr, ch): Same, reporting the reason
        - transfer_prefix_from(source): Move leading targets of another list
        - reset() / advance() / has_current(): Sequential cursor
        - at(index): Indexed access built on the cursor
        - size() / is_full() / clear()

    Invariants:
        - The chain is strictly ascending by (from_addr, to_addr, ch)
        - count always equals the number of reachable nodes
        - count never exceeds max_size when max_size > 0
        - The cursor is the node at cursor_index, or None when
          cursor_index == count
        - Each node belongs to exactly one list
    """

    def __init__(self, max_size: int = 0) -> None:
        self._head: Optional[Target] = None
        self._tail: Optional[Target] = None
        self._count: int = 0
        self._cursor: Optional[Target] = None
        self._cursor_index: int = 0
        self.config = TargetListConfig(max_size=max_size)

    @classmethod
    def from_config(cls, config: TargetListConfig) -> TargetList:
        return cls(max_size=config.max_size)

    def __del__(self) -> None:
        if getattr(self, "_head", None) is not None:
            self._release()

    @property
    def max_size(self) -> int:
        return self.config.max_size

    @property
    def head(self) -> Optional[Target]:
        return self._head

    @property
    def tail(self) -> Optional[Target]:
        return self._tail

    @property
    def cursor_index(self) -> int:
        return self._cursor_index

    def __repr__(self) -> str:
        limit = self.max_size if self.config.bounded else "unbounded"
        return f"TargetList(size={self._count}, max_size={limit})"

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Target]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Target):
            return False
        node = self._head
        while node is not None and node < item:
            node = node.next
        return node is not None and node == item

    def size(self) -> int:
        """Returns the number of targets in the list"""
        return self._count

    def is_full(self) -> bool:
        return self.config.bounded and self._count >= self.max_size

    # -- insertion ---------------------------------------------------------

    def insert(self, from_addr: MacAddress, to_addr: MacAddress, ch: Channel) -> bool:
        """Insert a target at its sorted position.

        Returns False, leaving the list untouched, when the list is full or
        already holds an equal target.
        """
        return self.try_insert(from_addr, to_addr, ch) is InsertResult.INSERTED

    def try_insert(
        self, from_addr: MacAddress, to_addr: MacAddress, ch: Channel
    ) -> InsertResult:
        """Insert a target at its sorted position and report the outcome.

        Raises:
            InvalidTargetError: if an address is not 6 bytes or the channel
                does not fit in 8 bits. Nothing is linked in that case.
        """
        if self.is_full():
            logger.debug(f"List full ({self._count}/{self.max_size}), rejecting target")
            return InsertResult.FULL

        # Build (and validate) the node before touching any link
        target = Target(from_addr, to_addr, ch)

        prev: Optional[Target] = None
        node = self._head
        pos = 0

        if self._tail is not None and self._tail < target:
            # Append at the end
            prev, node, pos = self._tail, None, self._count
        else:
            # Scan from the head; stops immediately if target sorts first
            while node is not None and node < target:
                prev, node = node, node.next
                pos += 1
            if node is not None and node == target:
                logger.debug(f"Skipping duplicate {target!r}")
                return InsertResult.DUPLICATE

        self._link(prev, target, node, pos)
        return InsertResult.INSERTED

    def _link(
        self, prev: Optional[Target], target: Target, node: Optional[Target], pos: int
    ) -> None:
        """Splice target between prev and node, at position pos."""
        target.next = node
        if prev is None:
            self._head = target
        else:
            prev.next = target
        if node is None:
            self._tail = target
        self._count += 1

        # Keep the cursor on the same node and its index in step
        if pos < self._cursor_index or (pos == self._cursor_index and self._cursor is not None):
            self._cursor_index += 1
        elif pos == self._cursor_index:
            self._cursor = target

    # -- ownership transfer ------------------------------------------------

    def transfer_prefix_from(self, source: TargetList) -> int:
        """Move leading targets of source into this list.

        As many targets as fit under this list's remaining capacity are
        detached from the front of source and relinked here; nothing is
        copied. Source keeps the untransferred remainder as a valid list
        and its cursor is reset.

        When the moved run sorts after this list's tail it is appended as a
        block. Otherwise each node is merged into its sorted position, and
        a node equal to one already held here stays with source.

        Returns the number of targets moved. This is min(room, len(source))
        less one for every target in that prefix this list already holds,
        so it can come out lower than the free room even when source has
        more to give.
        """
        if source is self or source._head is None:
            return 0

        room = source._count
        if self.config.bounded:
            room = min(room, self.max_size - self._count)
        if room <= 0:
            return 0

        # Split source after the first `room` nodes
        first = source._head
        last, _ = seek(first, 0, room - 1)
        rest = last.next
        last.next = None

        if self._tail is None or self._tail < first:
            old_count = self._count
            if self._tail is None:
                self._head = first
            else:
                self._tail.next = first
            self._tail = last
            self._count += room
            if self._cursor is None and self._cursor_index == old_count:
                self._cursor = first
            moved = room
            kept_head = kept_tail = None
        else:
            moved, kept_head, kept_tail = self._merge_run(first)

        if kept_tail is not None:
            kept_tail.next = rest
            source._head = kept_head
            if rest is None:
                source._tail = kept_tail
        else:
            source._head = rest
            if rest is None:
                source._tail = None
        source._count -= moved
        source.reset()

        logger.info(
            f"Transferred {moved} targets ({source._count} left in source, "
            f"{self._count} held)"
        )
        return moved

    def _merge_run(self, first: Target) -> tuple[int, Optional[Target], Optional[Target]]:
        """Merge a detached ascending run into this list.

        Returns the number of nodes merged and the head and tail of the
        run of duplicates that were not.
        """
        prev: Optional[Target] = None
        node = self._head
        pos = 0
        moved = 0
        kept_head: Optional[Target] = None
        kept_tail: Optional[Target] = None

        incoming: Optional[Target] = first
        while incoming is not None:
            following = incoming.next
            incoming.next = None

            while node is not None and node < incoming:
                prev, node = node, node.next
                pos += 1

            if node is not None and node == incoming:
                if kept_tail is None:
                    kept_head = incoming
                else:
                    kept_tail.next = incoming
                kept_tail = incoming
            else:
                self._link(prev, incoming, node, pos)
                prev = incoming
                pos += 1
                moved += 1

            incoming = following

        return moved, kept_head, kept_tail

    # -- cursor ------------------------------------------------------------

    def reset(self) -> None:
        """Rewind the cursor to the head."""
        self._cursor = self._head
        self._cursor_index = 0

    def advance(self) -> Optional[Target]:
        """Return the target under the cursor, then step past it."""
        current = self._cursor
        if current is not None:
            self._cursor = current.next
            self._cursor_index += 1
        return current

    def has_current(self) -> bool:
        return self._cursor is not None

    def at(self, index: int) -> Optional[Target]:
        """Returns the target at index, or None past the end.

        Walks forward from the cursor, so ascending lookups are cheap.
        NOTE: an index behind the cursor rewinds to the head and rescans.
        """
        if index < 0:
            return None
        if index < self._cursor_index:
            logger.debug(f"Rewinding cursor from {self._cursor_index} to reach {index}")
            self.reset()
        self._cursor, self._cursor_index = seek(self._cursor, self._cursor_index, index)
        return self._cursor

    # -- teardown ----------------------------------------------------------

    def clear(self) -> None:
        """Release every target and reset the list to empty."""
        if self._count:
            logger.info(f"Clearing {self._count} targets")
        self._release()

    def _release(self) -> None:
        node = self._head
        while node is not None:
            following = node.next
            node.next = None
            node = following

        self._head = None
        self._tail = None
        self._count = 0
        self._cursor = None
        self._cursor_index = 0
