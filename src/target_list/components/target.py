"""Target record.

A target is an immutable address pair plus channel, linked to the
next target of the list that owns it.
"""

from __future__ import annotations

from typing import Optional

from ..core.errors import InvalidTargetError
from ..core.types import MAC_LENGTH, MAX_CHANNEL, Channel, MacAddress, TargetKey


def format_mac(addr: MacAddress) -> str:
    """Render an address as colon separated hex, e.g. 'aa:bb:cc:dd:ee:ff'."""
    return ":".join(f"{b:02x}" for b in addr)


def _check_mac(addr: MacAddress, name: str) -> MacAddress:
    if not isinstance(addr, (bytes, bytearray, memoryview)):
        raise InvalidTargetError(
            f"{name} must be bytes-like, got {type(addr).__name__}"
        )
    addr = bytes(addr)
    if len(addr) != MAC_LENGTH:
        raise InvalidTargetError(
            f"{name} must be {MAC_LENGTH} bytes, got {len(addr)}"
        )
    return addr


class Target:
    """A single target: from address, to address and channel.

    Targets order lexicographically by (from_addr, to_addr, ch). Every
    comparison goes through the same key, so two targets compare equal
    exactly when all three fields match.

    The data fields are fixed at construction; only the link changes,
    and only through the TargetList that owns the node.
    """

    __slots__ = ("_from", "_to", "_ch", "_key", "next")

    def __init__(self, from_addr: MacAddress, to_addr: MacAddress, ch: Channel) -> None:
        if isinstance(ch, bool) or not isinstance(ch, int):
            raise InvalidTargetError(f"channel must be an int, got {type(ch).__name__}")
        if not 0 <= ch <= MAX_CHANNEL:
            raise InvalidTargetError(f"channel must be in 0..{MAX_CHANNEL}, got {ch}")

        self._from: MacAddress = _check_mac(from_addr, "from_addr")
        self._to: MacAddress = _check_mac(to_addr, "to_addr")
        self._ch: Channel = ch
        self._key: TargetKey = (self._from, self._to, self._ch)
        self.next: Optional[Target] = None

    @property
    def from_addr(self) -> MacAddress:
        return self._from

    @property
    def to_addr(self) -> MacAddress:
        return self._to

    @property
    def ch(self) -> Channel:
        return self._ch

    @property
    def key(self) -> TargetKey:
        return self._key

    def get_next(self) -> Optional[Target]:
        return self.next

    def set_next(self, node: Optional[Target]) -> None:
        self.next = node

    def compare(self, other: Target) -> int:
        """Three-way comparison: -1, 0 or 1."""
        if self._key < other._key:
            return -1
        if self._key > other._key:
            return 1
        return 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Target):
            return NotImplemented
        return self._key == other._key

    def __lt__(self, other: Target) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: Target) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: Target) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: Target) -> bool:
        return self.compare(other) >= 0

    def __hash__(self) -> int:
        return hash(self._key)

    def __repr__(self) -> str:
        return (
            f"Target(from={format_mac(self._from)}, "
            f"to={format_mac(self._to)}, ch={self._ch})"
        )
