"""Common type definitions for the target list.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from enum import Enum

# Core primitive types
MacAddress = bytes
Channel = int
TargetKey = tuple[MacAddress, MacAddress, Channel]

MAC_LENGTH = 6
MAX_CHANNEL = 0xFF


class InsertResult(Enum):
    """Outcome of an insertion attempt."""
    INSERTED = "inserted"
    DUPLICATE = "duplicate"
    FULL = "full"
