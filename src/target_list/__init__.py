"""Target List - sorted, duplicate-free, capacity-bounded list of targets."""

from .components.target import Target, format_mac
from .components.target_list import TargetList, seek
from .core.config import TargetListConfig
from .core.errors import (
    TargetListError,
    InvalidTargetError,
    InvalidCapacityError,
)
from .core.types import MacAddress, Channel, TargetKey, InsertResult

__all__ = [
    "Target",
    "TargetList",
    "TargetListConfig",
    "TargetListError",
    "InvalidTargetError",
    "InvalidCapacityError",
    "MacAddress",
    "Channel",
    "TargetKey",
    "InsertResult",
    "format_mac",
    "seek",
]
