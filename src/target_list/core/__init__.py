"""Target list core: types, errors and configuration."""

from .config import TargetListConfig
from .errors import InvalidCapacityError, InvalidTargetError, TargetListError
from .types import MAC_LENGTH, MAX_CHANNEL, Channel, InsertResult, MacAddress, TargetKey

__all__ = [
    "TargetListConfig",
    "TargetListError",
    "InvalidTargetError",
    "InvalidCapacityError",
    "InsertResult",
    "MacAddress",
    "Channel",
    "TargetKey",
    "MAC_LENGTH",
    "MAX_CHANNEL",
]
