"""Exception hierarchy for the target list.

Rejected insertions (duplicate key, full list) are reported through
return values; these exceptions cover malformed input only.
"""

from __future__ import annotations


class TargetListError(Exception):
    """Base exception for all target list errors."""
    pass


class InvalidTargetError(TargetListError, ValueError):
    """Raised when an address has the wrong width or a channel is out of range."""
    pass


class InvalidCapacityError(TargetListError, ValueError):
    """Raised when a list is configured with a negative capacity."""
    pass
