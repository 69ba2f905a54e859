"""Configuration for the target list."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidCapacityError


@dataclass(frozen=True)
class TargetListConfig:
    """Construction parameters for a TargetList.

    Attributes:
        max_size: Maximum number of targets held, 0 for unbounded
    """

    max_size: int = 0

    def __post_init__(self) -> None:
        if self.max_size < 0:
            raise InvalidCapacityError(
                f"max_size must be >= 0, got {self.max_size}"
            )

    @property
    def bounded(self) -> bool:
        return self.max_size > 0
