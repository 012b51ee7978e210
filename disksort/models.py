"""Shared Pydantic models and exceptions for disksort."""
from pydantic import BaseModel, Field
from typing import Optional


class SortRequest(BaseModel):
    algorithm: str = "lawnmower"
    light_count: int = Field(default=4, ge=1)
    initial: Optional[str] = None  # "D L D L ..." overrides light_count when set


class SortReport(BaseModel):
    algorithm: str
    light_count: int
    before: str
    after: str
    swap_count: int
    expected_swaps: int
    optimal: bool
    duration_ms: float = 0.0


def optimal_swap_count(light_count: int) -> int:
    """Minimum adjacent swaps needed to sort an alternating row.

    Each light disk has to pass every dark disk to its right, which adds up
    to 0 + 1 + ... + (k - 1).
    """
    return light_count * (light_count - 1) // 2


class DiskError(Exception):
    """Base class for all disksort errors."""


class DiskIndexError(DiskError, IndexError):
    """Raised when a row is read or swapped outside its bounds."""

    def __init__(self, index: int, total_count: int):
        self.index = index
        self.total_count = total_count
        super().__init__(
            f"Disk index {index} out of range for a row of {total_count} disks"
        )


class InvalidLightCountError(DiskError, ValueError):
    """Raised when a row is built with fewer than one light disk."""

    def __init__(self, light_count):
        self.light_count = light_count
        super().__init__(f"light_count must be a positive integer, got {light_count!r}")


class NotAlternatingError(DiskError, ValueError):
    """Raised when a sorter receives a row that is not in alternating order."""

    def __init__(self, row_text: str):
        self.row_text = row_text
        super().__init__(f"Row is not alternating: {row_text}")


class DiskParseError(DiskError, ValueError):
    """Raised when text or colors cannot be turned into a valid row."""


class AlgorithmUnavailableError(DiskError):
    """Raised when a request names an algorithm that is not registered."""

    def __init__(self, algorithm: str, reason: str):
        self.algorithm = algorithm
        self.reason = reason
        super().__init__(f"Algorithm '{algorithm}' is {reason}")
