"""disksort: the alternating disks puzzle and two adjacent-swap sorters."""
__version__ = "1.0.0"

from disksort.disks import DiskColor, DiskRow, SortedDisks
from disksort.models import (
    AlgorithmUnavailableError,
    DiskError,
    DiskIndexError,
    DiskParseError,
    InvalidLightCountError,
    NotAlternatingError,
    SortReport,
    SortRequest,
    optimal_swap_count,
)
from disksort.algorithms.left_to_right import sort_left_to_right
from disksort.algorithms.lawnmower import sort_lawnmower

__all__ = [
    "AlgorithmUnavailableError",
    "DiskColor",
    "DiskError",
    "DiskIndexError",
    "DiskParseError",
    "DiskRow",
    "InvalidLightCountError",
    "NotAlternatingError",
    "SortReport",
    "SortRequest",
    "SortedDisks",
    "optimal_swap_count",
    "sort_lawnmower",
    "sort_left_to_right",
]
