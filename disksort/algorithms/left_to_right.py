"""Sorter: Left-to-Right."""
from disksort.algorithm_api import algorithm, logger
from disksort.disks import DiskRow, SortedDisks
from disksort.models import NotAlternatingError


@algorithm(
    name="left_to_right",
    label="Left-to-Right",
    description="Repeated left-to-right bubble passes",
    doc="Scans the row left to right total_count() - 1 times, swapping every light disk "
        "that sits directly before a dark one. Reaches the minimum number of swaps.",
)
def sort_left_to_right(before: DiskRow) -> SortedDisks:
    if not before.is_alternating():
        raise NotAlternatingError(before.to_string())

    row = before.copy()
    n = row.total_count()
    swaps = 0
    for p in range(n - 1):
        pass_swaps = 0
        for i in range(n - 1):
            if row.get(i) > row.get(i + 1):
                row.swap(i)
                pass_swaps += 1
        swaps += pass_swaps
        logger.debug(f"pass {p + 1}/{n - 1}: {pass_swaps} swaps")
    logger.info(f"{n} disks sorted with {swaps} swaps")
    return SortedDisks(row, swaps)
