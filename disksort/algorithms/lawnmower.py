"""Sorter: Lawnmower."""
from disksort.algorithm_api import algorithm, logger
from disksort.disks import DiskRow, SortedDisks
from disksort.models import NotAlternatingError


def _forward_pass(row: DiskRow, lo: int, hi: int) -> int:
    """Bubble light disks right across [lo, hi). Returns the swap count."""
    swaps = 0
    for i in range(lo, hi - 1):
        if row.get(i) > row.get(i + 1):
            row.swap(i)
            swaps += 1
    return swaps


def _backward_pass(row: DiskRow, lo: int, hi: int) -> int:
    """Bubble dark disks left across [lo, hi). Returns the swap count."""
    swaps = 0
    for i in range(hi - 2, lo - 1, -1):
        if row.get(i) > row.get(i + 1):
            row.swap(i)
            swaps += 1
    return swaps


@algorithm(
    name="lawnmower",
    label="Lawnmower",
    description="Alternating-direction passes over a shrinking window",
    doc="Sweeps left to right, then right to left, dropping the settled disk at each end "
        "of the window after every pass. Stops as soon as a pass makes no swap.",
)
def sort_lawnmower(before: DiskRow) -> SortedDisks:
    if not before.is_alternating():
        raise NotAlternatingError(before.to_string())

    row = before.copy()
    lo, hi = 0, row.total_count()
    swaps = 0
    rounds = 0
    while True:
        rounds += 1
        forward = _forward_pass(row, lo, hi)
        swaps += forward
        if forward == 0:
            break
        hi -= 1  # rightmost disk of the window is settled

        backward = _backward_pass(row, lo, hi)
        swaps += backward
        lo += 1  # leftmost disk of the window is settled
        logger.debug(f"round {rounds}: {forward} forward, {backward} backward swaps")
        if backward == 0:
            break

    logger.info(f"{row.total_count()} disks sorted with {swaps} swaps in {rounds} rounds")
    return SortedDisks(row, swaps)
