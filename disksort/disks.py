"""Row-of-disks data model for the alternating disks problem.

A row holds 2k disks. It starts out alternating (dark at index 0, light at
index 1, ...) and the only way to change it is to swap two neighbours.
"""
from enum import IntEnum
from typing import Iterable, Iterator

import numpy as np

from disksort.models import (
    DiskIndexError,
    DiskParseError,
    InvalidLightCountError,
)


class DiskColor(IntEnum):
    """Color of one disk. The integer values give the sort order dark < light."""
    DARK = 0
    LIGHT = 1

    @property
    def code(self) -> str:
        return "L" if self is DiskColor.LIGHT else "D"

    @classmethod
    def from_code(cls, code: str) -> "DiskColor":
        if code == "D":
            return cls.DARK
        if code == "L":
            return cls.LIGHT
        raise DiskParseError(f"Unknown disk code '{code}' (expected 'D' or 'L')")


def _to_color(value) -> DiskColor:
    """Accept a DiskColor or an integral 0/1; floats, bools and None are rejected."""
    if isinstance(value, DiskColor):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise DiskParseError(f"Invalid disk color {value!r}: expected DiskColor or 0/1")
    try:
        return DiskColor(int(value))
    except ValueError as e:
        raise DiskParseError(f"Invalid disk color {value!r}: {e}") from e


class DiskRow:
    """A fixed-length row of dark and light disks."""

    def __init__(self, light_count: int):
        if (
            isinstance(light_count, bool)
            or not isinstance(light_count, (int, np.integer))
            or light_count < 1
        ):
            raise InvalidLightCountError(light_count)
        self._colors = np.full(2 * int(light_count), DiskColor.DARK, dtype=np.int8)
        self._colors[1::2] = DiskColor.LIGHT

    # --- Alternate constructors ---

    @classmethod
    def from_colors(cls, colors: Iterable) -> "DiskRow":
        """Build a row from an explicit color sequence.

        The row must be non-empty, of even length, and hold as many dark
        disks as light ones.
        """
        values = [_to_color(c) for c in colors]
        if not values or len(values) % 2 != 0:
            raise DiskParseError(
                f"A row needs an even, non-zero number of disks, got {len(values)}"
            )
        lights = sum(1 for c in values if c is DiskColor.LIGHT)
        if lights * 2 != len(values):
            raise DiskParseError(
                f"A row needs equal dark and light counts, got "
                f"{len(values) - lights} dark and {lights} light"
            )
        row = cls.__new__(cls)
        row._colors = np.array(values, dtype=np.int8)
        return row

    @classmethod
    def from_string(cls, text: str) -> "DiskRow":
        """Parse the format produced by to_string(), e.g. "D L D L"."""
        return cls.from_colors(DiskColor.from_code(tok) for tok in text.split())

    # --- Counts and access ---

    def total_count(self) -> int:
        return int(self._colors.shape[0])

    def light_count(self) -> int:
        return self.total_count() // 2

    def dark_count(self) -> int:
        return self.light_count()

    def is_index(self, index: int) -> bool:
        return 0 <= index < self.total_count()

    def get(self, index: int) -> DiskColor:
        if not self.is_index(index):
            raise DiskIndexError(index, self.total_count())
        return DiskColor(int(self._colors[index]))

    def swap(self, left_index: int) -> None:
        """Swap the disk at left_index with its right-hand neighbour."""
        right_index = left_index + 1
        if not self.is_index(left_index):
            raise DiskIndexError(left_index, self.total_count())
        if not self.is_index(right_index):
            raise DiskIndexError(right_index, self.total_count())
        c = self._colors
        c[left_index], c[right_index] = c[right_index], c[left_index]

    def copy(self) -> "DiskRow":
        row = DiskRow.__new__(DiskRow)
        row._colors = self._colors.copy()
        return row

    # --- Predicates ---

    def is_alternating(self) -> bool:
        """True when the row reads D L D L ... from index 0 to the end."""
        c = self._colors
        if c[0] != DiskColor.DARK or c[0] == c[1]:
            return False
        return bool(np.all(c[:-2] == c[2:]))

    def is_sorted(self) -> bool:
        """True when every dark disk is in the left half and every light disk in the right."""
        half = self.total_count() // 2
        c = self._colors
        return bool(np.all(c[:half] == DiskColor.DARK) and np.all(c[half:] == DiskColor.LIGHT))

    # --- Rendering and comparison ---

    def to_string(self) -> str:
        return " ".join(DiskColor(int(c)).code for c in self._colors)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"DiskRow('{self.to_string()}')"

    def __len__(self) -> int:
        return self.total_count()

    def __iter__(self) -> Iterator[DiskColor]:
        return (DiskColor(int(c)) for c in self._colors)

    def __eq__(self, other) -> bool:
        if not isinstance(other, DiskRow):
            return NotImplemented
        return bool(np.array_equal(self._colors, other._colors))

    __hash__ = None  # mutable through swap()


class SortedDisks:
    """Output of a sort: the final row and how many swaps it took."""

    __slots__ = ("_after", "_swap_count")

    def __init__(self, after: DiskRow, swap_count: int):
        if swap_count < 0:
            raise ValueError(f"swap_count must be non-negative, got {swap_count}")
        self._after = after.copy()
        self._swap_count = int(swap_count)

    def after(self) -> DiskRow:
        return self._after.copy()

    def swap_count(self) -> int:
        return self._swap_count

    def __eq__(self, other) -> bool:
        if not isinstance(other, SortedDisks):
            return NotImplemented
        return self._after == other._after and self._swap_count == other._swap_count

    __hash__ = None

    def __repr__(self) -> str:
        return f"SortedDisks(after='{self._after}', swap_count={self._swap_count})"
