"""Tests for the left-to-right and lawnmower sorters."""
import numpy as np
import pytest

from disksort.algorithms.lawnmower import sort_lawnmower
from disksort.algorithms.left_to_right import sort_left_to_right
from disksort.disks import DiskRow
from disksort.models import NotAlternatingError, optimal_swap_count

SORTERS = [sort_left_to_right, sort_lawnmower]


@pytest.fixture(params=SORTERS, ids=["left_to_right", "lawnmower"])
def sorter(request):
    return request.param


@pytest.mark.parametrize("k", range(1, 11))
def test_output_is_sorted(sorter, k):
    """Rows of length 2..20 come out sorted."""
    result = sorter(DiskRow(k))
    after = result.after()
    assert after.is_sorted()
    assert after.total_count() == 2 * k
    colors = np.array([int(c) for c in after])
    np.testing.assert_array_equal(colors, np.sort(colors))


@pytest.mark.parametrize("k", range(1, 11))
def test_swap_count_is_optimal(sorter, k):
    assert sorter(DiskRow(k)).swap_count() == k * (k - 1) // 2 == optimal_swap_count(k)


@pytest.mark.parametrize("k, swaps, final", [
    (1, 0, "D L"),
    (2, 1, "D D L L"),
    (3, 3, "D D D L L L"),
    (4, 6, "D D D D L L L L"),
])
def test_worked_examples(sorter, k, swaps, final):
    result = sorter(DiskRow(k))
    assert result.swap_count() == swaps
    assert result.after().to_string() == final


def test_input_not_mutated(sorter):
    row = DiskRow(5)
    sorter(row)
    assert row == DiskRow(5)
    assert row.is_alternating()


def test_rejects_non_alternating(sorter):
    row = DiskRow(3)
    row.swap(1)
    with pytest.raises(NotAlternatingError):
        sorter(row)


def test_rejects_light_first(sorter):
    with pytest.raises(NotAlternatingError):
        sorter(DiskRow.from_string("L D L D"))


def test_already_sorted_is_idempotent(sorter):
    """The only row both alternating and sorted is D L; sorting it changes nothing."""
    row = DiskRow(1)
    result = sorter(row)
    assert result.swap_count() == 0
    assert result.after() == row


def test_sorting_a_sorted_result_again_is_rejected(sorter):
    """A sorted row of four or more disks is no longer a valid sorter input."""
    result = sorter(DiskRow(3))
    with pytest.raises(NotAlternatingError):
        sorter(result.after())


def test_both_sorters_agree():
    for k in range(1, 16):
        a = sort_left_to_right(DiskRow(k))
        b = sort_lawnmower(DiskRow(k))
        assert a == b


def test_large_row(sorter):
    result = sorter(DiskRow(60))
    assert result.after().is_sorted()
    assert result.swap_count() == 60 * 59 // 2


def test_sorters_are_registered():
    assert sort_left_to_right._algorithm_spec["name"] == "left_to_right"
    assert sort_lawnmower._algorithm_spec["name"] == "lawnmower"
