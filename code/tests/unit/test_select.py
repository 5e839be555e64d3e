from __future__ import annotations

import numpy as np
import pytest

from kdmap.index.nodes import KEY_AXIS, VALUE_AXIS, Pair, axis_field
from kdmap.index.select import choose_pivot, partition, quick_select


def _pairs(n: int, seed: int = 0) -> list[Pair]:
    rng = np.random.default_rng(seed)
    values = rng.integers(-20, 20, size=n)
    return [Pair(f"k{int(i):03d}", int(v)) for i, v in zip(rng.permutation(n), values)]


def test_choose_pivot_stays_in_range() -> None:
    rng = np.random.default_rng(1)
    picks = {choose_pivot(rng, 3, 7) for _ in range(500)}
    assert picks == {3, 4, 5, 6, 7}


def test_partition_splits_on_strict_less_than() -> None:
    arr = [Pair("c", 5), Pair("a", 9), Pair("e", 5), Pair("b", 1), Pair("d", 7)]
    j = partition(arr, 0, 0, len(arr) - 1, VALUE_AXIS)

    assert arr[j] == Pair("c", 5)
    assert all(p.value < 5 for p in arr[:j])
    assert all(p.value >= 5 for p in arr[j + 1 :])
    assert sorted(arr) == sorted(
        [Pair("c", 5), Pair("a", 9), Pair("e", 5), Pair("b", 1), Pair("d", 7)]
    )


@pytest.mark.parametrize("axis", [KEY_AXIS, VALUE_AXIS])
def test_quick_select_places_rank_element(axis: bool) -> None:
    rng = np.random.default_rng(7)
    for n in (2, 3, 10, 33):
        base = _pairs(n, seed=n)
        for k in range(n):
            arr = list(base)
            got = quick_select(arr, k, 0, n - 1, axis, rng)
            expected = sorted(axis_field(p, axis) for p in base)[k]

            assert axis_field(got, axis) == expected
            assert arr[k] == got
            assert all(axis_field(p, axis) <= expected for p in arr[:k])
            assert all(axis_field(p, axis) >= expected for p in arr[k + 1 :])
            assert sorted(arr) == sorted(base)


def test_quick_select_respects_subrange() -> None:
    rng = np.random.default_rng(3)
    arr = [Pair(k, i) for i, k in enumerate("zyxwvutsrq")]
    untouched = arr[:3] + arr[8:]

    got = quick_select(arr, 5, 3, 7, KEY_AXIS, rng)

    assert got.key == sorted("wvuts")[2]
    assert arr[:3] + arr[8:] == untouched


def test_quick_select_single_element_range() -> None:
    arr = [Pair("a", 1), Pair("b", 2)]
    assert quick_select(arr, 1, 1, 1, KEY_AXIS, np.random.default_rng(0)) == Pair("b", 2)


def test_quick_select_rejects_rank_outside_range() -> None:
    arr = [Pair("a", 1), Pair("b", 2)]
    with pytest.raises(IndexError):
        quick_select(arr, 2, 0, 1, KEY_AXIS, np.random.default_rng(0))
