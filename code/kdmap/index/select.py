from __future__ import annotations

from typing import List, MutableSequence

import numpy as np

from .nodes import Pair, axis_field

__all__ = ["choose_pivot", "partition", "quick_select"]


def choose_pivot(rng: np.random.Generator, left: int, right: int) -> int:
    return int(rng.integers(left, right + 1))


def partition(arr: MutableSequence[Pair], p: int, left: int, right: int, axis: bool) -> int:
    """Lomuto partition of ``arr[left:right + 1]`` around ``arr[p]``.

    Returns the final index of the pivot. Elements strictly less than the
    pivot on ``axis`` end up before it; everything else after it.
    """
    arr[p], arr[right] = arr[right], arr[p]
    pivot = axis_field(arr[right], axis)
    j = left
    for i in range(left, right):
        if axis_field(arr[i], axis) < pivot:
            arr[i], arr[j] = arr[j], arr[i]
            j += 1
    arr[j], arr[right] = arr[right], arr[j]
    return j


def quick_select(
    arr: List[Pair],
    k: int,
    left: int,
    right: int,
    axis: bool,
    rng: np.random.Generator,
) -> Pair:
    """Place the rank-``k`` element of ``arr[left:right + 1]`` at index ``k``.

    After the call every element in ``[left, k)`` is <= ``arr[k]`` and every
    element in ``(k, right]`` is >= ``arr[k]`` on the chosen axis.
    """
    if not left <= k <= right:
        raise IndexError(f"rank {k} outside range [{left}, {right}]")

    while left < right:
        i = partition(arr, choose_pivot(rng, left, right), left, right, axis)
        if i == k:
            return arr[k]
        if i > k:
            right = i - 1
        else:
            left = i + 1
    return arr[left]
