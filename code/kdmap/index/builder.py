from __future__ import annotations

from numbers import Integral
from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from kdmap.errors import EmptyInputError, InvalidPairError

from .nodes import KEY_AXIS, KDNode, Pair
from .select import quick_select

__all__ = ["normalize_pairs", "find_duplicate_keys", "build_tree", "median_index"]

PairLike = Union[Pair, Tuple[str, int]]


def _as_pair(item: object, idx: int) -> Pair:
    try:
        key, value = item  # type: ignore[misc]
    except (TypeError, ValueError) as exc:
        raise InvalidPairError(f"pairs[{idx}] must be a (key, value) pair, got {item!r}") from exc
    if not isinstance(key, str):
        raise InvalidPairError(f"pairs[{idx}]: key must be str, got {type(key).__name__}")
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidPairError(f"pairs[{idx}]: value must be int, got {type(value).__name__}")
    return Pair(key, int(value))


def normalize_pairs(pairs: Iterable[PairLike]) -> List[Pair]:
    points = [_as_pair(item, i) for i, item in enumerate(pairs)]
    if not points:
        raise EmptyInputError()
    return points


def find_duplicate_keys(points: Iterable[Pair]) -> List[str]:
    seen: set[str] = set()
    reported: set[str] = set()
    dups: List[str] = []
    for p in points:
        if p.key in seen and p.key not in reported:
            dups.append(p.key)
            reported.add(p.key)
        seen.add(p.key)
    return dups


def median_index(left: int, right: int) -> int:
    # Upper median; the median itself goes to the right half.
    return (left + right + 1) // 2


def _build(
    points: List[Pair], left: int, right: int, axis: bool, rng: np.random.Generator
) -> Optional[KDNode]:
    if left > right:
        return None
    if left == right:
        return KDNode(point=points[left], axis=axis)

    mid = median_index(left, right)
    pivot = quick_select(points, mid, left, right, axis, rng)
    return KDNode(
        point=pivot,
        axis=axis,
        left=_build(points, left, mid - 1, not axis, rng),
        right=_build(points, mid, right, not axis, rng),
    )


def build_tree(
    points: List[Pair], rng: np.random.Generator, axis: bool = KEY_AXIS
) -> KDNode:
    """Build a balanced alternating-axis tree over ``points``.

    ``points`` is reordered in place. The root splits on ``axis`` and each
    level below flips it.
    """
    if not points:
        raise EmptyInputError()
    root = _build(points, 0, len(points) - 1, axis, rng)
    assert root is not None
    return root
