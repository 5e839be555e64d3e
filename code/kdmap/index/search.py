from __future__ import annotations

from typing import List, Optional, Tuple

from .nodes import KDNode, Pair

__all__ = ["search", "in_box", "range_search"]

Corner = Tuple[str, int]


def search(node: Optional[KDNode], key: str) -> Optional[int]:
    """Return the value stored under ``key`` or None.

    Key-axis nodes prune to one child. Value-axis nodes say nothing about
    keys, so both children are searched and the left result wins.
    """
    if node is None:
        return None

    if node.point.key == key:
        return node.point.value

    if node.axis:
        if key < node.point.key:
            return search(node.left, key)
        return search(node.right, key)

    found = search(node.left, key)
    if found is not None:
        return found
    return search(node.right, key)


def in_box(point: Pair, start: Corner, end: Corner) -> bool:
    return start[0] <= point.key < end[0] and start[1] <= point.value < end[1]


def _range(node: Optional[KDNode], start: Corner, end: Corner, found: List[Pair]) -> None:
    if node is None:
        return
    if node.is_leaf:
        if in_box(node.point, start, end):
            found.append(node.point)
        return

    lo, hi = (start[0], end[0]) if node.axis else (start[1], end[1])
    split = node.split_value
    if lo <= split < hi:
        _range(node.left, start, end, found)
        _range(node.right, start, end, found)
    elif split < lo:
        # left subtree is <= split < lo
        _range(node.right, start, end, found)
    else:
        # right subtree is >= split >= hi
        _range(node.left, start, end, found)


def range_search(root: Optional[KDNode], start: Corner, end: Corner) -> List[Pair]:
    """Collect leaves inside ``[start.key, end.key) x [start.value, end.value)``."""
    found: List[Pair] = []
    _range(root, start, end, found)
    return found
