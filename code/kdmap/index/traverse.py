from __future__ import annotations

from typing import Iterator, List, Optional, Tuple

from .nodes import KDNode, Pair, axis_name

__all__ = [
    "iter_leaves",
    "iter_splits",
    "key_splits",
    "value_splits",
    "max_depth",
    "count_nodes",
    "as_dict",
]


def iter_leaves(node: Optional[KDNode]) -> Iterator[Pair]:
    if node is None:
        return
    if node.is_leaf:
        yield node.point
        return
    yield from iter_leaves(node.left)
    yield from iter_leaves(node.right)


def iter_splits(node: Optional[KDNode]) -> Iterator[KDNode]:
    """Pre-order iteration over split (non-leaf) nodes."""
    if node is None or node.is_leaf:
        return
    yield node
    yield from iter_splits(node.left)
    yield from iter_splits(node.right)


def key_splits(root: Optional[KDNode]) -> List[str]:
    return [n.point.key for n in iter_splits(root) if n.axis]


def value_splits(root: Optional[KDNode]) -> List[int]:
    return [n.point.value for n in iter_splits(root) if not n.axis]


def max_depth(root: KDNode) -> int:
    def _walk(n: Optional[KDNode], depth: int) -> int:
        if n is None:
            return depth - 1
        if n.is_leaf:
            return depth
        return max(_walk(n.left, depth + 1), _walk(n.right, depth + 1))

    return _walk(root, 0)


def count_nodes(root: Optional[KDNode]) -> Tuple[int, int]:
    """Return ``(leaves, splits)``."""
    leaves = sum(1 for _ in iter_leaves(root))
    splits = sum(1 for _ in iter_splits(root))
    return leaves, splits


def as_dict(node: Optional[KDNode]) -> Optional[dict]:
    if node is None:
        return None
    d = {
        "is_leaf": node.is_leaf,
        "axis": axis_name(node.axis),
        "key": node.point.key,
        "value": node.point.value,
    }
    if not node.is_leaf:
        d["left"] = as_dict(node.left)
        d["right"] = as_dict(node.right)
    return d
