from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

KEY_AXIS = True
VALUE_AXIS = False


class Pair(NamedTuple):
    key: str
    value: int


def axis_name(axis: bool) -> str:
    return "key" if axis else "value"


def axis_field(pair: Pair, axis: bool) -> str | int:
    return pair.key if axis else pair.value


@dataclass(frozen=True)
class KDNode:
    """A node of the key/value k-d tree.

    Leaves carry one input pair and no children. Split nodes carry the pivot
    pair chosen by median selection, the axis they split on, and both
    children; the pivot also appears as a leaf in the right subtree.
    """

    point: Pair
    axis: bool
    left: Optional["KDNode"] = None
    right: Optional["KDNode"] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    @property
    def split_value(self) -> str | int:
        return axis_field(self.point, self.axis)
