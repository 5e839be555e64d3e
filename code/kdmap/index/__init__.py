"""Alternating-axis k-d tree over (str key, int value) pairs.

Exports :class:`KDMap` along with the node types it is built from.
"""

from __future__ import annotations

from .kdmap import KDMap
from .nodes import KEY_AXIS, VALUE_AXIS, KDNode, Pair

__all__ = ["KDMap", "KDNode", "Pair", "KEY_AXIS", "VALUE_AXIS"]
