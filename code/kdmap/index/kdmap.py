from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

import numpy as np

from kdmap.cfg.loader import validate_config
from kdmap.cfg.schema import KDMapConfig
from kdmap.errors import DuplicateKeyError
from kdmap.utils.loggers import log_build_summary, log_duplicate_keys_allowed
from kdmap.utils.seeding import make_rng

from .builder import PairLike, build_tree, find_duplicate_keys, normalize_pairs
from .nodes import KDNode, Pair
from .search import range_search, search
from .traverse import as_dict, iter_leaves, key_splits, max_depth, value_splits


class KDMap:
    """Immutable string -> int map indexed as a two-dimensional k-d tree.

    The tree alternates between splitting on keys (root level) and values,
    which supports exact-key lookup as well as half-open rectangle queries
    over (key, value) space. Nothing can be inserted or removed after
    construction.

    Duplicate keys are rejected unless ``config.reject_duplicate_keys`` is
    False, in which case ``get`` for a duplicated key returns one of its
    values without any guarantee about which.
    """

    __slots__ = ("_root", "_size")

    def __init__(
        self,
        pairs: Iterable[PairLike],
        *,
        config: KDMapConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        cfg = config if config is not None else KDMapConfig()
        if config is not None:
            validate_config(cfg)
        points = normalize_pairs(pairs)

        dups = find_duplicate_keys(points)
        if dups:
            if cfg.reject_duplicate_keys:
                raise DuplicateKeyError(dups[0])
            log_duplicate_keys_allowed(dups)

        gen = rng if rng is not None else make_rng(cfg.seed)
        self._size = len(points)
        self._root: KDNode = build_tree(points, gen)

        if cfg.log_build_stats:
            log_build_summary(
                self._size,
                max_depth(self._root),
                len(self.key_splits()),
                len(self.value_splits()),
            )

    @classmethod
    def from_config(cls, pairs: Iterable[PairLike], cfg: KDMapConfig) -> "KDMap":
        return cls(pairs, config=cfg)

    @property
    def root(self) -> KDNode:
        return self._root

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __getitem__(self, key: str) -> int:
        value = self.get(key)
        if value is None:
            raise KeyError(key)
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self._size})"

    def all_pairs(self) -> List[Pair]:
        return list(iter_leaves(self._root))

    def get(self, key: str) -> Optional[int]:
        """Value stored under ``key``, or None when absent."""
        return search(self._root, key)

    def range(self, start: Tuple[str, int], end: Tuple[str, int]) -> List[Pair]:
        """Pairs with ``start[0] <= key < end[0]`` and ``start[1] <= value < end[1]``."""
        return range_search(self._root, tuple(start), tuple(end))

    def key_splits(self) -> List[str]:
        return key_splits(self._root)

    def value_splits(self) -> List[int]:
        return value_splits(self._root)

    def max_depth(self) -> int:
        return max_depth(self._root)

    def as_dict(self) -> dict:
        return {"size": self._size, "root": as_dict(self._root)}
