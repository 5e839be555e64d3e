from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KDMapConfig:
    seed: int | None = None
    reject_duplicate_keys: bool = True
    log_build_stats: bool = False
