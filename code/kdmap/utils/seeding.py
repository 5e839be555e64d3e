from __future__ import annotations

import numpy as np

__all__ = ["make_rng"]


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Generator for pivot selection; ``None`` seeds from OS entropy."""
    return np.random.default_rng(None if seed is None else int(seed))
