from __future__ import annotations

from .io import read_pairs_csv
from .loggers import get_logger
from .seeding import make_rng

__all__ = ["get_logger", "make_rng", "read_pairs_csv"]
