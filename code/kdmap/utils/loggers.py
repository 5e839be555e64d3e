from __future__ import annotations

import logging
from logging import Logger
from typing import Sequence

_DEFAULT_LOGGER_NAME = "kdmap"
_HANDLER_NAME = "kdmap.stream"
_LOG_FORMAT = "[%(levelname)s] %(message)s"


def get_logger(name: str | None = None) -> Logger:
    base = logging.getLogger(_DEFAULT_LOGGER_NAME)
    if not any(h.get_name() == _HANDLER_NAME for h in base.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        base.addHandler(handler)
        base.setLevel(logging.INFO)
        base.propagate = False
    return base if name is None else base.getChild(str(name))


def log_build_summary(n_pairs: int, depth: int, n_key_splits: int, n_value_splits: int) -> None:
    get_logger("build").info(
        "Built KDMap: pairs=%d depth=%d key_splits=%d value_splits=%d",
        n_pairs,
        depth,
        n_key_splits,
        n_value_splits,
    )


def log_duplicate_keys_allowed(keys: Sequence[str]) -> None:
    shown = ", ".join(repr(k) for k in list(keys)[:5])
    more = f" (+{len(keys) - 5} more)" if len(keys) > 5 else ""
    get_logger("build").warning(
        "Duplicate keys accepted (reject_duplicate_keys=False): %s%s; "
        "get() for these keys returns an unspecified one of their values.",
        shown,
        more,
    )


def log_pairs_loaded(n_pairs: int, source: str) -> None:
    get_logger("io").debug("Loaded %d pairs from %s", n_pairs, source)
