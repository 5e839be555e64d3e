from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

import typer

from kdmap.cfg import ConfigError, KDMapConfig, load_config, validate_config
from kdmap.errors import KDMapError
from kdmap.index import KDMap
from kdmap.utils.io import read_pairs_csv

AXES = ("key", "value", "both")


def validate_axis(axis: Any, *, option: str = "--axis") -> str:
    """Return "key", "value" or "both"; "keys"/"values" and "k"/"v" are accepted."""
    ax = str(axis).strip().lower()
    ax = {"k": "key", "keys": "key", "v": "value", "values": "value"}.get(ax, ax)
    if ax not in AXES:
        raise typer.BadParameter(f"{option} must be one of: {', '.join(AXES)}; got {axis!r}")
    return ax


def resolve_config(config: Path | None, seed: int | None) -> KDMapConfig:
    try:
        cfg = load_config(config) if config is not None else KDMapConfig()
        if seed is not None:
            cfg = replace(cfg, seed=int(seed))
            validate_config(cfg)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config/--seed") from exc
    return cfg


def build_map(pairs_csv: Path, *, config: Path | None, seed: int | None, header: bool) -> KDMap:
    cfg = resolve_config(config, seed)
    try:
        pairs = read_pairs_csv(pairs_csv, header=header)
        return KDMap.from_config(pairs, cfg)
    except KDMapError as exc:
        raise typer.BadParameter(str(exc), param_hint="PAIRS_CSV") from exc


def format_pair(key: str, value: int) -> str:
    return f"{key},{value}"
