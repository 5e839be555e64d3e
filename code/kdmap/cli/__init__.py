from __future__ import annotations

from .common import build_map, format_pair, resolve_config, validate_axis

__all__ = ["build_map", "format_pair", "resolve_config", "validate_axis"]
