from __future__ import annotations

from .schema import KDMapConfig
from .loader import ConfigError, load_config, loads_config, to_dict, validate_config

__all__ = [
    "KDMapConfig",
    "ConfigError",
    "load_config",
    "loads_config",
    "validate_config",
    "to_dict",
]
