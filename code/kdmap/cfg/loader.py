from __future__ import annotations

import sys
from dataclasses import MISSING, asdict, fields, is_dataclass
from pathlib import Path
from typing import Any, Mapping, MutableMapping, Type, Union, get_args, get_origin, get_type_hints

import yaml

from .schema import KDMapConfig


class ConfigError(ValueError):
    pass


try:
    from types import UnionType as _UnionType
except ImportError:
    _UnionType = None

_UNION_TYPES = (Union,) + ((_UnionType,) if _UnionType is not None else ())


def load_config(path: Union[str, Path]) -> KDMapConfig:
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"Config file not found: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read config file: {p}") from exc
    return loads_config(text)


def loads_config(yaml_text: str) -> KDMapConfig:
    try:
        data = yaml.safe_load(yaml_text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid configuration data: {exc}") from exc

    if not isinstance(data, Mapping):
        raise ConfigError(f"Top-level configuration must be a mapping, got {type(data).__name__}")

    cfg = _from_mapping(KDMapConfig, data, path="config")
    validate_config(cfg)
    return cfg


def validate_config(cfg: KDMapConfig) -> None:
    seed = cfg.seed
    if seed is not None:
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise ConfigError(f"seed must be an int or null, got {seed!r}")
        if seed < 0:
            raise ConfigError(f"seed must be >= 0, got {seed}")
    if not isinstance(cfg.reject_duplicate_keys, bool):
        raise ConfigError("reject_duplicate_keys must be a bool")
    if not isinstance(cfg.log_build_stats, bool):
        raise ConfigError("log_build_stats must be a bool")


def to_dict(cfg: KDMapConfig) -> dict:
    return asdict(cfg)


def _from_mapping(cls: Type[Any], data: Mapping[str, Any], path: str) -> Any:
    if not is_dataclass(cls):
        raise ConfigError(f"Internal error: target {cls!r} is not a dataclass")

    allowed = {f.name for f in fields(cls)}
    unknown = set(data.keys()) - allowed
    if unknown:
        pretty = ", ".join(sorted(map(str, unknown)))
        raise ConfigError(f"Unknown field(s) at {path}: {pretty}")

    mod = sys.modules.get(cls.__module__)
    type_hints = get_type_hints(cls, globalns=mod.__dict__ if mod is not None else None)

    kwargs: MutableMapping[str, Any] = {}
    for f in fields(cls):
        if f.name in data:
            target = type_hints.get(f.name, f.type)
            kwargs[f.name] = _coerce_value_to_type(data[f.name], target, f"{path}.{f.name}")
        elif f.default is MISSING and f.default_factory is MISSING:
            raise ConfigError(f"Missing required field: {path}.{f.name}")

    try:
        return cls(**kwargs)
    except TypeError as exc:
        raise ConfigError(f"Failed to construct {cls.__name__} at {path}: {exc}") from exc


def _coerce_value_to_type(value: Any, typ: Any, path: str) -> Any:
    origin = get_origin(typ)
    args = get_args(typ)

    if origin in _UNION_TYPES:
        if value is None and type(None) in args:
            return None
        last_err: Exception | None = None
        for a in args:
            if a is type(None):
                continue
            try:
                return _coerce_value_to_type(value, a, path)
            except ConfigError as exc:
                last_err = exc
        raise ConfigError(f"Could not coerce value at {path}: {last_err}") from last_err

    if typ is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            low = value.strip().lower()
            if low in {"1", "true", "yes", "y", "on"}:
                return True
            if low in {"0", "false", "no", "n", "off"}:
                return False
        raise ConfigError(f"Expected bool at {path}, got {value!r}")

    if typ is int:
        if isinstance(value, bool):
            raise ConfigError(f"Expected int at {path}, got bool")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                pass
        raise ConfigError(f"Expected int at {path}, got {value!r}")

    return value
