from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

DEFAULTS: dict[str, Any] = {
    "format": "text",
    "intervals": False,
    "log_level": "WARNING",
    "in": None,
    "out": None,
}


def load_config(path: str | Path | None) -> dict[str, Any]:
    if not path:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return cfg


def resolve_option(
    cli_value: Any,
    cfg: dict[str, Any] | None,
    key: str,
    *,
    default: Any = None,
) -> Any:
    if cli_value is not None:
        return cli_value
    if cfg:
        section = cfg.get("solve")
        if isinstance(section, dict) and key in section:
            return section[key]
        if key in cfg:
            return cfg[key]
    return default


def merge_config(cfg: dict[str, Any] | None, overrides: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = {}
    for key in sorted(set(DEFAULTS) | set(overrides)):
        merged[key] = resolve_option(overrides.get(key), cfg, key, default=DEFAULTS.get(key))
    return merged
