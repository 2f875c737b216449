"""YAML config loader with environment override and runtime get/set."""

import json
import os
from pathlib import Path
from typing import Any

import yaml

from station.config.schema import StationConfig

DB_PATH_ENV = "STATION_DB_PATH"


def load_config(
    path: str | Path | None = None, apply_env: bool = True
) -> StationConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields defaults. STATION_DB_PATH, when set and
    apply_env is true, replaces storage.db_path.
    """
    raw: dict[str, Any] = {}
    if path is not None and Path(path).exists():
        with open(path) as f:
            raw = yaml.safe_load(f) or {}

    db_path = os.environ.get(DB_PATH_ENV) if apply_env else None
    if db_path:
        raw.setdefault("storage", {})["db_path"] = db_path

    return StationConfig(**raw)


def save_config(config: StationConfig, path: str | Path) -> None:
    """Write config back to a YAML file, creating the parent directory."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = json.loads(config.model_dump_json())
    with open(path, "w") as f:
        yaml.safe_dump(data, f, sort_keys=False)


def get_config_value(config: StationConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'display.scale'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: StationConfig, dotted_key: str, value: Any) -> StationConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new StationConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if part not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    old_value = target[parts[-1]]
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return StationConfig(**data)
