from pathlib import Path
from typing import Any, Dict

import yaml

_yaml_cache: Dict[str, Dict[str, Any]] = {}


def clear_yaml_cache() -> None:
    _yaml_cache.clear()


def _read_mapping(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"YAML file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_yaml(path: Path) -> Dict[str, Any]:
    path = Path(path)
    key = str(path.resolve())
    if key in _yaml_cache:
        return dict(_yaml_cache[key])

    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    data = _read_mapping(path)

    # Included files are merged first; keys in the including file win.
    merged: Dict[str, Any] = {}
    for include_file in data.pop("include", None) or []:
        merged.update(load_yaml(path.parent / include_file))
    merged.update(data)

    _yaml_cache[key] = merged
    return dict(merged)
