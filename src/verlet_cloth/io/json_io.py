# MIT License (see LICENSE)
"""
JSON serialization of simulation configuration.

Only the ClothConfig is stored; particle and constraint state is never
written. Every key is optional and falls back to the ClothConfig default.

JSON Schema Overview:
---------------------
{
  "width": float,              # Viewport width, default: 1920
  "height": float,             # Viewport height, default: 1080
  "gravity": float,            # Gravity along +y, default: 9.81
  "dt": float,                 # Time step, default: 0.1
  "rows": int,                 # Particle rows, default: 20
  "cols": int,                 # Particle columns, default: 20
  "spacing": float,            # Rest distance, default: 30
  "origin": [x, y],            # Particle (0, 0), default: [width/3, height/4]
  "click_tolerance": float,    # Tear radius, default: 30
  "solver_iters": int          # Relaxation passes, default: 5
}
"""
from __future__ import annotations
import json
from dataclasses import fields
from typing import Any

from ..config import ClothConfig

_KEYS = frozenset(f.name for f in fields(ClothConfig))


def load_config_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a config file without validation.

    Args:
        path: Path to the JSON file.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def config_from_json(data: dict[str, Any]) -> ClothConfig:
    """
    Build a ClothConfig from a decoded JSON object.

    Raises:
        ValueError: On unknown keys or invalid values.
    """
    unknown = set(data) - _KEYS
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")

    kwargs = dict(data)
    if kwargs.get("origin") is not None:
        ox, oy = kwargs["origin"]
        kwargs["origin"] = (float(ox), float(oy))
    for key in ("rows", "cols", "solver_iters"):
        if key in kwargs:
            value = kwargs[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not float(value).is_integer():
                raise ValueError(f"{key} must be an integer, got {value!r}")
            kwargs[key] = int(value)
    return ClothConfig(**kwargs)


def config_to_json(config: ClothConfig) -> dict[str, Any]:
    """Convert a ClothConfig to a JSON-compatible dict."""
    return {
        "width": float(config.width),
        "height": float(config.height),
        "gravity": float(config.gravity),
        "dt": float(config.dt),
        "rows": int(config.rows),
        "cols": int(config.cols),
        "spacing": float(config.spacing),
        "origin": [float(config.origin[0]), float(config.origin[1])],
        "click_tolerance": float(config.click_tolerance),
        "solver_iters": int(config.solver_iters),
    }


def load_config(path: str) -> ClothConfig:
    """Load and validate a ClothConfig from a JSON file."""
    return config_from_json(load_config_raw(path))


def save_config(config: ClothConfig, path: str) -> None:
    """
    Save a ClothConfig to a JSON file.

    Args:
        config: Config to save.
        path: Output path (overwritten if it exists).
    """
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_json(config), f, indent=2)
