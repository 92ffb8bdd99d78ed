# MIT License (see LICENSE)
"""
Input/Output utilities.

This subpackage provides JSON load/save of ClothConfig. Simulation state is
not serialized.

Typical usage:
    from verlet_cloth.io import load_config, save_config

    config = load_config("cloth.json")
    save_config(config, "copy.json")
"""
from .json_io import (
    config_from_json,
    config_to_json,
    load_config,
    load_config_raw,
    save_config,
)

__all__ = [
    # Loading
    "load_config",
    "load_config_raw",
    # Saving
    "save_config",
    # Serialization
    "config_from_json",
    "config_to_json",
]
