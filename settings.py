# settings.py
"""Application settings (settings.yml) with built-in defaults."""

from __future__ import annotations

import copy
import os
from typing import Any, Dict

import yaml

from config_validation import ConfigurationError

DEFAULT_SETTINGS_FILE = "settings.yml"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "radios_file": "radios.json",
    "logging": {
        "log_dir": "logs",
        "debug": False,
    },
    "tcp": {
        "timeout": None,  # None -> blocking socket, the OS decides
    },
    "rigctl": {
        "model": 1,  # Hamlib Dummy
        "path": None,
    },
}


def load_yaml_file(file_path: str) -> Dict[str, Any]:
    """Load a small YAML file into a dict; raise if not found."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Configuration file not found: {file_path}")
    with open(file_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(out.get(key), dict):
            if value is None:
                continue
            if not isinstance(value, dict):
                raise ConfigurationError(f"Settings section '{key}' must be a mapping")
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


def load_settings(file_path: str = DEFAULT_SETTINGS_FILE) -> Dict[str, Any]:
    """Return settings merged over the defaults. A missing file means defaults."""
    if not os.path.exists(file_path):
        return copy.deepcopy(DEFAULT_SETTINGS)

    try:
        data = load_yaml_file(file_path)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to read settings file {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"{file_path}: top level must be a mapping")

    settings = _merge(DEFAULT_SETTINGS, data)

    model = settings["rigctl"].get("model")
    try:
        settings["rigctl"]["model"] = int(model)
    except (TypeError, ValueError):
        raise ConfigurationError(
            f"{file_path}: rigctl.model must be a Hamlib model number, got '{model}'.\n"
            "→ Use 'rigctl -l' to list supported model numbers for your radio."
        )

    timeout = settings["tcp"].get("timeout")
    if timeout is not None:
        try:
            settings["tcp"]["timeout"] = float(timeout)
        except (TypeError, ValueError):
            raise ConfigurationError(f"{file_path}: tcp.timeout must be a number of seconds or null")

    log_dir = settings["logging"].get("log_dir")
    if log_dir is None or log_dir == "":
        settings["logging"]["log_dir"] = DEFAULT_SETTINGS["logging"]["log_dir"]
    elif not isinstance(log_dir, str):
        raise ConfigurationError(f"{file_path}: logging.log_dir must be a directory path, got '{log_dir}'")

    return settings
