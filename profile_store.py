# profile_store.py
"""Load and persist the radio profile collection (radios.json)."""

from __future__ import annotations

import json
import os
from typing import List

from config_validation import ConfigurationError, find_duplicate, validate_profile
from loghandler import get_logger
from radio_profile import RadioProfile

logger = None


def _log():
    global logger
    if logger is None:
        logger = get_logger()
    return logger


def load_profiles(file_path: str) -> List[RadioProfile]:
    """Load the ordered profile collection; raise ConfigurationError on any problem."""
    if not os.path.exists(file_path):
        raise ConfigurationError(f"Radios file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Failed to read radios file {file_path}: {e}") from e

    if not isinstance(data, dict) or not isinstance(data.get("radios", []), list):
        raise ConfigurationError(f"{file_path}: expected an object with a 'radios' list")

    profiles: List[RadioProfile] = []
    for index, entry in enumerate(data.get("radios") or []):
        try:
            profiles.append(RadioProfile.from_dict(entry))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"{file_path}: radio #{index + 1} is invalid: {e}") from e

    _log().debug(f"Loaded {len(profiles)} radio profile(s) from {file_path}")
    return profiles


def save_profiles(profiles: List[RadioProfile], file_path: str) -> None:
    """Write the collection back, keeping its order."""
    payload = {"radios": [p.to_dict() for p in profiles]}
    tmp_path = f"{file_path}.tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
            f.write("\n")
        os.replace(tmp_path, file_path)
    except OSError as e:
        raise ConfigurationError(f"Failed to save radios file {file_path}: {e}") from e

    _log().debug(f"Saved {len(profiles)} radio profile(s) to {file_path}")


def add_profile(profiles: List[RadioProfile], profile: RadioProfile, file_path: str) -> None:
    """Validate, append and persist a new profile.

    Duplicate rig ids are allowed; selection always picks the first match.
    """
    validate_profile(profile, _log())
    if find_duplicate(profiles, profile.rig_id) is not None:
        _log().warning(
            f"A radio named '{profile.rig_id}' already exists; the earlier entry will keep being selected."
        )
    profiles.append(profile)
    save_profiles(profiles, file_path)
    _log().info(f"Added radio {profile.describe()}")
