"""Configuration validation helpers for Radio Console."""
from typing import Iterable, Optional

from radio_profile import ConnectionType, RadioProfile


class ConfigurationError(Exception):
    """Raised when the configuration cannot be loaded, saved or is unusable."""
    pass


class ConfigValidationError(ConfigurationError):
    pass


def validate_profile(profile: RadioProfile, logger=None) -> None:
    """Validate the fields a profile's connection type needs, early and loudly.

    Only the fields of the profile's own connection type are checked; the
    others are inert.
    """
    problems = []
    if not profile.rig_id.strip():
        problems.append("'rig_id' must not be empty")

    if profile.conn_type is ConnectionType.TCP:
        if not profile.tcp_host:
            problems.append("'tcp_host' is required for TCP radios")
        if not profile.tcp_port:
            problems.append("'tcp_port' is required for TCP radios")
        elif not profile.tcp_port.isdigit() or not (0 < int(profile.tcp_port) < 65536):
            problems.append(f"'tcp_port' must be a port number, got '{profile.tcp_port}'")
    elif profile.conn_type is ConnectionType.SERIAL:
        if not profile.serial_port:
            problems.append("'serial_port' is required for Serial radios")
        if profile.baud_rate <= 0:
            problems.append(f"'baud_rate' must be a positive integer, got {profile.baud_rate}")
    elif profile.conn_type is ConnectionType.RIGCTL:
        if profile.rigctl_model is not None and profile.rigctl_model <= 0:
            problems.append(
                f"'rigctl_model' must be a Hamlib model number, got {profile.rigctl_model}.\n"
                "→ Use 'rigctl -l' to list supported model numbers for your radio."
            )

    if problems:
        msg = f"Configuration error in radio '{profile.rig_id}':\n" + "\n".join(f"  - {p}" for p in problems)
        if logger:
            logger.error(msg)
        raise ConfigValidationError(msg)


def find_duplicate(profiles: Iterable[RadioProfile], rig_id: str) -> Optional[RadioProfile]:
    for profile in profiles:
        if profile.rig_id == rig_id:
            return profile
    return None
