# dispatcher.py
# Routes "set this frequency on that radio" to the matching transport backend.

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from loghandler import get_logger
from radio_interface import SelectionError, SendResult
from radio_profile import ConnectionType, RadioProfile

CAT_SET_FREQUENCY = "FA"
CAT_TERMINATOR = ";"

logger = None


def format_cat_command(frequency_text: str) -> str:
    """'FA' + frequency + ';'. The text is not validated or converted."""
    return f"{CAT_SET_FREQUENCY}{frequency_text}{CAT_TERMINATOR}"


def find_profile(profiles: Sequence[RadioProfile], rig_id: str) -> Optional[RadioProfile]:
    """First profile with this rig id, in collection order."""
    for profile in profiles:
        if profile.rig_id == rig_id:
            return profile
    return None


class Dispatcher:
    def __init__(self, senders: Dict[ConnectionType, Any]):
        self.senders = senders
        global logger
        if logger is None:
            logger = get_logger()

    def dispatch(self, profiles: Sequence[RadioProfile], rig_id: str, frequency_text: str) -> SendResult:
        profile = find_profile(profiles, rig_id)
        if profile is None:
            err = SelectionError(f"Invalid radio selection: '{rig_id}'", SelectionError.UNKNOWN_RIG)
            logger.error(f"[DISPATCH] {err}")
            return SendResult.failure("dispatch", "", err)

        sender = self.senders.get(profile.conn_type)
        if sender is None:
            err = SelectionError(
                f"Invalid connection type selected for '{rig_id}': {profile.conn_type.value}",
                SelectionError.UNROUTABLE,
            )
            logger.error(f"[DISPATCH] {err}")
            return SendResult.failure("dispatch", "", err)

        logger.info(f"[DISPATCH] {profile.describe()} <- {frequency_text}")

        if profile.conn_type is ConnectionType.TCP:
            return sender.send(profile.tcp_host, profile.tcp_port, format_cat_command(frequency_text))
        if profile.conn_type is ConnectionType.SERIAL:
            return sender.send(profile.serial_port, profile.baud_rate, format_cat_command(frequency_text))
        # rigctl takes the bare frequency, not the CAT string
        return sender.send(frequency_text, model=profile.rigctl_model)
