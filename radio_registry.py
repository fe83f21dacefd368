# radio_registry.py
"""
Registry of available transport backends for Radio Console.
"""

from typing import Any, Dict

from radio_profile import ConnectionType
from radios.rigctl import RigctlSender
from radios.serial_cat import SerialSender
from radios.tcp import TcpSender

RADIO_SENDERS: Dict[ConnectionType, Dict[str, Any]] = {
    ConnectionType.TCP: {
        "label": "Radio via TCP",
        "class": TcpSender,
        "description": "CAT command over a TCP socket, one reply read back",
    },
    ConnectionType.SERIAL: {
        "label": "Radio via serial port",
        "class": SerialSender,
        "description": "CAT command written to a serial/USB port",
    },
    ConnectionType.RIGCTL: {
        "label": "Radio via rigctl",
        "class": RigctlSender,
        "description": "Hamlib rigctl command-line tool",
    },
}


def build_senders(settings: Dict[str, Any]) -> Dict[ConnectionType, Any]:
    """Instantiate one sender per connection type from application settings."""
    tcp = settings.get("tcp") or {}
    rigctl = settings.get("rigctl") or {}
    kwargs: Dict[ConnectionType, Dict[str, Any]] = {
        ConnectionType.TCP: {"timeout": tcp.get("timeout")},
        ConnectionType.SERIAL: {},
        ConnectionType.RIGCTL: {"model": rigctl.get("model", 1), "rigctl_path": rigctl.get("path")},
    }
    return {conn: entry["class"](**kwargs[conn]) for conn, entry in RADIO_SENDERS.items()}


__all__ = ["RADIO_SENDERS", "build_senders"]
