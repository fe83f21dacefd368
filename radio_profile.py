# radio_profile.py
"""Radio profile data model: one configured transceiver and how to reach it."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ConnectionType(Enum):
    TCP = "TCP"
    SERIAL = "Serial"
    RIGCTL = "rigctl"

    @classmethod
    def parse(cls, value: Any) -> "ConnectionType":
        """Map a config string to a connection type (case-insensitive)."""
        if isinstance(value, ConnectionType):
            return value
        text = str(value or "").strip().lower()
        if text == "rigctlprocess":
            return cls.RIGCTL
        for member in cls:
            if member.value.lower() == text:
                return member
        valid = ", ".join(m.value for m in cls)
        raise ValueError(f"Invalid connection type '{value}'. Valid options: {valid}")


# JSON key order used when writing a profile back to disk
PROFILE_KEYS = (
    "rig_id",
    "conn_type",
    "tcp_host",
    "tcp_port",
    "serial_port",
    "baud_rate",
    "rigctl_freq",
    "rigctl_model",
)


@dataclass
class RadioProfile:
    rig_id: str
    conn_type: ConnectionType
    tcp_host: str = ""
    tcp_port: str = ""
    serial_port: str = ""
    baud_rate: int = 0
    rigctl_freq: str = ""
    rigctl_model: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RadioProfile":
        """Build a profile from one entry of the radios file.

        Raises ValueError on a missing rig_id or an unknown conn_type. Fields
        of other connection types are taken as-is.
        """
        if not isinstance(data, dict):
            raise ValueError(f"Radio entry must be an object, got {type(data).__name__}")
        rig_id = data.get("rig_id")
        if rig_id in (None, ""):
            raise ValueError("Radio entry is missing 'rig_id'")

        model = data.get("rigctl_model")
        return cls(
            rig_id=str(rig_id),
            conn_type=ConnectionType.parse(data.get("conn_type")),
            tcp_host=str(data.get("tcp_host") or ""),
            tcp_port=str(data.get("tcp_port") or ""),
            serial_port=str(data.get("serial_port") or ""),
            baud_rate=int(data.get("baud_rate") or 0),
            rigctl_freq=str(data.get("rigctl_freq") or ""),
            rigctl_model=int(model) if model not in (None, "") else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize, omitting empty optional fields."""
        raw = {
            "rig_id": self.rig_id,
            "conn_type": self.conn_type.value,
            "tcp_host": self.tcp_host,
            "tcp_port": self.tcp_port,
            "serial_port": self.serial_port,
            "baud_rate": self.baud_rate,
            "rigctl_freq": self.rigctl_freq,
            "rigctl_model": self.rigctl_model,
        }
        return {k: raw[k] for k in PROFILE_KEYS if k in ("rig_id", "conn_type") or raw[k] not in (None, "", 0)}

    def describe(self) -> str:
        if self.conn_type is ConnectionType.TCP:
            target = f"{self.tcp_host}:{self.tcp_port}"
        elif self.conn_type is ConnectionType.SERIAL:
            target = f"{self.serial_port} @ {self.baud_rate} baud"
        else:
            target = f"rigctl model {self.rigctl_model if self.rigctl_model is not None else 'default'}"
        return f"{self.rig_id} [{self.conn_type.value}] {target}"
