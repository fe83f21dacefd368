# radios/serial_cat/port.py
# Serial port capability and the opener that produces it. The sender only
# talks to these protocols, so tests can hand it a fake port.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

import serial


@dataclass(frozen=True)
class SerialPortConfig:
    name: str
    baud: int
    timeout: Optional[float] = None


class SerialPort(Protocol):
    def write(self, data: bytes) -> Optional[int]: ...

    def read(self, size: int = 1) -> bytes: ...

    def close(self) -> None: ...


class SerialPortOpener(Protocol):
    def open_port(self, config: SerialPortConfig) -> SerialPort: ...


class PySerialPortOpener:
    """Opens real hardware ports through pyserial."""

    def open_port(self, config: SerialPortConfig) -> SerialPort:
        return serial.Serial(port=config.name, baudrate=config.baud, timeout=config.timeout)
