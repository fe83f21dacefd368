# radios/serial_cat/__init__.py
"""
Serial CAT sender package.

Exports:
- SerialSender        (writes one command per call)
- SerialPortConfig    (device path + baud rate)
- SerialPort / SerialPortOpener (capability protocols)
- PySerialPortOpener  (pyserial-backed production opener)
"""

from .port import PySerialPortOpener, SerialPort, SerialPortConfig, SerialPortOpener
from .sender import SerialSender

__all__ = [
    "SerialSender",
    "SerialPort",
    "SerialPortConfig",
    "SerialPortOpener",
    "PySerialPortOpener",
]
