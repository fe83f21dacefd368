import time
from typing import Optional

import serial

from loghandler import get_logger
from radio_interface import BaseRadioSender, PortOpenError, RadioIOError, SendResult

from .port import PySerialPortOpener, SerialPortConfig, SerialPortOpener

logger = None


class SerialSender(BaseRadioSender):
    """
    Fire-and-forget CAT sender for radios on a serial/USB port.

    The port opener is injected; by default it is the pyserial one. The port
    is closed exactly once per send, whatever the write outcome, and no reply
    is read back.
    """

    name = "Serial"

    def __init__(self, opener: Optional[SerialPortOpener] = None):
        self.opener = opener if opener is not None else PySerialPortOpener()
        global logger
        if logger is None:
            logger = get_logger()

    def send(self, port_path: str, baud_rate: int, command: str) -> SendResult:
        t0 = time.time()
        try:
            config = SerialPortConfig(name=port_path, baud=int(baud_rate))
            port = self.opener.open_port(config)
        except (serial.SerialException, OSError, TypeError, ValueError) as e:
            err = PortOpenError(f"Error opening serial port {port_path}: {e}")
            logger.error(f"[SERIAL] {err}")
            return SendResult.failure(self.name, command, err)

        try:
            logger.debug(f"[SERIAL] > {command} ({port_path} @ {baud_rate})")
            port.write((command + "\n").encode())
        except (serial.SerialException, OSError) as e:
            err = RadioIOError(f"Error writing to serial port {port_path}: {e}")
            logger.error(f"[SERIAL] {err}")
            return SendResult.failure(self.name, command, err, elapsed_ms=int((time.time() - t0) * 1000))
        finally:
            self._close(port, port_path)

        ms = int((time.time() - t0) * 1000)
        logger.info(f"[SERIAL] Command written to {port_path} in {ms} ms")
        return SendResult.success(self.name, command, elapsed_ms=ms)

    def _close(self, port, port_path: str) -> None:
        try:
            port.close()
        except (serial.SerialException, OSError) as e:
            logger.warning(f"[SERIAL] Closing {port_path} failed: {e}")
