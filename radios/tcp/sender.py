import socket
import time
from typing import Optional

from loghandler import get_logger
from radio_interface import (
    BaseRadioSender,
    RadioConnectionError,
    RadioIOError,
    SendResult,
)

logger = None

REPLY_BUFFER_SIZE = 1024


class TcpSender(BaseRadioSender):
    """
    One-shot TCP sender for radios exposing their CAT port over the network.

    Each send opens a fresh connection, writes the command plus '\n', reads
    one reply chunk of at most 1024 bytes and closes the socket. Connect,
    write and read failures are logged and returned as failed results; the
    socket is closed on every path.
    """

    name = "TCP"

    def __init__(self, timeout: Optional[float] = None):
        # None keeps the socket module default (blocking)
        self.timeout = timeout
        global logger
        if logger is None:
            logger = get_logger()

    def send(self, host: str, port: str, command: str) -> SendResult:
        t0 = time.time()

        def _elapsed() -> int:
            return int((time.time() - t0) * 1000)

        try:
            address = (host, int(port))
        except (TypeError, ValueError):
            err = RadioConnectionError(f"Invalid TCP port '{port}' for {host}")
            logger.error(f"[TCP] {err}")
            return SendResult.failure(self.name, command, err)

        try:
            if self.timeout is None:
                sock = socket.create_connection(address)
            else:
                sock = socket.create_connection(address, timeout=self.timeout)
        except (OSError, ValueError) as e:
            # ValueError covers UnicodeError from IDNA-encoding a malformed hostname
            err = RadioConnectionError(f"Error connecting to radio at {host}:{port}: {e}")
            logger.error(f"[TCP] {err}")
            return SendResult.failure(self.name, command, err, elapsed_ms=_elapsed())

        with sock:
            try:
                logger.debug(f"[TCP] > {command}")
                sock.sendall((command + "\n").encode())
            except OSError as e:
                err = RadioIOError(f"Error sending command to {host}:{port}: {e}")
                logger.error(f"[TCP] {err}")
                return SendResult.failure(self.name, command, err, elapsed_ms=_elapsed())

            try:
                data = sock.recv(REPLY_BUFFER_SIZE)
            except OSError as e:
                err = RadioIOError(f"Error reading response from {host}:{port}: {e}")
                logger.error(f"[TCP] {err}")
                return SendResult.failure(self.name, command, err, elapsed_ms=_elapsed())

        if not data:
            err = RadioIOError(f"Error reading response from {host}:{port}: connection closed without reply")
            logger.error(f"[TCP] {err}")
            return SendResult.failure(self.name, command, err, elapsed_ms=_elapsed())

        response = data.decode(errors="replace")
        ms = _elapsed()
        logger.info(f"[TCP] Radio response from {host}:{port} in {ms} ms: {response.strip()}")
        return SendResult.success(self.name, command, response, elapsed_ms=ms)
