# radio_interface.py

"""
Radio Console sender contract: results, errors and the backend interface

Every transport backend (TCP, serial, rigctl) implements BaseRadioSender and
reports the outcome of a single send as a SendResult. Backends never let an
I/O exception escape to the caller:

1) SUCCESS
   --------------------------------------------------------------
     result.ok        -> True
     result.response  -> whatever the radio/tool answered ('' for serial)

2) FAILURE
   --------------------------------------------------------------
     result.ok        -> False
     result.error     -> one of the BaseRadioError subclasses below
     result.response  -> captured output where there is any (rigctl)

Error taxonomy
--------------
• RadioConnectionError  TCP dial failure (refused, unreachable, bad port)
• RadioIOError          write or read failure on any transport
• PortOpenError         serial port could not be acquired
• ProcessError          rigctl could not be spawned or exited non-zero
• SelectionError        unknown radio id, or no backend for its type

Developer checklist for new backends
------------------------------------
[ ] Subclass BaseRadioSender and set `name`
[ ] Catch transport errors where they happen, log them, return SendResult.failure()
[ ] Release sockets/ports/handles on every exit path
[ ] One attempt per call; no retries
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


class BaseRadioError(Exception):
    """Generic radio communication error (superclass for all send errors)."""
    pass


class RadioConnectionError(BaseRadioError):
    """The TCP connection to the radio could not be established."""
    pass


class RadioIOError(BaseRadioError):
    """Writing the command or reading the reply failed."""
    pass


class PortOpenError(BaseRadioError):
    """The serial port could not be opened."""
    pass


class ProcessError(BaseRadioError):
    """The rigctl process could not be started or reported failure."""

    def __init__(self, message: str, returncode: Optional[int] = None, output: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.output = output


class SelectionError(BaseRadioError):
    """No profile matches the requested radio, or its type has no backend."""

    UNKNOWN_RIG = "unknown_rig"
    UNROUTABLE = "unroutable"

    def __init__(self, message: str, reason: str = UNKNOWN_RIG):
        super().__init__(message)
        self.reason = reason


@dataclass
class SendResult:
    """Outcome of one send attempt."""
    ok: bool
    backend: str
    command: str
    response: str = ""
    error: Optional[BaseRadioError] = None
    elapsed_ms: int = 0

    @classmethod
    def success(cls, backend: str, command: str, response: str = "", elapsed_ms: int = 0) -> "SendResult":
        return cls(ok=True, backend=backend, command=command, response=response, elapsed_ms=elapsed_ms)

    @classmethod
    def failure(
        cls,
        backend: str,
        command: str,
        error: BaseRadioError,
        response: str = "",
        elapsed_ms: int = 0,
    ) -> "SendResult":
        return cls(ok=False, backend=backend, command=command, response=response,
                   error=error, elapsed_ms=elapsed_ms)

    @property
    def message(self) -> str:
        """One-line human readable summary, used by the CLI status line."""
        if self.ok:
            reply = self.response.strip()
            return f"{self.backend}: sent '{self.command}'" + (f" -> {reply}" if reply else "")
        return f"{self.backend}: {type(self.error).__name__}: {self.error}"


class BaseRadioSender(ABC):
    """A backend able to deliver one command to one radio."""

    name: str = "radio"

    @abstractmethod
    def send(self, *args, **kwargs) -> SendResult: ...
