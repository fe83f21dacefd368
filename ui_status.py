# ui_status.py
# One-line outcome status with optional ANSI colors.

from typing import TextIO, Optional
import os
import sys

from radio_interface import SendResult

RESET = "\033[0m"
BOLD = "\033[1m"
BG_RED = "\033[41m"
BG_GREEN = "\033[42m"

__all__ = ["status_show", "show_result", "BG_RED", "BG_GREEN"]


def _supports_color(stream: TextIO) -> bool:
    """Best-effort check; allow force-disable via NO_ANSI=1."""
    if os.getenv("NO_ANSI") == "1":
        return False
    return hasattr(stream, "isatty") and stream.isatty()


def status_show(text: str, bg_color: str, stream: Optional[TextIO] = None) -> None:
    out = stream or sys.stdout
    if _supports_color(out):
        msg = f"{bg_color}{BOLD} {text} {RESET}"
    else:
        msg = f" {text} "
    print(msg, file=out, flush=True)


def show_result(result: SendResult, stream: Optional[TextIO] = None) -> None:
    """Green line for a delivered command, red for anything else."""
    label = "OK" if result.ok else "FAILED"
    status_show(f"{label} | {result.message}", BG_GREEN if result.ok else BG_RED, stream)
