# app_context.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from typing import Protocol
from radio_profile import RadioProfile


class LoggerLike(Protocol):
    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


@dataclass
class AppContext:
    """Lightweight container for state shared across the run."""
    logger: LoggerLike
    settings: Dict[str, Any]
    settings_path: str
    radios_path: str
    debug_mode: bool
    profiles: List[RadioProfile] = field(default_factory=list)
    log_file: Optional[str] = None
