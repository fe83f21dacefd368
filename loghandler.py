# loghandler.py
# Console + per-run log file for Radio Console. Modules call get_logger()
# lazily, after main has run setup_logging().

import glob
import logging
import os
from datetime import datetime
from typing import List, Optional, Tuple

LOG_PREFIX = "radio-console"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

_logger: Optional[logging.Logger] = None
log_file: Optional[str] = None


def _log_file_name(log_dir: str) -> str:
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return os.path.join(log_dir, f"{LOG_PREFIX}_{stamp}.log")


def _run_log_files(log_dir: str) -> List[str]:
    return sorted(glob.glob(os.path.join(log_dir, f"{LOG_PREFIX}_*.log")))


def setup_logging(log_dir: str = "logs", clear_old: bool = False, debug: bool = False) -> Tuple[logging.Logger, str]:
    """Send records to the console and to a fresh file under log_dir."""
    global _logger, log_file

    if clear_old:
        clear_old_logs(log_dir)
    os.makedirs(log_dir, exist_ok=True)

    log_file = _log_file_name(log_dir)
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.FileHandler(log_file, encoding="utf-8"), logging.StreamHandler()],
    )

    _logger = logging.getLogger()
    if debug:
        _logger.setLevel(logging.DEBUG)
    _logger.debug(f"Logging to {log_file} at {logging.getLevelName(level)}")
    return _logger, log_file


def get_logger() -> logging.Logger:
    if _logger is None:
        raise RuntimeError("Logger has not been initialized. Call setup_logging() first.")
    return _logger


def clear_old_logs(log_dir: str) -> int:
    """Delete earlier run logs in log_dir; other files are left alone."""
    deleted = 0
    for path in _run_log_files(log_dir):
        try:
            os.remove(path)
        except OSError as e:
            print(f"Failed to delete {path}: {e}")
        else:
            deleted += 1

    print(f"Cleared {deleted} old log files.")
    return deleted
