"""Pytest configuration for Radio Console tests"""
import logging
import os
import sys

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture(scope="session", autouse=True)
def setup_logging(tmp_path_factory):
    """Initialise the app logger once, writing log files to a temp dir."""
    from loghandler import setup_logging as _setup

    debug_enabled = os.getenv("RADIO_CONSOLE_DEBUG", "").lower() in ("1", "true", "yes")
    logger, _ = _setup(log_dir=str(tmp_path_factory.mktemp("logs")), debug=debug_enabled)
    logger.setLevel(logging.DEBUG)
    yield logger
