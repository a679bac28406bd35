#!/usr/bin/env python3
"""
Test script for logging setup and operation timing.
"""

import logging
import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from utils.logger import ROOT_LOGGER, get_logger, log_operation, setup_logging


@pytest.fixture
def clean_root_logger():
    logger = logging.getLogger(ROOT_LOGGER)
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


def test_setup_runs_once_per_process(tmp_path, clean_root_logger):
    """Test repeated setup across script reruns does not stack handlers"""
    first_log = tmp_path / "first.log"
    logger = setup_logging("DEBUG", str(first_log), force=True)
    assert len(logger.handlers) == 2

    again = setup_logging("INFO", str(tmp_path / "second.log"))
    assert again is logger
    assert len(logger.handlers) == 2
    assert logger.level == logging.DEBUG

    get_logger("test").debug("hello from a rerun")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from a rerun" in first_log.read_text()
    assert not (tmp_path / "second.log").exists()
    print("[OK] Logging configured once")


def test_forced_setup_replaces_handlers(tmp_path, clean_root_logger):
    """Test force re-targets the log file"""
    setup_logging("INFO", str(tmp_path / "a.log"), force=True)
    logger = setup_logging("INFO", str(tmp_path / "b.log"), force=True)
    files = [h.baseFilename for h in logger.handlers if isinstance(h, logging.FileHandler)]
    assert files == [str(tmp_path / "b.log")]


def test_log_operation_reports_and_reraises(caplog):
    """Test failures inside an operation are logged and propagated"""
    logger = logging.getLogger("operations_under_test")

    with caplog.at_level(logging.INFO, logger="operations_under_test"):
        with log_operation(logger, "load results"):
            pass
        with pytest.raises(ValueError):
            with log_operation(logger, "parse results"):
                raise ValueError("bad payload")

    messages = [record.getMessage() for record in caplog.records]
    assert any(m.startswith("Completed: load results") for m in messages)
    assert any(m.startswith("Failed: parse results") and "bad payload" in m for m in messages)
