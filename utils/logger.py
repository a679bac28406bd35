"""
Logging for the Ingredily recipes screen.

Streamlit re-executes the app script on every interaction, so setup is
done once per process and later calls return the configured logger.
"""

import logging
import logging.handlers
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import get_config

ROOT_LOGGER = "ingredily"

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_level: Optional[str] = None, log_file: Optional[str] = None,
                  force: bool = False) -> logging.Logger:
    """
    Configure the `ingredily` logger with console and rotating file output.

    Args:
        log_level: Level name; uses config if not provided.
        log_file: Log file path; uses config if not provided.
        force: Replace handlers even if logging was already set up.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    if logger.handlers and not force:
        return logger

    config = get_config()
    level = getattr(logging, (log_level or config.log_level).upper())
    log_path = Path(log_file or config.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(level)
    # Streamlit installs its own root handlers
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(_FORMAT, datefmt='%H:%M:%S'))
    console_handler.setLevel(max(level, logging.INFO))
    logger.addHandler(console_handler)

    file_handler = logging.handlers.RotatingFileHandler(log_path, maxBytes=1024 * 1024, backupCount=3)
    file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    file_handler.setLevel(level)
    logger.addHandler(file_handler)

    logger.info(f"Logging to {log_path} at {logging.getLevelName(level)}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get the `ingredily.<name>` child logger"""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


@contextmanager
def log_operation(logger: logging.Logger, operation: str,
                  level: int = logging.INFO) -> Iterator[None]:
    """Log start, duration and failure of an operation; errors propagate"""
    start = time.time()
    logger.log(level, f"Starting: {operation}")
    try:
        yield
    except Exception as e:
        logger.error(f"Failed: {operation} ({time.time() - start:.2f}s) - {e}")
        raise
    logger.log(level, f"Completed: {operation} ({time.time() - start:.2f}s)")
