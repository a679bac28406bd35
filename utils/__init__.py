"""
Utilities package for the Ingredily recipes screen.

Contains configuration and logging helpers shared by the UI and services.
"""

from .config import Config, get_config, reload_config
from .logger import setup_logging, get_logger, log_operation

__all__ = [
    'Config',
    'get_config',
    'reload_config',
    'setup_logging',
    'get_logger',
    'log_operation'
]
