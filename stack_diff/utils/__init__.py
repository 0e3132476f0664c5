"""
Utility modules for configuration and logging.
"""

from .config import ConfigManager, DiffOptions
from .logging_utils import setup_logging, get_logger

__all__ = [
    "ConfigManager",
    "DiffOptions",
    "setup_logging",
    "get_logger"
]
