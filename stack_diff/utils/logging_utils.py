"""
Log handler wiring for the stack-diff command line and viewer.

Diagnostics go to stderr at the level chosen with --log-level. Unless
disabled, every record down to DEBUG is also kept in stack_diff.log under
the config directory, rotated by size.
"""

import logging
import logging.handlers
from typing import Optional

from .config import ConfigManager

LOG_FILE_NAME = "stack_diff.log"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _rotating_file_handler(config_manager: ConfigManager, max_bytes: int,
                           backup_count: int) -> logging.Handler:
    log_file = config_manager.get_log_dir() / LOG_FILE_NAME
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(logging.DEBUG)
    return handler


def setup_logging(
    level: int = logging.INFO,
    log_to_console: bool = True,
    log_to_file: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    config_manager: Optional[ConfigManager] = None
) -> logging.Logger:
    """
    Replace the root logger's handlers for a stack-diff run.

    Args:
        level: Threshold of the stderr handler
        log_to_console: Attach the stderr handler
        log_to_file: Attach the rotating stack_diff.log handler
        max_bytes: Size at which stack_diff.log is rotated
        backup_count: Rotated files kept next to stack_diff.log
        config_manager: Supplies the log directory; a fresh one is built if omitted

    Returns:
        The root logger
    """
    root = logging.getLogger()
    # Root passes DEBUG records on; each handler applies its own level
    root.setLevel(logging.DEBUG if log_to_file else level)

    for old in list(root.handlers):
        root.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if log_to_console:
        stderr_handler = logging.StreamHandler()
        stderr_handler.setLevel(level)
        stderr_handler.setFormatter(formatter)
        root.addHandler(stderr_handler)

    if log_to_file:
        try:
            file_handler = _rotating_file_handler(
                config_manager or ConfigManager(), max_bytes, backup_count)
        except OSError as e:
            root.warning(f"Log file disabled: {e}")
        else:
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """Module logger; handlers live on the root set up by setup_logging."""
    return logging.getLogger(name)
