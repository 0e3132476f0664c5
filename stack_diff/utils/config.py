"""
Configuration Manager for stack-diff

Holds the persisted default thresholds, the log directory location and the
per-run DiffOptions assembled from command line arguments.
"""

import os
import json
import logging
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass

from ..core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_OVER = 10
DEFAULT_DIFF = 5
DEFAULT_OMIT_IDENTICAL = True

CONFIG_DIR_ENV = "STACK_DIFF_CONFIG_DIR"

_DEFAULT_TYPES = {
    "over": int,
    "diff": int,
    "omit_identical": bool,
}


@dataclass(frozen=True)
class DiffOptions:
    """Options of a single diff run."""
    left: Optional[str]
    right: Optional[str]
    over: int = DEFAULT_OVER
    diff: int = DEFAULT_DIFF
    omit_identical: bool = DEFAULT_OMIT_IDENTICAL

    def validate(self) -> 'DiffOptions':
        """
        Check the options before any file is touched.

        Raises:
            ConfigError: If an input path is missing or a threshold is not an integer
        """
        if not self.left:
            raise ConfigError("no left file specified")
        if not self.right:
            raise ConfigError("no right file specified")
        for name in ("over", "diff"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        return self


class ConfigManager:
    """
    Manages persisted defaults for stack-diff.

    The config directory is only created once something is written to it,
    so reading defaults works without a usable directory.

    Features:
    - Config directory override via STACK_DIFF_CONFIG_DIR
    - OS-standard config directory otherwise
    - Default over/diff/omit_identical values stored in config.json
    """

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else self._get_config_dir()
        self.config_file = self.config_dir / "config.json"
        self._config = self._load_config()

    def _get_config_dir(self) -> Path:
        """Get the appropriate config directory for the current OS."""
        env_dir = os.environ.get(CONFIG_DIR_ENV)
        if env_dir:
            return Path(env_dir)

        if os.name == 'nt':  # Windows
            base_dir = os.environ.get('APPDATA', Path.home() / 'AppData' / 'Roaming')
            return Path(base_dir) / 'StackDiff'
        return Path.home() / '.config' / 'stack_diff'

    def _load_config(self) -> Dict[str, Any]:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    return data
                logger.warning(f"Ignoring config file {self.config_file}: not a JSON object")
            except (json.JSONDecodeError, IOError) as e:
                logger.warning(f"Failed to load config file: {e}")
        return {}

    def _save_config(self):
        """Save current configuration to file."""
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self._config, f, indent=2, ensure_ascii=False)
        except OSError as e:
            logger.error(f"Failed to save config file: {e}")

    def _get_default(self, key: str, fallback: Any) -> Any:
        value = self._config.get('defaults', {}).get(key, fallback)
        expected = _DEFAULT_TYPES[key]
        # bool is an int subclass; keep the two apart
        if type(value) is not expected:
            logger.warning(f"Ignoring configured default {key}={value!r}: expected {expected.__name__}")
            return fallback
        return value

    def get_default_over(self) -> int:
        """Get the default minimum-count threshold."""
        return self._get_default('over', DEFAULT_OVER)

    def get_default_diff(self) -> int:
        """Get the default count-delta threshold."""
        return self._get_default('diff', DEFAULT_DIFF)

    def get_default_omit_identical(self) -> bool:
        """Get whether equal-count pairs are hidden by default."""
        return self._get_default('omit_identical', DEFAULT_OMIT_IDENTICAL)

    def set_default(self, key: str, value: Any):
        """Set and persist a default option value."""
        expected = _DEFAULT_TYPES.get(key)
        if expected is None:
            raise ConfigError(f"Unknown option: {key}")
        if type(value) is not expected:
            raise ConfigError(f"{key} must be {expected.__name__}, got {value!r}")
        self._config.setdefault('defaults', {})[key] = value
        self._save_config()

    def get_config_value(self, key: str, default=None) -> Any:
        """Get a configuration value."""
        return self._config.get(key, default)

    def get_log_dir(self) -> Path:
        """Get the logs directory path."""
        log_dir = self.config_dir / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)
        return log_dir
