"""
Configuration Manager - Handle backend settings persistence
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIG_DIR_ENV = "TEXT_DIFF_CONFIG_DIR"


class ConfigManager:
    """Manage configuration persistence"""

    _instance = None
    _config_file = None

    def __init__(self, config_dir: str | None = None):
        # 1st: explicit argument, 2nd: environment variable, 3rd: ~/.text_diff
        config_dir = config_dir or os.environ.get(CONFIG_DIR_ENV) or os.path.expanduser("~/.text_diff")

        config_path = Path(config_dir)
        try:
            config_path.mkdir(parents=True, exist_ok=True)
            self._config_file = config_path / "config.json"
        except OSError as e:
            logger.warning("Cannot write to %s: %s", config_dir, e)
            self._config_file = None

        # Fallback: temp directory
        if not self._config_file:
            tmp_dir = Path(tempfile.gettempdir()) / "text_diff"
            tmp_dir.mkdir(parents=True, exist_ok=True)
            self._config_file = tmp_dir / "config.json"
            logger.info("Using temporary config path: %s", self._config_file)

        self._config = self._load_config()

    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance"""
        if cls._instance is None:
            cls._instance = ConfigManager()
        return cls._instance

    @classmethod
    def reset_instance(cls):
        """Drop the singleton so the next access rereads the environment"""
        cls._instance = None

    @property
    def config_file(self) -> Path:
        return self._config_file

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file, merged over the defaults"""
        config = self._default_config()
        if not self._config_file.exists():
            return config

        try:
            with open(self._config_file) as f:
                stored = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.error("Error loading config %s: %s", self._config_file, e)
            return config

        if not isinstance(stored, dict):
            logger.error("Ignoring config %s: expected a JSON object", self._config_file)
            return config

        for key, value in stored.items():
            if isinstance(config.get(key), dict):
                # Sections keep their defaults unless the stored value is an object
                if isinstance(value, dict):
                    config[key] = {**config[key], **value}
                else:
                    logger.warning("Ignoring config section %r: expected an object", key)
            else:
                config[key] = value
        return config

    def _default_config(self) -> dict[str, Any]:
        """Get default configuration"""
        return {
            "defaults": {
                "ignoreWhitespace": False,
                "ignoreCase": False,
                "detectMoved": False,
            },
            "limits": {
                "maxLines": 20000,
                "maxLineTokens": 4000,
                "maxAlignmentWork": 10_000_000,
            },
            "server": {"host": "0.0.0.0", "port": 8000},
            "logLevel": "INFO",
        }

    def get_config(self) -> dict[str, Any]:
        """Get current configuration"""
        # Reload config from file to ensure we have the latest
        self._config = self._load_config()
        return copy.deepcopy(self._config)

    def save_config(self, config: dict[str, Any]):
        """Save configuration to file"""
        self._config.update(config)

        self._config_file.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(self._config_file, "w") as f:
                json.dump(self._config, f, indent=2)
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}")

    def get(self, key: str, default=None):
        """Get specific config value"""
        return self._config.get(key, default)

    def set(self, key: str, value: Any):
        """Set specific config value"""
        self._config[key] = value
        self.save_config(self._config)
