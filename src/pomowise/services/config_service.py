"""Configuration service for managing pomowise configuration.

ConfigService is the single source of truth for settings. It handles:

- Loading and saving config.json
- Dotted-key get/set/reset used by the ``config`` commands
- Config file initialization with defaults
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from platformdirs import user_config_dir, user_data_dir
from pydantic import BaseModel, ValidationError

from pomowise.models.config_models import AppConfig

APP_NAME = "pomowise"

logger = logging.getLogger(__name__)


class ConfigService:
    """Load, save and edit the application configuration."""

    def __init__(self, config_dir: Path | None = None, data_dir: Path | None = None):
        self.config_dir = Path(config_dir or user_config_dir(APP_NAME))
        self.config_path = self.config_dir / "config.json"
        self.data_dir = Path(data_dir or user_data_dir(APP_NAME))

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self._config: AppConfig | None = None

    @property
    def config(self) -> AppConfig:
        """Get or load the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    @property
    def status_path(self) -> Path:
        """Where the status file lives."""
        if self.config.status.path:
            return Path(self.config.status.path).expanduser()
        return self.data_dir / "status.json"

    def load_config(self) -> AppConfig:
        """Load configuration from storage."""
        if self._config is not None:
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                self._config = AppConfig.model_validate_json(f.read())
        except FileNotFoundError:
            # First run
            logger.info("No config at %s, writing defaults", self.config_path)
            self._config = AppConfig()
            self.save_config()
        except Exception as e:
            raise RuntimeError(f"Failed to load config: {e}") from e

        return self._config

    def save_config(self) -> None:
        """Save the current configuration to storage."""
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                f.write(self.config.model_dump_json(indent=4))
        except OSError as e:
            raise RuntimeError(f"Failed to save config: {e}") from e

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key.

        Raises:
            KeyError: If the key does not exist
        """
        return self._lookup(self.config, key)

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key.

        The new value is validated against the model before it is saved.

        Raises:
            KeyError: If the key does not exist
            ValueError: If the value is invalid for the key
        """
        self._lookup(self.config, key)
        keys = key.split(".")
        config_dict = self.config.model_dump()

        current = config_dict
        for k in keys[:-1]:
            current = current[k]
        current[keys[-1]] = value

        try:
            new_config = AppConfig.model_validate(config_dict)
        except ValidationError as e:
            raise ValueError(f"Invalid value for '{key}': {e.errors()[0]['msg']}") from e

        self._config = new_config
        self.save_config()
        logger.info("config %s set to %r", key, value)

    def reset(self, key: str | None = None) -> None:
        """Reset configuration (or a single key) to defaults."""
        if key is None:
            self._config = AppConfig()
            self.save_config()
        else:
            self.set(key, self._lookup(AppConfig(), key))
        logger.info("config reset %s", key or "(all)")

    @staticmethod
    def _lookup(config: AppConfig, key: str) -> Any:
        value: Any = config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                raise KeyError(key)
            value = getattr(value, k)
        return value


@lru_cache(maxsize=1)
def get_config_service() -> ConfigService:
    """Get a cached ConfigService instance."""
    config_service = ConfigService()
    config_service.load_config()
    return config_service
