"""Configuration management for the tomato CLI.

Settings are read from ``config.json`` in the platform config directory. The
file only seeds the startup values; adjustments made in the settings view
live for the current process and are never written back.
"""

import json
import logging
from pathlib import Path
from typing import Any, Literal, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)


class TimerSettings(BaseModel):
    """Phase durations and cycling behaviour."""

    focus_minutes: int = Field(default=25, ge=1, le=120)
    short_break_minutes: int = Field(default=5, ge=1, le=60)
    long_break_minutes: int = Field(default=15, ge=1, le=60)
    long_break_interval: int = Field(default=4, ge=1)
    auto_advance: bool = Field(default=True)


class UIConfig(BaseModel):
    """Live display configuration."""

    poll_interval: float = Field(default=0.25, gt=0, le=1.0)
    adjust_step: int = Field(default=5, ge=1, le=60)


class NotificationConfig(BaseModel):
    """Desktop notification configuration."""

    enabled: bool = Field(default=True)
    app_name: str = Field(default="tomato")


class LogConfig(BaseModel):
    """Log file configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")


class Config(BaseModel):
    """Main configuration."""

    timer: TimerSettings = Field(default_factory=TimerSettings)
    ui: UIConfig = Field(default_factory=UIConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)
    log: LogConfig = Field(default_factory=LogConfig)


class ConfigManager:
    """Loads the tomato CLI configuration file."""

    def __init__(self, config_dir: Path | None = None):
        self.config_dir = config_dir or Path(user_config_dir("tomato_cli"))
        self.config_file = self.config_dir / "config.json"
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file, falling back to defaults."""
        if not self.config_file.exists():
            return Config()

        try:
            with open(self.config_file, encoding="utf-8") as f:
                data = json.load(f)
            return Config(**data)
        except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
            # If config is corrupted, return default
            logger.warning("ignoring unreadable config %s: %s", self.config_file, e)
            return Config()

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        return self.get_from_config(self.config, key)

    @staticmethod
    def get_from_config(config: Config, key: str) -> Any:
        """Get value from a config object using dot notation."""
        value: Any = config
        for k in key.split("."):
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager
