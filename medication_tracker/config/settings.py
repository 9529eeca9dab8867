"""Configuration settings for the medication tracker."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

TRUE_VALUES = {"1", "true", "yes", "on"}


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self, env_path: Optional[Path] = None):
        """Initialize settings by loading from .env file and environment variables.

        Args:
            env_path: .env file to load (default: project root .env)
        """
        if env_path is None:
            env_path = Path(__file__).parent.parent.parent / ".env"
        load_dotenv(dotenv_path=env_path)

        # Logging Configuration
        self.log_level: str = self._get_env("LOG_LEVEL", "INFO")
        log_dir = self._get_env("LOG_DIR")
        self.log_dir: Optional[Path] = Path(log_dir) if log_dir else None

        # Storage Configuration
        self.data_dir: Path = Path(self._get_env("DATA_DIR", "."))
        self.strict_parsing: bool = self._get_bool_env("STRICT_PARSING", False)

        # Tracker Behavior
        self.default_quantity: int = self._get_int_env("DEFAULT_QUANTITY", 30)
        self.decrement_on_repeat: bool = self._get_bool_env("DECREMENT_ON_REPEAT", True)

        # Date Labels
        self.use_system_clock: bool = self._get_bool_env("USE_SYSTEM_CLOCK", False)
        self.today: str = self._get_env("TRACKER_TODAY", "2024-W01-1")
        self.week_start: str = self._get_env("TRACKER_WEEK_START", "2024-W01")

    def _get_env(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get environment variable with optional default value.

        Args:
            key: Environment variable name
            default: Default value if variable is not set

        Returns:
            Environment variable value or default
        """
        return os.getenv(key, default)

    def _get_bool_env(self, key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        return value.strip().lower() in TRUE_VALUES

    def _get_int_env(self, key: str, default: int) -> int:
        """Get integer environment variable.

        Raises:
            ValueError: If the variable is set but not an integer
        """
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError as e:
            raise ValueError(
                f"Environment variable '{key}' must be an integer, got {value!r}. "
                f"Please fix it in .env file or system environment."
            ) from e

    def __repr__(self) -> str:
        return (
            f"Settings("
            f"log_level={self.log_level}, "
            f"log_dir={self.log_dir}, "
            f"data_dir={self.data_dir}, "
            f"strict_parsing={self.strict_parsing}, "
            f"default_quantity={self.default_quantity}, "
            f"decrement_on_repeat={self.decrement_on_repeat}, "
            f"use_system_clock={self.use_system_clock}, "
            f"today={self.today}, "
            f"week_start={self.week_start}"
            f")"
        )
