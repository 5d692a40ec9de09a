"""
Configuration settings for the application.
"""

import logging
import os

from dotenv import load_dotenv

from fsbridge.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_TRUTHY = {"1", "true", "True"}


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.host: str = self._get_env("HOST", "127.0.0.1")
        self.port: int = self._get_int_env("PORT", 8000)
        self.reload: bool = self._get_env("RELOAD", "0") in _TRUTHY
        self.log_level: str = self._get_log_level_env("LOG_LEVEL", "INFO")
        self.cors_allow_origins: list[str] = self._get_list_env(
            "CORS_ALLOW_ORIGINS", "*"
        )

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_int_env(self, key: str, default: int) -> int:
        """Get an integer environment variable, raise error if it does not parse."""
        raw = os.getenv(key)
        if raw is None or raw.strip() == "":
            return default
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(
                f"Environment variable {key} must be an integer, got {raw!r}"
            )

    def _get_log_level_env(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if logging does not know it."""
        name = (self._get_env(key, default).strip() or default).upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ConfigurationError(
                f"Environment variable {key} must be a logging level name, got {name!r}"
            )
        return name

    def _get_list_env(self, key: str, default: str) -> list[str]:
        """Get a comma-separated environment variable as a list."""
        raw = self._get_env(key, default)
        return [item.strip() for item in raw.split(",") if item.strip()]


# Global settings instance
settings = Settings()
