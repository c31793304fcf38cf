"""
Configuration management using Pydantic Settings.
Loads from environment variables and .env files (cascading).

.env Precedence (highest to lowest):
1. Environment variables (already set in os.environ)
2. Project .env (current directory / project root)
3. User .env (~/.blueblaze/.env) - fallback for pip installs
"""

import logging
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


def get_user_env_path() -> Path:
    """Get path to user .env file (~/.blueblaze/.env)."""
    return Path.home() / ".blueblaze" / ".env"


def load_env_files() -> None:
    """Load .env files in precedence order.

    Note: With override=False, the FIRST value loaded wins (subsequent
    loads are ignored for already-set keys). So we load highest priority first.
    """
    load_dotenv(override=False)

    user_env = get_user_env_path()
    if user_env.exists():
        load_dotenv(user_env, override=False)
        logger.debug(f"Loaded fallback user .env from {user_env}")


# Load .env files at module import
load_env_files()


class Settings(BaseSettings):
    """Settings for the debug log file redirect, loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Fallback path used when change_debug_log() is called without one
    debug_log_file: str | None = Field(
        default=None,
        alias="BBA_WP__DEBUG_LOG_FILE",
        description="Directory, file or symlink to send error logging to. Consulted only when no path argument is given.",
    )

    # Gates log_debug() output
    debug: bool = Field(default=False, alias="WP_DEBUG")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator("debug_log_file", mode="before")
    @classmethod
    def blank_path_is_undefined(cls, value: Any) -> Any:
        """Treat an empty or whitespace-only path as not configured."""
        if isinstance(value, str) and not value.strip():
            return None
        return value


# Global settings instance
settings = Settings()
