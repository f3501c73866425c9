"""
Configuration Management for Bill Balance

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: Settings are read once at CLI startup and the values
are handed to the storage, editor and logging layers as plain arguments.
Nothing below the CLI calls get_settings() itself.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_CONFIG_DIR = Path.home() / ".config" / "balance"


class Settings(BaseSettings):
    """
    Application settings.

    Loads configuration from BALANCE_* environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="BALANCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    # Storage location
    config_dir: Path = Field(
        default=DEFAULT_CONFIG_DIR,
        description="Directory holding the payments file"
    )
    file_name: str = Field(
        default="spend",
        min_length=1,
        description="Payments file name, without extension"
    )

    # Projection defaults
    default_reset_day: int = Field(
        default=18,
        ge=1,
        le=28,
        description="Day the bill cycle resets when --reset-day is not given"
    )
    currency_symbol: str = Field(
        default="£",
        description="Symbol printed in front of amounts"
    )

    # Editor
    editor: Optional[str] = Field(
        default=None,
        description="Editor command; falls back to $VISUAL / $EDITOR"
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Minimum level written to stderr"
    )
    json_logs: bool = Field(
        default=False,
        description="Render log lines as JSON instead of console format"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the log level name."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('config_dir')
    @classmethod
    def expand_config_dir(cls, v: Path) -> Path:
        return v.expanduser()

    @property
    def payments_path(self) -> Path:
        """Full path of the YAML payments file."""
        return self.config_dir / f"{self.file_name}.yaml"


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Uses LRU cache to ensure settings are only loaded once.
    Call get_settings.cache_clear() to reload if needed.
    """
    return Settings()
