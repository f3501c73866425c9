"""Configuration package."""

from billbalance.config.settings import (
    DEFAULT_CONFIG_DIR,
    Settings,
    get_settings,
)

__all__ = [
    "DEFAULT_CONFIG_DIR",
    "Settings",
    "get_settings",
]
