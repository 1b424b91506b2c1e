"""Module de configuration."""

from nickel_conf.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    load_settings,
)
from nickel_conf.config.settings import DEFAULT_LOG_FILE, NickelConfSettings

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "load_settings",
    "NickelConfSettings",
    "DEFAULT_LOG_FILE",
]
