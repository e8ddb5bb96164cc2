"""Configuration module for DeskSort."""

from .manager import CONFIG_FILE_NAME, ConfigManager
from .models import DatabaseSettings, DeskSortConfig, LoggingSettings

__all__ = [
    "DeskSortConfig",
    "LoggingSettings",
    "DatabaseSettings",
    "ConfigManager",
    "CONFIG_FILE_NAME",
]
