"""Utility modules for DeskSort."""

from .environment import resolve_config_dir, resolve_desktop_dir
from .logging import get_console, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "get_console",
    "resolve_desktop_dir",
    "resolve_config_dir",
]
