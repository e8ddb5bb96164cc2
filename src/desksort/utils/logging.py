"""Logging setup: Rich console output plus a rotating log file."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

DESKSORT_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red bold",
        "success": "green bold",
        "path": "magenta",
    }
)

LOG_FILE_NAME = "desksort.log"


class DeskSortLogger:
    """Owns the ``desksort`` logger and the shared Rich console."""

    _instance: Optional["DeskSortLogger"] = None
    _initialized: bool = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.console = Console(theme=DESKSORT_THEME)
            self.logger = logging.getLogger("desksort")
            self._initialized = True

    def setup(
        self,
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
        console_enabled: bool = True,
        file_enabled: bool = False,
    ):
        """
        Configure logging handlers and formatters.

        Args:
            level: Logging level name
            log_dir: Directory for the rotating log file
            max_bytes: Size at which the log file is rotated
            backup_count: Number of rotated files to keep
            console_enabled: Log to the Rich console
            file_enabled: Log to ``<log_dir>/desksort.log``
        """
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()

        log_level = getattr(logging, level.upper(), logging.INFO)
        self.logger.setLevel(log_level)
        self.logger.propagate = False

        if console_enabled:
            console_handler = RichHandler(
                console=self.console,
                rich_tracebacks=True,
                show_time=True,
                show_path=False,
                markup=False,
            )
            console_handler.setLevel(log_level)
            self.logger.addHandler(console_handler)

        if file_enabled:
            log_dir = Path(log_dir) if log_dir is not None else Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = RotatingFileHandler(
                log_dir / LOG_FILE_NAME,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
            file_handler.setFormatter(
                logging.Formatter(
                    fmt="%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )
            file_handler.setLevel(log_level)
            self.logger.addHandler(file_handler)

    def get_logger(self, name: Optional[str] = None) -> logging.Logger:
        if name:
            # Module names already start with the package name
            if name.startswith("desksort."):
                name = name[len("desksort.") :]
            return self.logger.getChild(name)
        return self.logger


_logger_instance: Optional[DeskSortLogger] = None


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance.

    The first call configures console-only logging; ``setup_logging`` replaces
    that with the user's settings.

    Args:
        name: Optional component name, usually ``__name__``

    Returns:
        Logger under the ``desksort`` hierarchy
    """
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = DeskSortLogger()
        _logger_instance.setup()
    return _logger_instance.get_logger(name)


def setup_logging(
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    max_bytes: int = 5 * 1024 * 1024,
    backup_count: int = 3,
    console_enabled: bool = True,
    file_enabled: bool = False,
):
    """Configure global logging settings."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = DeskSortLogger()
    _logger_instance.setup(level, log_dir, max_bytes, backup_count, console_enabled, file_enabled)


def get_console() -> Console:
    """Get the Rich console shared with the log handler."""
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = DeskSortLogger()
    return _logger_instance.console
