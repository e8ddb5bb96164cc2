"""Configuration models using Pydantic for validation."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )
    log_dir: Path | None = Field(
        default=None, description="Directory for log files (defaults to <config_dir>/logs)"
    )
    max_bytes: int = Field(
        default=5 * 1024 * 1024, ge=1024, description="Max log file size before rotation (bytes)"
    )
    backup_count: int = Field(default=3, ge=1, description="Number of rotated log files to keep")
    console_enabled: bool = Field(default=True, description="Enable console logging")
    file_enabled: bool = Field(default=True, description="Enable file logging")

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper


class DatabaseSettings(BaseModel):
    """Database configuration."""

    path: Path | None = Field(
        default=None, description="SQLite database file (defaults to <config_dir>/settings.db)"
    )


class DeskSortConfig(BaseModel):
    """Main configuration for DeskSort."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    desktop_dir: Path | None = Field(
        default=None, description="Directory to sort (defaults to the user's desktop)"
    )
    sorted_folder_name: str = Field(
        default="Sorted", description="Folder on the desktop that holds the default categories"
    )

    logging: LoggingSettings = Field(
        default_factory=LoggingSettings, description="Logging settings"
    )
    database: DatabaseSettings = Field(
        default_factory=DatabaseSettings, description="Database settings"
    )

    @field_validator("sorted_folder_name")
    @classmethod
    def validate_sorted_folder_name(cls, v: str) -> str:
        """Ensure the folder name is a single path component."""
        v = v.strip()
        if not v:
            raise ValueError("sorted_folder_name must not be empty")
        if "/" in v or "\\" in v or v in (".", ".."):
            raise ValueError(f"sorted_folder_name must be a plain folder name, got {v!r}")
        return v
