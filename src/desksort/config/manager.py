"""Configuration management - loading, validation, and persistence."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from ..errors import ConfigError
from ..utils.environment import resolve_config_dir
from .models import DeskSortConfig

CONFIG_FILE_NAME = "config.yaml"


class ConfigManager:
    """Manages loading and saving configuration."""

    def __init__(self, config_path: Path | None = None, config_dir: Path | None = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Explicit path to config file. If None, searches default locations.
            config_dir: DeskSort config directory. Resolved from the platform if None.
        """
        self.config_path = Path(config_path) if config_path else None
        self._config_dir = Path(config_dir) if config_dir else None
        self._config: DeskSortConfig | None = None

    @property
    def config_dir(self) -> Path:
        """DeskSort's config directory (raises EnvironmentPathNotFound if unknown)."""
        if self._config_dir is None:
            self._config_dir = resolve_config_dir()
        return self._config_dir

    @property
    def search_locations(self) -> list[Path]:
        return [
            self.config_dir / CONFIG_FILE_NAME,
            Path.home() / ".desksort" / CONFIG_FILE_NAME,
        ]

    def load(self, create_if_missing: bool = False) -> DeskSortConfig:
        """
        Load configuration from file.

        Args:
            create_if_missing: Use the default config if no config file is found.

        Returns:
            Loaded and validated configuration.

        Raises:
            FileNotFoundError: If no config found and create_if_missing is False.
            ConfigError: If the config file is unreadable or invalid.
        """
        config_file = self._find_config_file()

        if config_file is None:
            if create_if_missing:
                return self._create_default_config()
            raise FileNotFoundError(
                f"No configuration file found. Searched: {self.search_locations}"
            )

        try:
            with open(config_file, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {config_file}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read config file {config_file}: {e}") from e

        if not isinstance(config_dict, dict):
            raise ConfigError(f"Config file {config_file} must contain a mapping")

        try:
            self._config = DeskSortConfig(**config_dict)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e

        self.config_path = config_file
        return self._config

    def save(self, config: DeskSortConfig | None = None, path: Path | None = None) -> Path:
        """
        Save configuration to file.

        Args:
            config: Configuration to save. Uses current config if None.
            path: Path to save to. Uses current config_path if None.

        Returns:
            Path the configuration was written to.
        """
        config_to_save = config or self._config
        if config_to_save is None:
            raise ValueError("No configuration to save")

        save_path = Path(path or self.config_path or self.config_dir / CONFIG_FILE_NAME)
        save_path.parent.mkdir(parents=True, exist_ok=True)

        config_dict = self._paths_to_strings(config_to_save.model_dump(mode="python"))

        with open(save_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                config_dict,
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False,
            )

        self.config_path = save_path
        self._config = config_to_save
        return save_path

    def _find_config_file(self) -> Path | None:
        """Find the first existing config file."""
        if self.config_path is not None:
            return self.config_path if self.config_path.exists() else None

        for location in self.search_locations:
            if location.exists():
                return location

        return None

    def _create_default_config(self) -> DeskSortConfig:
        self._config = DeskSortConfig()
        return self._config

    @staticmethod
    def _paths_to_strings(obj):
        """Recursively convert Path objects to strings in a nested dict/list structure."""
        if isinstance(obj, Path):
            return str(obj)
        elif isinstance(obj, dict):
            return {key: ConfigManager._paths_to_strings(value) for key, value in obj.items()}
        elif isinstance(obj, list):
            return [ConfigManager._paths_to_strings(item) for item in obj]
        else:
            return obj

    @property
    def config(self) -> DeskSortConfig:
        """Get current configuration, loading it (or the default) on first use."""
        if self._config is None:
            self._config = self.load(create_if_missing=True)
        return self._config
