"""Application facade: the operations the command shell invokes."""

from pathlib import Path

from sqlalchemy.exc import SQLAlchemyError

from ..config.models import DeskSortConfig
from ..database import CategoryMapping, Database, SqlMappingStore
from ..errors import MappingStoreError
from ..utils.environment import resolve_config_dir, resolve_desktop_dir
from ..utils.logging import get_logger
from .engine import SortEngine
from .report import SortReport

logger = get_logger(__name__)

DATABASE_FILE_NAME = "settings.db"


class DeskSortApp:
    """
    One application instance: a database, its mapping store and a sort engine.

    Create one per process and close it when done. Sorting calls must be
    serialized by the caller.
    """

    def __init__(self, desktop_dir: Path, database: Database, sorted_folder_name: str = "Sorted"):
        """
        Initialize the application and seed default mappings on first run.

        Args:
            desktop_dir: Directory sorted by ``scan_and_sort``
            database: Open database holding the mapping table
            sorted_folder_name: Folder under ``desktop_dir`` for default categories
        """
        self.desktop_dir = Path(desktop_dir)
        self.sorted_dir = self.desktop_dir / sorted_folder_name
        self.database = database
        try:
            self.database.create_all_tables()
        except SQLAlchemyError as e:
            raise MappingStoreError(f"Failed to initialise database {database.db_path}: {e}") from e

        self.store = SqlMappingStore(database)
        self.store.seed_defaults(self.sorted_dir)

        self.engine = SortEngine(self.store)

    @classmethod
    def from_config(
        cls, config: DeskSortConfig, config_dir: Path | None = None
    ) -> "DeskSortApp":
        """
        Build the application from configuration.

        Raises:
            EnvironmentPathNotFound: If the desktop or config directory cannot be resolved
            MappingStoreError: If the database cannot be initialised
        """
        desktop_dir = config.desktop_dir or resolve_desktop_dir()
        db_path = config.database.path
        if db_path is None:
            db_path = Path(config_dir or resolve_config_dir()) / DATABASE_FILE_NAME

        logger.debug(f"Desktop: {desktop_dir}, database: {db_path}")
        try:
            database = Database(db_path)
        except OSError as e:
            raise MappingStoreError(f"Cannot create database directory for {db_path}: {e}") from e

        return cls(
            desktop_dir=desktop_dir,
            database=database,
            sorted_folder_name=config.sorted_folder_name,
        )

    def scan_and_sort(self, root_dir: Path | None = None) -> SortReport:
        """Sort the desktop (or ``root_dir`` when given)."""
        return self.engine.scan_and_sort(root_dir or self.desktop_dir)

    def get_mapping(self, key: str) -> Path | None:
        return self.store.get(key)

    def set_mapping(self, key: str, target_path: str | Path) -> None:
        self.store.set(key, target_path)

    def get_all_mappings(self) -> list[CategoryMapping]:
        return self.store.get_all()

    def close(self):
        self.database.close()

    def __enter__(self) -> "DeskSortApp":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
