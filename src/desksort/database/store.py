"""Mapping store: extension key -> destination directory."""

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import NamedTuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..classifier.categories import default_mappings, normalize_key
from ..errors import MappingStoreError
from ..utils.logging import get_logger
from .models import Database
from .schema import PathMapping

logger = get_logger(__name__)


class CategoryMapping(NamedTuple):
    """One row of the mapping table."""

    key: str
    target_path: Path


class MappingStore(ABC):
    """
    Durable mapping from category key to destination directory.

    Every operation takes the store's lock. ``locked()`` holds the same
    re-entrant lock across a burst of calls, so a scan sees one consistent
    table while other callers wait.
    """

    def __init__(self):
        self._lock = threading.RLock()

    @contextmanager
    def locked(self) -> Iterator["MappingStore"]:
        with self._lock:
            yield self

    @abstractmethod
    def get(self, key: str) -> Path | None:
        """Return the destination for ``key``, or None if unmapped."""

    @abstractmethod
    def get_all(self) -> list[CategoryMapping]:
        """Return every mapping ordered by key."""

    @abstractmethod
    def set(self, key: str, target_path: str | Path) -> None:
        """Insert or replace the mapping for ``key``."""


class SqlMappingStore(MappingStore):
    """MappingStore backed by the ``path_mappings`` SQLite table."""

    def __init__(self, db: Database):
        super().__init__()
        self.db = db

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        session = self.db.get_session()
        try:
            yield session
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Mapping store failed to {action}: {e}")
            raise MappingStoreError(f"Failed to {action}: {e}") from e
        finally:
            session.close()

    def get(self, key: str) -> Path | None:
        # Keys that cannot be normalized are never mapped
        try:
            key = normalize_key(key)
        except ValueError:
            return None

        with self._lock, self._session(f"read mapping for {key}") as session:
            mapping = session.get(PathMapping, key)
            if mapping is None:
                return None
            return Path(mapping.target_path)

    def get_all(self) -> list[CategoryMapping]:
        with self._lock, self._session("read mappings") as session:
            rows = session.query(PathMapping).order_by(PathMapping.extension).all()
            mappings = [CategoryMapping(row.extension, Path(row.target_path)) for row in rows]

        logger.debug(f"Found {len(mappings)} mappings")
        return mappings

    def set(self, key: str, target_path: str | Path) -> None:
        """
        Insert or replace the mapping for ``key`` (last write wins).

        Raises:
            ValueError: If the key or path is empty.
            MappingStoreError: If the write fails.
        """
        key = normalize_key(key)
        target = str(target_path).strip()
        if not target:
            raise ValueError("Target path must not be empty")

        # merge() inserts or replaces by primary key
        logger.info(f"Setting path mapping: {key} -> {target}")
        with self._lock, self._session(f"write mapping for {key}") as session:
            session.merge(
                PathMapping(extension=key, target_path=target, updated_at=datetime.utcnow())
            )
            session.commit()

    def count(self) -> int:
        with self._lock, self._session("count mappings") as session:
            return session.query(PathMapping).count()

    def seed_defaults(self, sorted_dir: Path) -> int:
        """
        Populate the built-in defaults if the table is empty.

        All defaults are written in one transaction; on failure nothing is
        written.

        Args:
            sorted_dir: Base directory for the default category folders

        Returns:
            Number of mappings inserted, 0 if the table was already populated
        """
        with self._lock, self._session("seed default mappings") as session:
            # Never reseed over existing rows
            if session.query(PathMapping).count() > 0:
                return 0

            logger.info("Initializing default paths...")
            defaults = default_mappings(sorted_dir)
            session.add_all(
                PathMapping(extension=key, target_path=str(path)) for key, path in defaults
            )
            session.commit()

        logger.info(f"Default paths initialized ({len(defaults)} mappings under {sorted_dir})")
        return len(defaults)
