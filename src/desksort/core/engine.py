"""Sort engine: scan one directory and move each entry to its category folder."""

import os
from pathlib import Path

from ..classifier import Entry, EntryKind, FileClassifier
from ..database.store import MappingStore
from ..errors import DirectoryNotFound, DirectoryUnreadable, EntryError, EntryReadFailed
from ..mover import FileMover
from ..utils.logging import get_logger
from .report import MoveOutcome, SortReport

logger = get_logger(__name__)


class SortEngine:
    """
    Sorts the immediate children of a directory.

    Pipeline per entry: skip hidden -> classify -> look up destination ->
    create destination -> pick a free name -> rename.

    Failures of a single entry are recorded in the report and never stop the
    batch. Only a missing or unreadable root and mapping store errors abort a
    scan. The engine is not safe to run concurrently against the same
    destinations; callers must serialize scans.
    """

    def __init__(
        self,
        store: MappingStore,
        classifier: FileClassifier | None = None,
        mover: FileMover | None = None,
    ):
        """
        Initialize the sort engine.

        Args:
            store: Mapping store providing destination directories
            classifier: Entry classifier (default: FileClassifier)
            mover: Entry mover (default: FileMover)
        """
        self.store = store
        self.classifier = classifier or FileClassifier()
        self.mover = mover or FileMover()

    def _snapshot(self, root_dir: Path) -> list[Entry | EntryReadFailed]:
        """
        List the non-hidden children of ``root_dir`` in listing order.

        A child whose type cannot be read is returned as ``EntryReadFailed``
        in its place instead of aborting the listing.
        """
        root_dir = Path(root_dir)
        if not root_dir.is_dir():
            raise DirectoryNotFound(root_dir)

        items: list[Entry | EntryReadFailed] = []
        try:
            with os.scandir(root_dir) as it:
                for dir_entry in it:
                    # Hidden entries are never touched
                    if dir_entry.name.startswith("."):
                        continue
                    try:
                        items.append(Entry.from_dir_entry(dir_entry))
                    except OSError as e:
                        logger.warning(f"Cannot read entry {dir_entry.path}: {e}")
                        items.append(EntryReadFailed(Path(dir_entry.path), e))
        except OSError as e:
            raise DirectoryUnreadable(root_dir, e) from e

        return items

    def list_entries(self, root_dir: Path) -> list[Entry]:
        """
        Snapshot the immediate children of ``root_dir``, hidden entries excluded.

        Children whose type cannot be read are left out.

        Raises:
            DirectoryNotFound: If ``root_dir`` is missing or not a directory
            DirectoryUnreadable: If listing ``root_dir`` fails
        """
        return [item for item in self._snapshot(root_dir) if isinstance(item, Entry)]

    @staticmethod
    def _contains(path: Path, other: Path) -> bool:
        """Check whether ``other`` is ``path`` or lies below it."""
        try:
            return other.resolve().is_relative_to(path.resolve())
        except OSError:
            return False

    def _sort_entry(self, entry: Entry) -> MoveOutcome | None:
        # Classify and look up the destination
        key = self.classifier.classify(entry)
        if key is None:
            return None

        dest_dir = self.store.get(key)
        if dest_dir is None:
            logger.debug(f"No mapping for {key}, leaving in place: {entry.name}")
            return None

        # Never move a directory into itself, e.g. <desktop>/Sorted
        if entry.kind is EntryKind.DIRECTORY and self._contains(entry.path, Path(dest_dir)):
            logger.debug(f"Destination lies inside {entry.name}, leaving in place")
            return None

        # Move, recording failures instead of raising
        try:
            destination = self.mover.move(entry.path, dest_dir)
        except EntryError as e:
            logger.warning(f"Failed to move {entry.path}: {e}")
            return MoveOutcome.failed(entry.path, e)

        return MoveOutcome.moved(entry.path, destination)

    def scan_and_sort(self, root_dir: Path) -> SortReport:
        """
        Sort every eligible entry directly inside ``root_dir``.

        Args:
            root_dir: Directory to tidy, usually the desktop

        Returns:
            SortReport with one outcome per entry that had a mapping or
            could not be read

        Raises:
            DirectoryNotFound: If ``root_dir`` is missing or unreadable
            MappingStoreError: If a mapping lookup fails
        """
        root_dir = Path(root_dir)
        report = SortReport(root=root_dir)

        # The table cannot change while a scan is in progress
        with self.store.locked():
            items = self._snapshot(root_dir)
            logger.info(f"Scanning {root_dir}: {len(items)} candidate entries")

            for item in items:
                # Unreadable entries are reported without a lookup
                if isinstance(item, EntryReadFailed):
                    report.add(MoveOutcome.failed(item.source, item))
                    continue

                outcome = self._sort_entry(item)
                if outcome is not None:
                    report.add(outcome)

        logger.info(
            f"Sort finished: {len(report.moved)} moved, {len(report.failed)} failed"
        )
        return report
