"""Classify desktop entries into mapping keys."""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..utils.logging import get_logger
from .categories import FOLDER_KEY

logger = get_logger(__name__)


class EntryKind(str, Enum):
    """Kind of a directory entry as reported by the listing."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Entry:
    """A filesystem object considered for sorting during one scan."""

    path: Path
    kind: EntryKind

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_hidden(self) -> bool:
        return self.name.startswith(".")

    @property
    def extension(self) -> str:
        """
        Lowercase extension with its leading dot.

        Directories report ``FOLDER_KEY``; files without an extension report
        an empty string. Only the part after the last dot counts, so
        ``backup.tar.gz`` reports ``.gz``.
        """
        if self.kind is EntryKind.DIRECTORY:
            return FOLDER_KEY
        stem, dot, ext = self.name.rpartition(".")
        if not dot or not stem or not ext:
            return ""
        return f".{ext.lower()}"

    @classmethod
    def from_dir_entry(cls, dir_entry: os.DirEntry) -> "Entry":
        """
        Build an Entry from an ``os.scandir`` result.

        Symbolic links are not followed: a link to a directory is an opaque
        file entry, and moving it moves the link.
        """
        kind = EntryKind.DIRECTORY if dir_entry.is_dir(follow_symlinks=False) else EntryKind.FILE
        return cls(path=Path(dir_entry.path), kind=kind)


class FileClassifier:
    """Maps entries to the key used to look up their destination."""

    def classify(self, entry: Entry) -> str | None:
        """
        Classify an entry.

        Args:
            entry: Entry to classify

        Returns:
            ``FOLDER_KEY`` for directories, the lowercase extension for files,
            or None when the file has no extension.
        """
        key = entry.extension
        if not key:
            logger.debug(f"No extension, leaving in place: {entry.name}")
            return None
        return key
