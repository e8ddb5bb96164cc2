"""
DeskSort - keep the desktop tidy.

Moves every file and folder sitting on the desktop into a category folder
chosen by its extension, without ever overwriting anything.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .classifier import Entry, EntryKind, FileClassifier
from .core import DeskSortApp, MoveOutcome, SortEngine, SortReport
from .database import CategoryMapping, MappingStore, SqlMappingStore
from .errors import (
    DeskSortError,
    DirectoryCreateFailed,
    DirectoryNotFound,
    EnvironmentPathNotFound,
    MappingStoreError,
    MoveFailed,
)
from .mover import FileMover, unique_target
from .utils.logging import get_logger

__all__ = [
    "get_logger",
    # Classifier
    "Entry",
    "EntryKind",
    "FileClassifier",
    # Store
    "CategoryMapping",
    "MappingStore",
    "SqlMappingStore",
    # Mover
    "FileMover",
    "unique_target",
    # Engine
    "SortEngine",
    "SortReport",
    "MoveOutcome",
    "DeskSortApp",
    # Errors
    "DeskSortError",
    "EnvironmentPathNotFound",
    "DirectoryNotFound",
    "DirectoryCreateFailed",
    "MoveFailed",
    "MappingStoreError",
]
