"""Classifier module: entry types, category table and classification."""

from .categories import (
    DEFAULT_CATEGORIES,
    FOLDER_KEY,
    category_for,
    default_mappings,
    normalize_key,
)
from .classifier import Entry, EntryKind, FileClassifier

__all__ = [
    "Entry",
    "EntryKind",
    "FileClassifier",
    "DEFAULT_CATEGORIES",
    "FOLDER_KEY",
    "category_for",
    "default_mappings",
    "normalize_key",
]
