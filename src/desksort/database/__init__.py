"""Database module for DeskSort."""

from .models import Database
from .schema import Base, PathMapping
from .store import CategoryMapping, MappingStore, SqlMappingStore

__all__ = [
    "Base",
    "PathMapping",
    "Database",
    "CategoryMapping",
    "MappingStore",
    "SqlMappingStore",
]
