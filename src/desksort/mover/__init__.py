"""Mover module for collision-free entry moves."""

from .mover import FileMover
from .resolver import split_name, unique_target

__all__ = [
    "FileMover",
    "split_name",
    "unique_target",
]
