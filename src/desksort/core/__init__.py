"""Core module: sort engine, report and application facade."""

from .app import DeskSortApp
from .engine import SortEngine
from .report import MoveOutcome, OutcomeStatus, SortReport

__all__ = [
    "DeskSortApp",
    "SortEngine",
    "MoveOutcome",
    "OutcomeStatus",
    "SortReport",
]
