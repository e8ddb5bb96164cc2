"""Per-entry outcomes and the aggregate report of one scan."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from ..errors import EntryError


class OutcomeStatus(str, Enum):
    """Whether an entry was moved."""

    MOVED = "moved"
    FAILED = "failed"


@dataclass(frozen=True)
class MoveOutcome:
    """Result of attempting to sort a single entry."""

    status: OutcomeStatus
    source: Path
    destination: Path | None = None
    error: EntryError | None = None

    @classmethod
    def moved(cls, source: Path, destination: Path) -> "MoveOutcome":
        return cls(OutcomeStatus.MOVED, Path(source), destination=Path(destination))

    @classmethod
    def failed(cls, source: Path, error: EntryError) -> "MoveOutcome":
        return cls(OutcomeStatus.FAILED, Path(source), error=error)

    @property
    def success(self) -> bool:
        return self.status is OutcomeStatus.MOVED

    @property
    def reason(self) -> str | None:
        """Human-readable failure reason."""
        if self.error is None:
            return None
        return str(self.error)

    def describe(self) -> str:
        if self.success:
            return f"Moved {self.source} to {self.destination}"
        return f"Failed to move {self.source}: {self.reason}"


@dataclass
class SortReport:
    """
    Ordered outcomes of one scan, in listing order.

    A scan that found nothing to sort yields an empty report, not an error.
    """

    root: Path
    outcomes: list[MoveOutcome] = field(default_factory=list)

    def add(self, outcome: MoveOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def moved(self) -> list[MoveOutcome]:
        return [o for o in self.outcomes if o.success]

    @property
    def failed(self) -> list[MoveOutcome]:
        return [o for o in self.outcomes if not o.success]

    @property
    def moved_files(self) -> list[str]:
        return [o.describe() for o in self.moved]

    @property
    def errors(self) -> list[str]:
        return [o.describe() for o in self.failed]

    @property
    def is_empty(self) -> bool:
        return not self.outcomes

    def to_dict(self) -> dict[str, list[str]]:
        """Serialize for display, separating moves from errors."""
        return {
            "moved_files": self.moved_files,
            "errors": self.errors,
        }
