"""Exception hierarchy for DeskSort.

Call-level failures (``EnvironmentPathNotFound``, ``DirectoryNotFound``,
``MappingStoreError``, ``ConfigError``) propagate to the caller. Entry-level
failures (``EntryReadFailed``, ``DirectoryCreateFailed``, ``MoveFailed``) are
caught by the sort engine and recorded in the report instead.
"""

from pathlib import Path


class DeskSortError(Exception):
    """Base class for all DeskSort errors."""


class EnvironmentPathNotFound(DeskSortError):
    """The platform could not supply a required directory (desktop, config)."""

    def __init__(self, what: str, detail: str | None = None):
        self.what = what
        message = f"{what} path not found"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class ConfigError(DeskSortError):
    """Configuration file is unreadable or invalid."""


class DirectoryNotFound(DeskSortError):
    """The scan root does not exist or is not a directory."""

    def __init__(self, path: Path, message: str | None = None):
        self.path = Path(path)
        super().__init__(message or f"Directory not found: {self.path}")


class DirectoryUnreadable(DirectoryNotFound):
    """The scan root exists but its entries cannot be listed."""

    def __init__(self, path: Path, cause: OSError):
        self.cause = cause
        super().__init__(path, f"Cannot read directory {path}: {cause}")


class MappingStoreError(DeskSortError):
    """Reading or writing the mapping store failed."""


class EntryError(DeskSortError):
    """Base class for failures tied to a single entry of a scan."""

    def __init__(self, source: Path, cause: OSError):
        self.source = Path(source)
        self.cause = cause
        super().__init__(self.describe())

    def describe(self) -> str:
        return str(self.cause)


class DirectoryCreateFailed(EntryError):
    """The destination directory for an entry could not be created."""

    def __init__(self, source: Path, directory: Path, cause: OSError):
        self.directory = Path(directory)
        super().__init__(source, cause)

    def describe(self) -> str:
        return f"Failed to create target directory {self.directory}: {self.cause}"


class MoveFailed(EntryError):
    """Renaming an entry into its destination failed."""

    def __init__(self, source: Path, destination: Path, cause: OSError):
        self.destination = Path(destination)
        super().__init__(source, cause)


class EntryReadFailed(EntryError):
    """An entry was listed but its type could not be read."""

    def describe(self) -> str:
        return f"Failed to read entry: {self.cause}"
