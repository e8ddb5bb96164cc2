"""Mover component: create destinations and rename entries into them."""

from pathlib import Path

from ..errors import DirectoryCreateFailed, MoveFailed
from ..utils.logging import get_logger
from .resolver import unique_target

logger = get_logger(__name__)


class FileMover:
    """
    Moves desktop entries into their destination directories.

    Moves are plain renames: they never copy data and never overwrite an
    existing file. A rename across filesystems fails and is reported as
    ``MoveFailed``.
    """

    def ensure_directory(self, source: Path, directory: Path) -> None:
        """
        Create ``directory`` and any missing parents.

        Raises:
            DirectoryCreateFailed: If the directory cannot be checked or
                created, or a non-directory is in the way.
        """
        directory = Path(directory)

        try:
            # Nothing to do if it is already there
            if directory.is_dir():
                return
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DirectoryCreateFailed(source, directory, e) from e

        logger.info(f"Created folder: {directory}")

    def move(self, source: Path, dest_dir: Path) -> Path:
        """
        Move ``source`` into ``dest_dir`` under a collision-free name.

        Args:
            source: File or directory to move
            dest_dir: Destination directory, created if missing

        Returns:
            Final path of the moved entry

        Raises:
            DirectoryCreateFailed: If ``dest_dir`` cannot be created
            MoveFailed: If no free name can be checked or the rename fails
        """
        source = Path(source)
        dest_dir = Path(dest_dir)

        # Create destination folder if needed
        self.ensure_directory(source, dest_dir)

        # Resolve naming conflicts
        try:
            destination = unique_target(dest_dir, source.name)
        except OSError as e:
            raise MoveFailed(source, dest_dir / source.name, e) from e

        # Perform the move
        try:
            source.rename(destination)
        except OSError as e:
            raise MoveFailed(source, destination, e) from e

        logger.info(f"Moved: {source.name} -> {destination}")
        return destination
