"""Collision-free destination naming."""

from pathlib import Path


def split_name(name: str) -> tuple[str, str]:
    """
    Split a file name at its last dot.

    Returns:
        (stem, extension) where extension keeps its dot and may be empty.
        Names without a stem (``.bashrc``) have no extension.
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return name, ""
    return stem, f".{ext}"


def unique_target(dest_dir: Path, desired_name: str) -> Path:
    """
    Return a path in ``dest_dir`` that does not exist yet.

    ``dest_dir/desired_name`` is used when free. Otherwise ``_1``, ``_2``, ...
    is appended to the stem until a free name is found, so ``photo.jpg``
    becomes ``photo_1.jpg``. There is no upper bound on the counter.

    The existence check and the later move are not atomic; a concurrent
    writer can still take the name in between.
    """
    dest_dir = Path(dest_dir)
    candidate = dest_dir / desired_name
    if not candidate.exists() and not candidate.is_symlink():
        return candidate

    stem, ext = split_name(desired_name)
    counter = 1
    while True:
        candidate = dest_dir / f"{stem}_{counter}{ext}"
        if not candidate.exists() and not candidate.is_symlink():
            return candidate
        counter += 1
