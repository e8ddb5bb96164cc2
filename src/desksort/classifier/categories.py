"""Built-in category table used to seed the mapping store."""

from pathlib import Path

# Mapping key used for every directory, whatever its name
FOLDER_KEY = "folder"

# Category name -> extensions. The category name doubles as the folder name
# under the sorted base directory.
DEFAULT_CATEGORIES: dict[str, tuple[str, ...]] = {
    "Documents": (".pdf", ".docx", ".doc", ".txt", ".odt", ".rtf"),
    "Spreadsheets": (".xls", ".xlsx", ".csv", ".ods"),
    "Presentations": (".pptx", ".odp", ".key"),
    "Images": (".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp", ".tiff"),
    "Videos": (".mp4", ".mkv", ".avi", ".mov", ".webm", ".flv", ".wmv"),
    "Audio": (".mp3", ".wav", ".aac", ".ogg", ".flac"),
    "Archives": (".zip", ".rar", ".7z", ".tar", ".gz", ".tar.gz"),
    "Executables": (".exe", ".msi", ".sh", ".bat", ".AppImage"),
    "Code": (".js", ".py", ".rs", ".cpp", ".java", ".html", ".css", ".json", ".ts"),
    "Folders": (FOLDER_KEY,),
}


def normalize_key(key: str) -> str:
    """
    Normalize a mapping key for storage and lookup.

    Keys are lowercased and extensions get a leading dot, so ``PDF``,
    ``.pdf`` and ``.PDF`` are the same key. The directory sentinel
    (``folder`` or ``directory``) maps to ``FOLDER_KEY``.

    Raises:
        ValueError: If the key is empty.
    """
    key = key.strip().lower()
    if not key or key == ".":
        raise ValueError("Mapping key must not be empty")
    if key in (FOLDER_KEY, "directory"):
        return FOLDER_KEY
    if not key.startswith("."):
        key = f".{key}"
    return key


_KEY_TO_CATEGORY = {
    normalize_key(ext): category
    for category, extensions in DEFAULT_CATEGORIES.items()
    for ext in extensions
}


def category_for(key: str) -> str | None:
    """Return the built-in category name for a key, or None if it has none."""
    try:
        return _KEY_TO_CATEGORY.get(normalize_key(key))
    except ValueError:
        return None


def default_mappings(sorted_dir: Path) -> list[tuple[str, Path]]:
    """
    Build the first-run mapping table rooted at ``sorted_dir``.

    Args:
        sorted_dir: Base directory, normally ``<desktop>/Sorted``

    Returns:
        (normalized key, destination directory) pairs in table order
    """
    sorted_dir = Path(sorted_dir)
    return [
        (normalize_key(ext), sorted_dir / category)
        for category, extensions in DEFAULT_CATEGORIES.items()
        for ext in extensions
    ]
