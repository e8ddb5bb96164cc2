"""Tests for the classifier component."""

import os
from pathlib import Path

import pytest

from desksort.classifier import (
    DEFAULT_CATEGORIES,
    FOLDER_KEY,
    Entry,
    EntryKind,
    FileClassifier,
    category_for,
    default_mappings,
    normalize_key,
)


def file_entry(name: str) -> Entry:
    return Entry(path=Path("/desk") / name, kind=EntryKind.FILE)


class TestEntry:
    """Tests for Entry."""

    def test_extension_is_lowercase_with_dot(self):
        """Test extension normalization."""
        assert file_entry("Report.PDF").extension == ".pdf"

    def test_extension_uses_last_dot(self):
        """Test that only the last suffix counts."""
        assert file_entry("backup.tar.gz").extension == ".gz"

    def test_no_extension(self):
        """Test files without an extension."""
        assert file_entry("notes").extension == ""
        assert file_entry("trailing.").extension == ""

    def test_directory_extension_is_sentinel(self):
        """Test that directories always report the folder key."""
        entry = Entry(path=Path("/desk/photos.2023"), kind=EntryKind.DIRECTORY)
        assert entry.extension == FOLDER_KEY

    def test_is_hidden(self):
        """Test hidden entry detection."""
        assert file_entry(".DS_Store").is_hidden
        assert file_entry(".gitignore").is_hidden
        assert not file_entry("visible.txt").is_hidden

    def test_from_dir_entry(self, tmp_path):
        """Test building entries from scandir results."""
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "sub").mkdir()

        with os.scandir(tmp_path) as it:
            entries = {e.name: Entry.from_dir_entry(e) for e in it}

        assert entries["a.txt"].kind is EntryKind.FILE
        assert entries["sub"].kind is EntryKind.DIRECTORY
        assert entries["a.txt"].path == tmp_path / "a.txt"

    def test_symlink_to_directory_is_not_followed(self, tmp_path):
        """Test that a link to a directory is treated as a file."""
        target = tmp_path / "real_dir"
        target.mkdir()
        link = tmp_path / "link.zip"
        try:
            link.symlink_to(target, target_is_directory=True)
        except OSError:
            pytest.skip("symlinks not supported")

        with os.scandir(tmp_path) as it:
            entries = {e.name: Entry.from_dir_entry(e) for e in it}

        assert entries["link.zip"].kind is EntryKind.FILE
        assert entries["link.zip"].extension == ".zip"


class TestFileClassifier:
    """Tests for FileClassifier."""

    @pytest.fixture
    def classifier(self):
        return FileClassifier()

    @pytest.mark.parametrize("name", ["REPORT.PDF", "report.pdf", "Report.Pdf"])
    def test_case_insensitive(self, classifier, name):
        """Test that differently-cased names classify identically."""
        assert classifier.classify(file_entry(name)) == ".pdf"

    def test_no_extension_is_unclassified(self, classifier):
        """Test that a file without extension is skipped."""
        assert classifier.classify(file_entry("notes")) is None

    def test_unknown_extension_still_has_key(self, classifier):
        """Test that unknown extensions produce a key (lookup decides)."""
        assert classifier.classify(file_entry("archive.xyz")) == ".xyz"

    def test_directory_classified_as_folder(self, classifier):
        """Test that directories use the sentinel regardless of name."""
        entry = Entry(path=Path("/desk/Photos2023"), kind=EntryKind.DIRECTORY)
        assert classifier.classify(entry) == FOLDER_KEY

        dotted = Entry(path=Path("/desk/site.html"), kind=EntryKind.DIRECTORY)
        assert classifier.classify(dotted) == FOLDER_KEY


class TestCategories:
    """Tests for the built-in category table."""

    def test_normalize_key(self):
        """Test key normalization."""
        assert normalize_key(".PDF") == ".pdf"
        assert normalize_key("pdf") == ".pdf"
        assert normalize_key(" .Jpg ") == ".jpg"
        assert normalize_key("Folder") == FOLDER_KEY
        assert normalize_key("directory") == FOLDER_KEY

    @pytest.mark.parametrize("key", ["", "   ", "."])
    def test_normalize_key_rejects_empty(self, key):
        """Test that empty keys are rejected."""
        with pytest.raises(ValueError):
            normalize_key(key)

    def test_category_for(self):
        """Test category lookup for known and unknown keys."""
        assert category_for(".docx") == "Documents"
        assert category_for("XLSX") == "Spreadsheets"
        assert category_for(".appimage") == "Executables"
        assert category_for("folder") == "Folders"
        assert category_for(".xyz") is None
        assert category_for("") is None

    def test_default_groupings(self):
        """Test that the default table covers every expected group."""
        assert set(DEFAULT_CATEGORIES) == {
            "Documents",
            "Spreadsheets",
            "Presentations",
            "Images",
            "Videos",
            "Audio",
            "Archives",
            "Executables",
            "Code",
            "Folders",
        }
        assert ".tar.gz" in DEFAULT_CATEGORIES["Archives"]
        assert ".key" in DEFAULT_CATEGORIES["Presentations"]

    def test_default_mappings(self, tmp_path):
        """Test that defaults are rooted under the sorted directory."""
        sorted_dir = tmp_path / "Sorted"
        mappings = dict(default_mappings(sorted_dir))

        assert mappings[".pdf"] == sorted_dir / "Documents"
        assert mappings[".tiff"] == sorted_dir / "Images"
        assert mappings[".flac"] == sorted_dir / "Audio"
        assert mappings[".appimage"] == sorted_dir / "Executables"
        assert mappings[".ts"] == sorted_dir / "Code"
        assert mappings[FOLDER_KEY] == sorted_dir / "Folders"

    def test_default_keys_unique(self, tmp_path):
        """Test that no two defaults share a key."""
        keys = [key for key, _ in default_mappings(tmp_path)]
        assert len(keys) == len(set(keys))
        assert len(keys) == sum(len(exts) for exts in DEFAULT_CATEGORIES.values())
