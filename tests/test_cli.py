"""Tests for the command-line interface."""

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner
from rich.console import Console

from desksort.cli import main
from desksort.cli.main import cli


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    """Avoid Rich wrapping long temporary paths."""
    monkeypatch.setattr(main, "console", Console(width=300, highlight=False))


@pytest.fixture
def desktop(tmp_path):
    path = tmp_path / "Desktop"
    path.mkdir()
    return path


@pytest.fixture
def config_file(tmp_path, desktop, monkeypatch):
    """Write a config that keeps everything inside tmp_path."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))

    path = tmp_path / "config.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "desktop_dir": str(desktop),
                "database": {"path": str(tmp_path / "settings.db")},
                "logging": {"console_enabled": False, "file_enabled": False},
            }
        )
    )
    return path


@pytest.fixture
def runner():
    return CliRunner()


def invoke(runner, config_file, *args):
    return runner.invoke(cli, ["--config", str(config_file), *args])


class TestSortCommand:
    """Tests for `desksort sort`."""

    def test_sort_moves_files(self, runner, config_file, desktop):
        (desktop / "report.pdf").write_text("pdf")
        (desktop / "photo.png").write_text("png")
        (desktop / "notes").write_text("stay")

        result = invoke(runner, config_file, "sort")

        assert result.exit_code == 0, result.output
        assert "Successfully moved 2 items" in result.output
        assert (desktop / "Sorted" / "Documents" / "report.pdf").exists()
        assert (desktop / "Sorted" / "Images" / "photo.png").exists()
        assert (desktop / "notes").exists()

    def test_sort_empty_desktop(self, runner, config_file):
        result = invoke(runner, config_file, "sort")

        assert result.exit_code == 0, result.output
        assert "Successfully moved 0 items" in result.output

    def test_sort_reports_entry_errors(self, runner, config_file, desktop, tmp_path):
        """Test that per-entry failures are listed but do not fail the command."""
        blocker = tmp_path / "blocker"
        blocker.write_text("file")
        invoke(runner, config_file, "mappings", "set", ".bad", str(blocker / "Bad"))
        (desktop / "a.bad").write_text("a")
        (desktop / "b.pdf").write_text("b")

        result = invoke(runner, config_file, "sort")

        assert result.exit_code == 0, result.output
        assert "Sorting completed with 1 errors" in result.output
        assert "Failed to move" in result.output
        assert "Moved 1 items" in result.output

    def test_sort_missing_root(self, runner, config_file, tmp_path):
        result = invoke(runner, config_file, "sort", "--root", str(tmp_path / "nope"))

        assert result.exit_code == 1
        assert "Sorting failed" in result.output
        assert "Directory not found" in result.output

    def test_sort_other_root(self, runner, config_file, tmp_path, desktop):
        downloads = tmp_path / "Downloads"
        downloads.mkdir()
        (downloads / "song.mp3").write_text("mp3")

        result = invoke(runner, config_file, "sort", "--root", str(downloads))

        assert result.exit_code == 0, result.output
        assert (desktop / "Sorted" / "Audio" / "song.mp3").exists()


class TestMappingsCommands:
    """Tests for `desksort mappings`."""

    def test_list(self, runner, config_file):
        result = invoke(runner, config_file, "mappings", "list")

        assert result.exit_code == 0, result.output
        assert ".pdf" in result.output
        assert "Documents" in result.output
        assert "folder" in result.output

    def test_get(self, runner, config_file, desktop):
        result = invoke(runner, config_file, "mappings", "get", "PDF")

        assert result.exit_code == 0, result.output
        assert str(desktop / "Sorted" / "Documents") in result.output

    def test_get_unmapped(self, runner, config_file):
        result = invoke(runner, config_file, "mappings", "get", ".xyz")

        assert result.exit_code == 1
        assert "No mapping for .xyz" in result.output

    def test_set_then_get(self, runner, config_file, tmp_path):
        target = tmp_path / "Papers"

        set_result = invoke(runner, config_file, "mappings", "set", ".pdf", str(target))
        get_result = invoke(runner, config_file, "mappings", "get", ".pdf")

        assert set_result.exit_code == 0, set_result.output
        assert str(target) in get_result.output

    def test_set_empty_extension(self, runner, config_file, tmp_path):
        result = invoke(runner, config_file, "mappings", "set", " ", str(tmp_path))

        assert result.exit_code == 2


class TestInitAndConfig:
    """Tests for `desksort init` and `desksort config show`."""

    def test_init_with_existing_config(self, runner, config_file, tmp_path):
        result = invoke(runner, config_file, "init")

        assert result.exit_code == 0, result.output
        assert "Loaded configuration from" in result.output
        assert "Initialization complete" in result.output
        assert (tmp_path / "settings.db").exists()

    def test_init_creates_default_config(self, runner, tmp_path, monkeypatch):
        """Test that init writes a config file into the config dir."""
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
        monkeypatch.setenv("XDG_DESKTOP_DIR", str(tmp_path / "Desktop"))
        monkeypatch.setattr("desksort.utils.environment.platform.system", lambda: "Linux")
        monkeypatch.setattr("desksort.cli.main.setup_logging", lambda **kwargs: None)

        result = runner.invoke(cli, ["init"])

        assert result.exit_code == 0, result.output
        assert "Created default configuration" in result.output
        assert (tmp_path / "xdg" / "desksort" / "config.yaml").exists()
        assert (tmp_path / "xdg" / "desksort" / "settings.db").exists()

    def test_config_show(self, runner, config_file, desktop):
        result = invoke(runner, config_file, "config", "show")

        assert result.exit_code == 0, result.output
        assert str(desktop) in result.output
        assert "Sorted folder: Sorted" in result.output

    def test_invalid_config(self, runner, tmp_path):
        bad = tmp_path / "bad.yaml"
        bad.write_text("logging:\n  level: chatty\n")

        result = runner.invoke(cli, ["--config", str(bad), "sort"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
