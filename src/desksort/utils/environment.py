"""Locate the user's desktop and DeskSort's config directory."""

import os
import platform
from pathlib import Path

from ..errors import EnvironmentPathNotFound

APP_DIR_NAME = "desksort"


def _home_dir() -> Path:
    try:
        return Path.home()
    except RuntimeError as e:
        raise EnvironmentPathNotFound("Home directory", str(e)) from e


def resolve_desktop_dir() -> Path:
    """
    Return the user's desktop directory.

    ``XDG_DESKTOP_DIR`` wins when set; otherwise ``~/Desktop``. The directory
    is not required to exist, scanning a missing desktop fails later with
    ``DirectoryNotFound``.

    Raises:
        EnvironmentPathNotFound: If the home directory cannot be determined.
    """
    xdg_desktop = os.environ.get("XDG_DESKTOP_DIR")
    if xdg_desktop:
        return Path(os.path.expandvars(xdg_desktop)).expanduser()
    return _home_dir() / "Desktop"


def resolve_config_dir() -> Path:
    """
    Return DeskSort's per-user configuration directory.

    Raises:
        EnvironmentPathNotFound: If the platform cannot supply a config root.
    """
    system = platform.system()

    if system == "Windows":
        appdata = os.environ.get("APPDATA")
        if not appdata:
            raise EnvironmentPathNotFound("Config directory", "APPDATA is not set")
        base = Path(appdata)
    elif system == "Darwin":
        base = _home_dir() / "Library" / "Application Support"
    else:
        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        base = Path(xdg_config) if xdg_config else _home_dir() / ".config"

    return base / APP_DIR_NAME
