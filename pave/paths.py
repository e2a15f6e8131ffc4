"""Locations of pave's configuration, data and bin directories."""

from __future__ import annotations

import os
import sys
from pathlib import Path

APP_NAME = "pave"
LINKS_FILE_NAME = "links.json"


class UnsupportedPlatformError(OSError):
    """Raised when the running operating system has no known bin directory."""


def _platform() -> str:
    if sys.platform.startswith("linux"):
        return "linux"
    if sys.platform == "darwin":
        return "darwin"
    if sys.platform in ("win32", "cygwin"):
        return "windows"
    return sys.platform


def _user_home_dir() -> Path:
    variable = "USERPROFILE" if _platform() == "windows" else "HOME"
    home = os.environ.get(variable, "")
    if not home:
        raise OSError(f"${variable} is not defined")
    return Path(home)


def _user_config_dir() -> Path:
    platform = _platform()
    if platform == "windows":
        appdata = os.environ.get("APPDATA", "")
        if not appdata:
            raise OSError("%AppData% is not defined")
        return Path(appdata)
    if platform == "darwin":
        home = os.environ.get("HOME", "")
        if not home:
            raise OSError("$HOME is not defined")
        return Path(home) / "Library" / "Application Support"
    config_home = os.environ.get("XDG_CONFIG_HOME", "")
    if config_home:
        if not os.path.isabs(config_home):
            raise OSError("path in $XDG_CONFIG_HOME is relative")
        return Path(config_home)
    home = os.environ.get("HOME", "")
    if not home:
        raise OSError("neither $XDG_CONFIG_HOME nor $HOME are defined")
    return Path(home) / ".config"


def _ensure_dir(directory: Path) -> Path:
    try:
        directory.mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as exc:
        raise OSError(f"failed to create dir {directory}: {exc}") from exc
    return directory


def get_config_dir() -> Path:
    """Return the pave configuration directory, creating it if needed."""
    try:
        base = _user_config_dir()
    except OSError as exc:
        raise OSError(f"failed to get config dir: {exc}") from exc
    return _ensure_dir(base / APP_NAME)


def get_data_dir() -> Path:
    """Return the directory that holds the links registry, creating it if needed."""
    if _platform() == "linux":
        data_home = os.environ.get("XDG_DATA_HOME", "")
        base = Path(data_home) if data_home else _user_home_dir() / ".local" / "share"
        return _ensure_dir(base / APP_NAME)
    return _ensure_dir(_user_config_dir() / APP_NAME / "data")


def get_links_file_path() -> Path:
    """Return the path of the links registry JSON file."""
    return get_data_dir() / LINKS_FILE_NAME


def get_bin_dir() -> Path:
    """Return the directory where links are placed, creating it if needed."""
    platform = _platform()
    if platform == "linux":
        directory = _user_home_dir() / ".local" / "bin"
    elif platform == "darwin":
        directory = _user_home_dir() / "bin"
    elif platform == "windows":
        directory = _user_config_dir() / APP_NAME / "bin"
    else:
        raise UnsupportedPlatformError(f"unsupported OS: {platform}")
    return _ensure_dir(directory)


def is_path_in_path(directory: str | os.PathLike[str]) -> bool:
    """Tell whether ``directory`` appears, after normalisation, in ``PATH``."""
    path_env = os.environ.get("PATH", "")
    if not path_env:
        return False
    wanted = os.path.normpath(os.fspath(directory))
    return any(os.path.normpath(entry) == wanted for entry in path_env.split(os.pathsep))