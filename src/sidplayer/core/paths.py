"""core.paths
Per-user config and data directory lookup.

Two implementations share one small interface so the config reader never
checks which platform it runs on:
- PosixPaths: XDG_CONFIG_HOME / XDG_DATA_HOME, falling back to ~/.config
  and ~/.local/share
- WindowsPaths: %APPDATA% (or %USERPROFILE%\\Application Data), plus a
  config file next to the executable that takes precedence when present
"""
from __future__ import annotations

import os
import sys
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Mapping, Optional

DIR_NAME = "sidplayfp"
FILE_NAME = "sidplayfp.ini"
SONGLENGTH_FILE = "Songlengths.txt"


class PathResolutionError(Exception):
    """The platform base directory cannot be determined."""


class ConfigPathError(Exception):
    """A config directory could not be created or is not a directory."""


def _getenv(environ: Mapping[str, str], name: str) -> Optional[str]:
    value = environ.get(name)
    return value if value else None


class PlatformPaths:
    """Base directories for config and data files."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self.environ = os.environ if environ is None else environ

    def config_path(self) -> str:
        raise NotImplementedError

    def data_path(self) -> str:
        raise NotImplementedError

    def candidate_files(self, file_name: str) -> list[str]:
        """Alternate config files tried before the per-user location."""
        return []


class PosixPaths(PlatformPaths):
    def _path(self, xdg_var: str, default: str) -> str:
        path = _getenv(self.environ, xdg_var)
        if path:
            return path
        home = _getenv(self.environ, "HOME")
        if not home:
            raise PathResolutionError(f"Neither {xdg_var} nor HOME is set")
        return str(PurePosixPath(home, default))

    def config_path(self) -> str:
        return self._path("XDG_CONFIG_HOME", ".config")

    def data_path(self) -> str:
        return self._path("XDG_DATA_HOME", ".local/share")


class WindowsPaths(PlatformPaths):
    def _path(self) -> str:
        path = _getenv(self.environ, "APPDATA")
        if path:
            return path
        profile = _getenv(self.environ, "USERPROFILE")
        if not profile:
            raise PathResolutionError("Neither APPDATA nor USERPROFILE is set")
        return str(PureWindowsPath(profile, "Application Data"))

    def config_path(self) -> str:
        return self._path()

    def data_path(self) -> str:
        return self._path()

    def exec_path(self) -> str:
        """Directory of the running executable (frozen build) or launching script."""
        if getattr(sys, "frozen", False):
            return os.path.dirname(sys.executable)
        return os.path.dirname(os.path.abspath(sys.argv[0]))

    def candidate_files(self, file_name: str) -> list[str]:
        return [os.path.join(self.exec_path(), file_name)]


def get_platform_paths(environ: Optional[Mapping[str, str]] = None) -> PlatformPaths:
    if os.name == "nt":
        return WindowsPaths(environ)
    return PosixPaths(environ)


def create_dir(path) -> None:
    """Create one directory level if it does not exist yet."""
    p = Path(path)
    try:
        p.mkdir(mode=0o755)
    except FileExistsError:
        if not p.is_dir():
            raise ConfigPathError(f"Not a directory: {p}") from None
    except OSError as e:
        raise ConfigPathError(e.strerror or str(e)) from e
