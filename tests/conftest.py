"""Pytest configuration.

Ensures src/ is on sys.path so tests can import `sidplayer.*` without an
install, and provides platform paths rooted in a temporary directory.
"""

import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from sidplayer.core.paths import PosixPaths  # noqa: E402


@pytest.fixture
def xdg_paths(tmp_path):
    """PosixPaths whose config and data homes live under tmp_path."""
    return PosixPaths(environ={
        "HOME": str(tmp_path / "home"),
        "XDG_CONFIG_HOME": str(tmp_path / "config"),
        "XDG_DATA_HOME": str(tmp_path / "data"),
    })


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for h in root.handlers[:]:
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)
