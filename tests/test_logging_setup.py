"""Tests for sidplayer.core.logging_setup."""
import logging

import pytest

from sidplayer.core.logging_setup import _level_from_str, level_from_verbosity, setup_logging


@pytest.mark.parametrize("value,expected", [
    (None, logging.INFO),
    ("", logging.INFO),
    ("debug", logging.DEBUG),
    (" Warn ", logging.WARNING),
    ("ERROR", logging.ERROR),
    ("bogus", logging.INFO),
])
def test_level_from_str(value, expected):
    assert _level_from_str(value) == expected


@pytest.mark.parametrize("count,expected", [
    (0, logging.WARNING),
    (1, logging.INFO),
    (2, logging.DEBUG),
    (5, logging.DEBUG),
])
def test_level_from_verbosity(count, expected):
    assert level_from_verbosity(count) == expected


def test_setup_replaces_handlers(restore_root_logger):
    setup_logging("DEBUG")
    setup_logging(logging.WARNING)
    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1


def test_setup_with_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "sidplayer.log"
    root = setup_logging("INFO", log_file=log_file)
    logging.getLogger("sidplayer.test").info("hello file")
    for h in root.handlers:
        h.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")
    assert "| INFO     | sidplayer.test |" in log_file.read_text(encoding="utf-8")
