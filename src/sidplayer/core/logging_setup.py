"""Logging setup utilities for sidplayer.

Provides a single setup function to configure application-wide logging with:
- Console handler on stderr
- Optional file handler
- Level from a name ("DEBUG", "warn", ...), a logging constant, or a
  -v count via level_from_verbosity()

Usage:
    from .core.logging_setup import setup_logging
    setup_logging("DEBUG", log_file="sidplayer.log")
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _level_from_str(value: Optional[str]) -> int:
    if not value:
        return logging.INFO
    v = str(value).strip().upper()
    mapping = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARNING": logging.WARNING,
        "WARN": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }
    return mapping.get(v, logging.INFO)


def level_from_verbosity(count: int) -> int:
    """Map a repeated -v flag to a level: none -> WARNING, -v -> INFO, -vv -> DEBUG."""
    if count <= 0:
        return logging.WARNING
    if count == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(level: Optional[Union[str, int]] = None, log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Configure the root logger with a console handler and an optional file.

    Existing root handlers are replaced so repeated calls do not duplicate
    output. Returns the root logger.
    """
    if isinstance(level, str) or level is None:
        lvl = _level_from_str(level)
    else:
        lvl = level

    logger = logging.getLogger()
    logger.setLevel(lvl)

    # Clear existing handlers to avoid duplicates on re-run
    for h in logger.handlers[:]:
        logger.removeHandler(h)

    fmt = logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT)

    ch = logging.StreamHandler()
    ch.setLevel(lvl)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8", delay=True)
        fh.setLevel(lvl)
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logger.debug("Logging initialized: level=%s, file=%s", logging.getLevelName(lvl), log_file)
    return logger
