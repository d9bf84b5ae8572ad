"""Value parsing primitives.

Convert a raw INI value into an int, float or bool. Every parser raises
ParseError on malformed input so callers can fall back to a default.
"""
from __future__ import annotations

import re
from configparser import ConfigParser

_INT_RE = re.compile(r"[+-]?[0-9]+")
_DOUBLE_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


class ParseError(ValueError):
    """Raised when a text token cannot be converted to the requested type."""


def parse_int(text: str) -> int:
    token = text.strip()
    if not _INT_RE.fullmatch(token):
        raise ParseError(f"Not an integer: {text!r}")
    return int(token)


def parse_double(text: str) -> float:
    token = text.strip()
    if not _DOUBLE_RE.fullmatch(token):
        raise ParseError(f"Not a number: {text!r}")
    return float(token)


def parse_bool(text: str) -> bool:
    """Accept the same words ConfigParser does (yes/no, on/off, true/false, 1/0)."""
    token = text.strip().lower()
    try:
        return ConfigParser.BOOLEAN_STATES[token]
    except KeyError:
        raise ParseError(f"Not a boolean: {text!r}") from None
