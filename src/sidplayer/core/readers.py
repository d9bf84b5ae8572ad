"""Typed key readers for IniHandler.

Every reader looks the key up in the selected section. A key that is
missing altogether is added with an empty value so the written file lists
every known option. A blank value means "use the default".

Readers return the parsed value, or ``current`` when nothing valid was
supplied. Parse failures are logged against the key and never raised.
"""
from __future__ import annotations

import logging
import re
from typing import Optional, Sequence, TypeVar

from .ini import IniHandler
from .parsing import ParseError, parse_bool, parse_double, parse_int
from .settings import COLOR_NAMES, Color

logger = logging.getLogger(__name__)

T = TypeVar("T")

_FRACTION_RE = re.compile(r"[0-9]{1,3}")


def read_key(ini: IniHandler, key: str) -> Optional[str]:
    """Return the raw value, or None when missing (seeding it) or blank."""
    value = ini.get_value(key)
    if value is None:
        ini.add_value(key, "")
        logger.debug("Key doesn't exist: %s", key)
        return None
    if not value:
        return None
    return value


def read_string(ini: IniHandler, key: str) -> str:
    value = ini.get_value(key)
    if value is None:
        ini.add_value(key, "")
        logger.debug("Key doesn't exist: %s", key)
        return ""
    return value


def read_int(ini: IniHandler, key: str, current: int) -> int:
    value = read_key(ini, key)
    if value is None:
        return current
    try:
        return parse_int(value)
    except ParseError:
        logger.error("Error parsing int at %s", key)
        return current


def read_double(ini: IniHandler, key: str, current: float) -> float:
    value = read_key(ini, key)
    if value is None:
        return current
    try:
        return parse_double(value)
    except ParseError:
        logger.error("Error parsing double at %s", key)
        return current


def read_bool(ini: IniHandler, key: str, current: bool) -> bool:
    value = read_key(ini, key)
    if value is None:
        return current
    try:
        return parse_bool(value)
    except ParseError:
        logger.error("Error parsing bool at %s", key)
        return current


def read_char(ini: IniHandler, key: str, current: str) -> str:
    """Read a single character given as 'c' or as a decimal code point.

    Control characters (below 32) are rejected.
    """
    text = read_string(ini, key)
    if not text:
        return current

    if text[0] == "'":
        if len(text) < 3 or text[2] != "'":
            return current
        code = ord(text[1])
    else:
        try:
            code = parse_int(text)
        except ParseError:
            logger.error("Error parsing int at %s", key)
            return current

    if code < 32 or code > 0x10FFFF:
        return current
    return chr(code)


def parse_time(text: str) -> int:
    """Convert "SS" or "MM:SS[.mmm]" to milliseconds.

    Minutes run 0-99 and seconds 0-59. One to three fraction digits are
    scaled to thousandths. Raises ParseError on any malformed or
    out-of-range component.
    """
    sep = text.find(":")
    if sep < 0:
        return parse_int(text) * 1000

    minutes = parse_int(text[:sep])
    if not 0 <= minutes <= 99:
        raise ParseError(f"Minutes out of range: {minutes}")

    milliseconds = 0
    dot = text.find(".", sep + 1)
    if dot < 0:
        seconds = parse_int(text[sep + 1:])
    else:
        seconds = parse_int(text[sep + 1:dot])
        fraction = text[dot + 1:]
        if not _FRACTION_RE.fullmatch(fraction):
            raise ParseError(f"Bad fraction: {fraction!r}")
        milliseconds = int(fraction) * (100, 10, 1)[len(fraction) - 1]

    if not 0 <= seconds <= 59:
        raise ParseError(f"Seconds out of range: {seconds}")

    return (minutes * 60 + seconds) * 1000 + milliseconds


def read_time(ini: IniHandler, key: str) -> Optional[int]:
    """Return the duration in milliseconds, or None if absent or invalid."""
    text = read_string(ini, key)
    if not text:
        return None
    try:
        return parse_time(text)
    except ParseError as e:
        logger.error("Invalid time at %s: %s", key, e)
        return None


def read_enum(ini: IniHandler, key: str, choices: Sequence[tuple[str, T]], current: T) -> T:
    """Match the value exactly against (name, member) pairs; first match wins."""
    text = read_string(ini, key)
    if not text:
        return current
    for name, member in choices:
        if text == name:
            return member
    logger.warning("Unknown value %r at %s", text, key)
    return current


_COLOR_CHOICES = tuple((name, Color(index)) for index, name in enumerate(COLOR_NAMES))


def read_color(ini: IniHandler, key: str, current: Color) -> Color:
    return read_enum(ini, key, _COLOR_CHOICES, current)
