"""Tests for sidplayer.core.readers: read-or-seed and typed coercions."""
import logging

import pytest

from sidplayer.core.ini import IniHandler
from sidplayer.core.parsing import ParseError
from sidplayer.core.readers import (
    parse_time,
    read_bool,
    read_char,
    read_color,
    read_double,
    read_enum,
    read_int,
    read_key,
    read_string,
    read_time,
)
from sidplayer.core.settings import COLOR_NAMES, Color


def section(body: str) -> IniHandler:
    ini = IniHandler()
    ini.parse(("[S]\n" + body).splitlines(keepends=True))
    ini.set_section("S")
    return ini


# ---------------------------------------------------------------------------
# read-or-seed
# ---------------------------------------------------------------------------

class TestReadKey:
    def test_missing_key_is_seeded(self):
        ini = section("")
        assert read_key(ini, "Frequency") is None
        assert ini.sections() == (("S", (("Frequency", ""),)),)
        assert ini.dirty

    def test_blank_value_is_none(self):
        ini = section("Frequency =\n")
        assert read_key(ini, "Frequency") is None
        assert not ini.dirty

    def test_value_returned(self):
        assert read_key(section("k = v\n"), "k") == "v"

    def test_read_string_seeds_and_returns_blank(self):
        ini = section("")
        assert read_string(ini, "Engine") == ""
        assert ini.get_value("Engine") == ""


# ---------------------------------------------------------------------------
# scalar readers
# ---------------------------------------------------------------------------

class TestScalars:
    def test_read_int(self):
        assert read_int(section("n = 12\n"), "n", 3) == 12

    def test_read_int_missing_keeps_current(self):
        assert read_int(section(""), "n", 3) == 3

    def test_read_int_bad_value_logged(self, caplog):
        with caplog.at_level(logging.ERROR):
            assert read_int(section("n = twelve\n"), "n", 3) == 3
        assert "Error parsing int at n" in caplog.text

    def test_read_double(self):
        assert read_double(section("d = 0.75\n"), "d", 0.5) == pytest.approx(0.75)

    def test_read_double_bad_value(self):
        assert read_double(section("d = x\n"), "d", 0.5) == 0.5

    def test_read_bool(self):
        assert read_bool(section("b = true\n"), "b", False) is True

    def test_read_bool_bad_value(self, caplog):
        with caplog.at_level(logging.ERROR):
            assert read_bool(section("b = perhaps\n"), "b", True) is True
        assert "Error parsing bool at b" in caplog.text


class TestReadChar:
    @pytest.mark.parametrize("value,expected", [
        ("'x'", "x"),
        ("'+'", "+"),
        ("65", "A"),
        ("32", " "),
    ])
    def test_accepted(self, value, expected):
        assert read_char(section(f"c = {value}\n"), "c", "?") == expected

    @pytest.mark.parametrize("value", ["10", "31", "'x", "'xy'", "abc", "-5"])
    def test_rejected(self, value):
        assert read_char(section(f"c = {value}\n"), "c", "?") == "?"

    def test_quoted_control_char_rejected(self):
        assert read_char(section("c = '\t'\n"), "c", "?") == "?"

    def test_missing(self):
        ini = section("")
        assert read_char(ini, "c", "?") == "?"
        assert ini.get_value("c") == ""


# ---------------------------------------------------------------------------
# durations
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text,expected", [
    ("90", 90000),
    ("0", 0),
    ("1:30", 90000),
    ("1:30.5", 90500),
    ("1:30.25", 90250),
    ("1:30.125", 90125),
    ("0:00.001", 1),
    ("99:59.999", (99 * 60 + 59) * 1000 + 999),
])
def test_parse_time(text, expected):
    assert parse_time(text) == expected


@pytest.mark.parametrize("text", [
    "0:60",
    "100:00",
    "-1:00",
    "1:30.1234",
    "1:30.",
    "1:30.x",
    "1:xx",
    "abc",
    "1.5",
])
def test_parse_time_invalid(text):
    with pytest.raises(ParseError):
        parse_time(text)


class TestReadTime:
    def test_valid(self):
        assert read_time(section("t = 2:05\n"), "t") == 125000

    def test_invalid_returns_none(self, caplog):
        with caplog.at_level(logging.ERROR):
            assert read_time(section("t = 0:60\n"), "t") is None
        assert "Invalid time at t" in caplog.text

    def test_missing_seeds(self):
        ini = section("")
        assert read_time(ini, "t") is None
        assert ini.get_value("t") == ""


# ---------------------------------------------------------------------------
# enumerations
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("index,name", list(enumerate(COLOR_NAMES)))
def test_read_color_names(index, name):
    assert read_color(section(f"c = {name}\n"), "c", Color.BLACK) == Color(index)


@pytest.mark.parametrize("value", ["Bright White", "purple", "bright  white", "15"])
def test_read_color_unknown_keeps_current(value):
    assert read_color(section(f"c = {value}\n"), "c", Color.CYAN) is Color.CYAN


def test_color_table():
    assert len(COLOR_NAMES) == 16
    assert COLOR_NAMES[0] == "black"
    assert COLOR_NAMES[15] == "bright white"
    assert Color.BRIGHT_WHITE.label == "bright white"


class TestReadEnum:
    CHOICES = (("A", 1), ("B", 2), ("A", 3))

    def test_first_match_wins(self):
        assert read_enum(section("e = A\n"), "e", self.CHOICES, 0) == 1

    def test_case_sensitive(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert read_enum(section("e = b\n"), "e", self.CHOICES, 0) == 0
        assert "at e" in caplog.text

    def test_blank_keeps_current(self):
        assert read_enum(section("e =\n"), "e", self.CHOICES, 9) == 9
