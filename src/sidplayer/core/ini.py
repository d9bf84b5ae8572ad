"""core.ini
Order-preserving INI file model.

IniHandler keeps a file as an ordered list of sections, each holding an
ordered list of (key, value) entries. Comment lines are stored as entries
with an empty key so they are written back exactly as they were read.

Behaviour:
- Blank lines are dropped; a blank line is emitted after every section.
- Lines before the first [section] header are discarded.
- Malformed headers and key lines without '=' are skipped silently.
- The file is rewritten on close() only if something was added or removed.
- A leading UTF-8 byte order mark is skipped on read.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

_ENCODING = "utf-8"
# Tolerates a leading byte order mark left by some editors
_READ_ENCODING = "utf-8-sig"
_ERRORS = "surrogateescape"

Entry = tuple[str, str]


class _Malformed(Exception):
    pass


def _parse_section(line: str) -> str:
    end = line.find("]")
    if end < 0:
        raise _Malformed(line)
    return line[1:end]


def _parse_key(line: str) -> Entry:
    eq = line.find("=")
    if eq < 0:
        raise _Malformed(line)
    key = line[:eq].rstrip(" ")
    if not key:
        # Empty keys are reserved for comment entries
        raise _Malformed(line)
    value = line[eq + 1:].lstrip(" ")
    return key, value


class IniHandler:
    """Section/key-value store backed by an INI text file.

    All lookups and mutations act on the section selected with
    set_section() or add_section(). The selection is an index into the
    section list; a failed set_section() leaves it at the end so that a
    following add_section() appends.
    """

    def __init__(self) -> None:
        self._sections: list[tuple[str, list[Entry]]] = []
        self._cursor: Optional[int] = None
        self._file_name: Optional[Path] = None
        self._dirty = False

    def __enter__(self) -> "IniHandler":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def file_name(self) -> Optional[Path]:
        return self._file_name

    @property
    def dirty(self) -> bool:
        return self._dirty

    def sections(self) -> tuple[tuple[str, tuple[Entry, ...]], ...]:
        """Return an immutable snapshot of every section and its entries."""
        return tuple((name, tuple(entries)) for name, entries in self._sections)

    # ------------------------------------------------------------------
    # File handling
    # ------------------------------------------------------------------
    def open(self, path) -> bool:
        """Load path, creating an empty file there only if none exists."""
        try:
            self._read(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error("Cannot open %s: %s", path, e.strerror or e)
            return False
        else:
            return True

        try:
            with open(path, "x", encoding=_ENCODING):
                pass
        except OSError as e:
            logger.error("Cannot create %s: %s", path, e.strerror or e)
            return False
        return True

    def try_open(self, path) -> bool:
        """Load path if it can be opened; never creates anything."""
        try:
            self._read(path)
        except OSError as e:
            logger.debug("Cannot open %s: %s", path, e.strerror or e)
            return False
        return True

    def _read(self, path) -> None:
        self._file_name = Path(path)
        with open(path, "r", encoding=_READ_ENCODING, errors=_ERRORS) as fh:
            self.parse(fh)

    def parse(self, lines: Iterable[str]) -> None:
        """Append the sections found in lines to the in-memory model."""
        for raw in lines:
            line = raw.rstrip("\r\n")
            if not line:
                continue

            first = line[0]
            if first in (";", "#"):
                if self._sections:
                    self._sections[-1][1].append(("", line))
            elif first == "[":
                try:
                    self._sections.append((_parse_section(line), []))
                except _Malformed:
                    continue
            else:
                # Keys above the first header are discarded
                if not self._sections:
                    continue
                try:
                    self._sections[-1][1].append(_parse_key(line))
                except _Malformed:
                    continue

    def write(self, path) -> bool:
        """Serialize every section to path. Returns False if it cannot be opened."""
        try:
            with open(path, "w", encoding=_ENCODING, errors=_ERRORS) as fh:
                for name, entries in self._sections:
                    fh.write(f"[{name}]\n")
                    for key, value in entries:
                        if key:
                            fh.write(f"{key} = ")
                        fh.write(f"{value}\n")
                    fh.write("\n")
        except OSError as e:
            logger.error("Cannot write %s: %s", path, e.strerror or e)
            return False
        return True

    def close(self) -> None:
        """Write back if anything changed, then drop all state. Safe to call twice."""
        if self._dirty and self._file_name is not None:
            self.write(self._file_name)

        self._sections.clear()
        self._cursor = None
        self._file_name = None
        self._dirty = False

    # ------------------------------------------------------------------
    # Section cursor
    # ------------------------------------------------------------------
    def set_section(self, name: str) -> bool:
        for index, (section, _entries) in enumerate(self._sections):
            if section == name:
                self._cursor = index
                return True
        self._cursor = len(self._sections)
        return False

    def add_section(self, name: str) -> None:
        index = len(self._sections) if self._cursor is None else min(self._cursor, len(self._sections))
        self._sections.insert(index, (name, []))
        self._cursor = index
        self._dirty = True

    def _entries(self) -> list[Entry]:
        if self._cursor is None or self._cursor >= len(self._sections):
            raise RuntimeError("No INI section selected")
        return self._sections[self._cursor][1]

    # ------------------------------------------------------------------
    # Keys
    # ------------------------------------------------------------------
    def get_value(self, key: str) -> Optional[str]:
        for k, v in self._entries():
            if k == key:
                return v
        return None

    def add_value(self, key: str, value: str) -> None:
        self._entries().append((key, value))
        self._dirty = True

    def remove_value(self, key: str) -> None:
        entries = self._entries()
        for index, (k, _v) in enumerate(entries):
            if k == key:
                del entries[index]
                self._dirty = True
                return
