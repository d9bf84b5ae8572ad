"""Settings viewer entry point.

Loads sidplayfp.ini (creating it and filling in every known key on first
run) and prints the resulting settings.

Usage:
  sidplayer-config
  sidplayer-config --config ./sidplayfp.ini -vv
"""
from __future__ import annotations

import argparse
import os
import sys
from dataclasses import fields
from enum import Enum
from typing import List, Optional

# Add the src directory to the Python path when run as a script
if __package__ in (None, ""):
    src_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    if src_path not in sys.path:
        sys.path.insert(0, src_path)

from sidplayer.core.config import ConfigManager  # noqa: E402
from sidplayer.core.logging_setup import level_from_verbosity, setup_logging  # noqa: E402


def format_value(value) -> str:
    if isinstance(value, Enum):
        label = getattr(value, "label", None)
        return label if label is not None else value.name
    return str(value)


def describe(config: ConfigManager) -> List[str]:
    """Render every setting as '[Group] field = value'."""
    lines: List[str] = []
    groups = (
        ("General", config.general),
        ("Console", config.console),
        ("Audio", config.audio),
        ("Emulation", config.emulation),
    )
    for group, record in groups:
        for f in fields(record):
            lines.append(f"[{group}] {f.name} = {format_value(getattr(record, f.name))}")
    return lines


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="sidplayer-config", description="Show the player settings")
    ap.add_argument("-c", "--config", type=str, default=None, help="INI file to use instead of the per-user one")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="more log output (repeatable)")
    ap.add_argument("--log-file", type=str, default=None, help="also write log output to this file")
    args = ap.parse_args(argv)

    setup_logging(level_from_verbosity(args.verbose), log_file=args.log_file)

    config = ConfigManager(args.config)
    print(f"Config file: {config.config_path}")
    for line in describe(config):
        print(line)
    return 0 if config.loaded else 1


if __name__ == "__main__":
    sys.exit(main())
