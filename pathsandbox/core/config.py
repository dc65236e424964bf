# pathsandbox/core/config.py
#!/usr/bin/env python3
"""
Sandbox settings.

- ENV: PATHSANDBOX_ROWS=30, PATHSANDBOX_HEURISTIC=octile, ...
- CLI: --rows=30 --moves=4 --start=0,0 --end=9,9

CLI flags override environment variables, which override the defaults.
When no end is given it goes to the bottom-right corner.
"""

import os
import sys
from dataclasses import dataclass, fields
from typing import Dict, List, Mapping, Optional

from pathsandbox.core.heuristics import HEURISTICS
from pathsandbox.core.types import Coord

ENV_PREFIX = "PATHSANDBOX_"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class SandboxConfig:
    rows: int = 20
    cols: int = 20
    moves: int = 8
    heuristic: str = "euclidean"
    start: Coord = (0, 0)
    end: Optional[Coord] = None
    cell_size: int = 28
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.end is None:
            self.end = (self.rows - 1, self.cols - 1)


def _parse_coord(text: str) -> Coord:
    parts = text.replace(" ", "").split(",")
    if len(parts) != 2:
        raise ValueError(f"expected 'row,col', got {text!r}")
    return (int(parts[0]), int(parts[1]))


def _parse_value(key: str, text: str):
    if key in ("rows", "cols", "moves", "cell_size"):
        value = int(text)
        if key == "moves" and value not in (4, 8):
            raise ValueError(f"moves must be 4 or 8, got {value}")
        if key != "moves" and value <= 0:
            raise ValueError(f"{key} must be positive, got {value}")
        return value
    if key in ("start", "end"):
        return _parse_coord(text)
    if key == "heuristic":
        name = text.lower()
        if name not in HEURISTICS:
            raise ValueError(f"unknown heuristic {text!r}")
        return name
    if key == "log_level":
        level = text.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"unknown log level {text!r}")
        return level
    raise ValueError(f"unknown setting {key!r}")


def resolve_config(argv: Optional[List[str]] = None,
                   environ: Optional[Mapping[str, str]] = None) -> SandboxConfig:
    argv = sys.argv[1:] if argv is None else argv
    environ = os.environ if environ is None else environ
    keys = [f.name for f in fields(SandboxConfig)]

    raw: Dict[str, str] = {}
    for key in keys:
        env_key = ENV_PREFIX + key.upper()
        if env_key in environ:
            raw[key] = environ[env_key]
    for arg in argv:
        if not arg.startswith("--") or "=" not in arg:
            continue
        key, text = arg[2:].split("=", 1)
        key = key.replace("-", "_").lower()
        if key not in keys:
            raise ValueError(f"unknown option --{key}")
        raw[key] = text

    values = {}
    for key, text in raw.items():
        try:
            values[key] = _parse_value(key, text)
        except ValueError as ex:
            raise ValueError(f"bad value for {key}: {ex}") from None
    return SandboxConfig(**values)
