"""Locating ``prjboard.toml``."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "prjboard.toml"
CONFIG_ENV_VAR = "PRJBOARD_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the board config for *start* (default: cwd), or None.

    ``PRJBOARD_CONFIG`` wins when set; a value naming no file means "no
    config" rather than falling back to the directory search. Otherwise
    *start* and each of its parents are checked in turn.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
