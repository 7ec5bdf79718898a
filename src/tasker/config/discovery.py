"""Locate ``tasker.toml``.

``TASKER_CONFIG`` names the file directly. Otherwise the nearest
``tasker.toml`` in the start directory or one of its ancestors wins, and
that directory becomes the tasker root.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "tasker.toml"
CONFIG_ENV_VAR = "TASKER_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start* (default: cwd), or None.

    A ``TASKER_CONFIG`` pointing at a missing file yields None rather than
    falling back to the walk-up search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override).expanduser()
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
