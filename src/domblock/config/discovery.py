"""Locate ``domblock.toml``.

``DOMBLOCK_CONFIG`` wins when set. Otherwise the nearest
``domblock.toml`` in the start directory or one of its parents is used.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "domblock.toml"
CONFIG_ENV_VAR = "DOMBLOCK_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default cwd), if any.

    A ``DOMBLOCK_CONFIG`` value that does not name a file disables
    discovery rather than falling through to the walk-up search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
