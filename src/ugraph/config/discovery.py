"""Locate ugraph.toml.

Lookup order: the UGRAPH_CONFIG env var, then the nearest ugraph.toml in
the start directory or any of its parents.
"""

from __future__ import annotations

import os
from pathlib import Path


CONFIG_FILENAME = "ugraph.toml"
CONFIG_ENV_VAR = "UGRAPH_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any.

    An UGRAPH_CONFIG pointing at a missing file disables discovery.
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
