"""Config file discovery.

Walk-up finder locates ``timegap.toml`` starting from the working
directory. The ``TIMEGAP_CONFIG`` env var and ``--config`` flag override it.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "timegap.toml"
CONFIG_ENV_VAR = "TIMEGAP_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for timegap.toml.

    Checks ``TIMEGAP_CONFIG`` first; returns None when nothing is found.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None
