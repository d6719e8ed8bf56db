"""Config file discovery.

Walk-up finder locates cloudcore.toml the way git finds .git/.
The CLOUDCORE_CONFIG env var overrides the search.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "cloudcore.toml"
CONFIG_ENV_VAR = "CLOUDCORE_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for cloudcore.toml.

    Returns the path to the config file, or None if not found.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        path = Path(env_path)
        return path if path.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
