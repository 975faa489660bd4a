"""Config file discovery.

Walks up from the working directory looking for ``rangectl.toml``, the
way git finds ``.git/``. ``RANGECTL_CONFIG`` overrides the search.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from rangectl.config.models import RangeConfig

CONFIG_FILENAME = "rangectl.toml"
CONFIG_ENV_VAR = "RANGECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest ``rangectl.toml`` at or above *start*, or None.

    A set ``RANGECTL_CONFIG`` wins; if it names a missing file nothing is
    found.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config(path: Path | None = None, cwd: Path | None = None) -> RangeConfig:
    """Load and validate a config file, or the defaults if none is found."""
    if path is None:
        path = find_config(cwd)
    if path is None:
        return RangeConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return RangeConfig.model_validate(data)
