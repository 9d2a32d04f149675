"""
Defaults and the optional JSON settings file.

Lookup order for the file: explicit path, then ``$SORTSCOPE_SETTINGS``, then
``sortscope.json`` in the working directory. A missing file means defaults.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
from dataclasses import dataclass
from typing import Optional

from sortscope.algorithms import ALGORITHM_INFO, DEFAULT_ALGORITHM
from sortscope.inputs import DISTRIBUTIONS

logger = logging.getLogger(__name__)

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

DEFAULT_SIZE         = 32
MIN_ARRAY_SIZE       = 4
MAX_ARRAY_SIZE       = 128
DEFAULT_DISTRIBUTION = "random"
DEFAULT_RADIX_BASE   = 10
RADIX_BASES          = (2, 4, 8, 10, 16)
DEFAULT_LOG_LEVEL    = "WARNING"
LOG_LEVELS           = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

SETTINGS_ENV  = "SORTSCOPE_SETTINGS"
SETTINGS_FILE = "sortscope.json"


@dataclass(frozen=True)
class Settings:
    algorithm: str = DEFAULT_ALGORITHM
    size: int = DEFAULT_SIZE
    distribution: str = DEFAULT_DISTRIBUTION
    seed: Optional[int] = None
    radix_base: int = DEFAULT_RADIX_BASE
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        # unknown algorithm names are left to the engine's bubble fallback
        if not isinstance(self.algorithm, str):
            raise ValueError(f"algorithm must be a string, got {self.algorithm!r}")
        if not isinstance(self.size, int) or not MIN_ARRAY_SIZE <= self.size <= MAX_ARRAY_SIZE:
            raise ValueError(f"size must be an integer in {MIN_ARRAY_SIZE}..{MAX_ARRAY_SIZE}, got {self.size!r}")
        if self.distribution not in DISTRIBUTIONS:
            raise ValueError(f"distribution must be one of {sorted(DISTRIBUTIONS)}, got {self.distribution!r}")
        if self.seed is not None and not isinstance(self.seed, int):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        if self.radix_base not in RADIX_BASES:
            raise ValueError(f"radix_base must be one of {RADIX_BASES}, got {self.radix_base!r}")
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {self.log_level!r}")
        object.__setattr__(self, "log_level", self.log_level.upper())

    @property
    def known_algorithm(self) -> bool:
        return self.algorithm in ALGORITHM_INFO

    def replace(self, **overrides) -> "Settings":
        """Copy with the given fields replaced; ``None`` keeps the current value."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dataclasses.replace(self, **changes)


def _settings_path(path=None) -> str:
    if path:
        return os.fspath(path)
    return os.environ.get(SETTINGS_ENV) or os.path.join(os.getcwd(), SETTINGS_FILE)


def _read_json(path) -> dict:
    if not os.path.exists(path):
        return {}
    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: expected a JSON object", path)
        return {}
    return data


def load_settings(path=None) -> Settings:
    path = _settings_path(path)
    data = _read_json(path)
    known = {f.name for f in dataclasses.fields(Settings)}
    for key in sorted(set(data) - known):
        logger.warning("Unknown setting %r in %s", key, path)
    return Settings(**{k: v for k, v in data.items() if k in known})
