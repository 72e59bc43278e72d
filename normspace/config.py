"""Runtime settings for normspace.

Settings are read once from the environment:

NORMSPACE_LOG_LEVEL  — level name for the package logger (default WARNING)
NORMSPACE_DTYPE      — float dtype integer input is promoted to
                       ("float64" or "float32", default float64)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Mapping, Optional

import numpy as np

_DTYPES = {
    "float64": np.float64,
    "float32": np.float32,
}


@dataclass(frozen=True)
class Settings:
    log_level: int = logging.WARNING
    default_dtype: type = np.float64

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        level_name = env.get("NORMSPACE_LOG_LEVEL", "WARNING").strip().upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(
                f"NORMSPACE_LOG_LEVEL: unknown level {level_name!r}"
            )

        dtype_name = env.get("NORMSPACE_DTYPE", "float64").strip().lower()
        if dtype_name not in _DTYPES:
            raise ValueError(
                f"NORMSPACE_DTYPE: unsupported dtype {dtype_name!r}. "
                f"Valid options: {', '.join(sorted(_DTYPES))}."
            )

        return cls(log_level=level, default_dtype=_DTYPES[dtype_name])


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, parsed from the environment on first use."""
    return Settings.from_env()
