from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVEL_ENV = "BWD_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
HOME_VARS = ("HOME", "USERPROFILE")


@dataclass(frozen=True)
class Config:
    target: Optional[str] = None
    copy: bool = False
    short: bool = False
    json: bool = False
    root: bool = False
    slashes: bool = False


@dataclass
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL

    def numeric_log_level(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        if isinstance(level, int):
            return level
        return logging.WARNING


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build run-time settings from the environment (there are no config files)."""

    env = os.environ if environ is None else environ
    cfg = Settings()
    level = env.get(LOG_LEVEL_ENV)
    if level:
        cfg.log_level = level.strip()
    return cfg
