"""Process environment seams: working directory, home lookup, existence checks."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional, Sequence

from .config import HOME_VARS
from .errors import FilesystemError


def current_dir() -> Path:
    try:
        return Path.cwd()
    except OSError as exc:
        raise FilesystemError(exc) from exc


def home_dir(
    environ: Optional[Mapping[str, str]] = None,
    names: Sequence[str] = HOME_VARS,
) -> Optional[Path]:
    """Return the first home directory variable that is set and non-empty."""

    env = os.environ if environ is None else environ
    for name in names:
        value = env.get(name)
        if value:
            return Path(value)
    return None


def path_exists(path: Path) -> bool:
    try:
        os.stat(path)
    except (FileNotFoundError, NotADirectoryError, ValueError):
        return False
    except OSError as exc:
        raise FilesystemError(exc) from exc
    return True
