from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Optional

from .environment import path_exists
from .errors import FilesystemError, InvalidPathError

logger = logging.getLogger(__name__)

_EXTENDED_PREFIX = "\\\\?\\"
_EXTENDED_UNC_PREFIX = "\\\\?\\UNC\\"


def strip_extended_prefix(path: str) -> str:
    """Drop the Windows extended-length marker that canonicalization can add.

    ``\\\\?\\C:\\work`` becomes ``C:\\work`` and ``\\\\?\\UNC\\srv\\share``
    becomes ``\\\\srv\\share``. Anything else is returned untouched.
    """

    if path.startswith(_EXTENDED_UNC_PREFIX):
        return "\\\\" + path[len(_EXTENDED_UNC_PREFIX):]
    if path.startswith(_EXTENDED_PREFIX):
        return path[len(_EXTENDED_PREFIX):]
    return path


def canonicalize(path: Path) -> Path:
    try:
        real = os.path.realpath(path, strict=True)
    except OSError as exc:
        raise FilesystemError(exc) from exc
    return Path(strip_extended_prefix(real))


def resolve_target(
    target: Optional[str],
    cwd: Path,
    *,
    exists: Callable[[Path], bool] = path_exists,
    canonical: Callable[[Path], Path] = canonicalize,
) -> Path:
    """Resolve ``target`` against ``cwd`` into a canonical absolute path.

    Without a target the working directory is returned as-is. A target that
    does not exist raises :class:`InvalidPathError` with the string the user
    typed, not the joined path.
    """

    if target is None:
        return cwd
    joined = cwd / target
    if not exists(joined):
        raise InvalidPathError(target)
    resolved = canonical(joined)
    logger.debug("Resolved %r to %s", target, resolved)
    return resolved
