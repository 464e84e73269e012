from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)

ROOT_MARKERS = (".git", ".bwd-root")


def find_root(
    path: Path,
    *,
    markers: Sequence[str] = ROOT_MARKERS,
    exists: Callable[[Path], bool] = os.path.exists,
) -> Optional[Path]:
    """Walk from ``path`` upwards to the nearest directory holding a marker.

    A marker counts whatever its entry kind, so a ``.git`` file (worktrees,
    submodules) is as good as a ``.git`` directory.
    """

    candidate = path
    while True:
        for marker in markers:
            if exists(candidate / marker):
                logger.debug("Found %s in %s", marker, candidate)
                return candidate
        parent = candidate.parent
        if parent == candidate:
            logger.debug("No root marker above %s", path)
            return None
        candidate = parent
