from __future__ import annotations

import json
import logging
from pathlib import Path, PurePath
from typing import Callable, Dict, Optional, Union

from .config import Config
from .errors import JsonError, RootNotFoundError
from .root import find_root as locate_root

logger = logging.getLogger(__name__)

HOME_PLACEHOLDER = "$HOME"

Document = Dict[str, Optional[str]]
Rendered = Union[str, Document]


def shorten(path: PurePath, home: Optional[PurePath]) -> str:
    """Replace a leading ``home`` with ``$HOME``; other paths pass through."""

    if home is None:
        return str(path)
    if path == home:
        return HOME_PLACEHOLDER
    try:
        rest = path.relative_to(home)
    except ValueError:
        return str(path)
    return str(type(path)(HOME_PLACEHOLDER, rest))


def relative_to_root(path: PurePath, root: PurePath) -> str:
    # PurePath("") renders as ".", which covers path == root.
    return str(path.relative_to(root))


def render(
    resolved: Path,
    config: Config,
    home: Optional[Path],
    *,
    find_root: Callable[[Path], Optional[Path]] = locate_root,
) -> Rendered:
    """Render ``resolved`` per the first matching mode: json, short, root, plain."""

    if config.json:
        root = find_root(resolved)
        return {
            "path": str(resolved),
            "short": shorten(resolved, home),
            "root": relative_to_root(resolved, root) if root is not None else None,
        }

    if config.short:
        text = shorten(resolved, home)
    elif config.root:
        root = find_root(resolved)
        if root is None:
            raise RootNotFoundError(resolved)
        text = relative_to_root(resolved, root)
    else:
        text = str(resolved)

    if config.slashes:
        text = text.replace("\\", "/")
    return text


def lossy(text: str) -> str:
    # Undecodable filename bytes arrive as lone surrogates; show them as U+FFFD.
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def serialize(document: Document) -> str:
    try:
        return json.dumps(document, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise JsonError(str(exc)) from exc


def to_text(rendered: Rendered) -> str:
    if isinstance(rendered, str):
        return lossy(rendered)
    return lossy(serialize(rendered))
