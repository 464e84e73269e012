"""Turn a raw argument list into a :class:`~bwd.config.Config`.

Arguments are scanned left to right. Flag-shaped tokens are interpreted until
the first ``--``; after it every token is literal, so ``bwd -- -notes`` resolves
a directory called ``-notes``. The first literal token is the target and later
ones are ignored. Unknown flags are dropped silently.
"""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from .config import Config

SEPARATOR = "--"

HELP_FLAGS = ("-h", "--help")
VERSION_FLAGS = ("-v", "--version")

_FIELD_FLAGS: Dict[str, str] = {
    "-c": "copy",
    "--copy": "copy",
    "-s": "short",
    "--short": "short",
    "-j": "json",
    "--json": "json",
    "-r": "root",
    "--root": "root",
    "--slash": "slashes",
}


def _before_separator(args: Sequence[str]) -> Sequence[str]:
    for index, arg in enumerate(args):
        if arg == SEPARATOR:
            return args[:index]
    return args


def meta_request(args: Sequence[str]) -> Optional[str]:
    """Return ``"help"`` or ``"version"`` if requested ahead of any ``--``."""

    flags = _before_separator(args)
    if any(arg in HELP_FLAGS for arg in flags):
        return "help"
    if any(arg in VERSION_FLAGS for arg in flags):
        return "version"
    return None


def parse(args: Sequence[str]) -> Config:
    target: Optional[str] = None
    enabled = {name: False for name in set(_FIELD_FLAGS.values())}
    parsing_flags = True
    for arg in args:
        if parsing_flags and arg == SEPARATOR:
            parsing_flags = False
            continue
        if parsing_flags and arg.startswith("-"):
            name = _FIELD_FLAGS.get(arg)
            if name is not None:
                enabled[name] = True
            continue
        if target is None:
            target = arg
    return Config(target=target, **enabled)
