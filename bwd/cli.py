"""bwd: print the working directory (or a target) in the form you need."""

from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Callable, Optional, Sequence, TextIO

from .clipboard import copy_text
from .config import load_settings
from .environment import current_dir, home_dir
from .errors import BwdError
from .flags import meta_request, parse
from .render import render, to_text
from .resolve import resolve_target

try:
    VERSION = version("bwd")
except PackageNotFoundError:
    VERSION = "0+unknown"

HELP_TEXT = """bwd - Better Working Directory

Usage:
  bwd [target] [-c] [-s] [-j] [-r] [--slash] [-- target]

Flags:
  -c, --copy     Copy the output to the clipboard
  -s, --short    Replace the home directory with $HOME
  -j, --json     Print path, short and root forms as one JSON object
  -r, --root     Print the path relative to the project root (.git or .bwd-root)
      --slash    Use forward slashes (/) instead of backslashes (\\)
  -h, --help     Show this help
  -v, --version  Show the version
  --             Stop reading flags; the next argument is the target"""

logger = logging.getLogger("bwd")


def _configure_logging() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.numeric_log_level(),
        format="[%(asctime)s] %(levelname)s:%(name)s: %(message)s",
        stream=sys.stderr,
    )


def run(
    argv: Sequence[str],
    *,
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
    copy: Callable[[str], None] = copy_text,
) -> int:
    out = stdout if stdout is not None else sys.stdout
    err = stderr if stderr is not None else sys.stderr

    request = meta_request(argv)
    if request == "help":
        print(HELP_TEXT, file=out)
        return 0
    if request == "version":
        print(f"bwd {VERSION}", file=out)
        return 0

    try:
        config = parse(argv)
        logger.debug("Parsed %s", config)
        resolved = resolve_target(config.target, current_dir())
        rendered = render(resolved, config, home_dir())
        text = to_text(rendered)
        print(text, file=out)
        if config.copy:
            copy(text)
    except BwdError as exc:
        logger.debug("Failed with %s", exc.kind)
        print(f"[bwd error] {exc}", file=err)
        return 1
    return 0


def main() -> None:
    _configure_logging()
    raise SystemExit(run(sys.argv[1:]))

