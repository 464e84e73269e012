from __future__ import annotations

import logging

import pyperclip

from .errors import ClipboardError

logger = logging.getLogger(__name__)


def copy_text(text: str) -> None:
    try:
        pyperclip.copy(text)
    except pyperclip.PyperclipException as exc:
        raise ClipboardError(str(exc)) from exc
    logger.debug("Copied %d characters to the clipboard", len(text))
