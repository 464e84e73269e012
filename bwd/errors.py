from __future__ import annotations

from pathlib import Path


class BwdError(Exception):
    """Base class for every failure that ends an invocation."""

    kind = "Error"


class FilesystemError(BwdError):
    kind = "Io"

    def __init__(self, error: OSError):
        super().__init__(f"IO Error: {error}")
        self.error = error


class InvalidPathError(BwdError):
    kind = "InvalidPath"

    def __init__(self, target: str):
        super().__init__(f"Invalid path: '{target}'")
        self.target = target


class RootNotFoundError(BwdError):
    kind = "RootNotFound"

    def __init__(self, path: Path):
        super().__init__(f"No project root (.git or .bwd-root) found above '{path}'")
        self.path = path


class ClipboardError(BwdError):
    kind = "Clipboard"

    def __init__(self, detail: str):
        super().__init__(f"Clipboard Error: {detail}")


class JsonError(BwdError):
    kind = "Json"

    def __init__(self, detail: str):
        super().__init__(f"JSON Error: {detail}")
