"""Error taxonomy shared by the walker, config loader, and CLI.

Library code raises these; only ``xtree.cli`` turns them into exit codes.
"""

from __future__ import annotations

from pathlib import Path


class XtreeError(Exception):
    """Base class for every error raised by xtree."""


class PathError(XtreeError):
    """Root path is missing, not a directory, or unreadable."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason


class EntryReadError(XtreeError):
    """One child entry could not be listed or stat'd.

    Raised by listing helpers and recovered by the walker, which records it
    as a warning and keeps going.
    """

    def __init__(self, path: Path, reason: str, error: OSError | None = None) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason
        self.error = error


class InvalidArgument(XtreeError, ValueError):
    """Malformed user input such as a negative or non-numeric depth."""


__all__ = [
    "XtreeError",
    "PathError",
    "EntryReadError",
    "InvalidArgument",
]
