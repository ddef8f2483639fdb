"""Filesystem listing helpers that turn per-entry failures into skip results."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..errors import EntryReadError
from .types import ScanWarning


@dataclass(frozen=True)
class DirectoryChild:
    """One listed child plus its resolved directory flag."""

    name: str
    path: Path
    is_dir: bool


def display_name(raw: str) -> str:
    """Printable form of a filesystem name.

    Undecodable bytes arrive as lone surrogates and cannot be written to a
    UTF-8 stream; they become U+FFFD here. Listing keeps using the raw path.
    """
    return raw.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def describe_os_error(exc: OSError) -> str:
    """Short human label for an ``OSError`` (``"Permission denied"``...)."""
    return exc.strerror or exc.__class__.__name__


def child_sort_key(child: DirectoryChild) -> tuple[str, str]:
    # Raw name breaks ties between names that fold to the same key.
    return (child.name.casefold(), child.name)


def _child_is_dir(child: os.DirEntry, follow_symlinks: bool) -> bool:
    try:
        return child.is_dir(follow_symlinks=follow_symlinks)
    except OSError as exc:
        raise EntryReadError(Path(child.path), describe_os_error(exc), exc) from exc


def list_directory_children(
    directory: Path,
    show_hidden: bool = True,
    follow_symlinks: bool = False,
) -> tuple[list[DirectoryChild], list[ScanWarning]]:
    """List children of ``directory`` in deterministic order.

    Returns ``(children, skipped)``. Children whose type cannot be determined
    land in ``skipped`` instead of aborting the listing. Raises
    ``EntryReadError`` when ``directory`` itself cannot be scanned.
    """
    children: list[DirectoryChild] = []
    skipped: list[ScanWarning] = []
    try:
        with os.scandir(directory) as entries:
            for child in entries:
                name = child.name
                if not show_hidden and name.startswith("."):
                    continue
                try:
                    is_dir = _child_is_dir(child, follow_symlinks)
                except EntryReadError as exc:
                    skipped.append(ScanWarning(path=exc.path, reason=exc.reason, error=exc.error))
                    continue
                children.append(DirectoryChild(name=display_name(name), path=Path(child.path), is_dir=is_dir))
    except OSError as exc:
        raise EntryReadError(directory, describe_os_error(exc), exc) from exc

    children.sort(key=child_sort_key)
    return children, skipped


__all__ = [
    "DirectoryChild",
    "child_sort_key",
    "describe_os_error",
    "display_name",
    "list_directory_children",
]
