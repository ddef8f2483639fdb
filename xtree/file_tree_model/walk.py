"""Depth-bounded traversal that filters a directory tree by entry name.

The walk keeps an explicit stack of open directory frames instead of
recursing, so pathologically deep trees never hit the interpreter recursion
limit. A frame is folded into its parent once its listing is exhausted; only
then is its aggregate match count known.

Depth convention: the root is depth 0 and is always listed. A directory at
depth ``d`` is listed iff ``d <= max_depth``, so ``max_depth=0`` tests the
root's immediate children without descending into any of them.
"""

from __future__ import annotations

import logging
import stat
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import EntryReadError, InvalidArgument, PathError
from ..search import MatchSpan, SearchTerm
from .fs import DirectoryChild, describe_os_error, display_name, list_directory_children
from .types import Entry, ScanWarning, TreeNode, WalkResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 3


def validate_depth(max_depth: object) -> int:
    """Return ``max_depth`` when it is a non-negative ``int``."""
    if isinstance(max_depth, bool) or not isinstance(max_depth, int):
        raise InvalidArgument(f"depth must be an integer, got {max_depth!r}")
    if max_depth < 0:
        raise InvalidArgument(f"depth must be >= 0, got {max_depth}")
    return max_depth


def parse_depth(value: str) -> int:
    """Parse user-supplied depth text such as ``"3"``."""
    try:
        parsed = int(str(value).strip())
    except ValueError as exc:
        raise InvalidArgument(f"invalid depth value: {value!r}") from exc
    return validate_depth(parsed)


@dataclass
class _Frame:
    """Open directory whose children are still being visited."""

    entry: Entry
    self_match: bool
    span: MatchSpan | None
    pending: Iterator[DirectoryChild]
    kept: list[TreeNode] = field(default_factory=list)
    descendant_matches: int = 0

    def adopt(self, node: TreeNode) -> None:
        if not node.self_match and node.descendant_matches == 0:
            return
        self.kept.append(node)
        self.descendant_matches += node.total_matches

    def finish(self) -> TreeNode:
        return TreeNode(
            entry=self.entry,
            self_match=self.self_match,
            span=self.span,
            descendant_matches=self.descendant_matches,
            children=tuple(self.kept),
            scanned=True,
        )


def _check_root(root: Path) -> None:
    # exists()/is_dir() raise instead of returning False when a parent is unsearchable.
    try:
        mode = root.stat().st_mode
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise PathError(root, "path not found") from exc
    except OSError as exc:
        raise PathError(root, f"cannot access ({describe_os_error(exc)})") from exc
    if not stat.S_ISDIR(mode):
        raise PathError(root, "not a directory")


def walk_tree(
    root_path: str | Path,
    search_term: str | SearchTerm,
    max_depth: int,
    *,
    show_hidden: bool = True,
    dirs_only: bool = False,
    follow_symlinks: bool = False,
) -> WalkResult:
    """Walk ``root_path`` and keep only entries whose names match.

    A directory is kept when its own name matches or when any kept descendant
    matches. ``dirs_only`` ignores files entirely. Children that cannot be
    read are skipped and reported in ``WalkResult.warnings``.
    """
    max_depth = validate_depth(max_depth)
    term = SearchTerm.coerce(search_term)
    root = Path(root_path)
    _check_root(root)

    warnings: list[ScanWarning] = []

    def record(warning: ScanWarning) -> None:
        warnings.append(warning)

    def open_listing(directory: Path, depth: int) -> Iterator[DirectoryChild]:
        logger.debug("scanning %s (depth %d)", directory, depth)
        children, skipped = list_directory_children(
            directory,
            show_hidden=show_hidden,
            follow_symlinks=follow_symlinks,
        )
        for warning in skipped:
            record(warning)
        return iter(children)

    try:
        root_children = open_listing(root, 0)
    except EntryReadError as exc:
        raise PathError(root, f"cannot read directory ({exc.reason})") from exc

    root_entry = Entry(name=display_name(str(root)), path=root, is_dir=True, depth=0)
    stack: list[_Frame] = [_Frame(entry=root_entry, self_match=False, span=None, pending=root_children)]

    while True:
        frame = stack[-1]
        child = next(frame.pending, None)
        if child is None:
            node = stack.pop().finish()
            if not stack:
                return WalkResult(root=node, term=term, max_depth=max_depth, warnings=tuple(warnings))
            stack[-1].adopt(node)
            continue

        if dirs_only and not child.is_dir:
            continue

        entry = Entry(name=child.name, path=child.path, is_dir=child.is_dir, depth=frame.entry.depth + 1)
        span = term.span(child.name)
        self_match = span is not None

        if child.is_dir and entry.depth <= max_depth:
            try:
                pending = open_listing(child.path, entry.depth)
            except EntryReadError as exc:
                warning = ScanWarning(path=exc.path, reason=exc.reason, error=exc.error)
                record(warning)
                frame.adopt(TreeNode(entry=entry, self_match=self_match, span=span, scan_error=warning))
                continue
            stack.append(_Frame(entry=entry, self_match=self_match, span=span, pending=pending))
            continue

        frame.adopt(TreeNode(entry=entry, self_match=self_match, span=span))


def walk(root_path: str | Path, search_term: str | SearchTerm, max_depth: int) -> TreeNode:
    """Return the filtered tree rooted at ``root_path``."""
    return walk_tree(root_path, search_term, max_depth).root


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "parse_depth",
    "validate_depth",
    "walk",
    "walk_tree",
]
