"""Domain datatypes for filtered, match-annotated directory trees."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from ..search import MatchSpan, SearchTerm


@dataclass(frozen=True)
class Entry:
    """One filesystem node visited by the walker.

    ``depth`` counts directory levels below the root: the root is 0 and its
    immediate children are 1.
    """

    name: str
    path: Path
    is_dir: bool
    depth: int


@dataclass(frozen=True)
class ScanWarning:
    """A child that could not be listed or stat'd and was skipped."""

    path: Path
    reason: str
    error: OSError | None = None


@dataclass(frozen=True)
class TreeNode:
    """Retained tree node with its own match flag and aggregate counts."""

    entry: Entry
    self_match: bool = False
    span: MatchSpan | None = None
    descendant_matches: int = 0
    children: tuple["TreeNode", ...] = ()
    scanned: bool = False
    scan_error: ScanWarning | None = None

    @property
    def name(self) -> str:
        return self.entry.name

    @property
    def path(self) -> Path:
        return self.entry.path

    @property
    def is_dir(self) -> bool:
        return self.entry.is_dir

    @property
    def depth(self) -> int:
        return self.entry.depth

    @property
    def total_matches(self) -> int:
        """Matches this node contributes to its parent's aggregate."""
        return self.descendant_matches + (1 if self.self_match else 0)

    def iter_nodes(self) -> Iterator["TreeNode"]:
        """Yield this node and every retained descendant in display order."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))


@dataclass(frozen=True)
class WalkResult:
    """Outcome of one traversal: the filtered tree plus skipped entries."""

    root: TreeNode
    term: SearchTerm
    max_depth: int
    warnings: tuple[ScanWarning, ...] = ()

    @property
    def match_count(self) -> int:
        return self.root.descendant_matches

    @property
    def has_matches(self) -> bool:
        return self.root.descendant_matches > 0


__all__ = [
    "Entry",
    "ScanWarning",
    "TreeNode",
    "WalkResult",
]
