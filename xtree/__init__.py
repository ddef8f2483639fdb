"""Public package surface for xtree.

Exports ``main`` for programmatic CLI invocation plus the core walker and
match predicate. Rendering and config live in submodules.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import EntryReadError, InvalidArgument, PathError, XtreeError
from .file_tree_model import TreeNode, WalkResult, walk, walk_tree
from .search import SearchTerm, match_span, matches


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "__version__",
    "EntryReadError",
    "InvalidArgument",
    "PathError",
    "XtreeError",
    "SearchTerm",
    "TreeNode",
    "WalkResult",
    "main",
    "match_span",
    "matches",
    "walk",
    "walk_tree",
]
