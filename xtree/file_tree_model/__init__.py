"""Domain model for filtered directory trees.

This package contains non-UI tree primitives:
- entry, node, and warning datatypes
- directory listing with per-entry skip results
- the depth-bounded walker that filters and aggregates matches
"""

from __future__ import annotations

from .types import Entry, ScanWarning, TreeNode, WalkResult
from .fs import DirectoryChild, child_sort_key, describe_os_error, display_name, list_directory_children
from .walk import DEFAULT_MAX_DEPTH, parse_depth, validate_depth, walk, walk_tree

__all__ = [
    "Entry",
    "ScanWarning",
    "TreeNode",
    "WalkResult",
    "DirectoryChild",
    "child_sort_key",
    "describe_os_error",
    "display_name",
    "list_directory_children",
    "DEFAULT_MAX_DEPTH",
    "parse_depth",
    "validate_depth",
    "walk",
    "walk_tree",
]
