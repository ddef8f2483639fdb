"""Text rendering for filtered trees.

Turns a ``WalkResult`` into box-drawn tree rows with the matched span
highlighted and a ``(N)`` count after every directory holding matches.
Color codes come from ``pygments.console`` and are only emitted on request.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TextIO

from pygments.console import ansiformat, colorize

from .ansi import clip_ansi_line
from .file_tree_model import ScanWarning, TreeNode, WalkResult, display_name

BRANCH_MID = "├── "
BRANCH_LAST = "└── "
PIPE = "│   "
SPACE = "    "

COLOR_MODES = ("auto", "always", "never")
NO_MATCHES_MESSAGE = "No entries match the search term."


def _plain(text: str) -> str:
    return text


@dataclass(frozen=True)
class RenderStyle:
    color: bool = False

    def _paint(self, attr: str) -> Callable[[str], str]:
        if not self.color:
            return _plain
        if attr.startswith("*"):
            return lambda text: ansiformat(attr, text)
        return lambda text: colorize(attr, text)

    @property
    def match(self) -> Callable[[str], str]:
        return self._paint("brightred")

    @property
    def directory(self) -> Callable[[str], str]:
        return self._paint("*blue*")

    @property
    def muted(self) -> Callable[[str], str]:
        return self._paint("brightblack")

    @property
    def warning(self) -> Callable[[str], str]:
        return self._paint("yellow")


def should_use_color(mode: str, stream: TextIO) -> bool:
    """Resolve ``auto``/``always``/``never`` against ``stream`` and ``NO_COLOR``."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def format_name(node: TreeNode, style: RenderStyle) -> str:
    """Render a node name with its match span highlighted."""
    paint = style.directory if node.is_dir else _plain
    name = node.name
    suffix = paint("/") if node.is_dir else ""
    if node.span is None or node.span[0] == node.span[1]:
        return paint(name) + suffix

    start, end = node.span
    parts: list[str] = []
    if start > 0:
        parts.append(paint(name[:start]))
    parts.append(style.match(name[start:end]))
    if end < len(name):
        parts.append(paint(name[end:]))
    parts.append(suffix)
    return "".join(parts)


def format_node(node: TreeNode, style: RenderStyle) -> str:
    label = format_name(node, style)
    if node.is_dir and node.descendant_matches > 0:
        label += style.muted(f" ({node.descendant_matches})")
    if node.scan_error is not None:
        label += style.warning(" [unreadable]")
    return label


def format_summary(result: WalkResult) -> str:
    count = result.match_count
    if count == 0:
        return NO_MATCHES_MESSAGE
    return f"{count} {'match' if count == 1 else 'matches'}"


def render_tree_lines(
    result: WalkResult,
    *,
    color: bool = False,
    max_cols: int | None = None,
) -> list[str]:
    """Return display rows for ``result`` without trailing newlines.

    The root label comes first, followed by one row per retained node and a
    summary row separated by a blank line. Without matches the tree is omitted
    and only the summary row is returned.
    """
    if not result.has_matches:
        summary = format_summary(result)
        return [clip_ansi_line(summary, max_cols) if max_cols is not None else summary]

    style = RenderStyle(color=color)
    root = result.root
    lines: list[str] = [style.directory(root.name)]

    stack: list[tuple[TreeNode, str, bool]] = []

    def push_children(node: TreeNode, prefix: str) -> None:
        last = len(node.children) - 1
        for idx in range(last, -1, -1):
            stack.append((node.children[idx], prefix, idx == last))

    push_children(root, "")
    while stack:
        node, prefix, is_last = stack.pop()
        branch = BRANCH_LAST if is_last else BRANCH_MID
        lines.append(f"{prefix}{branch}{format_node(node, style)}")
        push_children(node, prefix + (SPACE if is_last else PIPE))

    lines.append("")
    lines.append(format_summary(result))

    if max_cols is not None:
        lines = [clip_ansi_line(line, max_cols) for line in lines]
    return lines


def render_warnings(warnings: Iterable[ScanWarning], *, color: bool = False) -> list[str]:
    style = RenderStyle(color=color)
    return [f"{style.warning('warning:')} {display_name(str(warning.path))}: {warning.reason}" for warning in warnings]


def render_tree(result: WalkResult, *, color: bool = False, max_cols: int | None = None) -> str:
    return "\n".join(render_tree_lines(result, color=color, max_cols=max_cols)) + "\n"


__all__ = [
    "COLOR_MODES",
    "NO_MATCHES_MESSAGE",
    "RenderStyle",
    "format_name",
    "format_node",
    "format_summary",
    "render_tree",
    "render_tree_lines",
    "render_warnings",
    "should_use_color",
]
