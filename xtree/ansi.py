"""ANSI-aware measurement and clipping for rendered tree rows.

Escape sequences never count toward width, and East Asian wide characters
take two columns, so clipped rows line up with what the terminal shows.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
RESET = "\x1b[0m"


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character."""
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled row to at most ``max_cols`` display columns.

    Escape sequences are kept verbatim. When visible text is cut while a
    style is active, a reset is appended so color does not leak.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    styled = False
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                seq = match.group(0)
                out.append(seq)
                if seq.endswith("m"):
                    styled = seq not in (RESET, "\x1b[39;49;00m", "\x1b[m")
                i = match.end()
                continue
        w = char_display_width(text[i])
        if col + w > max_cols:
            if styled:
                out.append(RESET)
            break
        out.append(text[i])
        col += w
        i += 1

    return "".join(out)


__all__ = [
    "ANSI_ESCAPE_RE",
    "char_display_width",
    "clip_ansi_line",
    "display_width",
    "strip_ansi",
]
