"""Name-matching primitives used by the tree walker and renderer."""

from __future__ import annotations

from .match import MatchSpan, SearchTerm, match_span, matches

__all__ = [
    "MatchSpan",
    "SearchTerm",
    "match_span",
    "matches",
]
