"""Case-insensitive substring matching for entry names.

Both sides are normalized with full Unicode case folding (``str.casefold``),
so ``"STRASSE"`` finds ``"Straße"``. The needle is folded once per search via
``SearchTerm``; names are folded per comparison.
"""

from __future__ import annotations

from dataclasses import dataclass, field

MatchSpan = tuple[int, int]


def _fold_with_owners(text: str) -> tuple[str, list[int]]:
    """Casefold ``text`` and map each folded character back to its source index.

    Folding can expand one character into several (``ß`` -> ``ss``), so offsets
    found in the folded string cannot index the original directly.
    """
    parts: list[str] = []
    owners: list[int] = []
    for idx, ch in enumerate(text):
        folded = ch.casefold()
        parts.append(folded)
        owners.extend([idx] * len(folded))
    return "".join(parts), owners


@dataclass(frozen=True)
class SearchTerm:
    """User search text plus its precomputed case-folded needle."""

    raw: str
    folded: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "folded", self.raw.casefold())

    @classmethod
    def coerce(cls, term: "str | SearchTerm") -> "SearchTerm":
        if isinstance(term, SearchTerm):
            return term
        return cls(str(term))

    @property
    def matches_everything(self) -> bool:
        return not self.folded

    def matches(self, name: str) -> bool:
        if not self.folded:
            return True
        return self.folded in name.casefold()

    def span(self, name: str) -> MatchSpan | None:
        """Return ``[start, end)`` of the first hit within ``name``.

        Offsets refer to ``name`` itself, not its folded form. A partial hit
        inside an expanded character widens the span to cover that character.
        """
        if not self.folded:
            return (0, 0)
        folded_name, owners = _fold_with_owners(name)
        idx = folded_name.find(self.folded)
        if idx < 0:
            return None
        last = idx + len(self.folded) - 1
        return owners[idx], owners[last] + 1


def matches(name: str, search_term: str | SearchTerm) -> bool:
    """Return whether ``search_term`` occurs in ``name`` ignoring case."""
    return SearchTerm.coerce(search_term).matches(name)


def match_span(name: str, search_term: str | SearchTerm) -> MatchSpan | None:
    return SearchTerm.coerce(search_term).span(name)


__all__ = [
    "MatchSpan",
    "SearchTerm",
    "matches",
    "match_span",
]
