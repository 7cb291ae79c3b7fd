"""Local pre-check run before any provider call.

Blocklist containment first (case-insensitive, declared order), then a
minimum content length. Pure: no I/O, same input → same result.
"""

from __future__ import annotations

from akkuea_curation.curation.dictionary import BLOCKLIST, MIN_CONTENT_LENGTH, find_first
from akkuea_curation.curation.types import CurationResult


class HeuristicFilter:
    """Blocklist + length guardrail."""

    def __init__(
        self,
        blocklist: tuple[str, ...] = BLOCKLIST,
        min_content_length: int = MIN_CONTENT_LENGTH,
    ):
        self._blocklist = tuple(term.lower() for term in blocklist)
        self._min_content_length = min_content_length

    def evaluate(self, title: str, content: str) -> CurationResult:
        text = f"{title}\n{content}".lower()

        term = find_first(text, self._blocklist)
        if term is not None:
            return CurationResult.rejected(f"Contains prohibited term: {term}")

        if len(content.strip()) < self._min_content_length:
            return CurationResult.pending("Content too short for auto-approval")

        return CurationResult.approved("Heuristics passed")
