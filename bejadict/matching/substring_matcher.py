"""Exact substring matching for English queries."""

from typing import TYPE_CHECKING, List

from ..models import gloss_texts, raw_lines
from .base import Candidate, SearchStrategy

if TYPE_CHECKING:
    from ..index.builder import SearchIndex


class SubstringMatcher(SearchStrategy):
    """
    Finds entries whose English gloss or raw transcription contains the query.

    Matching is case-insensitive containment; no fuzzy index is involved.
    """

    def find_candidates(self, index: "SearchIndex", query: str) -> List[Candidate]:
        """Return every entry with a gloss or raw line containing ``query``."""
        needle = query.strip().lower()
        if not needle:
            return []

        candidates = []
        for record in index.records:
            texts = gloss_texts(record.result) + raw_lines(record.result)
            if any(needle in (text or "").lower() for text in texts):
                candidates.append(Candidate(result=record.result, position=record.position))

        return candidates
