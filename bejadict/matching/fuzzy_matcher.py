"""Fuzzy matching for Beja queries."""

import logging
from typing import TYPE_CHECKING, List

from ..utils.text_normalizer import normalize
from .base import Candidate, SearchStrategy

if TYPE_CHECKING:
    from ..index.builder import SearchIndex

logger = logging.getLogger(__name__)


class FuzzyMatcher(SearchStrategy):
    """Looks a normalized Beja query up in the approximate-match index."""

    def __init__(self, candidate_limit: int = 200):
        """
        Initialize the fuzzy matcher.

        Args:
            candidate_limit: Maximum index hits passed on to ranking.
        """
        self.candidate_limit = candidate_limit

    def find_candidates(self, index: "SearchIndex", query: str) -> List[Candidate]:
        """Return the closest index hits for ``query``, best score first."""
        pattern = normalize(query).full
        if not pattern:
            return []

        hits = index.lookup(pattern, limit=self.candidate_limit)
        logger.debug(f"Fuzzy lookup for {pattern!r} returned {len(hits)} candidates")

        return [
            Candidate(result=record.result, position=record.position, record=record, score=score)
            for record, score in hits
        ]
