"""Approximate string-matching index over weighted text fields."""

import logging
import math
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

import Levenshtein

logger = logging.getLogger(__name__)


def _bigrams(text: str) -> List[str]:
    """Return the character bigrams of ``text`` in position order."""
    return [text[i:i + 2] for i in range(len(text) - 1)]


@dataclass(frozen=True)
class FuzzyField:
    """A searchable field and its normalized weight."""

    name: str
    weight: float


@dataclass
class FuzzyHit:
    """A document that matched a pattern."""

    doc_id: int
    score: float  # 0.0 = perfect, 1.0 = no field matched
    field_scores: Dict[str, float] = field(default_factory=dict)


class FuzzyIndex:
    """
    Location-agnostic approximate matching over several weighted fields.

    A field matches when some substring of it is within
    ``floor(threshold * len(pattern))`` edits of the pattern. Each field's
    score is ``edits / len(pattern)``; fields that do not match score 1.0 and
    the document score is the weighted sum, so lower is better.

    Candidates are found through per-field bigram postings. A substring with
    ``k`` edits still shares at least ``m - 1 - 2k`` bigram positions with a
    pattern of length ``m``, so the filter never drops a real match.
    """

    def __init__(
        self,
        fields: Sequence[Tuple[str, float]],
        threshold: float = 0.33,
        min_match_length: int = 2,
    ):
        """
        Initialize an empty index.

        Args:
            fields: (name, weight) pairs; weights are normalized to sum to 1.
            threshold: Maximum edits per pattern character (0.0 to 1.0).
            min_match_length: Shortest pattern/substring that may match.
        """
        total = sum(weight for _, weight in fields)
        if total <= 0:
            raise ValueError("Field weights must sum to a positive value")

        self.fields = [FuzzyField(name, weight / total) for name, weight in fields]
        self.threshold = threshold
        self.min_match_length = min_match_length

        self._texts: List[Dict[str, str]] = []
        self._postings: Dict[str, Dict[str, Set[int]]] = {f.name: {} for f in self.fields}

    def __len__(self) -> int:
        """Return the number of indexed documents."""
        return len(self._texts)

    def add(self, texts: Mapping[str, Optional[str]]) -> int:
        """
        Add a document to the index.

        Args:
            texts: Field name to text. Missing fields index as empty.

        Returns:
            The document id (insertion order, starting at 0).
        """
        doc_id = len(self._texts)
        stored = {f.name: texts.get(f.name) or "" for f in self.fields}
        self._texts.append(stored)

        for name, text in stored.items():
            postings = self._postings[name]
            for gram in set(_bigrams(text)):
                postings.setdefault(gram, set()).add(doc_id)

        return doc_id

    def search(self, pattern: str, limit: Optional[int] = None) -> List[FuzzyHit]:
        """
        Find documents approximately containing ``pattern``.

        Args:
            pattern: Already-normalized query text.
            limit: Maximum number of hits to return (None = all).

        Returns:
            Hits ordered by ascending score, then insertion order.
        """
        m = len(pattern)
        if m < self.min_match_length or not self._texts:
            return []

        max_edits = self.max_edits(m)
        hits: List[FuzzyHit] = []

        for doc_id in self._candidates(pattern, m - 1 - 2 * max_edits):
            field_scores = {}
            for f in self.fields:
                edits = self._approximate_edits(pattern, self._texts[doc_id][f.name], max_edits)
                if edits is not None:
                    field_scores[f.name] = edits / m

            if not field_scores:
                continue

            score = sum(f.weight * field_scores.get(f.name, 1.0) for f in self.fields)
            hits.append(FuzzyHit(doc_id=doc_id, score=score, field_scores=field_scores))

        hits.sort(key=lambda h: (h.score, h.doc_id))
        logger.debug(f"Pattern {pattern!r}: {len(hits)} hits (max_edits={max_edits})")

        if limit is not None:
            return hits[:limit]
        return hits

    def max_edits(self, pattern_length: int) -> int:
        """Return the edit budget for a pattern of the given length."""
        # Epsilon keeps e.g. 0.33 * 100 from rounding down to 32
        return int(math.floor(self.threshold * pattern_length + 1e-9))

    def _candidates(self, pattern: str, required: int) -> Iterable[int]:
        """Return ids of documents sharing enough bigrams with the pattern."""
        if required <= 0:
            return range(len(self._texts))

        grams = _bigrams(pattern)
        found: Set[int] = set()
        for f in self.fields:
            postings = self._postings[f.name]
            counts: Counter = Counter()
            for gram in grams:
                counts.update(postings.get(gram, ()))
            found.update(doc_id for doc_id, count in counts.items() if count >= required)

        return sorted(found)

    def _approximate_edits(self, pattern: str, text: str, max_edits: int) -> Optional[int]:
        """
        Return the fewest edits turning ``pattern`` into a substring of ``text``.

        Returns:
            Edit count, or None if it exceeds ``max_edits``.
        """
        if not text:
            return None
        if pattern in text:
            return 0
        if max_edits == 0:
            return None

        m = len(pattern)
        n = len(text)
        best = max_edits + 1
        shortest = max(self.min_match_length, m - max_edits, 1)

        for size in range(shortest, min(m + max_edits, n) + 1):
            for start in range(n - size + 1):
                distance = Levenshtein.distance(
                    pattern, text[start:start + size], score_cutoff=best - 1
                )
                if distance < best:
                    best = distance
                    if best == 1:
                        return best

        return best if best <= max_edits else None
