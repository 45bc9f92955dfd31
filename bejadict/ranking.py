"""Ranking of search candidates into the final result order."""

import logging
from typing import List, Optional, Sequence, Tuple

from .index.builder import IndexedRecord
from .matching.base import Candidate
from .models import SearchDirection, SearchResult, gloss_texts, primary_headword, raw_lines
from .utils.edit_distance import within_edit_distance_one
from .utils.text_normalizer import compact, normalize

logger = logging.getLogger(__name__)

FUZZY_RESULT_LIMIT = 60

# Sort length for entries without any English gloss
NO_GLOSS_LENGTH = 9999

# Verb glosses are written "to run"; the marker is optional for exact and prefix tiers
INFINITIVE_MARKER = "to "


def _gloss_forms(gloss: str) -> Tuple[str, ...]:
    """Return a gloss with and without its infinitive marker."""
    if gloss.startswith(INFINITIVE_MARKER) and len(gloss) > len(INFINITIVE_MARKER):
        return gloss, gloss[len(INFINITIVE_MARKER):].lstrip()
    return (gloss,)


def source_rank_key(candidate: Candidate, needle: str) -> Tuple:
    """
    Sort key for an English query (lower sorts first).

    Tiers: 0 exact gloss, 1 gloss prefix, 2 gloss substring, 3 raw line
    substring, 4 none. A leading "to " is ignored for the first two tiers.
    Ties break on the shortest matching gloss, then the headword.

    Args:
        candidate: Candidate to score.
        needle: Trimmed, lowercased query.
    """
    result = candidate.result
    glosses = [g for g in ((text or "").lower().strip() for text in gloss_texts(result)) if g]
    forms = [form for g in glosses for form in _gloss_forms(g)]

    if any(form == needle for form in forms):
        tier = 0
    elif any(form.startswith(needle) for form in forms):
        tier = 1
    elif any(needle in g for g in glosses):
        tier = 2
    elif any(needle in (line or "").lower() for line in raw_lines(result)):
        tier = 3
    else:
        tier = 4

    matching = [len(g) for g in glosses if needle in g]
    if matching:
        best_length = min(matching)
    elif glosses:
        best_length = min(len(g) for g in glosses)
    else:
        best_length = NO_GLOSS_LENGTH

    headword = primary_headword(result) or ""
    return (tier, best_length, headword.casefold(), headword, candidate.position)


def target_rank_key(
    candidate: Candidate,
    query: str,
    query_no_apos: str,
    query_compact: str,
    query_no_apos_compact: str,
) -> Tuple:
    """
    Sort key for a Beja query (lower sorts first).

    Signals, in priority order: exact compact match, exact match ignoring
    apostrophes, prefix match, one edit away from the primary form. The fuzzy
    index score decides between candidates with identical signals.
    """
    record = candidate.record or IndexedRecord.from_result(candidate.result, candidate.position)

    exact = bool(query_compact) and query_compact in (
        record.primary_compact, record.search_blob_compact
    )
    exact_no_apos = bool(query_no_apos_compact) and query_no_apos_compact in (
        record.primary_no_apos_compact, record.search_blob_no_apos_compact
    )
    starts = (bool(query) and record.search_blob.startswith(query)) or (
        bool(query_no_apos) and record.search_blob_no_apos.startswith(query_no_apos)
    )
    near = (
        bool(record.primary_compact)
        and within_edit_distance_one(record.primary_compact, query_compact)
    ) or (
        bool(query_no_apos_compact)
        and bool(record.primary_no_apos_compact)
        and within_edit_distance_one(record.primary_no_apos_compact, query_no_apos_compact)
    )

    return (not exact, not exact_no_apos, not starts, not near, candidate.score, candidate.position)


def rank(
    candidates: Sequence[Candidate],
    query: str,
    direction: SearchDirection,
    limit: Optional[int] = None,
) -> List[SearchResult]:
    """
    Order candidates deterministically and cap the list.

    Args:
        candidates: Output of the query executor.
        query: Raw user query.
        direction: Query language.
        limit: Maximum results. None applies FUZZY_RESULT_LIMIT to Beja
            queries and leaves English queries uncapped.

    Returns:
        Ranked search results.
    """
    direction = SearchDirection(direction)

    if direction is SearchDirection.SOURCE_LANGUAGE:
        needle = query.strip().lower()
        ordered = sorted(candidates, key=lambda c: source_rank_key(c, needle))
    else:
        form = normalize(query)
        ordered = sorted(
            candidates,
            key=lambda c: target_rank_key(
                c,
                form.full,
                form.no_apostrophe,
                compact(form.full),
                compact(form.no_apostrophe),
            ),
        )
        if limit is None:
            limit = FUZZY_RESULT_LIMIT

    results = [c.result for c in ordered]
    if limit is not None:
        results = results[:limit]

    logger.debug(f"Ranked {len(candidates)} candidates for {query!r}, returning {len(results)}")
    return results
