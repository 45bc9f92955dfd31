"""Query execution: picks the search strategy for a direction and ranks its output."""

import logging
from typing import List, Optional, Union

from .config import SearchConfig
from .index.builder import SearchIndex
from .matching.base import Candidate, SearchStrategy
from .matching.fuzzy_matcher import FuzzyMatcher
from .matching.substring_matcher import SubstringMatcher
from .models import SearchDirection, SearchResult
from .ranking import rank

logger = logging.getLogger(__name__)


def create_strategy(
    direction: Union[SearchDirection, str],
    config: Optional[SearchConfig] = None,
) -> SearchStrategy:
    """Create the search strategy for a query direction."""
    config = config or SearchConfig()
    direction = SearchDirection(direction)

    if direction is SearchDirection.SOURCE_LANGUAGE:
        return SubstringMatcher()
    elif direction is SearchDirection.TARGET_LANGUAGE:
        return FuzzyMatcher(candidate_limit=config.candidate_limit)
    else:
        raise ValueError(f"Unknown direction: {direction}")


def search(
    index: SearchIndex,
    raw_query: str,
    direction: Union[SearchDirection, str],
    config: Optional[SearchConfig] = None,
) -> List[Candidate]:
    """
    Select unranked candidates for a query.

    Args:
        index: Index over the loaded datasets.
        raw_query: Query exactly as typed.
        direction: ``beja`` (fuzzy) or ``english`` (substring).
        config: Search settings; defaults if None.

    Returns:
        Candidates for :func:`bejadict.ranking.rank`. Blank queries give [].
    """
    if not raw_query or not raw_query.strip():
        return []

    strategy = create_strategy(direction, config)
    return strategy.find_candidates(index, raw_query)


def lookup(
    index: SearchIndex,
    raw_query: str,
    direction: Union[SearchDirection, str],
    config: Optional[SearchConfig] = None,
) -> List[SearchResult]:
    """Search and rank in one call."""
    config = config or SearchConfig()
    direction = SearchDirection(direction)

    candidates = search(index, raw_query, direction, config)
    if direction is SearchDirection.TARGET_LANGUAGE:
        limit = config.fuzzy_result_limit
    else:
        limit = config.source_result_limit

    return rank(candidates, raw_query, direction, limit=limit)
