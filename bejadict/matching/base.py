"""Abstract base class for search strategies."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from ..models import SearchResult

if TYPE_CHECKING:
    from ..index.builder import IndexedRecord, SearchIndex


@dataclass(frozen=True)
class Candidate:
    """A search hit waiting to be ranked."""

    result: SearchResult
    position: int  # order in the index, used as the last tie-break
    record: Optional["IndexedRecord"] = None  # set for Beja searches
    score: float = 0.0  # fuzzy index score, lower is more similar


class SearchStrategy(ABC):
    """
    Abstract base class for search strategies.

    Each query direction has its own way of selecting candidate entries;
    ranking happens afterwards.
    """

    @abstractmethod
    def find_candidates(self, index: "SearchIndex", query: str) -> List[Candidate]:
        """
        Select the entries matching a query.

        Args:
            index: Index over the loaded datasets.
            query: Raw, non-blank user query.

        Returns:
            Candidates in index order (or fuzzy score order).
        """
        pass
