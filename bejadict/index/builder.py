"""Builds the searchable record set and fuzzy index over all three datasets."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from tqdm import tqdm

from ..config import IndexConfig
from ..models import (
    DictionaryEntry,
    EntryKind,
    ReverseEntry,
    SearchResult,
    SecondaryEntry,
    target_forms,
)
from ..utils.text_normalizer import compact, normalize
from .fuzzy_index import FuzzyIndex

logger = logging.getLogger(__name__)

PRIMARY = "primary"
PRIMARY_NO_APOS = "primary_no_apos"
SEARCH_BLOB = "search_blob"
SEARCH_BLOB_NO_APOS = "search_blob_no_apos"


@dataclass(frozen=True)
class IndexedRecord:
    """A search result with its precomputed normalized Beja forms."""

    result: SearchResult
    position: int  # order across dictionary, reverse and secondary entries

    primary: str
    primary_no_apos: str
    search_blob: str
    search_blob_no_apos: str

    primary_compact: str
    primary_no_apos_compact: str
    search_blob_compact: str
    search_blob_no_apos_compact: str

    @classmethod
    def from_result(cls, result: SearchResult, position: int) -> "IndexedRecord":
        """Normalize the Beja forms of a result."""
        forms = target_forms(result)
        primary = normalize(forms[0] if forms else "")
        blob = normalize(" ".join(form for form in forms if form))

        return cls(
            result=result,
            position=position,
            primary=primary.full,
            primary_no_apos=primary.no_apostrophe,
            search_blob=blob.full,
            search_blob_no_apos=blob.no_apostrophe,
            primary_compact=compact(primary.full),
            primary_no_apos_compact=compact(primary.no_apostrophe),
            search_blob_compact=compact(blob.full),
            search_blob_no_apos_compact=compact(blob.no_apostrophe),
        )


class SearchIndex:
    """
    Read-only index over one generation of the datasets.

    Keeps the source collections by reference so callers can tell whether
    the index is stale after a dataset reload.
    """

    def __init__(
        self,
        records: List[IndexedRecord],
        fuzzy: FuzzyIndex,
        sources: Tuple[Sequence, Sequence, Sequence],
    ):
        self.records = records
        self.fuzzy = fuzzy
        self._sources = sources

    def __len__(self) -> int:
        """Return the number of indexed entries."""
        return len(self.records)

    def is_built_from(
        self,
        dict_entries: Sequence[DictionaryEntry],
        reverse_entries: Sequence[ReverseEntry],
        secondary_entries: Sequence[SecondaryEntry],
    ) -> bool:
        """Check whether this index was built from exactly these collections."""
        current = (dict_entries, reverse_entries, secondary_entries)
        return all(a is b for a, b in zip(self._sources, current))

    def lookup(self, pattern: str, limit: Optional[int] = None) -> List[Tuple[IndexedRecord, float]]:
        """
        Run an approximate lookup.

        Args:
            pattern: Normalized (``full``) query.
            limit: Maximum number of hits.

        Returns:
            (record, score) pairs, most similar first.
        """
        return [(self.records[hit.doc_id], hit.score) for hit in self.fuzzy.search(pattern, limit)]


def build_index(
    dict_entries: Sequence[DictionaryEntry],
    reverse_entries: Sequence[ReverseEntry],
    secondary_entries: Sequence[SecondaryEntry],
    config: Optional[IndexConfig] = None,
) -> SearchIndex:
    """
    Build a search index over the three datasets.

    Args:
        dict_entries: Beja -> English dictionary entries.
        reverse_entries: English -> Beja entries.
        secondary_entries: OCR-derived secondary entries.
        config: Index tuning (weights, threshold); defaults if None.

    Returns:
        A SearchIndex, possibly empty.
    """
    config = config or IndexConfig()

    fuzzy = FuzzyIndex(
        fields=[
            (PRIMARY, config.primary_weight),
            (PRIMARY_NO_APOS, config.primary_no_apostrophe_weight),
            (SEARCH_BLOB, config.search_blob_weight),
            (SEARCH_BLOB_NO_APOS, config.search_blob_no_apostrophe_weight),
        ],
        threshold=config.threshold,
        min_match_length=config.min_match_length,
    )

    results = [
        *(SearchResult(EntryKind.DICTIONARY, entry) for entry in dict_entries),
        *(SearchResult(EntryKind.REVERSE, entry) for entry in reverse_entries),
        *(SearchResult(EntryKind.SECONDARY, entry) for entry in secondary_entries),
    ]

    records: List[IndexedRecord] = []
    for position, result in enumerate(
        tqdm(results, desc="Indexing entries", disable=not config.show_progress)
    ):
        record = IndexedRecord.from_result(result, position)
        fuzzy.add({
            PRIMARY: record.primary,
            PRIMARY_NO_APOS: record.primary_no_apos,
            SEARCH_BLOB: record.search_blob,
            SEARCH_BLOB_NO_APOS: record.search_blob_no_apos,
        })
        records.append(record)

    logger.info(
        f"Indexed {len(records)} entries "
        f"({len(dict_entries)} dictionary, {len(reverse_entries)} reverse, "
        f"{len(secondary_entries)} secondary)"
    )

    return SearchIndex(records, fuzzy, (dict_entries, reverse_entries, secondary_entries))
