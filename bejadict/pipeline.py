"""Dictionary search service: builds the index once and answers queries."""

import logging
from typing import List, Optional, Sequence, Union

from .config import Config
from .data.entry_store import EntryStore
from .index.builder import SearchIndex, build_index
from .models import DictionaryEntry, ReverseEntry, SearchDirection, SearchResult, SecondaryEntry
from .search import lookup

logger = logging.getLogger(__name__)


class DictionarySearch:
    """
    Main entry point for looking words up.

    Owns the entry collections and the index built over them. The index is
    built lazily on the first query and rebuilt from scratch whenever a
    collection is replaced; between rebuilds it is only read.
    """

    def __init__(self, config: Optional[Config] = None, store: Optional[EntryStore] = None):
        """
        Initialize the service.

        Args:
            config: Search configuration; defaults if None.
            store: Loaded datasets. If None they are loaded from ``config.data``.
        """
        self.config = config or Config()
        self.store = store if store is not None else EntryStore.from_config(self.config.data)
        self.index: Optional[SearchIndex] = None

    def build(self) -> SearchIndex:
        """Build (or rebuild) the index over the current collections."""
        logger.info(f"Building search index over {len(self.store)} entries")
        self.index = build_index(*self.store.collections, config=self.config.index)
        return self.index

    def ensure_index(self) -> SearchIndex:
        """Return the index, rebuilding it if the collections changed."""
        if self.index is None or not self.index.is_built_from(*self.store.collections):
            return self.build()
        return self.index

    def replace_collections(
        self,
        dictionary: Optional[Sequence[DictionaryEntry]] = None,
        reverse: Optional[Sequence[ReverseEntry]] = None,
        secondary: Optional[Sequence[SecondaryEntry]] = None,
    ) -> None:
        """
        Swap in new datasets; collections left as None are kept.

        The index is rebuilt on the next query.
        """
        self.store = EntryStore(
            dictionary=dictionary if dictionary is not None else self.store.dictionary,
            reverse=reverse if reverse is not None else self.store.reverse,
            secondary=secondary if secondary is not None else self.store.secondary,
        )
        logger.info("Dataset replaced, index will be rebuilt")

    def lookup(self, query: str, direction: Union[SearchDirection, str]) -> List[SearchResult]:
        """
        Look a query up in the given direction.

        Args:
            query: Text as typed by the user.
            direction: ``beja`` or ``english``.

        Returns:
            Ranked results; empty for a blank query.
        """
        index = self.ensure_index()
        results = lookup(index, query, direction, self.config.search)
        logger.debug(f"{direction} lookup {query!r}: {len(results)} results")
        return results
