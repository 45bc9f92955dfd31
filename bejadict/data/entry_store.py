"""Entry store for loading the three dictionary datasets."""

import json
import logging
from pathlib import Path
from typing import Callable, List, Optional, Tuple, TypeVar, Union

from ..config import DataConfig
from ..models import DictionaryEntry, ReverseEntry, SecondaryEntry

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntryStore:
    """
    Holds the dictionary, reverse and secondary entry collections.

    Collections are immutable tuples; loading new data replaces them, which
    is what tells the search service to rebuild its index.
    """

    def __init__(
        self,
        dictionary: Optional[Tuple[DictionaryEntry, ...]] = None,
        reverse: Optional[Tuple[ReverseEntry, ...]] = None,
        secondary: Optional[Tuple[SecondaryEntry, ...]] = None,
    ):
        self.dictionary: Tuple[DictionaryEntry, ...] = tuple(dictionary or ())
        self.reverse: Tuple[ReverseEntry, ...] = tuple(reverse or ())
        self.secondary: Tuple[SecondaryEntry, ...] = tuple(secondary or ())

    @classmethod
    def from_paths(
        cls,
        dictionary_path: Optional[Union[str, Path]] = None,
        reverse_path: Optional[Union[str, Path]] = None,
        secondary_path: Optional[Union[str, Path]] = None,
    ) -> "EntryStore":
        """
        Load the datasets from JSON files.

        Args:
            dictionary_path: dictionary.json; skipped if None.
            reverse_path: english_beja.json; skipped if None.
            secondary_path: dict2.json; skipped if None.

        Returns:
            A populated EntryStore.
        """
        store = cls(
            dictionary=_load_entries(dictionary_path, DictionaryEntry.from_dict),
            reverse=_load_entries(reverse_path, ReverseEntry.from_dict),
            secondary=_load_entries(secondary_path, SecondaryEntry.from_dict),
        )
        logger.info(
            f"Loaded {len(store.dictionary)} dictionary, {len(store.reverse)} reverse "
            f"and {len(store.secondary)} secondary entries"
        )
        return store

    @classmethod
    def from_config(cls, config: DataConfig) -> "EntryStore":
        """Load the datasets named in a DataConfig."""
        return cls.from_paths(config.dictionary_path, config.reverse_path, config.secondary_path)

    def __len__(self) -> int:
        """Return the total number of entries."""
        return len(self.dictionary) + len(self.reverse) + len(self.secondary)

    @property
    def collections(self) -> Tuple[tuple, tuple, tuple]:
        """Return (dictionary, reverse, secondary)."""
        return self.dictionary, self.reverse, self.secondary


def _load_entries(path: Optional[Union[str, Path]], parse: Callable[[dict], T]) -> Tuple[T, ...]:
    """Parse a JSON array of entry objects."""
    if path is None:
        return ()

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of entries in {path}")

    entries: List[T] = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise ValueError(f"Entry {i} in {path} is not an object")
        entries.append(parse(item))

    logger.debug(f"Parsed {len(entries)} entries from {path}")
    return tuple(entries)
