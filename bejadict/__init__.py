"""
Beja / English dictionary search.

Normalizes queries, builds an approximate-match index over the dictionary
datasets and ranks hits for both search directions.
"""

from .config import Config
from .index.builder import SearchIndex, build_index
from .models import (
    DictionaryEntry,
    EntryKind,
    ReverseEntry,
    SearchDirection,
    SearchResult,
    SecondaryEntry,
    SourceLocator,
)
from .pipeline import DictionarySearch
from .ranking import rank
from .search import lookup, search
from .utils.edit_distance import within_edit_distance_one
from .utils.text_normalizer import NormalizedForm, normalize

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DictionaryEntry",
    "DictionarySearch",
    "EntryKind",
    "NormalizedForm",
    "ReverseEntry",
    "SearchDirection",
    "SearchIndex",
    "SearchResult",
    "SecondaryEntry",
    "SourceLocator",
    "build_index",
    "lookup",
    "normalize",
    "rank",
    "search",
    "within_edit_distance_one",
]
