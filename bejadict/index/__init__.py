"""Approximate-match index over the dictionary datasets."""

from .builder import IndexedRecord, SearchIndex, build_index
from .fuzzy_index import FuzzyHit, FuzzyIndex

__all__ = ["FuzzyHit", "FuzzyIndex", "IndexedRecord", "SearchIndex", "build_index"]
