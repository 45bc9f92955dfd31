"""Search strategies for the two query directions."""

from .base import Candidate, SearchStrategy
from .fuzzy_matcher import FuzzyMatcher
from .substring_matcher import SubstringMatcher

__all__ = ["Candidate", "FuzzyMatcher", "SearchStrategy", "SubstringMatcher"]
