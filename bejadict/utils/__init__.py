"""Utility functions."""

from .edit_distance import within_edit_distance_one
from .text_normalizer import BejaTextNormalizer, NormalizedForm, compact, normalize, strip_apostrophes

__all__ = [
    "BejaTextNormalizer",
    "NormalizedForm",
    "compact",
    "normalize",
    "strip_apostrophes",
    "within_edit_distance_one",
]
