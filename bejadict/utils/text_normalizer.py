"""Text normalization utilities for Beja and English search text."""

import re
import unicodedata
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional


@dataclass(frozen=True)
class NormalizedForm:
    """Comparable forms of one input string."""

    full: str  # keeps word-internal apostrophes
    no_apostrophe: str

    @property
    def compact(self) -> str:
        """``full`` without whitespace, for exact comparisons only."""
        return compact(self.full)

    @property
    def no_apostrophe_compact(self) -> str:
        """``no_apostrophe`` without whitespace, for exact comparisons only."""
        return compact(self.no_apostrophe)


class BejaTextNormalizer:
    """Canonicalize free-form text so differing orthographies compare equal."""

    # Right/left single quotation marks, modifier letter apostrophe and
    # turned comma, prime
    APOSTROPHE_VARIANTS = re.compile("[\u2019\u2018\u02bc\u02bb\u2032]")

    # Combining Diacritical Marks block
    COMBINING_MARKS = re.compile("[\u0300-\u036f]")

    NON_WORD = re.compile(r"[^a-z0-9']+")
    WHITESPACE = re.compile(r"\s+")
    APOSTROPHES = re.compile(r"'+")

    @classmethod
    def normalize_text(cls, text: Optional[str]) -> str:
        """
        Main normalization function.

        Lowercases, unifies apostrophe glyphs, strips diacritics and reduces
        everything outside ``[a-z0-9']`` to single spaces.

        Args:
            text: Input text (None is treated as empty).

        Returns:
            Normalized text
        """
        if not text:
            return ""

        text = text.lower()
        text = cls.APOSTROPHE_VARIANTS.sub("'", text)
        text = unicodedata.normalize("NFKD", text)
        text = cls.COMBINING_MARKS.sub("", text)
        text = cls.NON_WORD.sub(" ", text)
        text = cls.WHITESPACE.sub(" ", text)

        return text.strip()

    @classmethod
    def strip_apostrophes(cls, text: str) -> str:
        """Remove every apostrophe from already-normalized text."""
        return cls.APOSTROPHES.sub("", text)


def strip_apostrophes(text: str) -> str:
    """Convenience wrapper for :meth:`BejaTextNormalizer.strip_apostrophes`."""
    return BejaTextNormalizer.strip_apostrophes(text)


def compact(text: str) -> str:
    """Remove all whitespace from a normalized string."""
    return BejaTextNormalizer.WHITESPACE.sub("", text)


@lru_cache(maxsize=65536)
def normalize(text: Optional[str]) -> NormalizedForm:
    """
    Normalize a string into its comparable forms.

    Args:
        text: Raw text from a dataset or a user query.

    Returns:
        NormalizedForm with apostrophe-preserving and apostrophe-free variants.
    """
    full = BejaTextNormalizer.normalize_text(text)
    return NormalizedForm(full=full, no_apostrophe=strip_apostrophes(full))
