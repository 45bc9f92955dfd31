"""Data models for the dictionary search."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


class EntryKind(str, Enum):
    """Tag identifying which dataset an entry comes from."""

    DICTIONARY = "beja_en"  # Beja -> English dictionary
    REVERSE = "en_beja"  # English -> Beja word list
    SECONDARY = "dict2"  # OCR-derived secondary dictionary


class SearchDirection(str, Enum):
    """Language the query is written in."""

    TARGET_LANGUAGE = "beja"
    SOURCE_LANGUAGE = "english"


@dataclass(frozen=True)
class SourceLocator:
    """Page (and optional line range) an entry was transcribed from."""

    page: int
    line_range: Optional[Tuple[int, int]] = None

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "SourceLocator":
        """Create a locator from a dataset ``source`` object."""
        data = data or {}
        start = data.get("start_line")
        end = data.get("end_line")
        line_range = (int(start), int(end)) if start is not None and end is not None else None
        return cls(page=int(data.get("page", 0)), line_range=line_range)


@dataclass(frozen=True)
class DictionaryEntry:
    """Headword entry of the main Beja -> English dictionary."""

    headword: str
    headword_parts: Tuple[str, ...]
    gloss_en: Tuple[str, ...]
    gloss_ar: Tuple[str, ...]
    raw: Tuple[str, ...]
    source: SourceLocator

    # Grammatical metadata, carried through for display only
    pos: Optional[Tuple[str, ...]] = None
    gender: Optional[str] = None
    number: Optional[str] = None
    word_class: Optional[str] = None
    nominalized_verb: bool = False
    regions: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict) -> "DictionaryEntry":
        """Create an entry from a ``dictionary.json`` record."""
        return cls(
            headword=data.get("headword") or "",
            headword_parts=_as_tuple(data.get("headword_parts")),
            gloss_en=_as_tuple(data.get("gloss_en")),
            gloss_ar=_as_tuple(data.get("gloss_ar")),
            raw=_as_tuple(data.get("raw")),
            source=SourceLocator.from_dict(data.get("source")),
            pos=_as_tuple(data["pos"]) if data.get("pos") is not None else None,
            gender=data.get("gender"),
            number=data.get("number"),
            word_class=data.get("class"),
            nominalized_verb=bool(data.get("nominalized_verb", False)),
            regions=_as_tuple(data.get("regions")),
        )


@dataclass(frozen=True)
class ReverseEntry:
    """Entry of the English -> Beja word list."""

    english: str
    beja: Tuple[str, ...]
    gloss_ar: Tuple[str, ...]
    raw: Tuple[str, ...]
    source: SourceLocator

    pos: Optional[Tuple[str, ...]] = None
    gender: Optional[str] = None
    word_class: Optional[str] = None
    regions: Tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict) -> "ReverseEntry":
        """Create an entry from an ``english_beja.json`` record."""
        return cls(
            english=data.get("english") or "",
            beja=_as_tuple(data.get("beja")),
            gloss_ar=_as_tuple(data.get("gloss_ar")),
            raw=_as_tuple(data.get("raw")),
            source=SourceLocator.from_dict(data.get("source")),
            pos=_as_tuple(data["pos"]) if data.get("pos") is not None else None,
            gender=data.get("gender"),
            word_class=data.get("class"),
            regions=_as_tuple(data.get("regions")),
        )


@dataclass(frozen=True)
class SecondaryEntry:
    """
    Entry of the OCR-derived secondary dictionary.

    Unlike the other datasets, gloss and raw text are single strings and the
    source has no line range.
    """

    headword: str
    gloss_en: str
    raw: str
    source: SourceLocator

    pos_guess: Optional[str] = None
    ocr_conf: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict) -> "SecondaryEntry":
        """Create an entry from a ``dict2.json`` record."""
        source = data.get("source") or {}
        return cls(
            headword=data.get("headword") or "",
            gloss_en=data.get("gloss_en") or "",
            raw=data.get("raw") or "",
            source=SourceLocator(page=int(source.get("page", 0))),
            pos_guess=data.get("pos_guess"),
            ocr_conf=data.get("ocr_conf"),
        )


Entry = Union[DictionaryEntry, ReverseEntry, SecondaryEntry]


@dataclass(frozen=True)
class SearchResult:
    """A search hit: the dataset tag plus a reference to the matched entry."""

    kind: EntryKind
    entry: Entry

    @property
    def source(self) -> SourceLocator:
        return self.entry.source

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for output."""
        line_range = self.entry.source.line_range
        return {
            "kind": self.kind.value,
            "beja": beja_text(self),
            "english": english_text(self),
            "arabic": arabic_text(self),
            "page": self.entry.source.page,
            "start_line": line_range[0] if line_range else None,
            "end_line": line_range[1] if line_range else None,
        }


def _as_tuple(value) -> Tuple[str, ...]:
    """Coerce an optional list (or bare string) field to a tuple of strings."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    return tuple(str(v) for v in value if v is not None)


def _unknown_kind(result: SearchResult) -> ValueError:
    return ValueError(f"Unknown entry kind: {result.kind!r}")


def target_forms(result: SearchResult) -> List[str]:
    """
    Return every Beja written form of an entry, primary form first.

    Args:
        result: The search result to inspect.

    Returns:
        List of Beja strings (possibly empty strings for missing data).
    """
    entry = result.entry
    if result.kind is EntryKind.DICTIONARY:
        return [entry.headword, *entry.headword_parts]
    elif result.kind is EntryKind.REVERSE:
        return list(entry.beja)
    elif result.kind is EntryKind.SECONDARY:
        return [entry.headword]
    raise _unknown_kind(result)


def primary_target_form(result: SearchResult) -> str:
    """Return the primary Beja form of an entry ('' if it has none)."""
    forms = target_forms(result)
    return forms[0] if forms else ""


def gloss_texts(result: SearchResult) -> List[str]:
    """Return the English gloss fields of an entry."""
    entry = result.entry
    if result.kind is EntryKind.DICTIONARY:
        return list(entry.gloss_en)
    elif result.kind is EntryKind.REVERSE:
        return [entry.english]
    elif result.kind is EntryKind.SECONDARY:
        return [entry.gloss_en]
    raise _unknown_kind(result)


def raw_lines(result: SearchResult) -> List[str]:
    """Return the original transcription lines of an entry."""
    entry = result.entry
    if result.kind is EntryKind.DICTIONARY or result.kind is EntryKind.REVERSE:
        return list(entry.raw)
    elif result.kind is EntryKind.SECONDARY:
        return [entry.raw] if entry.raw else []
    raise _unknown_kind(result)


def primary_headword(result: SearchResult) -> str:
    """Return the headword used to order English search results."""
    entry = result.entry
    if result.kind is EntryKind.DICTIONARY or result.kind is EntryKind.SECONDARY:
        return entry.headword
    elif result.kind is EntryKind.REVERSE:
        return entry.english
    raise _unknown_kind(result)


def beja_text(result: SearchResult) -> str:
    """Return the Beja text shown for a result."""
    entry = result.entry
    if result.kind is EntryKind.DICTIONARY or result.kind is EntryKind.SECONDARY:
        return entry.headword
    elif result.kind is EntryKind.REVERSE:
        return "; ".join(entry.beja)
    raise _unknown_kind(result)


def english_text(result: SearchResult) -> str:
    """Return the English text shown for a result."""
    entry = result.entry
    if result.kind is EntryKind.DICTIONARY:
        return "; ".join(entry.gloss_en)
    elif result.kind is EntryKind.REVERSE:
        return entry.english
    elif result.kind is EntryKind.SECONDARY:
        return entry.gloss_en
    raise _unknown_kind(result)


def arabic_text(result: SearchResult) -> str:
    """Return the Arabic gloss shown for a result (secondary entries have none)."""
    entry = result.entry
    if result.kind is EntryKind.DICTIONARY or result.kind is EntryKind.REVERSE:
        return "; ".join(entry.gloss_ar)
    elif result.kind is EntryKind.SECONDARY:
        return ""
    raise _unknown_kind(result)


def primary_text(result: SearchResult, direction: SearchDirection) -> str:
    """Return the text in the language the user searched in."""
    if direction is SearchDirection.TARGET_LANGUAGE:
        return beja_text(result)
    return english_text(result)


def secondary_text(result: SearchResult, direction: SearchDirection) -> str:
    """Return the translation shown under the primary text."""
    if direction is SearchDirection.TARGET_LANGUAGE:
        return english_text(result)
    return beja_text(result)
