"""Data loading and output modules."""

from .entry_store import EntryStore
from .output_writer import OutputWriter

__all__ = ["EntryStore", "OutputWriter"]
