"""Output writer for search results."""

import json
from pathlib import Path
from typing import Iterable, List, Literal, Union

import pandas as pd

from ..models import SearchResult


class OutputWriter:
    """
    Writes search results to various output formats.

    Supports CSV, Parquet, and JSON formats.
    Can be used as a context manager; results are flushed on exit.
    """

    def __init__(
        self,
        output_path: Union[str, Path],
        format: Literal["csv", "parquet", "json"] = "json",
    ):
        """
        Initialize the output writer.

        Args:
            output_path: Path to write output file.
            format: Output format (csv, parquet, or json).
        """
        if format not in ("csv", "parquet", "json"):
            raise ValueError(f"Unknown output format: {format}")

        self.output_path = Path(output_path)
        self.format = format
        self._buffer: List[dict] = []

        # Ensure output directory exists
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

    def write_result(self, result: SearchResult, rank: int) -> None:
        """
        Write a single result to the buffer.

        Args:
            result: A ranked SearchResult.
            rank: 1-based position in the result list.
        """
        self._buffer.append({"rank": rank, **result.to_dict()})

    def write_results(self, results: Iterable[SearchResult]) -> None:
        """Write ranked results to the buffer, numbering them from 1."""
        for rank, result in enumerate(results, start=1):
            self.write_result(result, rank)

    def flush(self) -> None:
        """Write buffered results to file."""
        if self.format == "json":
            with open(self.output_path, "w", encoding="utf-8") as f:
                json.dump(self._buffer, f, ensure_ascii=False, indent=2)
            return

        df = pd.DataFrame(self._buffer)
        if self.format == "csv":
            df.to_csv(self.output_path, index=False)
        elif self.format == "parquet":
            df.to_parquet(self.output_path, index=False)

    def __enter__(self) -> "OutputWriter":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit - flush unless an error occurred."""
        if exc_type is None:
            self.flush()

    @property
    def count(self) -> int:
        """Return the number of results in the buffer."""
        return len(self._buffer)
