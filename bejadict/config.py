"""Configuration management for the dictionary search."""

from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator


class DataConfig(BaseModel):
    """Locations of the three JSON datasets."""

    dictionary_path: Optional[Path] = None  # dictionary.json (Beja -> English)
    reverse_path: Optional[Path] = None  # english_beja.json (English -> Beja)
    secondary_path: Optional[Path] = None  # dict2.json (OCR-derived)

    @field_validator("dictionary_path", "reverse_path", "secondary_path", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class IndexConfig(BaseModel):
    """Configuration for the approximate-match index."""

    threshold: float = Field(
        default=0.33, ge=0.0, le=1.0,
        description="Maximum edits per pattern character for a field to match",
    )
    min_match_length: int = Field(default=2, ge=1)
    primary_weight: float = Field(default=0.75, ge=0.0)
    primary_no_apostrophe_weight: float = Field(default=0.15, ge=0.0)
    search_blob_weight: float = Field(default=0.08, ge=0.0)
    search_blob_no_apostrophe_weight: float = Field(default=0.02, ge=0.0)
    show_progress: bool = False

    @model_validator(mode="after")
    def check_weights(self) -> "IndexConfig":
        """At least one field has to carry weight."""
        total = (
            self.primary_weight
            + self.primary_no_apostrophe_weight
            + self.search_blob_weight
            + self.search_blob_no_apostrophe_weight
        )
        if total <= 0:
            raise ValueError("Index field weights must not all be zero")
        return self


class SearchConfig(BaseModel):
    """Configuration for query execution and ranking."""

    candidate_limit: int = Field(
        default=200, ge=80,
        description="Fuzzy index hits handed to the ranking stage",
    )
    fuzzy_result_limit: int = Field(default=60, ge=1)
    source_result_limit: Optional[int] = Field(default=None, ge=1)


class OutputConfig(BaseModel):
    """Configuration for exporting results."""

    output_path: Optional[Path] = None
    format: Literal["csv", "parquet", "json"] = "json"

    @field_validator("output_path", mode="before")
    @classmethod
    def convert_to_path(cls, v):
        """Convert string to Path."""
        if v is None:
            return None
        return Path(v) if isinstance(v, str) else v


class Config(BaseModel):
    """Main configuration for the dictionary search."""

    data: DataConfig = Field(default_factory=DataConfig)
    index: IndexConfig = Field(default_factory=IndexConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file."""
        # mode="json" turns Path objects into strings
        data = self.model_dump(mode="json")
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True)
