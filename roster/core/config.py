"""Configuration models and YAML loader for the roster query tool."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from roster.core.schemas import DEFAULT_PAGE_SIZE, SortDirection, SortField


class MatchingConfig(BaseModel):
    """Typo tolerance for free-text search.

    skip_alphanumeric_candidates: candidates made only of ASCII letters and
    digits (roll numbers, single-word names) get substring matching only,
    never the edit-distance fallback.
    """

    model_config = ConfigDict(frozen=True)

    max_typo_distance: int = Field(default=1, ge=0)
    skip_alphanumeric_candidates: bool = True


class Settings(BaseModel):
    """Top-level settings loaded from YAML."""

    data_path: str = "data/students.yaml"
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, ge=1)
    page_window: int = Field(default=2, ge=0)
    default_sort_field: SortField = SortField.NAME
    default_sort_direction: SortDirection = SortDirection.ASC
    matching: MatchingConfig = Field(default_factory=MatchingConfig)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        path = Path(path)
        if not path.exists():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)
        raw: dict[str, Any] = yaml.safe_load(path.read_text()) or {}
        if not isinstance(raw, dict):
            msg = f"Config file must contain a mapping: {path}"
            raise ValueError(msg)
        return cls.model_validate(raw)
