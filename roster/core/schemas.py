"""Core data models for the student roster query pipeline."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEPARTMENTS = ("CSE", "ECE", "ME", "CE", "EE")
YEARS = (1, 2, 3, 4)

# Filter value meaning "do not filter on this field".
ALL = "all"

DEFAULT_PAGE_SIZE = 8

# Request fields whose change invalidates the current page position.
_QUERY_FIELDS = ("search_text", "department", "year", "sort_field", "sort_direction")


class SortField(str, Enum):
    NAME = "name"
    SCORE = "score"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class StudentRecord(BaseModel):
    """A single student row.

    Frozen. Range and uniqueness checks belong to whoever edits the roster;
    the query pipeline takes records as given.
    """

    model_config = ConfigDict(frozen=True)

    roll_number: str
    name: str
    department: str
    year: int
    score: float


class QueryRequest(BaseModel):
    """Search, filter, sort and page parameters for one pipeline call."""

    model_config = ConfigDict(frozen=True)

    search_text: str = ""
    department: str | None = None
    year: int | None = None
    sort_field: SortField = SortField.NAME
    sort_direction: SortDirection = SortDirection.ASC
    page: int = 1
    page_size: int = Field(default=DEFAULT_PAGE_SIZE, gt=0)

    @field_validator("department", mode="before")
    @classmethod
    def department_all_means_none(cls, v: Any) -> Any:
        if v == ALL or v == "":
            return None
        return v

    @field_validator("year", mode="before")
    @classmethod
    def year_all_means_none(cls, v: Any) -> Any:
        if isinstance(v, bool):
            msg = "year must be an integer, not a boolean"
            raise ValueError(msg)
        if v == ALL or v == "":
            return None
        return v

    @classmethod
    def reset(cls, page_size: int = DEFAULT_PAGE_SIZE) -> "QueryRequest":
        """Return the request with every search, filter and sort option cleared."""
        return cls(page_size=page_size)

    def refine(self, **changes: Any) -> "QueryRequest":
        """Return a copy with ``changes`` applied.

        Changing the search text, a filter or the sort order moves back to
        page 1 unless an explicit ``page`` is part of the changes.
        """
        refined = type(self).model_validate({**self.model_dump(), **changes})
        if "page" in changes:
            return refined
        if any(getattr(refined, f) != getattr(self, f) for f in _QUERY_FIELDS):
            return refined.model_copy(update={"page": 1})
        return refined

    def toggle_sort(self, field: SortField | str) -> "QueryRequest":
        """Select ``field`` ascending, or flip the direction if already selected."""
        field = SortField(field)
        if field == self.sort_field:
            direction = (
                SortDirection.DESC
                if self.sort_direction == SortDirection.ASC
                else SortDirection.ASC
            )
        else:
            direction = SortDirection.ASC
        return self.refine(sort_field=field, sort_direction=direction)


class PageResult(BaseModel):
    """One page of query output plus the counts needed to render paging controls."""

    model_config = ConfigDict(frozen=True)

    items: list[StudentRecord] = Field(default_factory=list)
    total_matches: int = Field(ge=0)
    total_pages: int = Field(ge=1)
    current_page: int = Field(ge=1)
    page_size: int = Field(gt=0)

    @property
    def first_index(self) -> int:
        """1-based position of the first item on this page (0 if empty)."""
        if not self.items:
            return 0
        return (self.current_page - 1) * self.page_size + 1

    @property
    def last_index(self) -> int:
        """1-based position of the last item on this page (0 if empty)."""
        if not self.items:
            return 0
        return self.first_index + len(self.items) - 1

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages


class DatasetStats(BaseModel):
    """Summary figures for a whole roster."""

    model_config = ConfigDict(frozen=True)

    total_records: int = 0
    department_count: int = 0
    average_score: float = 0.0
