"""Filter chain for roster queries.

Filter order:
  1. SearchTextFilter : fuzzy match on roll number OR name
  2. DepartmentFilter : exact, case-sensitive
  3. YearFilter       : exact integer

Every filter keeps survivors in their input order and passes everything
through when its parameter is unset.
"""

import logging
from collections.abc import Callable, Sequence

from roster.core.config import MatchingConfig
from roster.core.schemas import QueryRequest, StudentRecord
from roster.pipeline.fuzzy import matches

logger = logging.getLogger(__name__)

# A filter is a callable that takes records and returns an ordered subset.
Filter = Callable[[list[StudentRecord]], list[StudentRecord]]


class SearchTextFilter:
    """Keep records whose roll number or name fuzzy-matches the search text."""

    def __init__(self, search_text: str, policy: MatchingConfig | None = None) -> None:
        self._text = search_text
        self._policy = policy

    def __call__(self, records: list[StudentRecord]) -> list[StudentRecord]:
        if self._text == "":
            return records
        result = [r for r in records if self._matches(r)]
        removed = len(records) - len(result)
        if removed:
            logger.debug("SearchTextFilter: removed %d records", removed)
        return result

    def _matches(self, record: StudentRecord) -> bool:
        return matches(self._text, record.roll_number, self._policy) or matches(
            self._text, record.name, self._policy
        )


class DepartmentFilter:
    """Keep records in exactly the given department."""

    def __init__(self, department: str | None) -> None:
        self._department = department

    def __call__(self, records: list[StudentRecord]) -> list[StudentRecord]:
        if self._department is None:
            return records
        result = [r for r in records if r.department == self._department]
        removed = len(records) - len(result)
        if removed:
            logger.debug("DepartmentFilter: removed %d records", removed)
        return result


class YearFilter:
    """Keep records in exactly the given year of study."""

    def __init__(self, year: int | None) -> None:
        self._year = year

    def __call__(self, records: list[StudentRecord]) -> list[StudentRecord]:
        if self._year is None:
            return records
        result = [r for r in records if r.year == self._year]
        removed = len(records) - len(result)
        if removed:
            logger.debug("YearFilter: removed %d records", removed)
        return result


def build_filters(request: QueryRequest, policy: MatchingConfig | None = None) -> list[Filter]:
    """Build the filter chain for a request."""
    return [
        SearchTextFilter(request.search_text, policy),
        DepartmentFilter(request.department),
        YearFilter(request.year),
    ]


def run_filter_chain(
    records: Sequence[StudentRecord],
    filters: list[Filter],
) -> list[StudentRecord]:
    """Apply filters in order, returning the surviving records.

    Always returns a new list; the input sequence is left untouched.
    """
    result = list(records)
    for f in filters:
        result = f(result)
    return result


def filter_records(
    records: Sequence[StudentRecord],
    request: QueryRequest,
    policy: MatchingConfig | None = None,
) -> list[StudentRecord]:
    """Return the records that satisfy every filter in ``request``, in original order."""
    return run_filter_chain(records, build_filters(request, policy))
