"""Roster-wide summary figures."""

from collections.abc import Sequence

from roster.core.schemas import DatasetStats, StudentRecord


def summarize(records: Sequence[StudentRecord]) -> DatasetStats:
    """Count records and departments and average the scores (0.0 when empty)."""
    if not records:
        return DatasetStats()
    return DatasetStats(
        total_records=len(records),
        department_count=len({r.department for r in records}),
        average_score=sum(r.score for r in records) / len(records),
    )
