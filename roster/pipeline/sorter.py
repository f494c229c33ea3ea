"""Stable single-field ordering of student records.

Descending order uses ``sorted(..., reverse=True)``, which inverts the
comparison but keeps equal records in their incoming order.
"""

import locale
from collections.abc import Callable, Sequence
from typing import Any

from roster.core.schemas import SortDirection, SortField, StudentRecord
from roster.pipeline.normalizer import normalize


def name_collation_key(name: str) -> tuple[str, str]:
    """Collation key for human alphabetic order.

    Primary: accent- and case-folded name. Secondary: the raw name. Both
    go through ``locale.strxfrm`` so the host's LC_COLLATE applies.
    """
    return (locale.strxfrm(normalize(name)), locale.strxfrm(name))


def _score_key(record: StudentRecord) -> float:
    return record.score


def _name_key(record: StudentRecord) -> tuple[str, str]:
    return name_collation_key(record.name)


_SORT_KEYS: dict[SortField, Callable[[StudentRecord], Any]] = {
    SortField.NAME: _name_key,
    SortField.SCORE: _score_key,
}


def sort_records(
    records: Sequence[StudentRecord],
    field: SortField | str,
    direction: SortDirection | str = SortDirection.ASC,
) -> list[StudentRecord]:
    """Return a new list of ``records`` ordered by ``field``.

    Raises:
        ValueError: if ``field`` or ``direction`` is not a known value.
    """
    key = _SORT_KEYS[SortField(field)]
    reverse = SortDirection(direction) == SortDirection.DESC
    return sorted(records, key=key, reverse=reverse)
