"""Page slicing and page-number markers for paging controls."""

import math
from collections.abc import Sequence
from typing import NamedTuple

from roster.core.schemas import StudentRecord

ELLIPSIS = "..."


class PageSlice(NamedTuple):
    items: list[StudentRecord]
    total_pages: int
    current_page: int


def count_pages(total: int, page_size: int) -> int:
    """Number of pages for ``total`` items; never less than 1."""
    if page_size <= 0:
        msg = f"page_size must be positive, got {page_size}"
        raise ValueError(msg)
    return max(1, math.ceil(total / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    return max(1, min(page, total_pages))


def paginate(records: Sequence[StudentRecord], page: int, page_size: int) -> PageSlice:
    """Slice out one page, clamping ``page`` into ``[1, total_pages]``."""
    total_pages = count_pages(len(records), page_size)
    current_page = clamp_page(page, total_pages)
    start = (current_page - 1) * page_size
    items = list(records[start : start + page_size])
    return PageSlice(items=items, total_pages=total_pages, current_page=current_page)


def page_markers(current_page: int, total_pages: int, window: int = 2) -> list[int | str]:
    """Compact page list: first page, current +/- window, last page, ELLIPSIS for gaps.

    >>> page_markers(5, 10)
    [1, '...', 3, 4, 5, 6, 7, '...', 10]
    """
    middle = range(
        max(2, current_page - window),
        min(total_pages - 1, current_page + window) + 1,
    )

    markers: list[int | str] = [1]
    if current_page - window > 2:
        markers.append(ELLIPSIS)
    markers.extend(middle)

    if current_page + window < total_pages - 1:
        markers.extend([ELLIPSIS, total_pages])
    elif total_pages > 1:
        markers.append(total_pages)
    return markers
