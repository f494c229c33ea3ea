"""Orchestrator: wires filter chain, sorter and paginator.

Data flow:
  1. Filter chain → matching records, original order
  2. Sorter       → stable order by the requested field
  3. Paginator    → one clamped page of the sorted result

The order is fixed: sorting only ranks matching records, and page N is
always the Nth slice of the final ordering. Callers reset ``page`` to 1
when search, filter or sort parameters change (see QueryRequest.refine).
"""

import json
import logging
from collections.abc import Sequence

from roster.core.config import MatchingConfig
from roster.core.schemas import PageResult, QueryRequest, StudentRecord
from roster.pipeline.matcher import filter_records
from roster.pipeline.paginator import paginate
from roster.pipeline.sorter import sort_records

logger = logging.getLogger(__name__)


def run_query(
    records: Sequence[StudentRecord],
    request: QueryRequest,
    matching: MatchingConfig | None = None,
) -> PageResult:
    """Run one query over a roster snapshot.

    ``records`` is read, never modified. Calling twice with the same
    arguments yields equal results.
    """
    filtered = filter_records(records, request, matching)
    ordered = sort_records(filtered, request.sort_field, request.sort_direction)
    page = paginate(ordered, request.page, request.page_size)

    logger.debug(
        "Query %r: %d of %d records matched, page %d/%d",
        request.search_text, len(filtered), len(records),
        page.current_page, page.total_pages,
    )

    return PageResult(
        items=page.items,
        total_matches=len(filtered),
        total_pages=page.total_pages,
        current_page=page.current_page,
        page_size=request.page_size,
    )


def export_page_json(result: PageResult) -> str:
    """Export a page of results as a JSON string."""
    data = {
        "total_matches": result.total_matches,
        "total_pages": result.total_pages,
        "current_page": result.current_page,
        "page_size": result.page_size,
        "items": [r.model_dump() for r in result.items],
    }
    return json.dumps(data, indent=2, ensure_ascii=False)
