"""Read-only roster snapshot loading.

The roster file is a YAML (or JSON) list of student mappings, optionally
nested under a top-level ``students`` key. Nothing here writes back.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from roster.core.schemas import StudentRecord

logger = logging.getLogger(__name__)


def load_records(path: str | Path) -> list[StudentRecord]:
    """Load every student record from ``path`` in file order."""
    path = Path(path)
    if not path.exists():
        msg = f"Roster file not found: {path}"
        raise FileNotFoundError(msg)

    raw: Any = yaml.safe_load(path.read_text(encoding="utf-8"))
    if raw is None:
        return []
    if isinstance(raw, dict):
        if "students" not in raw:
            msg = f"Roster file must contain a list of students: {path}"
            raise ValueError(msg)
        raw = raw["students"]
    if not isinstance(raw, list):
        msg = f"Roster file must contain a list of students: {path}"
        raise ValueError(msg)

    records = [StudentRecord.model_validate(row) for row in raw]
    logger.debug("Loaded %d records from %s", len(records), path)
    return records
