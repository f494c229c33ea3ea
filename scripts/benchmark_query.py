#!/usr/bin/env python3
"""Benchmark the query pipeline against a synthetic roster.

Builds N random student records, runs a fixed set of representative
queries several times each, and prints a timing table.

Usage:
    python scripts/benchmark_query.py
    python scripts/benchmark_query.py --records 2000 --repeat 50
    python scripts/benchmark_query.py --seed 7
"""

import argparse
import logging
import random
import statistics
import sys
import time
from pathlib import Path

# Ensure project root is on the path when run as a script
sys.path.insert(0, str(Path(__file__).parent.parent))

from roster.core.schemas import (
    DEPARTMENTS,
    YEARS,
    QueryRequest,
    SortDirection,
    SortField,
    StudentRecord,
)
from roster.pipeline.orchestrator import run_query

logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)

_FIRST_NAMES = (
    "José", "Ravi", "Ananya", "Chloé", "Liam", "Mei", "Søren", "Fatima",
    "Björn", "Priya", "Zoë", "Arjun", "Noémie", "Kwame", "Lucía", "Aditya",
)
_LAST_NAMES = (
    "Martínez", "Kumar", "Iyer", "Dubois", "O'Brien", "Tanaka", "Nielsen",
    "Zahra", "Larsson", "Nair", "Papadopoulos", "Mehta", "Laurent", "Mensah",
)

_QUERIES: dict[str, QueryRequest] = {
    "no filters": QueryRequest(),
    "substring search": QueryRequest(search_text="kumar"),
    "typo search": QueryRequest(search_text="Ravi Kumer"),
    "department + year": QueryRequest(department="CSE", year=2),
    "score desc, page 3": QueryRequest(
        sort_field=SortField.SCORE, sort_direction=SortDirection.DESC, page=3,
    ),
}


def _synthetic_roster(count: int, rng: random.Random) -> list[StudentRecord]:
    records = []
    for i in range(count):
        department = rng.choice(DEPARTMENTS)
        year = rng.choice(YEARS)
        records.append(
            StudentRecord(
                roll_number=f"{department}{2026 - year}-{i:04d}",
                name=f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}",
                department=department,
                year=year,
                score=round(rng.uniform(0.0, 10.0), 2),
            )
        )
    return records


def _time_query(records: list[StudentRecord], request: QueryRequest, repeat: int) -> list[float]:
    timings = []
    for _ in range(repeat):
        started = time.perf_counter()
        run_query(records, request)
        timings.append((time.perf_counter() - started) * 1000.0)
    return timings


def main() -> None:
    parser = argparse.ArgumentParser(description="Benchmark the roster query pipeline")
    parser.add_argument("--records", type=int, default=1000, help="Roster size (default: 1000)")
    parser.add_argument("--repeat", type=int, default=20, help="Runs per query (default: 20)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    records = _synthetic_roster(args.records, rng)
    print(f"Roster: {len(records)} records, {args.repeat} runs per query\n")

    print(f"{'Query':<22} {'Matches':>8} {'Median ms':>10} {'Max ms':>8}")
    print("-" * 52)
    for label, request in _QUERIES.items():
        timings = _time_query(records, request, args.repeat)
        matches = run_query(records, request).total_matches
        print(
            f"{label:<22} {matches:>8} "
            f"{statistics.median(timings):>10.3f} {max(timings):>8.3f}"
        )


if __name__ == "__main__":
    main()
