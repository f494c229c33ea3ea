"""Typo-tolerant matching of a search query against one field value.

Match rules, in order:
  1. Empty query or empty candidate never matches.
  2. Substring containment after normalization matches.
  3. Alphanumeric gate: candidates made only of ASCII letters and digits
     stop here (no typo tolerance for dense tokens like roll numbers).
  4. Edit-distance fallback: lengths within max_typo_distance of each
     other and a Levenshtein distance of at most max_typo_distance.
"""

import re

from rapidfuzz.distance import Levenshtein

from roster.core.config import MatchingConfig
from roster.pipeline.normalizer import normalize

_ALPHANUMERIC = re.compile(r"[a-z0-9]+", re.IGNORECASE | re.ASCII)

_DEFAULT_POLICY = MatchingConfig()


def is_alphanumeric_token(text: str) -> bool:
    """True when ``text`` is made only of ASCII letters and digits."""
    return _ALPHANUMERIC.fullmatch(text) is not None


def matches(query: str, candidate: str, policy: MatchingConfig | None = None) -> bool:
    """Return True if ``query`` matches ``candidate`` under ``policy``."""
    if not query or not candidate:
        return False
    if policy is None:
        policy = _DEFAULT_POLICY

    norm_query = normalize(query)
    norm_candidate = normalize(candidate)

    if norm_query in norm_candidate:
        return True

    if policy.skip_alphanumeric_candidates and is_alphanumeric_token(norm_candidate):
        return False

    max_distance = policy.max_typo_distance
    if abs(len(norm_query) - len(norm_candidate)) > max_distance:
        return False

    return Levenshtein.distance(norm_query, norm_candidate) <= max_distance
