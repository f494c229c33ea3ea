"""Text canonicalization for accent- and case-insensitive comparison."""

import unicodedata


def normalize(text: str) -> str:
    """Trim, decompose, drop combining marks, lowercase.

    "  José " and "jose" both become "jose". Empty input gives "".
    """
    decomposed = unicodedata.normalize("NFD", text.strip())
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.lower()
