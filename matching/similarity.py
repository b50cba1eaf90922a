"""Edit-distance similarity between normalized strings."""

from rapidfuzz.distance import Levenshtein


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit cost for insert, delete and substitute."""
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """Return the similarity of two normalized strings in [0, 1].

    Computed as ``(max_len - distance) / max_len``. Two empty strings are a
    full match. Inputs are compared as given; normalize them first.
    """
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return (max_len - edit_distance(a, b)) / max_len
