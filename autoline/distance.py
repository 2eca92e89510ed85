"""Edit distance — Levenshtein distance and normalized similarity."""


def distance(a: str, b: str) -> int:
    """Levenshtein distance (insert/delete/substitute, unit cost)."""
    if a == b:
        return 0

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            current[j] = min(
                previous[j] + 1,         # deletion
                current[j - 1] + 1,      # insertion
                previous[j - 1] + cost,  # substitution
            )
        previous = current

    return previous[len(b)]


def similarity(a: str, b: str) -> float:
    """Similarity relative to the shorter string: 1 - distance / min length.

    Only meaningful for ranking. Can go negative when the strings differ
    a lot in length. Both strings must be non-empty.
    """
    assert a and b, "similarity() needs two non-empty strings"
    return 1 - distance(a, b) / min(len(a), len(b))
