"""Compare two location id lists by pairwise distance and by similarity."""

from collections import Counter


def parse_location_lists(text):
    """Split each line into a left and right id; return both lists sorted."""
    left = []
    right = []
    for line in text.splitlines():
        parts = line.split()
        if len(parts) < 2:
            raise ValueError(f"expected two location ids, got {line!r}")
        left.append(int(parts[0]))
        right.append(int(parts[1]))
    return sorted(left), sorted(right)


def distance_score(left, right):
    """Sum of absolute differences between the paired ids."""
    return sum(abs(a - b) for a, b in zip(left, right, strict=True))


def similarity_score(left, right):
    """Sum of each left id times how often it occurs in the right list."""
    frequency = Counter(right)
    return sum(value * frequency[value] for value in left)