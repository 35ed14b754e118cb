"""Count reports whose levels change safely, optionally with one level removed."""

from itertools import pairwise


def parse_rows(text):
    """Parse each line into a list of integer levels."""
    return [[int(part) for part in line.split()] for line in text.splitlines()]


def is_safe(row):
    """True when levels strictly change in one direction by 1 to 3 each step."""
    if not row:
        raise ValueError("a report needs at least one level")
    steps = [a - b for a, b in pairwise(row)]
    descending = all(1 <= step <= 3 for step in steps)
    ascending = all(-3 <= step <= -1 for step in steps)
    return descending or ascending


def is_safe_with_dampener(row):
    """True when the row is safe, or becomes safe by dropping one level."""
    if is_safe(row):
        return True
    return any(is_safe(row[:i] + row[i + 1:]) for i in range(len(row)))


def part1(text):
    return sum(1 for row in parse_rows(text) if is_safe(row))


def part2(text):
    return sum(1 for row in parse_rows(text) if is_safe_with_dampener(row))