"""Check which towel designs can be made from the available patterns."""

from functools import lru_cache


def parse_input(text):
    """The towel patterns and the designs, as two lists of strings."""
    if "\n\n" not in text:
        raise ValueError("expected patterns and designs separated by a blank line")
    patterns, designs = text.split("\n\n", 1)
    return patterns.split(", "), designs.splitlines()


def _checked(towels):
    towels = tuple(towels)
    if "" in towels:
        raise ValueError("towel patterns must not be empty")
    return towels


def _possible(towels):
    towels = _checked(towels)

    @lru_cache(maxsize=None)
    def possible(design):
        for towel in towels:
            if design.startswith(towel):
                rest = design[len(towel):]
                if not rest or possible(rest):
                    return True
        return False

    return possible


def _ways(towels):
    towels = _checked(towels)

    @lru_cache(maxsize=None)
    def ways(design):
        total = 0
        for towel in towels:
            if design.startswith(towel):
                rest = design[len(towel):]
                total += 1 if not rest else ways(rest)
        return total

    return ways


def can_make(design, towels):
    """True when the design is a concatenation of towel patterns."""
    return _possible(towels)(design)


def count_ways(design, towels):
    """Number of distinct ways to build the design from towel patterns."""
    return _ways(towels)(design)


def part1(text):
    """Number of designs that can be made."""
    towels, designs = parse_input(text)
    possible = _possible(towels)
    return sum(1 for design in designs if possible(design))


def part2(text):
    """Total number of ways to make every design."""
    towels, designs = parse_input(text)
    ways = _ways(towels)
    return sum(ways(design) for design in designs)