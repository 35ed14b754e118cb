"""Simulate stones that change and split every time you blink."""

from collections import Counter

_MULTIPLIER = 2024


def parse_stones(text):
    """The engraved numbers, in order."""
    return [int(part) for part in text.split()]


def _transform(stone):
    if stone == 0:
        return [1]
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [stone * _MULTIPLIER]


def blink(stones):
    """The stones after one blink, in order."""
    return [new for stone in stones for new in _transform(stone)]


def count_after_blinks(stones, blinks):
    """Number of stones after the given number of blinks."""
    counts = Counter(stones)
    for _ in range(blinks):
        next_counts = Counter()
        for stone, amount in counts.items():
            for new in _transform(stone):
                next_counts[new] += amount
        counts = next_counts
    return sum(counts.values())


def part1(text):
    """Number of stones after 25 blinks, simulated stone by stone."""
    stones = parse_stones(text)
    for _ in range(25):
        stones = blink(stones)
    return len(stones)


def part2(text):
    """Number of stones after 75 blinks."""
    return count_after_blinks(parse_stones(text), 75)