"""Score and rate hiking trails that climb from height 0 to height 9."""

from collections import deque
from functools import lru_cache

_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))
_TRAILHEAD = 0
_PEAK = 9


def parse_heights(text):
    """Map (row, col) positions to their single-digit heights."""
    return {
        (row, col): int(char)
        for row, line in enumerate(text.splitlines())
        for col, char in enumerate(line)
    }


def valid_neighbors(heights, position):
    """Adjacent positions exactly one step higher than the given one."""
    current = heights[position]
    row, col = position
    result = []
    for d_row, d_col in _DIRECTIONS:
        neighbor = (row + d_row, col + d_col)
        if heights.get(neighbor) == current + 1:
            result.append(neighbor)
    return result


def reachable_peaks(heights, start):
    """The height-9 positions reachable from start by climbing one step at a time."""
    visited = set()
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        for neighbor in valid_neighbors(heights, vertex):
            if neighbor not in visited:
                visited.add(neighbor)
                queue.append(neighbor)
    return {pos for pos in visited if heights[pos] == _PEAK}


def count_paths(heights, start, target):
    """Number of distinct climbing paths from start to target."""

    @lru_cache(maxsize=None)
    def paths_from(position):
        if position == target:
            return 1
        return sum(paths_from(n) for n in valid_neighbors(heights, position))

    return paths_from(start)


def _trailheads(heights):
    return [pos for pos, height in heights.items() if height == _TRAILHEAD]


def part1(text):
    """Sum over trailheads of the number of peaks each can reach."""
    heights = parse_heights(text)
    return sum(len(reachable_peaks(heights, start)) for start in _trailheads(heights))


def part2(text):
    """Sum over trailheads of the number of distinct trails to any peak."""
    heights = parse_heights(text)
    return sum(
        count_paths(heights, start, target)
        for start in _trailheads(heights)
        for target in reachable_peaks(heights, start)
    )