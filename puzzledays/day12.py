"""Price fences around garden regions by perimeter or by number of sides."""

from collections import deque

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def garden_map(text):
    """Map (row, col) positions to their plant type."""
    return {
        (row, col): char
        for row, line in enumerate(text.splitlines())
        for col, char in enumerate(line)
    }


def _same_neighbors(garden, position):
    plant = garden[position]
    row, col = position
    return [
        (row + d_row, col + d_col)
        for d_row, d_col in _DIRECTIONS
        if garden.get((row + d_row, col + d_col)) == plant
    ]


def find_regions(garden):
    """Connected regions of equal plants, each a list of positions."""
    visited = set()
    regions = []
    for start in garden:
        if start in visited:
            continue
        visited.add(start)
        region = []
        queue = deque([start])
        while queue:
            vertex = queue.popleft()
            region.append(vertex)
            for neighbor in _same_neighbors(garden, vertex):
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        regions.append(region)
    return regions


def count_corners(garden, position):
    """Number of region corners at a cell, outer and inner."""
    plant = garden[position]
    row, col = position
    corners = 0
    for (r1, c1), (r2, c2) in zip(_DIRECTIONS, _DIRECTIONS[1:] + _DIRECTIONS[:1]):
        first = garden.get((row + r1, col + c1)) == plant
        second = garden.get((row + r2, col + c2)) == plant
        if not first and not second:
            corners += 1
        elif first and second:
            diagonal = garden.get((row + r1 + r2, col + c1 + c2))
            if diagonal is not None and diagonal != plant:
                corners += 1
    return corners


def part1(text):
    """Sum of area times perimeter over all regions."""
    garden = garden_map(text)
    return sum(
        len(region) * sum(4 - len(_same_neighbors(garden, p)) for p in region)
        for region in find_regions(garden)
    )


def part2(text):
    """Sum of area times number of sides over all regions."""
    garden = garden_map(text)
    return sum(
        len(region) * sum(count_corners(garden, p) for p in region)
        for region in find_regions(garden)
    )