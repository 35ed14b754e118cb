"""Locate antinodes created by pairs of same-frequency antennas."""

from dataclasses import dataclass
from itertools import combinations, count


@dataclass
class AntennaMap:
    """A square grid of rows with antenna positions grouped by frequency."""

    rows: list
    antennas: dict
    width: int

    def within_bounds(self, position):
        """True when a (row, col) position lies inside the square grid."""
        row, col = position
        return 0 <= row < self.width and 0 <= col < self.width

    def render(self, antinodes):
        """The grid with '#' drawn on empty cells that hold an antinode."""
        lines = []
        for y in range(self.width):
            line = "".join(
                "#" if (y, x) in antinodes and self.rows[y][x] == "." else self.rows[y][x]
                for x in range(self.width)
            )
            lines.append(line)
        return "\n".join(lines)


def parse_map(text):
    """Parse the grid; every character other than '.' is an antenna."""
    rows = text.splitlines()
    antennas = {}
    for y, line in enumerate(rows):
        for x, char in enumerate(line):
            if char != ".":
                antennas.setdefault(char, []).append((y, x))
    width = len(rows[0]) if rows else 0
    return AntennaMap(rows, antennas, width)


def _pairs(antenna_map):
    for positions in antenna_map.antennas.values():
        for first, second in combinations(positions, 2):
            step = (second[0] - first[0], second[1] - first[1])
            yield first, second, step


def part1(text):
    """Count in-bounds positions one antenna spacing beyond each pair."""
    antenna_map = parse_map(text)
    antinodes = set()
    for first, second, (dy, dx) in _pairs(antenna_map):
        antinodes.add((first[0] - dy, first[1] - dx))
        antinodes.add((second[0] + dy, second[1] + dx))
    return len({node for node in antinodes if antenna_map.within_bounds(node)})


def _ray(antenna_map, start, step, sign):
    for factor in count(1):
        node = (start[0] + sign * step[0] * factor, start[1] + sign * step[1] * factor)
        if not antenna_map.within_bounds(node):
            return
        yield node


def part2(text):
    """Count in-bounds positions at any multiple of each pair's spacing."""
    antenna_map = parse_map(text)
    antinodes = set()
    for first, second, step in _pairs(antenna_map):
        antinodes.update(_ray(antenna_map, first, step, 1))
        antinodes.update(_ray(antenna_map, second, step, -1))
    return len(antinodes)