"""Count shortcuts through the walls of a single-lane racetrack."""

from collections import deque
from dataclasses import dataclass

_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))
MAX_CHEAT = 20


@dataclass
class Racetrack:
    """Open track positions, start and end (x, y), and the grid size."""

    start: tuple
    end: tuple
    track: set
    width: int
    height: int

    def path(self):
        """A shortest list of positions from start to end, both included."""
        parents = {self.start: None}
        queue = deque([self.start])
        while queue:
            current = queue.popleft()
            if current == self.end:
                break
            x, y = current
            for dx, dy in _DIRECTIONS:
                nxt = (x + dx, y + dy)
                if nxt in self.track and nxt not in parents:
                    parents[nxt] = current
                    queue.append(nxt)
        if self.end not in parents:
            raise ValueError("the end cannot be reached")
        route = []
        node = self.end
        while node is not None:
            route.append(node)
            node = parents[node]
        route.reverse()
        return route


def parse_racetrack(text):
    """Parse the grid; 'S', 'E' and '.' are track, anything else is wall."""
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty racetrack")
    start = end = (0, 0)
    track = set()
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            position = (col, row)
            if char == "S":
                start = position
            elif char == "E":
                end = position
            elif char != ".":
                continue
            track.add(position)
    return Racetrack(start, end, track, len(lines[0]), len(lines))


def part1(text, threshold):
    """Two-step cheats through a wall that save at least threshold picoseconds."""
    path = parse_racetrack(text).path()
    index = {pos: idx for idx, pos in enumerate(path)}
    count = 0
    for idx, (x, y) in enumerate(path):
        for dx, dy in _DIRECTIONS:
            target = index.get((x + 2 * dx, y + 2 * dy))
            if target is not None and target > idx and target - idx - 2 >= threshold:
                count += 1
    return count


def part2(text, threshold):
    """Cheats of up to 20 steps that save at least threshold picoseconds."""
    path = parse_racetrack(text).path()
    index = {pos: idx for idx, pos in enumerate(path)}
    offsets = [
        (dx, dy, abs(dx) + abs(dy))
        for dx in range(-MAX_CHEAT, MAX_CHEAT + 1)
        for dy in range(-MAX_CHEAT, MAX_CHEAT + 1)
        if abs(dx) + abs(dy) <= MAX_CHEAT
    ]
    count = 0
    for idx, (x, y) in enumerate(path):
        for dx, dy, distance in offsets:
            target = index.get((x + dx, y + dy))
            if target is not None and target > idx and target - idx - distance >= threshold:
                count += 1
    return count