"""Find the cheapest reindeer routes through a maze."""

import heapq
from dataclasses import dataclass

STEP_COST = 1
TURN_COST = 1000
_EAST = (1, 0)
_ALL = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class Maze:
    """Wall positions, start and end (x, y), and the (width, height)."""

    walls: set
    start: tuple
    end: tuple
    size: tuple

    def render(self):
        """The maze drawn with S, E, '#' and '.'."""
        width, height = self.size
        lines = []
        for row in range(height):
            chars = []
            for col in range(width):
                pos = (col, row)
                if pos == self.start:
                    chars.append("S")
                elif pos == self.end:
                    chars.append("E")
                elif pos in self.walls:
                    chars.append("#")
                else:
                    chars.append(".")
            lines.append("".join(chars))
        return "\n".join(lines) + "\n"


def parse_maze(text):
    lines = text.splitlines()
    if not lines:
        raise ValueError("empty maze")
    walls = set()
    start = end = (0, 0)
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char == "#":
                walls.add((col, row))
            elif char == "S":
                start = (col, row)
            elif char == "E":
                end = (col, row)
    return Maze(walls, start, end, (len(lines[0]), len(lines)))


def _turns(direction):
    x, y = direction
    return ((-y, x), (y, -x))


def _forward(maze, state):
    (px, py), d = state
    for turn in _turns(d):
        yield ((px, py), turn), TURN_COST
    nxt = (px + d[0], py + d[1])
    if nxt not in maze.walls:
        yield (nxt, d), STEP_COST


def _backward(maze, state):
    (px, py), d = state
    for turn in _turns(d):
        yield ((px, py), turn), TURN_COST
    prev = (px - d[0], py - d[1])
    if prev not in maze.walls:
        yield (prev, d), STEP_COST


def _dijkstra(sources, edges):
    dist = {s: 0 for s in sources}
    heap = [(0, i, s) for i, s in enumerate(sources)]
    counter = len(heap)
    while heap:
        cost, _, state = heapq.heappop(heap)
        if cost > dist[state]:
            continue
        for nxt, weight in edges(state):
            new = cost + weight
            if new < dist.get(nxt, new + 1):
                dist[nxt] = new
                counter += 1
                heapq.heappush(heap, (new, counter, nxt))
    return dist


def _best(maze, forward):
    costs = [forward[(maze.end, d)] for d in _ALL if (maze.end, d) in forward]
    if not costs:
        raise ValueError("the end cannot be reached")
    return min(costs)


def part1(text):
    """Lowest score from the start, facing east, to the end."""
    maze = parse_maze(text)
    forward = _dijkstra([(maze.start, _EAST)], lambda s: _forward(maze, s))
    return _best(maze, forward)


def part2(text):
    """Number of tiles lying on at least one lowest-score route."""
    maze = parse_maze(text)
    forward = _dijkstra([(maze.start, _EAST)], lambda s: _forward(maze, s))
    best = _best(maze, forward)
    backward = _dijkstra([(maze.end, d) for d in _ALL], lambda s: _backward(maze, s))
    return len({
        state[0] for state, cost in forward.items()
        if state in backward and cost + backward[state] == best
    })