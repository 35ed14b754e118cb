"""Find a path across a memory grid while bytes fall and corrupt it."""

from collections import deque
from dataclasses import dataclass, field

_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass
class MemorySpace:
    """A grid from (0, 0) to (size, size) and the ordered falling bytes."""

    size: int
    corruptions: list
    fallen: set = field(default_factory=set)

    def simulate(self, count):
        """Let the first count bytes fall."""
        if count > len(self.corruptions):
            raise ValueError(
                f"only {len(self.corruptions)} bytes can fall, not {count}"
            )
        self.fallen.update(self.corruptions[:count])


def parse_memory_space(size, text):
    """Parse 'x,y' lines into the falling byte positions."""
    corruptions = []
    for line in text.splitlines():
        pieces = [int(x) for x in line.split(",")]
        if len(pieces) < 2:
            raise ValueError(f"malformed byte position {line!r}")
        corruptions.append((pieces[0], pieces[1]))
    return MemorySpace(size, corruptions)


def neighbors(size, position, blocked):
    """In-bounds, unblocked positions next to the given one."""
    x, y = position
    result = []
    for dx, dy in _DIRECTIONS:
        nxt = (x + dx, y + dy)
        if 0 <= nxt[0] <= size and 0 <= nxt[1] <= size and nxt not in blocked:
            result.append(nxt)
    return result


def shortest_path(size, blocked):
    """Fewest steps from (0, 0) to (size, size), or None if there is no way."""
    start = (0, 0)
    end = (size, size)
    distances = {start: 0}
    queue = deque([start])
    while queue:
        current = queue.popleft()
        if current == end:
            return distances[current]
        for nxt in neighbors(size, current, blocked):
            if nxt not in distances:
                distances[nxt] = distances[current] + 1
                queue.append(nxt)
    return None


def part1(text, size, simulate_count):
    """Fewest steps to the exit after simulate_count bytes have fallen."""
    space = parse_memory_space(size, text)
    space.simulate(simulate_count)
    steps = shortest_path(space.size, space.fallen)
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return steps


def part2(text, size, simulate_count):
    """'x,y' of the first byte that cuts off the exit."""
    space = parse_memory_space(size, text)
    low = simulate_count
    high = len(space.corruptions)
    while low < high:
        mid = (low + high) // 2
        if shortest_path(size, set(space.corruptions[:mid])) is not None:
            low = mid + 1
        else:
            high = mid
    if high == 0:
        raise ValueError("no byte has fallen")
    x, y = space.corruptions[high - 1]
    return f"{x},{y}"