"""Trace a guard's patrol and count obstructions that trap it in a loop."""

from dataclasses import dataclass

_UP = (-1, 0)


def rotate(direction):
    """Turn a (row, col) direction 90 degrees to the right."""
    row, col = direction
    return (col, -row)


@dataclass
class Board:
    """Grid cells keyed by (row, col) with the guard's start position."""

    start: tuple
    positions: dict

    @property
    def walls(self):
        return {pos for pos, value in self.positions.items() if value == "#"}

    def visited_positions(self):
        """Every position the guard stands on before leaving the grid."""
        current = self.start
        direction = _UP
        visited = {current}
        while True:
            visited.add(current)
            ahead = (current[0] + direction[0], current[1] + direction[1])
            cell = self.positions.get(ahead)
            if cell is None:
                return visited
            if cell == "#":
                direction = rotate(direction)
            current = (current[0] + direction[0], current[1] + direction[1])


def parse_board(text):
    """Parse the grid; the guard starts at '^' (or at the origin if absent)."""
    positions = {}
    start = (0, 0)
    for row, line in enumerate(text.splitlines()):
        for col, char in enumerate(line):
            positions[(row, col)] = char
            if char == "^":
                start = (row, col)
    return Board(start, positions)


def _loops(board, walls, obstruction):
    current = board.start
    direction = _UP
    seen = {(current, direction)}
    while True:
        ahead = (current[0] + direction[0], current[1] + direction[1])
        if ahead in walls or ahead == obstruction:
            direction = rotate(direction)
            continue
        if (ahead, direction) in seen:
            return True
        if ahead not in board.positions:
            return False
        current = ahead
        seen.add((current, direction))


def part1(text):
    return len(parse_board(text).visited_positions())


def part2(text):
    board = parse_board(text)
    candidates = board.visited_positions() - {board.start}
    walls = board.walls
    return sum(1 for candidate in candidates if _loops(board, walls, candidate))