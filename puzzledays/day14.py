"""Predict where security robots end up on a wrapping grid."""

import math
from dataclasses import dataclass, field

DEFAULT_WIDTH = 101
DEFAULT_HEIGHT = 103
PART1_SECONDS = 100


@dataclass(frozen=True)
class Robot:
    """A robot's starting (x, y) position and per-second velocity."""

    position: tuple
    velocity: tuple


@dataclass
class Board:
    """A wrapping grid of the given size holding robots."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    robots: list = field(default_factory=list)

    def position_at(self, robot, time):
        """The robot's (x, y) position after the given number of seconds."""
        x, y = robot.position
        vx, vy = robot.velocity
        return ((x + vx * time) % self.width, (y + vy * time) % self.height)

    def quadrant(self, position):
        """Quadrant 1-4 (reading order) of a position, or None on a middle line."""
        half_width = self.width // 2
        half_height = self.height // 2
        col, row = position
        if col == half_width or row == half_height:
            return None
        left = col < half_width
        top = row < half_height
        if top:
            return 1 if left else 2
        return 3 if left else 4

    def render(self, positions):
        """The grid with each position's count drawn and '.' elsewhere."""
        return "\n".join(
            "".join(str(positions[(col, row)]) if (col, row) in positions else "."
                    for col in range(self.width))
            for row in range(self.height)
        )


def _pair(text):
    first, second = text[2:].split(",")
    return int(first), int(second)


def parse_robot(line):
    """Parse a line such as 'p=0,4 v=3,-3'."""
    try:
        position, velocity = line.strip().split(" ", 1)
        return Robot(_pair(position), _pair(velocity))
    except ValueError as error:
        raise ValueError(f"malformed robot line {line!r}") from error


def parse_board(text, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT):
    """A board of the given size with one robot per input line."""
    return Board(width, height, [parse_robot(line) for line in text.splitlines()])


def part1(text, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT):
    """Product of the robot counts per quadrant after 100 seconds."""
    board = parse_board(text, width, height)
    counts = {}
    for robot in board.robots:
        quadrant = board.quadrant(board.position_at(robot, PART1_SECONDS))
        if quadrant is not None:
            counts[quadrant] = counts.get(quadrant, 0) + 1
    return math.prod(counts.values())


def part2(text, width=DEFAULT_WIDTH, height=DEFAULT_HEIGHT):
    """First second at which no two robots share a position."""
    board = parse_board(text, width, height)
    time = 0
    while True:
        positions = {board.position_at(robot, time) for robot in board.robots}
        if len(positions) == len(board.robots):
            return time
        time += 1