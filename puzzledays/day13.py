"""Find the cheapest button presses that move a claw onto a prize."""

from dataclasses import dataclass

A_COST = 3
B_COST = 1
PRIZE_OFFSET = 10000000000000


@dataclass(frozen=True)
class Machine:
    """A claw machine: per-press movement of buttons A and B, and the prize."""

    a: tuple
    b: tuple
    prize: tuple

    def solve(self, limit=None):
        """Presses (a, b) reaching the prize exactly, or None if there are none."""
        ax, ay = self.a
        bx, by = self.b
        px, py = self.prize
        determinant = ax * by - bx * ay
        if determinant == 0:
            return None
        a_num = px * by - bx * py
        b_num = ax * py - px * ay
        if a_num % determinant or b_num % determinant:
            return None
        a_presses = a_num // determinant
        b_presses = b_num // determinant
        if a_presses < 0 or b_presses < 0:
            return None
        if limit is not None and (a_presses > limit or b_presses > limit):
            return None
        return a_presses, b_presses


def _pair(line):
    _, values = line.split(": ", 1)
    first, second = values.split(", ", 1)
    return int(first[2:]), int(second[2:])


def parse_machines(text, offset=0):
    """Parse blank-line separated machine descriptions; offset moves each prize."""
    machines = []
    for paragraph in text.split("\n\n"):
        lines = paragraph.strip().splitlines()
        if len(lines) < 3:
            raise ValueError(f"incomplete machine description {paragraph!r}")
        a = _pair(lines[0])
        b = _pair(lines[1])
        px, py = _pair(lines[2])
        machines.append(Machine(a=a, b=b, prize=(px + offset, py + offset)))
    return machines


def _total_cost(machines):
    total = 0
    for machine in machines:
        presses = machine.solve()
        if presses is not None:
            total += presses[0] * A_COST + presses[1] * B_COST
    return total


def part1(text):
    """Fewest tokens to win every winnable prize."""
    return _total_cost(parse_machines(text))


def part2(text, offset=PRIZE_OFFSET):
    """Fewest tokens to win every winnable prize after moving the prizes."""
    return _total_cost(parse_machines(text, offset))