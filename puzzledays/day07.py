"""Find calibration equations that operators can make true."""

from enum import Enum
from itertools import product


class Operator(Enum):
    """Binary operators applied strictly left to right."""

    ADD = "+"
    MULTIPLY = "*"
    CONCATENATE = "||"

    def apply(self, a, b):
        """Combine two non-negative integers with this operator."""
        if self is Operator.ADD:
            return a + b
        if self is Operator.MULTIPLY:
            return a * b
        return int(f"{a}{b}")


def parse_equations(text):
    """Parse 'target: n1 n2 ...' lines into (target, numbers) pairs."""
    equations = []
    for line in text.splitlines():
        values = [int(part) for part in line.replace(":", "").split()]
        if not values:
            raise ValueError(f"empty equation line {line!r}")
        target, *numbers = values
        equations.append((target, numbers))
    return equations


def is_solvable(target, numbers, operators):
    """True when some choice of operators between the numbers yields target."""
    if not numbers:
        raise ValueError("an equation needs at least one number")
    first, *rest = numbers
    for choice in product(operators, repeat=len(rest)):
        result = first
        for operator, number in zip(choice, rest):
            result = operator.apply(result, number)
        if result == target:
            return True
    return False


def _calibration_total(text, operators):
    return sum(
        target
        for target, numbers in parse_equations(text)
        if is_solvable(target, numbers, operators)
    )


def part1(text):
    return _calibration_total(text, (Operator.ADD, Operator.MULTIPLY))


def part2(text):
    return _calibration_total(
        text, (Operator.ADD, Operator.MULTIPLY, Operator.CONCATENATE)
    )