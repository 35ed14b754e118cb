import pytest

from puzzledays.day07 import Operator, is_solvable, parse_equations, part1, part2

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""

BASIC = (Operator.ADD, Operator.MULTIPLY)
ALL = (Operator.ADD, Operator.MULTIPLY, Operator.CONCATENATE)


def test_parse_equations_first_line():
    equations = parse_equations(EXAMPLE)
    assert equations[0] == (190, [10, 19])
    assert len(equations) == 9


def test_parse_empty_line_raises():
    with pytest.raises(ValueError):
        parse_equations("190: 10 19\n\n")


def test_concatenate_joins_digits():
    assert Operator.CONCATENATE.apply(12, 345) == 12345


def test_solvable_with_basic_operators():
    assert is_solvable(190, [10, 19], BASIC) is True
    assert is_solvable(3267, [81, 40, 27], BASIC) is True


def test_unsolvable_with_basic_operators():
    assert is_solvable(83, [17, 5], BASIC) is False
    assert is_solvable(156, [15, 6], BASIC) is False


def test_concatenation_makes_solvable():
    assert is_solvable(156, [15, 6], ALL) is True


def test_single_number_needs_no_operator():
    assert is_solvable(5, [5], BASIC) is True
    assert is_solvable(6, [5], BASIC) is False


def test_empty_numbers_raise():
    with pytest.raises(ValueError):
        is_solvable(1, [], BASIC)


def test_part1_example():
    assert part1(EXAMPLE) == 3749


def test_part2_example():
    assert part2(EXAMPLE) == 11387


def test_part2_never_smaller_than_part1():
    assert part2(EXAMPLE) >= part1(EXAMPLE)