import pytest

from puzzledays.day15 import direction_of, part1, part2

SMALL = """########
#..O.O.#
##@.O..#
#...O..#
#.#.O..#
#...O..#
#......#
########

<^^>>>vv<v>>v<<"""


def test_direction_of():
    assert direction_of("^") == (0, -1)
    assert direction_of(">") == (1, 0)


def test_direction_of_unknown():
    with pytest.raises(ValueError):
        direction_of("x")


def test_part1_small_example():
    assert part1(SMALL) == 2028


def test_part1_blocked_push_changes_nothing():
    grid = "#####\n#@O#\n#####"
    assert part1(grid + "\n\n>") == part1(grid + "\n\n")


def test_part2_push_right():
    assert part2("#####\n#@O.#\n#####\n\n>") == 104


def test_part2_blocked_push_changes_nothing():
    grid = "####\n#@O#\n####"
    assert part2(grid + "\n\n>>") == part2(grid + "\n\n")


def test_missing_moves_section():
    with pytest.raises(ValueError):
        part1("#@#")


def test_part2_unknown_map_char():
    with pytest.raises(ValueError):
        part2("#@X#\n\n>")