import pytest

from puzzledays.day16 import parse_maze, part1, part2

EXAMPLE = """###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############"""

TINY = "####\n#SE#\n####"


def test_parse_maze():
    maze = parse_maze(TINY)
    assert maze.start == (1, 1)
    assert maze.end == (2, 1)
    assert maze.size == (4, 3)
    assert len(maze.walls) == 10


def test_render_round_trip():
    assert parse_maze(EXAMPLE).render() == EXAMPLE + "\n"


def test_part1_example():
    assert part1(EXAMPLE) == 7036


def test_part2_example():
    assert part2(EXAMPLE) == 45


def test_tiny_maze():
    assert part1(TINY) == 1
    assert part2(TINY) == 2


def test_unreachable_end():
    with pytest.raises(ValueError):
        part1("#####\n#S#E#\n#####")


def test_empty_maze():
    with pytest.raises(ValueError):
        parse_maze("")