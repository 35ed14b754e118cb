from puzzledays.day06 import parse_board, part1, part2, rotate

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#..."""


def test_rotate_direction():
    assert rotate((1, 0)) == (0, -1)


def test_rotate_four_times_is_identity():
    direction = (-1, 0)
    turned = direction
    for _ in range(4):
        turned = rotate(turned)
    assert turned == direction


def test_part1_example():
    assert part1(EXAMPLE) == 41


def test_part2_example():
    assert part2(EXAMPLE) == 6


def test_parse_board_finds_start():
    board = parse_board(EXAMPLE)
    assert board.start == (6, 4)
    assert board.positions[(0, 4)] == "#"


def test_visited_includes_start_and_stays_on_grid():
    board = parse_board(EXAMPLE)
    visited = board.visited_positions()
    assert board.start in visited
    assert visited <= set(board.positions)
    assert not visited & board.walls


def test_walks_straight_off_grid():
    board = parse_board(".\n.\n^")
    assert board.visited_positions() == {(0, 0), (1, 0), (2, 0)}