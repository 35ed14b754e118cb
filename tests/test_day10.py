import pytest

from puzzledays.day10 import (
    count_paths,
    parse_heights,
    part1,
    part2,
    reachable_peaks,
    valid_neighbors,
)

SMALL = "0123\n1234\n8765\n9876\n"

LARGE = """89010123
78121874
87430965
96549874
45678903
32019012
01329801
10456732
"""


def test_part1_small_example():
    assert part1(SMALL) == 1


def test_part1_large_example():
    assert part1(LARGE) == 36


def test_part2_small_example():
    assert part2(SMALL) == 16


def test_part2_large_example():
    assert part2(LARGE) == 81


def test_parse_heights_covers_every_cell():
    heights = parse_heights(SMALL)
    assert len(heights) == 16
    assert heights[(0, 0)] == 0
    assert heights[(3, 0)] == 9


def test_valid_neighbors_climb_by_one():
    heights = parse_heights(LARGE)
    for position in heights:
        for neighbor in valid_neighbors(heights, position):
            assert heights[neighbor] == heights[position] + 1
            assert abs(neighbor[0] - position[0]) + abs(neighbor[1] - position[1]) == 1


def test_valid_neighbors_at_origin():
    heights = parse_heights(SMALL)
    assert sorted(valid_neighbors(heights, (0, 0))) == [(0, 1), (1, 0)]


def test_reachable_peaks_are_all_height_nine():
    heights = parse_heights(LARGE)
    for start in (pos for pos, h in heights.items() if h == 0):
        assert all(heights[p] == 9 for p in reachable_peaks(heights, start))


def test_reachable_peaks_small():
    heights = parse_heights(SMALL)
    assert reachable_peaks(heights, (0, 0)) == {(3, 0)}


def test_count_paths_small_matches_rating():
    heights = parse_heights(SMALL)
    assert count_paths(heights, (0, 0), (3, 0)) == part2(SMALL)


def test_count_paths_to_self_is_one():
    heights = parse_heights(SMALL)
    assert count_paths(heights, (2, 2), (2, 2)) == 1


def test_rating_at_least_score():
    assert part2(LARGE) >= part1(LARGE)


def test_non_digit_raises():
    with pytest.raises(ValueError):
        parse_heights("01.\n")