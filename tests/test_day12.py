import pytest

from puzzledays.day12 import count_corners, find_regions, garden_map, part1, part2

SIMPLE = "AAAA\nBBCD\nBBCC\nEEEC\n"

E_SHAPE = "EEEEE\nEXXXX\nEEEEE\nEXXXX\nEEEEE\n"

AB_SHAPE = "AAAAAA\nAAABBA\nAAABBA\nABBAAA\nABBAAA\nAAAAAA\n"


def test_part1_simple():
    assert part1(SIMPLE) == 140


def test_part2_simple():
    assert part2(SIMPLE) == 80


def test_part2_e_shape():
    assert part2(E_SHAPE) == 236


def test_part2_ab_shape():
    assert part2(AB_SHAPE) == 368


@pytest.mark.parametrize("text", [SIMPLE, E_SHAPE, AB_SHAPE])
def test_regions_partition_the_garden(text):
    garden = garden_map(text)
    regions = find_regions(garden)
    cells = [cell for region in regions for cell in region]
    assert len(cells) == len(garden)
    assert set(cells) == set(garden)


@pytest.mark.parametrize("text", [SIMPLE, E_SHAPE, AB_SHAPE])
def test_regions_hold_one_plant_type(text):
    garden = garden_map(text)
    for region in find_regions(garden):
        assert len({garden[p] for p in region}) == 1


def test_simple_region_count():
    assert len(find_regions(garden_map(SIMPLE))) == 5


def test_isolated_cell_has_four_corners():
    garden = garden_map(SIMPLE)
    assert count_corners(garden, (1, 3)) == 4


def test_sides_never_exceed_perimeter():
    for text in (SIMPLE, E_SHAPE, AB_SHAPE):
        assert part2(text) <= part1(text)


def test_count_corners_missing_position_raises():
    with pytest.raises(KeyError):
        count_corners(garden_map(SIMPLE), (10, 10))