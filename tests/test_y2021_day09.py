import pytest

from advent_puzzles.y2021.day09 import Heightmap, mult_largest_basins, sum_risked_level

EXAMPLE = [
    "2199943210",
    "3987894921",
    "9856789892",
    "8767896789",
    "9899965678",
]


def test_sum_risked_level_example():
    assert sum_risked_level(EXAMPLE) == 15


def test_mult_largest_basins_example():
    assert mult_largest_basins(EXAMPLE) == 1134


def test_find_lowest_points():
    heightmap = Heightmap(EXAMPLE)
    assert heightmap.find_lowest_points() == {(0, 1): 1, (0, 9): 0, (2, 2): 5, (4, 6): 5}


def test_basin_sizes():
    heightmap = Heightmap(EXAMPLE)
    heightmap.find_lowest_points()
    assert heightmap.basin_size((0, 1)) == 3
    assert heightmap.basin_size((0, 9)) == 9
    assert heightmap.three_largest_basins() == [14, 9, 9]


def test_three_largest_pads_with_zeros():
    heightmap = Heightmap(["19", "99"])
    heightmap.find_lowest_points()
    assert heightmap.three_largest_basins() == [1, 0, 0]


def test_is_smaller_than_around():
    heightmap = Heightmap(EXAMPLE)
    assert heightmap.is_smaller_than_around(0, 1) is True
    assert heightmap.is_smaller_than_around(0, 0) is False


def test_non_digit_raises():
    with pytest.raises(ValueError):
        Heightmap(["12a"])