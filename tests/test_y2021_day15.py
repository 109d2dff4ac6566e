import pytest

from advent_puzzles.y2021.day15 import RiskLevelMap, lowest_risk_path


@pytest.mark.parametrize(
    ("lines", "expected"),
    [
        (["1", "2"], 2),
        (["116", "138"], 12),
        (["1163", "1381", "2136"], 13),
        (["112", "131", "683", "316"], 13),
        (
            [
                "1163751742",
                "1381373672",
                "2136511328",
                "3694931569",
                "7463417111",
                "1319128137",
                "1359912421",
                "3125421639",
                "1293138521",
                "2311944581",
            ],
            40,
        ),
        (
            [
                "1199999999",
                "9119999999",
                "9911999999",
                "9991199999",
                "9999119999",
                "9999911999",
                "9999991199",
                "9999999119",
                "9999999911",
            ],
            17,
        ),
        (
            [
                "1999999999",
                "1999999999",
                "1999999999",
                "1999999999",
                "1999999999",
                "1999999999",
                "1999999999",
                "1111111111",
            ],
            16,
        ),
        (["199", "119", "919", "119", "199", "111"], 9),
    ],
)
def test_lowest_risk_path(lines, expected):
    assert lowest_risk_path(lines) == expected


def test_single_cell_has_no_risk():
    assert RiskLevelMap(["7"]).lowest_risk_path() == 0


def test_non_digit_raises():
    with pytest.raises(ValueError):
        RiskLevelMap(["12", "3x"])


def test_empty_map_raises():
    with pytest.raises(ValueError):
        RiskLevelMap([])