import pytest

from advent_puzzles.y2022.day01 import max_calories, top_three_calories

EXAMPLE = [
    "1000",
    "2000",
    "3000",
    "",
    "4000",
    "",
    "5000",
    "6000",
    "",
    "7000",
    "8000",
    "9000",
    "",
    "10000",
]


@pytest.mark.parametrize(
    ("lines", "expected"),
    [
        (EXAMPLE, 24000),
        (EXAMPLE[:-1] + ["1000000"], 1000000),
    ],
)
def test_max_calories(lines, expected):
    assert max_calories(lines) == expected


def test_top_three_calories():
    assert top_three_calories(EXAMPLE) == 45000


def test_top_three_with_fewer_elves():
    assert top_three_calories(["100", "", "200"]) == 300


def test_single_line_counts_as_nothing():
    assert max_calories(["5000"]) == 0
    assert top_three_calories(["5000"]) == 0


def test_non_number_raises():
    with pytest.raises(ValueError):
        max_calories(["100", "abc"])