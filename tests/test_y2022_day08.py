import pytest

from advent_puzzles.y2022.day08 import count_visible_trees


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("30373\n25512\n65332\n33549\n35390", 21),
        ("303\n625\n653", 9),
        (
            "9999999999999999\n1234555566667890\n1246890999998873\n9999999999999999",
            36 + 16,
        ),
        ("92345555666\n92463941239\n92468909999\n99999999999", 26 + 7),
    ],
)
def test_count_visible_trees(text, expected):
    assert count_visible_trees(text.splitlines()) == expected


def test_all_trees_visible_in_two_by_two():
    assert count_visible_trees(["12", "34"]) == 4


def test_grid_too_small():
    with pytest.raises(ValueError):
        count_visible_trees(["12345"])


def test_uneven_rows():
    with pytest.raises(ValueError):
        count_visible_trees(["123", "12", "123"])