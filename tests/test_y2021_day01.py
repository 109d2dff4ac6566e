import pytest

from advent_puzzles.y2021.day01 import count_increased_singles, count_increased_triples


@pytest.mark.parametrize(
    ("values", "expected"),
    [
        ([199, 200], 1),
        ([199, 200, 208, 210, 200, 207, 240, 269, 260, 263], 7),
        ([10, 7, 8, 9, 11, 10, 20, 17, 20, 27], 6),
    ],
)
def test_count_increased_singles(values, expected):
    assert count_increased_singles(values) == expected


def test_count_increased_singles_single_value():
    assert count_increased_singles([5]) == 0


def test_count_increased_triples():
    values = [199, 200, 208, 210, 200, 207, 240, 269, 260, 263]
    assert count_increased_triples(values) == 5


def test_count_increased_triples_too_short():
    assert count_increased_triples([1, 2, 3]) == 0