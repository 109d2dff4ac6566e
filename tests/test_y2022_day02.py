import pytest

from advent_puzzles.y2022.day02 import (
    Shape,
    expected_result,
    get_shape,
    total_score,
    total_score_for_outcomes,
)


@pytest.mark.parametrize(
    ("lines", "expected"),
    [
        (["A Y", "B X", "C Z"], 15),
        (["C X"], 1 + 6),
        (["A Z"], 3 + 0),
    ],
)
def test_total_score(lines, expected):
    assert total_score(lines) == expected


def test_total_score_for_outcomes():
    assert total_score_for_outcomes(["A Y", "B X", "C Z"]) == 12


@pytest.mark.parametrize(
    ("name", "shape"),
    [("A", Shape.ROCK), ("Y", Shape.PAPER), ("C", Shape.SCISSORS), ("X", Shape.ROCK)],
)
def test_get_shape(name, shape):
    assert get_shape(name) is shape


@pytest.mark.parametrize(("name", "score"), [("X", 0), ("Y", 3), ("Z", 6)])
def test_expected_result(name, score):
    assert expected_result(name) == score


def test_unknown_shape_raises():
    with pytest.raises(ValueError):
        get_shape("Q")


def test_unknown_result_raises():
    with pytest.raises(ValueError):
        expected_result("A")


def test_malformed_round_raises():
    with pytest.raises(ValueError):
        total_score(["AY"])