import pytest

from advent_puzzles.y2022.day05 import (
    parse_move,
    parse_stacks,
    rearrange_in_batches,
    rearrange_one_by_one,
)

DRAWING = [
    "    [D]    ",
    "[N] [C]    ",
    "[Z] [M] [P]",
    " 1   2   3",
]

MOVES = [
    "move 1 from 2 to 1",
    "move 3 from 1 to 3",
    "move 2 from 2 to 1",
    "move 1 from 1 to 2",
]


@pytest.mark.parametrize(
    ("moves", "expected"),
    [
        ([], "NDP"),
        (MOVES[:1], "DCP"),
        (MOVES, "CMZ"),
    ],
)
def test_rearrange_one_by_one(moves, expected):
    assert rearrange_one_by_one([*DRAWING, "", *moves]) == expected


def test_rearrange_in_batches():
    assert rearrange_in_batches([*DRAWING, "", *MOVES]) == "MCD"


def test_parse_stacks_bottom_first():
    assert parse_stacks(DRAWING) == [["Z", "N"], ["M", "C", "D"], ["P"]]


def test_parse_move():
    assert parse_move("move 3 from 1 to 3") == (3, 1, 3)


def test_parse_move_rejects_other_text():
    with pytest.raises(ValueError):
        parse_move("shift 3 from 1 to 3")


def test_missing_blank_line():
    with pytest.raises(ValueError):
        rearrange_one_by_one(DRAWING)


def test_moving_from_empty_stack():
    with pytest.raises(ValueError):
        rearrange_one_by_one([*DRAWING, "", "move 2 from 3 to 1"])


def test_unknown_stack_number():
    with pytest.raises(ValueError):
        rearrange_in_batches([*DRAWING, "", "move 1 from 4 to 1"])


def test_empty_stack_has_no_top():
    with pytest.raises(ValueError):
        rearrange_in_batches([*DRAWING, "", "move 1 from 3 to 1"])