import pytest

from advent_puzzles.y2021.day04 import (
    Board,
    find_best_board,
    find_worst_board,
    parse_boards,
    parse_numbers,
)

_DRAWN = [7, 4, 9, 5, 11, 17, 23, 2, 0, 14, 21, 24, 10, 16, 13, 6, 15, 25, 12, 22,
          18, 20, 8, 19, 3, 26, 1]

_GRIDS = [
    [[22, 13, 17, 11, 0], [8, 2, 23, 4, 24], [21, 9, 14, 16, 7],
     [6, 10, 3, 18, 5], [1, 12, 20, 15, 19]],
    [[3, 15, 0, 2, 22], [9, 18, 13, 17, 5], [19, 8, 7, 25, 23],
     [20, 11, 10, 24, 4], [14, 21, 16, 12, 6]],
    [[14, 21, 17, 24, 4], [10, 16, 15, 9, 19], [18, 8, 23, 26, 20],
     [22, 11, 13, 6, 5], [2, 0, 12, 3, 7]],
]


def _puzzle_lines():
    lines = [",".join(str(number) for number in _DRAWN)]
    for grid in _GRIDS:
        lines.append("")
        lines.extend(" ".join(f"{n:>2}" for n in row) for row in grid)
    return lines


EXAMPLE = _puzzle_lines()

SEQUENTIAL_ROWS = [
    " ".join(str(n) for n in range(start, start + 5)) for start in range(1, 26, 5)
]


def test_find_best_board():
    assert find_best_board(EXAMPLE) == 4512


def test_find_worst_board():
    assert find_worst_board(EXAMPLE) == 1924


def test_parse_numbers():
    assert parse_numbers("7,4,9") == [7, 4, 9]


def test_parse_numbers_rejects_non_numbers():
    with pytest.raises(ValueError, match="impossible to parse numbers"):
        parse_numbers("1,x,3")


def test_board_rejects_short_row():
    rows = ["1 2 3 4"] + SEQUENTIAL_ROWS[1:]
    with pytest.raises(ValueError, match="incorrect amount"):
        Board(rows)


def test_board_rejects_too_few_rows():
    with pytest.raises(ValueError):
        Board(SEQUENTIAL_ROWS[:3])


def test_parse_boards_skips_blank_lines():
    boards = parse_boards(["", *SEQUENTIAL_ROWS, "", *SEQUENTIAL_ROWS])
    assert len(boards) == 2
    assert boards[1].values[2] == [11, 12, 13, 14, 15]


def test_mark_returns_position():
    board = Board(SEQUENTIAL_ROWS)
    assert board.mark(13) == (2, 2)
    assert board.mark(99) is None


def test_column_completion():
    board = Board(SEQUENTIAL_ROWS)
    for number in (1, 6, 11, 16, 21):
        board.mark(number)
    assert board.is_column_completed(0)
    assert not board.is_row_completed(0)


def test_steps_to_win_within_and_unmarked_sum():
    board = Board(SEQUENTIAL_ROWS)
    assert board.steps_to_win_within([1, 2, 3, 4, 5], 5) == 4
    assert board.sum_of_unmarked() == 310


def test_steps_to_win_within_limit_too_small():
    board = Board(SEQUENTIAL_ROWS)
    assert board.steps_to_win_within([1, 2, 3, 4, 5], 4) is None


def test_steps_to_win_after():
    assert Board(SEQUENTIAL_ROWS).steps_to_win_after([1, 2, 3, 4, 5], 2) == 4
    assert Board(SEQUENTIAL_ROWS).steps_to_win_after([1, 2, 3, 4, 5], 4) is None


def test_steps_to_win_after_never_winning():
    assert Board(SEQUENTIAL_ROWS).steps_to_win_after([1, 2], 0) == 2