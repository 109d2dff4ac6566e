import pytest

from advent_puzzles.y2021.day10 import (
    brackets_to_complete,
    first_illegal_char,
    incomplete_rows_score,
    syntax_error_score,
)

EXAMPLE = [
    "[({(<(())[]>[[{[]{<()<>>", "[(()[<>])]({[<{<<[]>>(",
    "{([(<{}[<>[]}>{[]{[(<()>", "(((({<>}<{<{<>}{[]{[]{}",
    "[[<[([]))<([[{}[[()]]]", "[{[{({}]{}}([{[{{{}}([]",
    "{<[[]]>}<{[{[{[]{()[[[]", "[<(<(<(<{}))><([]([]()",
    "<{([([[(<>()){}]>(<<{{", "<{([{{}}[<[[[<>{}]]]>[]]",
]


@pytest.mark.parametrize(
    "index, expected",
    [(2, "}"), (4, ")"), (5, "]"), (7, ")"), (8, ">")],
)
def test_first_illegal_char(index, expected):
    assert first_illegal_char(EXAMPLE[index]) == expected


def test_first_illegal_char_none_for_incomplete():
    assert first_illegal_char(EXAMPLE[0]) is None


def test_syntax_error_score():
    assert syntax_error_score(EXAMPLE) == 26397


def test_incomplete_rows_score():
    assert incomplete_rows_score(EXAMPLE) == 288957


def test_brackets_to_complete():
    assert brackets_to_complete(EXAMPLE[0]) == "}}]])})]"
    assert brackets_to_complete(EXAMPLE[2]) is None


def test_incomplete_rows_score_without_rows_raises():
    with pytest.raises(ValueError):
        incomplete_rows_score(["(]"])