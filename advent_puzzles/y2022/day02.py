"""Rock paper scissors: scoring a strategy guide."""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum


class Shape(IntEnum):
    """A hand shape; its value plus one is its score."""

    ROCK = 0
    PAPER = 1
    SCISSORS = 2


# WIN_MATRIX[mine][opponent] is the outcome score for my shape.
WIN_MATRIX = (
    (3, 0, 6),
    (6, 3, 0),
    (0, 6, 3),
)

_SHAPES = {
    "A": Shape.ROCK,
    "B": Shape.PAPER,
    "C": Shape.SCISSORS,
    "X": Shape.ROCK,
    "Y": Shape.PAPER,
    "Z": Shape.SCISSORS,
}

_RESULTS = {"X": 0, "Y": 3, "Z": 6}


def get_shape(name: str) -> Shape:
    """Map a letter of the guide to a shape."""
    try:
        return _SHAPES[name]
    except KeyError:
        raise ValueError(f"unsupported shape {name!r}") from None


def expected_result(name: str) -> int:
    """Outcome score asked for: X to lose, Y to draw, Z to win."""
    try:
        return _RESULTS[name]
    except KeyError:
        raise ValueError(f"unsupported result {name!r}") from None


def _split(line: str) -> tuple[str, str]:
    parts = line.split(" ")
    if len(parts) != 2:
        raise ValueError(f"cannot parse round {line!r}")
    return parts[0], parts[1]


def total_score(lines: Iterable[str]) -> int:
    """Score when the second column is the shape to play."""
    score = 0
    for line in lines:
        opponent_name, my_name = _split(line)
        opponent, mine = get_shape(opponent_name), get_shape(my_name)
        score += mine + 1 + WIN_MATRIX[mine][opponent]
    return score


def total_score_for_outcomes(lines: Iterable[str]) -> int:
    """Score when the second column is the outcome to reach."""
    score = 0
    for line in lines:
        opponent_name, result_name = _split(line)
        opponent = get_shape(opponent_name)
        result = expected_result(result_name)
        score += sum(
            result + mine + 1 for mine in Shape if WIN_MATRIX[mine][opponent] == result
        )
    return score