"""Syntax scoring: corrupted and incomplete bracket lines."""

from __future__ import annotations

from collections.abc import Iterable

OPEN_CLOSE_PAIRS = {"{": "}", "[": "]", "<": ">", "(": ")"}

_ERROR_SCORES = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_SCORES = {")": 1, "]": 2, "}": 3, ">": 4}


def _scan(row: str) -> tuple[list[str], str | None]:
    """Return the open bracket stack and the first illegal character, if any."""
    stack: list[str] = []
    for char in row:
        if char in OPEN_CLOSE_PAIRS:
            stack.append(char)
        elif stack and char == OPEN_CLOSE_PAIRS[stack[-1]]:
            stack.pop()
        else:
            return stack, char
    return stack, None


def first_illegal_char(row: str) -> str | None:
    """Return the first closing character that does not match, or None."""
    return _scan(row)[1]


def syntax_error_score(lines: Iterable[str]) -> int:
    """Total score of the first illegal character of each corrupted line."""
    return sum(_ERROR_SCORES.get(first_illegal_char(line) or "", 0) for line in lines)


def brackets_to_complete(row: str) -> str | None:
    """Return the closing brackets that complete the row, or None if it is corrupted."""
    stack, illegal = _scan(row)
    if illegal is not None:
        return None
    return "".join(OPEN_CLOSE_PAIRS[char] for char in reversed(stack))


def incomplete_rows_score(lines: Iterable[str]) -> int:
    """Middle completion score among all rows that are not corrupted."""
    scores = []
    for line in lines:
        closing = brackets_to_complete(line)
        if closing is None:
            continue
        score = 0
        for char in closing:
            score = score * 5 + _COMPLETION_SCORES[char]
        scores.append(score)
    if not scores:
        raise ValueError("no incomplete rows")
    scores.sort()
    return scores[len(scores) // 2]