"""Giant squid: playing bingo against the squid."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

BOARD_SIZE = 5


def _parse_row(text: str) -> list[int]:
    fields = [field for field in text.split(" ") if field]
    if len(fields) != BOARD_SIZE:
        raise ValueError("incorrect amount of numbers in row")
    return [int(field) for field in fields]


class Board:
    """A 5x5 bingo board that remembers which numbers have been marked."""

    def __init__(self, rows: Iterable[str]) -> None:
        rows = list(rows)
        if len(rows) < BOARD_SIZE:
            raise ValueError(f"a board needs {BOARD_SIZE} rows, got {len(rows)}")
        self.values = [_parse_row(row) for row in rows[:BOARD_SIZE]]
        self.marked = [[False] * BOARD_SIZE for _ in range(BOARD_SIZE)]

    def mark(self, number: int) -> tuple[int, int] | None:
        """Mark the first cell holding the number and return its position."""
        for i, row in enumerate(self.values):
            for j, value in enumerate(row):
                if value == number:
                    self.marked[i][j] = True
                    return i, j
        return None

    def is_row_completed(self, row: int) -> bool:
        """Tell whether every cell of the row is marked."""
        return all(self.marked[row])

    def is_column_completed(self, column: int) -> bool:
        """Tell whether every cell of the column is marked."""
        return all(row[column] for row in self.marked)

    def _wins_with(self, number: int) -> bool:
        position = self.mark(number)
        if position is None:
            return False
        i, j = position
        return self.is_row_completed(i) or self.is_column_completed(j)

    def steps_to_win_within(self, numbers: Sequence[int], limit: int) -> int | None:
        """Return the index of the winning draw if it comes before the limit."""
        for step, number in enumerate(numbers[:limit]):
            if self._wins_with(number):
                return step
        return None

    def steps_to_win_after(self, numbers: Sequence[int], limit: int) -> int | None:
        """Return the index of the winning draw if it comes after the limit.

        A board that never wins counts as winning after all draws.
        """
        for step, number in enumerate(numbers):
            if self._wins_with(number):
                return step if step > limit else None
        return len(numbers)

    def sum_of_unmarked(self) -> int:
        """Sum the numbers that have not been marked."""
        return sum(
            value
            for values, marks in zip(self.values, self.marked)
            for value, marked in zip(values, marks)
            if not marked
        )


def parse_numbers(text: str) -> list[int]:
    """Parse the comma separated draw order."""
    try:
        return [int(field) for field in text.split(",")]
    except ValueError:
        raise ValueError("impossible to parse numbers") from None


def parse_boards(lines: Sequence[str]) -> list[Board]:
    """Parse boards of five rows each, separated by blank lines."""
    boards = []
    i = 0
    while i < len(lines):
        if lines[i] == "":
            i += 1
            continue
        boards.append(Board(lines[i : i + BOARD_SIZE]))
        i += BOARD_SIZE
    return boards


def _load(lines: Sequence[str]) -> tuple[list[int], list[Board]]:
    if not lines:
        raise ValueError("empty input")
    numbers = parse_numbers(lines[0])
    boards = parse_boards(lines[1:])
    if not boards:
        raise ValueError("no boards")
    return numbers, boards


def _score(board: Board, numbers: Sequence[int], step: int) -> int:
    if step >= len(numbers):
        raise ValueError("no board wins")
    return board.sum_of_unmarked() * numbers[step]


def find_best_board(lines: Sequence[str]) -> int:
    """Score of the board that wins first."""
    numbers, boards = _load(lines)
    best = boards[0]
    limit = len(numbers)
    for board in boards:
        steps = board.steps_to_win_within(numbers, limit)
        if steps is not None:
            best, limit = board, steps
    return _score(best, numbers, limit)


def find_worst_board(lines: Sequence[str]) -> int:
    """Score of the board that wins last."""
    numbers, boards = _load(lines)
    worst = boards[0]
    limit = 0
    for board in boards:
        steps = board.steps_to_win_after(numbers, limit)
        if steps is not None:
            worst, limit = board, steps
    return _score(worst, numbers, limit)