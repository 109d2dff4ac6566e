"""Dumbo octopus: simulating flashing energy levels."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import count


def _parse_row(line: str) -> list[int]:
    row = []
    for char in line:
        if len(char) != 1 or char not in "0123456789":
            raise ValueError(f"cannot parse not number {char!r}")
        row.append(int(char))
    return row


class OctopusBoard:
    """A grid of octopus energy levels."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.levels = [_parse_row(line) for line in lines]
        if not self.levels or not self.levels[0]:
            raise ValueError("empty board")
        if any(len(row) != len(self.levels[0]) for row in self.levels):
            raise ValueError("rows have different lengths")

    def simulate(self) -> None:
        """Advance the board by one step."""
        for row in self.levels:
            for j, _ in enumerate(row):
                row[j] += 1
        flashing = any(level > 9 for row in self.levels for level in row)
        while flashing:
            flashing = False
            for i, row in enumerate(self.levels):
                for j, level in enumerate(row):
                    if level <= 9:
                        continue
                    self.flash(i, j)
                    row[j] = 0
                    flashing = True

    def flash(self, i: int, j: int) -> None:
        """Raise the cell and every neighbour that has not flashed this step."""
        self.levels[i][j] += 1
        height, width = len(self.levels), len(self.levels[0])
        for di in (-1, 0, 1):
            for dj in (-1, 0, 1):
                a, b = i + di, j + dj
                if (di or dj) and 0 <= a < height and 0 <= b < width and self.levels[a][b] != 0:
                    self.levels[a][b] += 1

    def just_flashed(self) -> int:
        """Count the octopuses that flashed in the last step."""
        return sum(level == 0 for row in self.levels for level in row)

    def all_flashed(self) -> bool:
        """Tell whether every octopus flashed in the last step."""
        return all(level == 0 for row in self.levels for level in row)


def count_total_flashes(lines: Iterable[str], steps: int) -> int:
    """Total number of flashes over the given number of steps."""
    board = OctopusBoard(lines)
    total = 0
    for _ in range(steps):
        board.simulate()
        total += board.just_flashed()
    return total


def find_first_synchronised_step(lines: Iterable[str]) -> int:
    """First step after which every octopus flashes at once."""
    board = OctopusBoard(lines)
    for step in count(1):
        board.simulate()
        if board.all_flashed():
            return step
    raise AssertionError("unreachable")