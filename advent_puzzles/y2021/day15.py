"""Chiton: the lowest total risk of a path through the cave."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

Point = tuple[int, int]


def _parse_row(line: str) -> list[int]:
    row = []
    for char in line:
        if len(char) != 1 or char not in "0123456789":
            raise ValueError(f"cannot parse not number {char!r}")
        row.append(int(char))
    return row


class RiskLevelMap:
    """A grid of risk levels searched by moving right and down."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.values = [_parse_row(line) for line in lines]
        if not self.values or not self.values[0]:
            raise ValueError("empty risk level map")

    @property
    def _height(self) -> int:
        return len(self.values)

    @property
    def _width(self) -> int:
        return len(self.values[0])

    def _risk(self, point: Point) -> int:
        i, j = point
        return self.values[i][j]

    def _next(self, point: Point) -> Iterator[Point]:
        i, j = point
        if j != self._width - 1:
            yield i, j + 1
        if i != self._height - 1:
            yield i + 1, j

    def _relax_left(self, point: Point, totals: dict[Point, int]) -> None:
        i, j = point
        if j == 0:
            return
        left = (i, j - 1)
        through = totals.get(point, 0) + self._risk(point)
        if totals.get(left, 0) > through:
            totals[left] = through

    def lowest_risk_path(self) -> int:
        """Total risk of the best path from the top left to the bottom right."""
        start = (0, 0)
        totals: dict[Point, int] = {start: 0}
        visited: set[Point] = set()
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current in visited:
                continue
            visited.add(current)
            current_total = totals.get(current, 0)
            for point in self._next(current):
                queue.append(point)
                candidate = current_total + self._risk(point)
                known = totals.get(point, 0)
                if known == 0 or known > candidate:
                    totals[point] = candidate
                    self._relax_left(point, totals)
        return totals.get((self._height - 1, self._width - 1), 0)


def lowest_risk_path(lines: Iterable[str]) -> int:
    """Lowest total risk of a path through the map given as lines of digits."""
    return RiskLevelMap(lines).lowest_risk_path()