"""Smoke basin: low points and basins of a heightmap."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from math import prod

Point = tuple[int, int]

_OFFSETS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _digit(char: str) -> int:
    if char not in "0123456789" or len(char) != 1:
        raise ValueError(f"cannot parse not number {char!r}")
    return int(char)


class Heightmap:
    """A grid of heights together with the low points found in it."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.heights = [[_digit(char) for char in line] for line in lines]
        if not self.heights or not self.heights[0]:
            raise ValueError("empty heightmap")
        self.lowest_points: dict[Point, int] = {}

    @property
    def _height(self) -> int:
        return len(self.heights)

    @property
    def _width(self) -> int:
        return len(self.heights[0])

    def _neighbours(self, i: int, j: int) -> Iterator[Point]:
        for di, dj in _OFFSETS:
            a, b = i + di, j + dj
            if 0 <= a < self._height and 0 <= b < self._width:
                yield a, b

    def is_smaller_than_around(self, i: int, j: int) -> bool:
        """Tell whether the point is lower than all of its neighbours."""
        here = self.heights[i][j]
        return all(here < self.heights[a][b] for a, b in self._neighbours(i, j))

    def mark_lowest(self, i: int, j: int) -> None:
        """Record a low point and forget any neighbouring one."""
        self.lowest_points[(i, j)] = self.heights[i][j]
        for di, dj in _OFFSETS:
            self.lowest_points.pop((i + di, j + dj), None)

    def find_lowest_points(self) -> dict[Point, int]:
        """Find and record every low point; return them with their heights."""
        for i, row in enumerate(self.heights):
            for j, _ in enumerate(row):
                if self.is_smaller_than_around(i, j):
                    self.mark_lowest(i, j)
        return dict(self.lowest_points)

    def risk_level(self) -> int:
        """Sum of one plus the height of each recorded low point."""
        return sum(height + 1 for height in self.lowest_points.values())

    def basin_size(self, point: Point) -> int:
        """Count the points that flow down into the given low point."""
        basin = {point}
        queue = deque([point])
        while queue:
            i, j = queue.popleft()
            here = self.heights[i][j]
            for a, b in self._neighbours(i, j):
                height = self.heights[a][b]
                if height != 9 and height > here and (a, b) not in basin:
                    basin.add((a, b))
                    queue.append((a, b))
        return len(basin)

    def three_largest_basins(self) -> list[int]:
        """Sizes of the three largest basins, largest first, padded with zeros."""
        sizes = sorted((self.basin_size(p) for p in self.lowest_points), reverse=True)[:3]
        return sizes + [0] * (3 - len(sizes))


def sum_risked_level(lines: Iterable[str]) -> int:
    """Sum of the risk levels of all low points."""
    heightmap = Heightmap(lines)
    heightmap.find_lowest_points()
    return heightmap.risk_level()


def mult_largest_basins(lines: Iterable[str]) -> int:
    """Product of the sizes of the three largest basins."""
    heightmap = Heightmap(lines)
    heightmap.find_lowest_points()
    return prod(heightmap.three_largest_basins())