"""Hydrothermal venture: counting points where vent lines overlap."""

from __future__ import annotations

import contextlib
from collections import Counter
from collections.abc import Iterable

Point = tuple[int, int]


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _parse_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"cannot parse to int {text!r}") from None


def parse_point(text: str) -> Point:
    """Parse an 'x,y' pair."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError(f"incorrect point format {text!r}")
    return _parse_int(parts[0]), _parse_int(parts[1])


def parse_coordinates(text: str) -> tuple[Point, Point]:
    """Parse an 'x1,y1 -> x2,y2' line into its two end points."""
    parts = text.split(" -> ")
    if len(parts) != 2:
        raise ValueError(f"cannot parse row {text!r}")
    points = []
    for part in parts:
        try:
            points.append(parse_point(part))
        except ValueError:
            raise ValueError(f"cannot parse point {part!r}") from None
    return points[0], points[1]


class VentPlane:
    """A plane that counts how many vent lines cover each point."""

    def __init__(self) -> None:
        self._hits: Counter[Point] = Counter()

    def _trace(self, start: Point, end: Point) -> None:
        (x1, y1), (x2, y2) = start, end
        dx, dy = _sign(x2 - x1), _sign(y2 - y1)
        steps = max(abs(x2 - x1), abs(y2 - y1))
        self._hits.update((x1 + dx * i, y1 + dy * i) for i in range(steps + 1))

    def add_straight_line(self, coordinates: str) -> None:
        """Add a horizontal or vertical line; diagonal lines are skipped."""
        start, end = parse_coordinates(coordinates)
        if start[0] == end[0] or start[1] == end[1]:
            self._trace(start, end)

    def add_line(self, coordinates: str) -> None:
        """Add a horizontal, vertical or 45-degree diagonal line."""
        start, end = parse_coordinates(coordinates)
        width, height = abs(end[0] - start[0]), abs(end[1] - start[1])
        if width and height and width != height:
            raise ValueError("line is neither straight, no 45' diagonal")
        self._trace(start, end)

    def overlaps(self) -> int:
        """Count the points covered by more than one line."""
        return sum(1 for hits in self._hits.values() if hits > 1)


def straight_overlaps(lines: Iterable[str]) -> int:
    """Overlaps of horizontal and vertical lines; unusable lines are ignored."""
    plane = VentPlane()
    for line in lines:
        with contextlib.suppress(ValueError):
            plane.add_straight_line(line)
    return plane.overlaps()


def all_overlaps(lines: Iterable[str]) -> int:
    """Overlaps of straight and diagonal lines; unusable lines are ignored."""
    plane = VentPlane()
    for line in lines:
        with contextlib.suppress(ValueError):
            plane.add_line(line)
    return plane.overlaps()