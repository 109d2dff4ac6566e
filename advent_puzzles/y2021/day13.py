"""Transparent origami: folding a sheet of dots."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

_FOLD_PATTERN = re.compile(r"^fold along (.*?)=(.*?)$")

Point = tuple[int, int]


def parse_point(text: str) -> Point:
    """Parse an 'x,y' dot position."""
    parts = text.split(",")
    if len(parts) != 2:
        raise ValueError("coordinates have wrong length")
    return int(parts[0]), int(parts[1])


def parse_fold(text: str) -> tuple[str, int]:
    """Parse a 'fold along axis=value' instruction."""
    match = _FOLD_PATTERN.match(text)
    if match is None or not match.group(1):
        raise ValueError(f"cannot parse fold {text!r}")
    return match.group(1)[0], int(match.group(2))


class Plane:
    """A set of dots on transparent paper."""

    def __init__(self, points: Iterable[str]) -> None:
        self.points: set[Point] = {parse_point(point) for point in points}

    def fold(self, instruction: str) -> None:
        """Apply one fold instruction."""
        axis, coordinate = parse_fold(instruction)
        if axis == "x":
            self.fold_left(coordinate)
        elif axis == "y":
            self.fold_up(coordinate)
        else:
            raise ValueError(f"unsupported fold axis {axis!r}")

    def fold_left(self, x: int) -> None:
        """Fold the part right of the vertical line x over to the left."""
        self.points = {(2 * x - px if px > x else px, py) for px, py in self.points}

    def fold_up(self, y: int) -> None:
        """Fold the part below the horizontal line y up."""
        self.points = {(px, 2 * y - py if py > y else py) for px, py in self.points}

    def __len__(self) -> int:
        return len(self.points)

    def render(self) -> str:
        """Draw the dots as '#' and the empty places as '.'."""
        width = max((x for x, _ in self.points), default=0) + 1
        height = max((y for _, y in self.points), default=0) + 1
        return "\n".join(
            "".join("#" if (x, y) in self.points else "." for x in range(width))
            for y in range(height)
        )


def split_data(lines: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split the input at the first blank line into dots and folds."""
    lines = list(lines)
    try:
        blank = lines.index("")
    except ValueError:
        return lines, []
    return lines[:blank], lines[blank + 1 :]


def points_after_first_fold(lines: Sequence[str]) -> int:
    """Number of dots visible after the first fold."""
    points, folds = split_data(lines)
    if not folds:
        raise ValueError("no fold instructions")
    plane = Plane(points)
    plane.fold(folds[0])
    return len(plane)


def render_after_all_folds(lines: Sequence[str]) -> str:
    """Drawing of the sheet after every fold has been made."""
    points, folds = split_data(lines)
    plane = Plane(points)
    for instruction in folds:
        plane.fold(instruction)
    return plane.render()