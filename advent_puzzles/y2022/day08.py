"""Treetop tree house: counting trees visible from outside the grid."""

from __future__ import annotations

from collections.abc import Sequence

Position = tuple[int, int]


def count_visible_trees(lines: Sequence[str]) -> int:
    """Number of trees visible from at least one edge of the grid."""
    grid = list(lines)
    if len(grid) < 2 or len(grid[0]) < 2:
        raise ValueError("the grid must be at least two by two")
    height, width = len(grid), len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("rows have different lengths")

    visible: set[Position] = set()

    def scan(line_of_sight: list[Position]) -> None:
        (row, column), *inner = line_of_sight
        highest = grid[row][column]
        for row, column in inner:
            tree = grid[row][column]
            if tree > highest:
                visible.add((row, column))
                highest = tree

    for row in range(1, height - 1):
        scan([(row, column) for column in range(width - 1)])
        scan([(row, column) for column in range(width - 1, 0, -1)])
    for column in range(1, width - 1):
        scan([(row, column) for row in range(height - 1)])
        scan([(row, column) for row in range(height - 1, 0, -1)])

    edges = 2 * height + 2 * width - 4
    return edges + len(visible)