"""Camp cleanup: section assignments that contain or overlap each other."""

from __future__ import annotations

from collections.abc import Iterable

Range = tuple[int, int]


def split_range(text: str) -> Range:
    """Parse a 'start-end' section range."""
    parts = text.split("-")
    if len(parts) != 2:
        raise ValueError(f"cannot parse range {text!r}")
    return int(parts[0]), int(parts[1])


def fully_contains(first: Range, second: Range) -> bool:
    """Tell whether the first range holds every section of the second."""
    return first[0] <= second[0] and first[1] >= second[1]


def overlaps(first: Range, second: Range) -> bool:
    """Tell whether the two ranges share at least one section."""
    return first[1] >= second[0] and second[1] >= first[0]


def _parse_pair(line: str) -> tuple[Range, Range]:
    parts = line.split(",")
    if len(parts) != 2:
        raise ValueError(f"cannot parse pair {line!r}")
    return split_range(parts[0]), split_range(parts[1])


def count_containing_pairs(lines: Iterable[str]) -> int:
    """Count pairs where one range fully contains the other."""
    count = 0
    for line in lines:
        first, second = _parse_pair(line)
        if fully_contains(first, second) or fully_contains(second, first):
            count += 1
    return count


def count_overlapping_pairs(lines: Iterable[str]) -> int:
    """Count pairs whose ranges overlap."""
    return sum(1 for line in lines if overlaps(*_parse_pair(line)))