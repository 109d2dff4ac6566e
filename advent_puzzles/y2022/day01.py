"""Calorie counting: finding the elves that carry the most food."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Iterator, Sequence


def _elf_totals(lines: Iterable[str]) -> Iterator[int]:
    current = 0
    for line in lines:
        if line == "":
            yield current
            current = 0
            continue
        current += int(line)
    yield current


def max_calories(lines: Sequence[str]) -> int:
    """Calories carried by the elf carrying the most; a single line counts as nothing."""
    if len(lines) == 1:
        return 0
    return max(0, *_elf_totals(lines))


def top_three_calories(lines: Sequence[str]) -> int:
    """Calories carried by the three elves carrying the most; a single line counts as nothing."""
    if len(lines) == 1:
        return 0
    return sum(heapq.nlargest(3, [*_elf_totals(lines), 0, 0, 0]))