"""No space left on device: measuring the terminal transcript."""

from __future__ import annotations

from collections.abc import Iterable


def total_line_length(lines: Iterable[str]) -> int:
    """Sum of the lengths of all lines."""
    return sum(len(line) for line in lines)