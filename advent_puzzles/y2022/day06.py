"""Tuning trouble: finding the first run of distinct characters."""

from __future__ import annotations


def find_marker(line: str, distinct: int) -> int:
    """Number of characters read when the last `distinct` ones first differ pairwise."""
    if distinct < 1:
        raise ValueError("the marker length must be positive")
    start = 0
    last_seen: dict[str, int] = {}
    for index, char in enumerate(line):
        previous = last_seen.get(char)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[char] = index
        if index - start + 1 == distinct:
            return index + 1
    raise ValueError(f"no marker of {distinct} distinct characters found")