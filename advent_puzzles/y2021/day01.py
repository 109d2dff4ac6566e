"""Sonar sweep: counting how often depth measurements increase."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise


def count_increased_singles(values: Sequence[int]) -> int:
    """Count the measurements that are larger than the one before them."""
    return sum(later > earlier for earlier, later in pairwise(values))


def count_increased_triples(values: Sequence[int]) -> int:
    """Count three-measurement windows whose sum exceeds the previous window's sum."""
    # Neighbouring windows share two values, so comparing the outer ends is enough.
    return sum(later > earlier for earlier, later in zip(values, values[3:]))