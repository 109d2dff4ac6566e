"""The treachery of whales: aligning crab submarines with least fuel."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_SEARCH_LIMIT = 1200


def _parse_positions(text: str) -> list[int]:
    return [int(field) for field in text.split(",")]


def median(values: Sequence[int]) -> int:
    """Return the middle position used as the alignment target.

    For an odd count the element just above the middle is taken.
    """
    ordered = sorted(values)
    half = len(ordered) // 2
    if len(ordered) % 2 == 1:
        return ordered[half + 1]
    return (ordered[half - 1] + ordered[half]) // 2


def linear_cost(positions: Iterable[int], target: int) -> int:
    """Fuel when every step costs one unit."""
    return sum(abs(position - target) for position in positions)


def triangular_cost(positions: Iterable[int], target: int) -> int:
    """Fuel when each further step costs one more unit than the last."""
    return sum(
        distance * (distance + 1) // 2
        for distance in (abs(position - target) for position in positions)
    )


def fuel_to_align_linear(text: str) -> int:
    """Fuel to move all crabs to the median with constant step cost."""
    positions = _parse_positions(text)
    return linear_cost(positions, median(positions))


def fuel_to_align_triangular(text: str) -> int:
    """Least fuel over all targets below the search limit with rising step cost."""
    positions = _parse_positions(text)
    return min(triangular_cost(positions, target) for target in range(_SEARCH_LIMIT))