"""Rucksack reorganization: priorities of misplaced items and badges."""

from __future__ import annotations

from collections.abc import Iterable


def priority(letter: str) -> int:
    """Priority of an item: a-z are 1 to 26, A-Z are 27 to 52, anything else 0."""
    if len(letter) != 1:
        raise ValueError(f"an item is a single character, got {letter!r}")
    if "a" <= letter <= "z":
        return ord(letter) - ord("a") + 1
    if "A" <= letter <= "Z":
        return ord(letter) - ord("A") + 27
    return 0


def duplicated_item(rucksack: str) -> str:
    """Return the first item of the first compartment also found in the second."""
    half = len(rucksack) // 2
    first, second = rucksack[:half], rucksack[half:]
    for item in first:
        if item in second:
            return item
    raise ValueError(f"no item is in both compartments of {rucksack!r}")


def badge(first: str, second: str, third: str) -> str:
    """Return the first item of the third rucksack that the other two also hold."""
    for item in third:
        if item in first and item in second:
            return item
    raise ValueError("no item is common to the three rucksacks")


def sum_duplicated_priorities(lines: Iterable[str]) -> int:
    """Sum of the priorities of the item duplicated in each rucksack."""
    return sum(priority(duplicated_item(line)) for line in lines)


def sum_badge_priorities(lines: Iterable[str]) -> int:
    """Sum of the badge priorities of each group of three rucksacks."""
    lines = list(lines)
    if len(lines) % 3:
        raise ValueError("rucksacks do not form groups of three")
    groups = zip(*[iter(lines)] * 3)
    return sum(priority(badge(*group)) for group in groups)