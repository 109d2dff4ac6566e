"""Supply stacks: rearranging crates with a crane."""

from __future__ import annotations

import re
from collections.abc import Sequence

_MOVE = re.compile(r"^move (.*?) from (.*?) to (.*?)$")

Stacks = list[list[str]]


def parse_stacks(lines: Sequence[str]) -> Stacks:
    """Parse the drawing of stacks; each stack is listed bottom first."""
    if not lines:
        raise ValueError("no stack drawing")
    *rows, labels = lines
    stacks: Stacks = [[] for _ in labels.split()]
    for row in reversed(rows):
        for index, stack in enumerate(stacks):
            symbol = row[index * 4 + 1 : index * 4 + 2]
            if symbol.strip():
                stack.append(symbol)
    return stacks


def parse_move(line: str) -> tuple[int, int, int]:
    """Parse 'move N from A to B' into (N, A, B)."""
    match = _MOVE.match(line)
    if match is None:
        raise ValueError(f"cannot parse move {line!r}")
    try:
        count, source, target = (int(group) for group in match.groups())
    except ValueError:
        raise ValueError(f"cannot parse numbers in move {line!r}") from None
    return count, source, target


def _split_input(lines: Sequence[str]) -> tuple[Stacks, list[tuple[int, int, int]]]:
    lines = list(lines)
    try:
        blank = lines.index("")
    except ValueError:
        raise ValueError("no blank line between stacks and moves") from None
    stacks = parse_stacks(lines[:blank])
    moves = [parse_move(line) for line in lines[blank + 1 :]]
    return stacks, moves


def _take(stacks: Stacks, count: int, source: int, target: int) -> tuple[list[str], list[str]]:
    for number in (source, target):
        if not 1 <= number <= len(stacks):
            raise ValueError(f"no stack number {number}")
    origin = stacks[source - 1]
    if count > len(origin):
        raise ValueError(f"stack {source} holds fewer than {count} crates")
    if count <= 0:
        return [], stacks[target - 1]
    crates = origin[-count:]
    del origin[-count:]
    return crates, stacks[target - 1]


def _tops(stacks: Stacks) -> str:
    for number, stack in enumerate(stacks, start=1):
        if not stack:
            raise ValueError(f"stack {number} is empty")
    return "".join(stack[-1] for stack in stacks)


def rearrange_one_by_one(lines: Sequence[str]) -> str:
    """Top crates after moving crates one at a time."""
    stacks, moves = _split_input(lines)
    for count, source, target in moves:
        crates, destination = _take(stacks, count, source, target)
        destination.extend(reversed(crates))
    return _tops(stacks)


def rearrange_in_batches(lines: Sequence[str]) -> str:
    """Top crates after moving crates several at once, keeping their order."""
    stacks, moves = _split_input(lines)
    for count, source, target in moves:
        crates, destination = _take(stacks, count, source, target)
        destination.extend(crates)
    return _tops(stacks)