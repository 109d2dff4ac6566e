"""Dive: steering the submarine with course commands."""

from __future__ import annotations

from collections.abc import Iterable


def _parse_action(action: str) -> tuple[str, int]:
    parts = action.split(" ")
    if len(parts) != 2:
        raise ValueError("invalid data")
    direction, amount_text = parts
    return direction, int(amount_text)


def get_shift(action: str) -> tuple[int, int]:
    """Return the horizontal and depth change caused by one command."""
    direction, amount = _parse_action(action)
    match direction:
        case "forward":
            return amount, 0
        case "down":
            return 0, amount
        case "up":
            return 0, -amount
        case _:
            raise ValueError("unsupported direction")


def move(actions: Iterable[str]) -> int:
    """Follow the commands and return horizontal position times depth."""
    x = y = 0
    for action in actions:
        dx, dy = get_shift(action)
        x += dx
        y += dy
    return x * y


def get_shift_with_aim(action: str, aim: int) -> tuple[int, int, int]:
    """Return the horizontal, depth and aim change of one command at the given aim."""
    direction, amount = _parse_action(action)
    match direction:
        case "forward":
            return amount, amount * aim, 0
        case "down":
            return 0, 0, amount
        case "up":
            return 0, 0, -amount
        case _:
            raise ValueError("unsupported direction")


def move_with_aim(actions: Iterable[str]) -> int:
    """Follow the commands using aim and return horizontal position times depth."""
    x = y = aim = 0
    for action in actions:
        dx, dy, daim = get_shift_with_aim(action, aim)
        x += dx
        y += dy
        aim += daim
    return x * y