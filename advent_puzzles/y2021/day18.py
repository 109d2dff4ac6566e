"""Snailfish: adding and reducing snailfish numbers."""

from __future__ import annotations

import re
from collections.abc import Sequence
from itertools import permutations

_PAIR = re.compile(r"\[(\d+),(\d+)\]")
_NUMBER = re.compile(r"\d+")
_LAST_NUMBER = re.compile(r"(\d+)(\D*)$")
_LARGE_NUMBER = re.compile(r"\d{2,}")


class SnailfishNumber:
    """A snailfish number kept in its written form, such as '[[1,2],3]'."""

    def __init__(self, value: str) -> None:
        self.value = value

    def __str__(self) -> str:
        return self.value

    def add(self, other: SnailfishNumber | str) -> None:
        """Make this number the pair of itself and the other number."""
        self.value = f"[{self.value},{other}]"

    def reduce(self) -> None:
        """Explode and split until neither applies."""
        while self.explode() or self.split():
            pass

    def explode(self) -> bool:
        """Explode the leftmost pair nested inside four pairs, if there is one."""
        depth = 0
        for index, char in enumerate(self.value):
            if char == "[":
                depth += 1
                if depth == 5:
                    break
            elif char == "]":
                depth -= 1
        else:
            return False

        match = _PAIR.match(self.value, index)
        if match is None:
            raise ValueError(f"exploding pair is not a pair of regular numbers: {self.value!r}")
        left, right = int(match.group(1)), int(match.group(2))

        before = _LAST_NUMBER.sub(
            lambda m: f"{int(m.group(1)) + left}{m.group(2)}",
            self.value[:index],
            count=1,
        )
        after = _NUMBER.sub(
            lambda m: str(int(m.group()) + right),
            self.value[match.end():],
            count=1,
        )
        self.value = before + "0" + after
        return True

    def split(self) -> bool:
        """Split the leftmost regular number of ten or more, if there is one."""
        match = _LARGE_NUMBER.search(self.value)
        if match is None:
            return False
        number = int(match.group())
        half = number // 2
        self.value = (
            f"{self.value[:match.start()]}[{half},{number - half}]{self.value[match.end():]}"
        )
        return True

    def magnitude(self) -> int:
        """Return the magnitude: three times the left plus twice the right."""
        text = self.value
        while "[" in text:
            reduced = _PAIR.sub(
                lambda m: str(3 * int(m.group(1)) + 2 * int(m.group(2))), text
            )
            if reduced == text:
                raise ValueError(f"malformed snailfish number {self.value!r}")
            text = reduced
        return int(text)


def magnitude_of_sum(lines: Sequence[str]) -> int:
    """Magnitude of the reduced sum of all numbers, added in order."""
    if not lines:
        raise ValueError("no snailfish numbers")
    total = SnailfishNumber(lines[0])
    for line in lines[1:]:
        total.add(line)
        total.reduce()
    return total.magnitude()


def largest_magnitude_of_sum(lines: Sequence[str]) -> int:
    """Largest magnitude of the sum of any two different numbers."""
    return max(
        (magnitude_of_sum([first, second]) for first, second in permutations(lines, 2)),
        default=0,
    )