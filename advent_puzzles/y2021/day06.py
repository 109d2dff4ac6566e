"""Lanternfish: simulating a growing school of fish by timer counts."""

from __future__ import annotations

NEW_BORN_TIMER = 8
GIVEN_BIRTH_TIMER = 6


class School:
    """Counts of fish grouped by the days left until they give birth."""

    def __init__(self, text: str) -> None:
        self.counts = [0] * (NEW_BORN_TIMER + 1)
        for field in text.split(","):
            timer = int(field)
            if not 0 <= timer <= NEW_BORN_TIMER:
                raise ValueError(f"timer out of range: {timer}")
            self.counts[timer] += 1

    def grow(self) -> None:
        """Advance the school by one day."""
        parents = self.counts[0]
        self.counts = self.counts[1:] + [parents]
        self.counts[GIVEN_BIRTH_TIMER] += parents

    def total(self) -> int:
        """Return the number of fish in the school."""
        return sum(self.counts)


def count_lanternfish(text: str, days: int) -> int:
    """Return the number of fish after the given number of days."""
    school = School(text)
    for _ in range(days):
        school.grow()
    return school.total()