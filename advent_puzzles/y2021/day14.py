"""Extended polymerization: growing a polymer by pair insertion."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import pairwise


def _parse_rule(text: str) -> tuple[str, str]:
    parts = text.split(" -> ")
    if len(parts) != 2:
        raise ValueError(f"cannot parse insertion rule {text!r}")
    return parts[0], parts[1]


class Polymer:
    """A polymer kept as counts of adjacent element pairs.

    The last element is kept as a single-letter entry so that every
    element is counted exactly once by the first letter of its entry.
    """

    def __init__(self, template: str, rules: Iterable[str]) -> None:
        if not template:
            raise ValueError("empty polymer template")
        self.rules: dict[str, str] = dict(_parse_rule(rule) for rule in rules)
        self.pair_counts: Counter[str] = Counter(a + b for a, b in pairwise(template))
        self.pair_counts[template[-1]] += 1

    def polymerize(self) -> None:
        """Apply every insertion rule once."""
        grown: Counter[str] = Counter()
        for key, count in self.pair_counts.items():
            if len(key) == 1:
                grown[key] += count
                continue
            try:
                inserted = self.rules[key]
            except KeyError:
                raise ValueError(f"no insertion rule for pair {key!r}") from None
            grown[key[0] + inserted] += count
            grown[inserted + key[1]] += count
        self.pair_counts = grown

    def common_counts(self) -> tuple[int, int]:
        """Return the counts of the most and the least common element."""
        letters: Counter[str] = Counter()
        for key, count in self.pair_counts.items():
            letters[key[0]] += count
        return max(letters.values()), min(letters.values())

    def __len__(self) -> int:
        return sum(self.pair_counts.values())


def split_data(lines: Sequence[str]) -> tuple[str, list[str]]:
    """Split the input into the template and the insertion rules."""
    if not lines:
        raise ValueError("empty input")
    return lines[0], list(lines[2:])


def diff_most_and_least_common(lines: Sequence[str], steps: int) -> int:
    """Most common minus least common element count after the given steps."""
    template, rules = split_data(lines)
    polymer = Polymer(template, rules)
    for _ in range(steps):
        polymer.polymerize()
    most, least = polymer.common_counts()
    return most - least