"""Passage pathing: counting routes through a cave system."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Iterator

START = "start"
END = "end"

Path = tuple[str, ...]


def is_cave_small(name: str) -> bool:
    """A cave is small when its name has no upper-case letter."""
    return not any(char.isupper() for char in name)


class CaveGraph:
    """Undirected graph of caves and the passages between them."""

    def __init__(self, edges: Iterable[str]) -> None:
        self.neighbours: dict[str, list[str]] = defaultdict(list)
        for edge in edges:
            parts = edge.split("-")
            if len(parts) != 2:
                raise ValueError(f"cannot parse edge {edge!r}")
            first, second = parts
            self.neighbours[first].append(second)
            self.neighbours[second].append(first)
        self.neighbours = dict(self.neighbours)

    def _walk(self, current: str, visited: frozenset[str]) -> Iterator[Path]:
        for cave in self.neighbours.get(current, ()):
            if cave == START:
                continue
            if cave == END:
                yield (END,)
                continue
            if cave in visited:
                continue
            next_visited = visited | {cave} if is_cave_small(cave) else visited
            for rest in self._walk(cave, next_visited):
                yield (cave, *rest)

    def _walk_twice(
        self, current: str, visited: frozenset[str], twice: str | None
    ) -> Iterator[Path]:
        for cave in self.neighbours.get(current, ()):
            if cave == START:
                continue
            if cave == END:
                yield (END,)
                continue
            next_visited, next_twice = visited, twice
            if cave in visited:
                if twice is not None:
                    continue
                next_twice = cave
            elif is_cave_small(cave):
                next_visited = visited | {cave}
            for rest in self._walk_twice(cave, next_visited, next_twice):
                yield (cave, *rest)

    def paths_part1(self) -> list[Path]:
        """All paths from start to end visiting small caves at most once."""
        return [(START, *rest) for rest in self._walk(START, frozenset())]

    def paths_part2(self) -> list[Path]:
        """All paths where a single small cave may be visited twice."""
        return [(START, *rest) for rest in self._walk_twice(START, frozenset(), None)]


def count_paths_part1(edges: Iterable[str]) -> int:
    """Number of paths visiting small caves at most once."""
    return len(CaveGraph(edges).paths_part1())


def count_paths_part2(edges: Iterable[str]) -> int:
    """Number of paths where one small cave may be visited twice."""
    return len(CaveGraph(edges).paths_part2())