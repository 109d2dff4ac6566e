"""Command line entry point that solves one puzzle day from an input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence

from advent_puzzles.y2021 import (
    day01 as y21d01,
    day02 as y21d02,
    day03 as y21d03,
    day04 as y21d04,
    day05 as y21d05,
    day06 as y21d06,
    day07 as y21d07,
    day08 as y21d08,
    day09 as y21d09,
    day10 as y21d10,
    day11 as y21d11,
    day12 as y21d12,
    day13 as y21d13,
    day14 as y21d14,
    day15 as y21d15,
    day18 as y21d18,
)
from advent_puzzles.y2022 import (
    day01 as y22d01,
    day02 as y22d02,
    day03 as y22d03,
    day04 as y22d04,
    day05 as y22d05,
    day06 as y22d06,
    day07 as y22d07,
    day08 as y22d08,
)

Solver = Callable[[list[str]], list[str]]

_SOLVERS: dict[tuple[int, int], Solver] = {}


def _solver(year: int, day: int) -> Callable[[Solver], Solver]:
    def register(function: Solver) -> Solver:
        _SOLVERS[(year, day)] = function
        return function

    return register


def _report(*answers: tuple[str, object]) -> list[str]:
    return [f"{label} {value}" for label, value in answers]


def read_lines(path: str) -> list[str]:
    """Read a text file and return its lines without line endings."""
    with open(path, encoding="utf-8") as handle:
        return handle.read().splitlines()


@_solver(2021, 1)
def _sonar_sweep(lines: list[str]) -> list[str]:
    depths = [int(line) for line in lines]
    return _report(
        ("increased singles:", y21d01.count_increased_singles(depths)),
        ("increased triples:", y21d01.count_increased_triples(depths)),
    )


@_solver(2021, 2)
def _dive(lines: list[str]) -> list[str]:
    return _report(
        ("move:", y21d02.move(lines)),
        ("move with aim:", y21d02.move_with_aim(lines)),
    )


@_solver(2021, 3)
def _binary_diagnostic(lines: list[str]) -> list[str]:
    return _report(
        ("power consumption:", y21d03.power_consumption(lines)),
        ("life support rating:", y21d03.life_support_rating(lines)),
    )


@_solver(2021, 4)
def _giant_squid(lines: list[str]) -> list[str]:
    return _report(
        ("best board result", y21d04.find_best_board(lines)),
        ("worst board result", y21d04.find_worst_board(lines)),
    )


@_solver(2021, 5)
def _hydrothermal_venture(lines: list[str]) -> list[str]:
    return _report(
        ("straight overlaps:", y21d05.straight_overlaps(lines)),
        ("all overlaps:", y21d05.all_overlaps(lines)),
    )


@_solver(2021, 6)
def _lanternfish(lines: list[str]) -> list[str]:
    return _report(
        ("lanternfish after 80 days:", y21d06.count_lanternfish(lines[0], 80)),
        ("lanternfish after 256 days:", y21d06.count_lanternfish(lines[0], 256)),
    )


@_solver(2021, 7)
def _treachery_of_whales(lines: list[str]) -> list[str]:
    return [
        f"part1 requires: {y21d07.fuel_to_align_linear(lines[0])} fuel",
        f"part2 requires: {y21d07.fuel_to_align_triangular(lines[0])} fuel",
    ]


@_solver(2021, 8)
def _seven_segment_search(lines: list[str]) -> list[str]:
    return _report(
        ("amount of digits 1 4 7 8:", y21d08.count_1478_digits(lines)),
        ("sum:", y21d08.sum_output_values(lines)),
    )


@_solver(2021, 9)
def _smoke_basin(lines: list[str]) -> list[str]:
    return _report(
        ("sum:", y21d09.sum_risked_level(lines)),
        ("mult of 3 largest bassins:", y21d09.mult_largest_basins(lines)),
    )


@_solver(2021, 10)
def _syntax_scoring(lines: list[str]) -> list[str]:
    return _report(
        ("syntaxErrors:", y21d10.syntax_error_score(lines)),
        ("incompleteRows:", y21d10.incomplete_rows_score(lines)),
    )


@_solver(2021, 11)
def _dumbo_octopus(lines: list[str]) -> list[str]:
    return _report(
        ("total:", y21d11.count_total_flashes(lines, 195)),
        ("step:", y21d11.find_first_synchronised_step(lines)),
    )


@_solver(2021, 12)
def _passage_pathing(lines: list[str]) -> list[str]:
    return _report(
        ("paths1:", y21d12.count_paths_part1(lines)),
        ("paths2:", y21d12.count_paths_part2(lines)),
    )


@_solver(2021, 13)
def _transparent_origami(lines: list[str]) -> list[str]:
    return [
        *_report(("points:", y21d13.points_after_first_fold(lines))),
        *y21d13.render_after_all_folds(lines).splitlines(),
        "",
    ]


@_solver(2021, 14)
def _extended_polymerization(lines: list[str]) -> list[str]:
    return _report(
        ("diff 10 steps:", y21d14.diff_most_and_least_common(lines, 10)),
        ("diff 40 steps:", y21d14.diff_most_and_least_common(lines, 40)),
    )


@_solver(2021, 15)
def _chiton(lines: list[str]) -> list[str]:
    return _report(("totalRisk", y21d15.lowest_risk_path(lines)))


@_solver(2021, 18)
def _snailfish(lines: list[str]) -> list[str]:
    return _report(
        ("magnitude", y21d18.magnitude_of_sum(lines)),
        ("largestMagnitude", y21d18.largest_magnitude_of_sum(lines)),
    )


@_solver(2022, 1)
def _calorie_counting(lines: list[str]) -> list[str]:
    return _report(
        ("puzzle 1:", y22d01.max_calories(lines)),
        ("puzzle 2:", y22d01.top_three_calories(lines)),
    )


@_solver(2022, 2)
def _rock_paper_scissors(lines: list[str]) -> list[str]:
    return _report(
        ("puzzle 1:", y22d02.total_score(lines)),
        ("puzzle 2:", y22d02.total_score_for_outcomes(lines)),
    )


@_solver(2022, 3)
def _rucksacks(lines: list[str]) -> list[str]:
    return _report(
        ("puzzle 1:", y22d03.sum_duplicated_priorities(lines)),
        ("puzzle 2:", y22d03.sum_badge_priorities(lines)),
    )


@_solver(2022, 4)
def _camp_cleanup(lines: list[str]) -> list[str]:
    return _report(
        ("puzzle 1:", y22d04.count_containing_pairs(lines)),
        ("puzzle 2:", y22d04.count_overlapping_pairs(lines)),
    )


@_solver(2022, 5)
def _supply_stacks(lines: list[str]) -> list[str]:
    return _report(
        ("puzzle1:", y22d05.rearrange_one_by_one(lines)),
        ("puzzle2:", y22d05.rearrange_in_batches(lines)),
    )


@_solver(2022, 6)
def _tuning_trouble(lines: list[str]) -> list[str]:
    signal = "".join(lines)
    return _report(
        ("puzzle 1:", y22d06.find_marker(signal, 4)),
        ("puzzle 2:", y22d06.find_marker(signal, 14)),
    )


@_solver(2022, 7)
def _no_space_left(lines: list[str]) -> list[str]:
    return _report(("puzzle 1:", y22d07.total_line_length(lines)))


@_solver(2022, 8)
def _treetop_tree_house(lines: list[str]) -> list[str]:
    return _report(("puzzle 1:", y22d08.count_visible_trees(lines)))


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the puzzle of the given year and day and print the answers."""
    parser = argparse.ArgumentParser(
        prog="advent-puzzles", description="Solve one puzzle day from an input file."
    )
    parser.add_argument("year", type=int)
    parser.add_argument("day", type=int)
    parser.add_argument("input", nargs="?", default="input.txt", help="puzzle input file")
    args = parser.parse_args(argv)

    solver = _SOLVERS.get((args.year, args.day))
    if solver is None:
        parser.error(f"no solution for {args.year} day {args.day}")

    try:
        output = solver(read_lines(args.input))
    except (OSError, ValueError, LookupError) as error:
        print(error, file=sys.stderr)
        return 1
    for line in output:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())