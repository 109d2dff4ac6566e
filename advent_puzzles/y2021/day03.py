"""Binary diagnostic: power consumption and life support ratings."""

from __future__ import annotations

from collections.abc import Callable, Sequence


def count_ones_in_all_positions(report: Sequence[str]) -> list[int]:
    """Count the ones at every bit position of the report."""
    if not report:
        raise ValueError("empty report")
    length = len(report[0])
    counts = [0] * length
    for value in report:
        if len(value) != length:
            raise ValueError("different length of data in report")
        for position, bit in enumerate(value):
            if bit == "1":
                counts[position] += 1
            elif bit != "0":
                raise ValueError(f"not binary format in report {value!r}")
    return counts


def gamma_and_epsilon_rates(report: Sequence[str]) -> tuple[str, str]:
    """Return the gamma and epsilon rates as bit strings."""
    counts = count_ones_in_all_positions(report)
    half = len(report) // 2
    gamma = "".join("1" if count > half else "0" for count in counts)
    epsilon = "".join("0" if count > half else "1" for count in counts)
    return gamma, epsilon


def power_consumption(report: Sequence[str]) -> int:
    """Multiply the gamma rate by the epsilon rate."""
    gamma, epsilon = gamma_and_epsilon_rates(report)
    return binary_to_int(gamma) * binary_to_int(epsilon)


def _count_ones_in_position(report: Sequence[str], position: int) -> int:
    ones = 0
    for value in report:
        bit = value[position]
        if bit == "1":
            ones += 1
        elif bit != "0":
            raise ValueError(f"not binary format in report {value!r}")
    return ones


def find_most_common_bit(report: Sequence[str], position: int) -> str:
    """Return the most common bit at a position; ties give '1'."""
    ones = _count_ones_in_position(report, position)
    return "1" if ones * 2 >= len(report) else "0"


def find_least_common_bit(report: Sequence[str], position: int) -> str:
    """Return the least common bit at a position; ties give '0'."""
    ones = _count_ones_in_position(report, position)
    return "1" if ones * 2 < len(report) else "0"


def _rating(report: Sequence[str], pick_bit: Callable[[Sequence[str], int], str]) -> str:
    candidates = list(report)
    if not candidates:
        raise ValueError("empty report")
    position = 0
    while len(candidates) > 1:
        bit = pick_bit(candidates, position)
        candidates = [value for value in candidates if value[position] == bit]
        position += 1
    return candidates[0]


def oxygen_generator_rating(report: Sequence[str]) -> str:
    """Filter by the most common bit until one value remains."""
    return _rating(report, find_most_common_bit)


def co2_scrubber_rating(report: Sequence[str]) -> str:
    """Filter by the least common bit until one value remains."""
    return _rating(report, find_least_common_bit)


def life_support_rating(report: Sequence[str]) -> int:
    """Multiply the oxygen generator rating by the CO2 scrubber rating."""
    oxygen = oxygen_generator_rating(report)
    co2 = co2_scrubber_rating(report)
    return binary_to_int(oxygen) * binary_to_int(co2)


def binary_to_int(bits: str) -> int:
    """Convert a string of '0' and '1' characters to an integer."""
    result = 0
    for bit in bits:
        if bit not in "01":
            raise ValueError("cannot convert non binary")
        result = result * 2 + (bit == "1")
    return result