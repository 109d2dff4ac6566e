"""Seven segment search: untangling scrambled display wiring."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

CORRECT_DISPLAY = {
    "abcefg": 0,
    "cf": 1,
    "acdeg": 2,
    "acdfg": 3,
    "bcdf": 4,
    "abdfg": 5,
    "abdefg": 6,
    "acf": 7,
    "abcdefg": 8,
    "abcdfg": 9,
}

_UNIQUE_LENGTHS = {2: 1, 4: 4, 3: 7, 7: 8}


def _single_missing(reference: str, signal: str) -> str | None:
    """Return the one letter of reference absent from signal, if exactly one is."""
    missing = [letter for letter in reference if letter not in signal]
    return missing[0] if len(missing) == 1 else None


class Display:
    """Wiring of one display, deduced from its ten signal patterns."""

    def __init__(self, signal_wires: Iterable[str]) -> None:
        self.segment_map: dict[str, str] = {}
        self.digit_signals: dict[int, str] = {}

        remaining = self._find_unique_digits(list(signal_wires))
        self._find_segment_a()
        remaining = self._find_six_and_segments_c_f(remaining)
        remaining = self._find_five_and_segment_e(remaining)
        remaining = self._find_nine(remaining)
        remaining = self._find_zero_and_segment_d(remaining)
        self._find_segment_b()
        remaining = self._find_three(remaining)
        self._find_two(remaining)
        self._find_segment_g()

    def _signal(self, digit: int) -> str:
        return self.digit_signals.get(digit, "")

    def _wire_for(self, segment: str) -> str | None:
        for wire, correct in self.segment_map.items():
            if correct == segment:
                return wire
        return None

    def _find_unique_digits(self, signals: list[str]) -> list[str]:
        remaining = []
        for signal in signals:
            digit = _UNIQUE_LENGTHS.get(len(signal))
            if digit is None:
                remaining.append(signal)
            else:
                self.digit_signals[digit] = signal
        return remaining

    def _find_segment_a(self) -> None:
        one = self._signal(1)
        for letter in self._signal(7):
            if letter not in one:
                self.segment_map[letter] = "a"
                return
        raise ValueError("wrong seven-one relation")

    def _find_six_and_segments_c_f(self, signals: list[str]) -> list[str]:
        remaining = []
        one = self._signal(1)
        if len(one) < 2:
            raise ValueError("no signal for digit one")
        first, second = one[0], one[1]
        for signal in signals:
            if len(signal) != 6:
                remaining.append(signal)
                continue
            has_first = first in signal
            has_second = second in signal
            if has_first and has_second:
                remaining.append(signal)
                continue
            self.digit_signals[6] = signal
            if has_first:
                self.segment_map[first] = "f"
                self.segment_map[second] = "c"
            else:
                self.segment_map[first] = "c"
                self.segment_map[second] = "f"
        return remaining

    def _find_five_and_segment_e(self, signals: list[str]) -> list[str]:
        remaining = []
        for signal in signals:
            missing = _single_missing(self._signal(6), signal) if len(signal) == 5 else None
            if missing is None:
                remaining.append(signal)
                continue
            self.digit_signals[5] = signal
            self.segment_map[missing] = "e"
        return remaining

    def _find_nine(self, signals: list[str]) -> list[str]:
        wire_e = self._wire_for("e")
        eight = self._signal(8)
        remaining = []
        for signal in signals:
            is_nine = (
                len(signal) == 6
                and wire_e is not None
                and wire_e in eight
                and wire_e not in signal
            )
            if is_nine:
                self.digit_signals[9] = signal
            else:
                remaining.append(signal)
        return remaining

    def _find_zero_and_segment_d(self, signals: list[str]) -> list[str]:
        remaining = []
        for signal in signals:
            missing = _single_missing(self._signal(8), signal) if len(signal) == 6 else None
            if missing is None:
                remaining.append(signal)
                continue
            self.digit_signals[0] = signal
            self.segment_map[missing] = "d"
        return remaining

    def _find_segment_b(self) -> None:
        known = {self._wire_for(segment) for segment in "cfd"}
        for letter in self._signal(4):
            if letter not in known:
                self.segment_map[letter] = "b"
                return
        raise ValueError("cannot populate segment b")

    def _find_three(self, signals: list[str]) -> list[str]:
        remaining = []
        for signal in signals:
            if _single_missing(self._signal(9), signal) is None:
                remaining.append(signal)
            else:
                self.digit_signals[3] = signal
        return remaining

    def _find_two(self, signals: list[str]) -> None:
        if not signals:
            raise ValueError("no signal left for digit two")
        self.digit_signals[2] = signals[0]

    def _find_segment_g(self) -> None:
        known = {self._wire_for(segment) for segment in "acde"}
        for letter in self._signal(2):
            if letter not in known:
                self.segment_map[letter] = "g"
                return
        raise ValueError("cannot populate segment g")

    def decode_signal(self, signal: str) -> str:
        """Translate a scrambled signal into sorted correct segment names."""
        return "".join(sorted(self.segment_map.get(letter, "") for letter in signal))

    def decode_output_value(self, signals: Iterable[str]) -> int:
        """Read the output digits as one number."""
        result = 0
        for signal in signals:
            result = result * 10 + CORRECT_DISPLAY.get(self.decode_signal(signal), 0)
        return result


def _split_entry(line: str) -> tuple[str, str]:
    parts = line.split(" | ")
    if len(parts) != 2:
        raise ValueError("error when splitting by |")
    return parts[0], parts[1]


def count_1478_digits(lines: Iterable[str]) -> int:
    """Count output patterns that can only be 1, 4, 7 or 8."""
    count = 0
    for line in lines:
        _, output = _split_entry(line)
        count += sum(1 for digit in output.split(" ") if len(digit) in _UNIQUE_LENGTHS)
    return count


def sum_output_values(lines: Iterable[str]) -> int:
    """Decode every entry and add up the output values."""
    total = 0
    for line in lines:
        patterns, output = _split_entry(line)
        signal_wires = patterns.split(" ")
        if len(signal_wires) != 10:
            raise ValueError("error when splitting first part")
        outputs: Sequence[str] = output.split(" ")
        if len(outputs) != 4:
            raise ValueError("error when splitting second part")
        total += Display(signal_wires).decode_output_value(outputs)
    return total