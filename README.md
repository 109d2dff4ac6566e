# advent-puzzles

Solutions to a selection of Advent of Code puzzles from 2021 and 2022.
Every day is a small module of plain functions and a few classes, so each
part of a puzzle can be used on its own or checked against the examples from
the puzzle text. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using it as a library

The puzzle input is passed in as a list of lines, or as a single string for
puzzles whose input is one line. Malformed input raises `ValueError`.

```python
from advent_puzzles.y2021 import day01, day06
from advent_puzzles.y2022 import day06 as tuning

depths = [199, 200, 208, 210, 200, 207, 240, 269, 260, 263]
day01.count_increased_singles(depths)   # 7
day01.count_increased_triples(depths)   # 5

day06.count_lanternfish("3,4,3,1,2", 18)  # 26

tuning.find_marker("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 4)   # 7
tuning.find_marker("mjqjpqmgbljsphdztnvjfqwrcgsmlb", 14)  # 19
```

Some days keep state in a class that can be stepped by hand, for example
`School` (2021 day 6), `OctopusBoard` (2021 day 11), `Plane` (2021 day 13),
`Polymer` (2021 day 14) and `SnailfishNumber` (2021 day 18):

```python
from advent_puzzles.y2021.day18 import SnailfishNumber

number = SnailfishNumber("[[[[4,3],4],4],[7,[[8,4],9]]]")
number.add("[1,1]")
number.reduce()
str(number)          # "[[[[0,7],4],[[7,8],[6,0]]],[8,1]]"
number.magnitude()   # 1384
```

The covered puzzles live in:

- `advent_puzzles.y2021`: `day01` to `day15`, and `day18`
- `advent_puzzles.y2022`: `day01` to `day08`

## Command line

The package installs the `advent-puzzles` command. It takes a year, a day and
the path of an input file (default `input.txt`), and prints the answers for
that day:

```
advent-puzzles 2021 1 input.txt
advent-puzzles 2022 6 signal.txt
```

The same can be run as `python -m advent_puzzles.cli`. An unknown year and day
is reported as a usage error; an unreadable file or malformed input prints the
error to standard error and exits with status 1. For 2021 day 13 the folded
sheet is drawn with `#` and `.`.

## Limits

- Only the days listed above are solved; other days are not available.
- 2022 day 7 only reports the total length of the transcript lines; it does
  not build a directory tree or compute directory sizes.
- 2022 day 8 only counts visible trees; there is no scenic score.
- 2021 day 15 searches paths that move right and down, and solves the map as
  given, without the enlarged map.
- Inputs are read from local files only; nothing is downloaded.