"""Solutions to Advent of Code puzzles from 2021 and 2022, with a command line entry point."""

__version__ = "0.1.0"