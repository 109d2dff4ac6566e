"""Puzzles from the 2022 event: days 1 to 8."""