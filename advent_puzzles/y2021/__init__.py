"""Puzzles from the 2021 event: days 1 to 15 and day 18."""