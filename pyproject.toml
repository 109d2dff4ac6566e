[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent-puzzles"
version = "0.1.0"
description = "Solutions to Advent of Code puzzles from 2021 and 2022, usable as a library or from the command line."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent-puzzles = "advent_puzzles.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["advent_puzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
