[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aocpuzzles"
version = "0.1.0"
description = "Solutions to Advent of Code puzzles from 2024 and a set of 2021 practice days"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "aoc-2024", "aoc-2021"]
classifiers = [
    "Development Status :: 4 - Beta",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc2024-day01 = "aocpuzzles.day01:main"
aoc2024-day02 = "aocpuzzles.day02:main"
aoc2024-day03 = "aocpuzzles.day03:main"
aoc2024-day04 = "aocpuzzles.day04:main"
aoc2024-day05 = "aocpuzzles.day05:main"
aoc2024-day06 = "aocpuzzles.day06:main"
aoc2024-day07 = "aocpuzzles.day07:main"
aoc2024-day08 = "aocpuzzles.day08:main"
aoc2024-day09 = "aocpuzzles.day09:main"
aoc2024-day10 = "aocpuzzles.day10:main"
aoc2024-day11 = "aocpuzzles.day11:main"
aoc2024-day12 = "aocpuzzles.day12:main"
aoc2024-day13 = "aocpuzzles.day13:main"
aoc2024-day14 = "aocpuzzles.day14:main"
aoc2021-day01 = "aocpuzzles.practice_day01:main"
aoc2021-day02 = "aocpuzzles.practice_day02:main"
aoc2021-day03 = "aocpuzzles.practice_day03:main"
aoc2021-day04 = "aocpuzzles.practice_day04:main"

[tool.hatch.build.targets.wheel]
packages = ["aocpuzzles"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
