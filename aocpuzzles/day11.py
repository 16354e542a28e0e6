"""Plutonian pebbles: stones that change and split every time you blink."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from functools import cache
from pathlib import Path

FIRST_BLINKS = 25
SECOND_BLINKS = 75
_MULTIPLIER = 2024
_UNSIGNED = re.compile(r"\+?[0-9]+")


def parse_stones(text: str) -> list[int]:
    """The engraved numbers, separated by whitespace."""
    tokens = text.split()
    if not tokens:
        raise ValueError("no stones given")
    for token in tokens:
        if not _UNSIGNED.fullmatch(token):
            raise ValueError(f"not a stone: {token!r}")
    return [int(token) for token in tokens]


def _evolve(stone: int) -> tuple[int, ...]:
    if stone < 0:
        raise ValueError(f"stones carry non-negative numbers, got {stone}")
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return (int(digits[:half]), int(digits[half:]))
    return (stone * _MULTIPLIER,)


def blink(stones: Iterable[int]) -> list[int]:
    """The stones after one blink, in order."""
    return [new for stone in stones for new in _evolve(stone)]


@cache
def _count(stone: int, blinks: int) -> int:
    if blinks == 0:
        return 1
    return sum(_count(new, blinks - 1) for new in _evolve(stone))


def count_stones(stones: Iterable[int], blinks: int) -> int:
    """How many stones there are after ``blinks`` blinks."""
    if blinks < 0:
        raise ValueError("blinks must not be negative")
    return sum(_count(stone, blinks) for stone in stones)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="day11", description="Count stones after blinking.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    stones = parse_stones(args.input.read_text())
    current = stones
    for _ in range(FIRST_BLINKS):
        current = blink(current)
    print(f"There are {len(current)} stones after {FIRST_BLINKS} blinks")
    print(f"There are {count_stones(stones, SECOND_BLINKS)} stones after {SECOND_BLINKS} blinks")


if __name__ == "__main__":
    main()