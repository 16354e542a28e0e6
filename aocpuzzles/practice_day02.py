"""Submarine piloting: following forward/down/up commands, with and without aim."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import NamedTuple

_UNSIGNED = re.compile(r"\+?[0-9]+")


class Direction(Enum):
    FORWARD = "forward"
    DOWN = "down"
    UP = "up"


class Command(NamedTuple):
    direction: Direction
    amount: int


def _command(line: str) -> Command:
    if "forward" in line:
        direction = Direction.FORWARD
    elif "down" in line:
        direction = Direction.DOWN
    else:
        direction = Direction.UP
    token = line[len(direction.value):].strip()
    if not _UNSIGNED.fullmatch(token):
        raise ValueError(f"not a command: {line!r}")
    return Command(direction, int(token))


def parse_commands(text: str) -> list[Command]:
    """One command per newline-separated piece, a trailing empty piece included.

    A piece that names neither forward nor down is read as up; anything that
    does not end in an amount, such as the empty piece after a final newline,
    raises ValueError.
    """
    return [_command(line) for line in text.split("\n")]


def navigate(commands: Iterable[Command]) -> tuple[int, int]:
    """Horizontal position and depth when down and up change depth directly."""
    position = depth = 0
    for direction, amount in commands:
        if direction is Direction.FORWARD:
            position += amount
        elif direction is Direction.DOWN:
            depth += amount
        else:
            depth -= amount
            if depth < 0:
                raise ValueError("depth went above the surface")
    return position, depth


def navigate_with_aim(commands: Iterable[Command]) -> tuple[int, int]:
    """Horizontal position and depth when down and up change the aim."""
    position = depth = aim = 0
    for direction, amount in commands:
        if direction is Direction.FORWARD:
            position += amount
            depth += aim * amount
        elif direction is Direction.DOWN:
            aim += amount
        else:
            aim -= amount
            if aim < 0:
                raise ValueError("aim went above level")
    return position, depth


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="practice_day02", description="Pilot the submarine.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    commands = parse_commands(args.input.read_text())
    for label, (position, depth) in (
        ("Direct", navigate(commands)),
        ("With aim", navigate_with_aim(commands)),
    ):
        print(
            f"{label}:\nThe amount of data read: {len(commands)}\n"
            f"Position found: {position}\nDepth found: {depth}\n"
            f"Product: {position * depth}"
        )


if __name__ == "__main__":
    main()