"""Restroom robots: wrapping motion, quadrant safety factor and a tree search."""

from __future__ import annotations

import argparse
import math
import re
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from pathlib import Path

BOUNDS = (101, 103)
TREE_DEPTH = 5
SEARCH_LIMIT = 10_000_000
_LINE = re.compile(r"p=([+-]?[0-9]+),([+-]?[0-9]+) v=([+-]?[0-9]+),([+-]?[0-9]+)$")
_BELOW = ((-1, 1), (0, 1), (1, 1))


@dataclass
class Robot:
    """A robot's position (x, y) and velocity per second."""

    position: tuple[int, int]
    velocity: tuple[int, int]

    @classmethod
    def parse(cls, line: str) -> Robot:
        """Read a line of the form ``p=x,y v=dx,dy``."""
        match = _LINE.search(line)
        if match is None:
            raise ValueError(f"not a robot: {line!r}")
        x, y, dx, dy = (int(group) for group in match.groups())
        return cls((x, y), (dx, dy))

    def step(self, bounds: tuple[int, int] = BOUNDS) -> None:
        """Move one second, wrapping around the edges."""
        width, height = bounds
        x, y = self.position
        dx, dy = self.velocity
        self.position = ((x + dx) % width, (y + dy) % height)

    def quadrant(self, bounds: tuple[int, int] = BOUNDS) -> int | None:
        """Quadrant number, or None on the middle row or column."""
        mid_x, mid_y = bounds[0] // 2, bounds[1] // 2
        x, y = self.position
        if x == mid_x or y == mid_y:
            return None
        left, top = mid_x > x, mid_y > y
        if top:
            return 3 if left else 0
        return 2 if left else 1


def parse_robots(text: str) -> list[Robot]:
    return [Robot.parse(line) for line in text.splitlines() if line.strip()]


def _moved(robots: Iterable[Robot]) -> list[Robot]:
    return [replace(robot) for robot in robots]


def safety_factor(
    robots: Iterable[Robot], bounds: tuple[int, int] = BOUNDS, seconds: int = 100
) -> int:
    """Product of the robot counts in the four quadrants after ``seconds``."""
    moved = _moved(robots)
    for _ in range(seconds):
        for robot in moved:
            robot.step(bounds)
    counts = Counter(robot.quadrant(bounds) for robot in moved)
    return math.prod(counts[quadrant] for quadrant in range(4))


def _tree_at(position: tuple[int, int], occupied: set[tuple[int, int]], depth: int) -> bool:
    if depth == 0:
        return True
    x, y = position
    below = [(x + dx, y + dy) for dx, dy in _BELOW]
    if not all(spot in occupied for spot in below):
        return False
    return all(_tree_at(spot, occupied, depth - 1) for spot in below)


def tree_located(robots: Sequence[Robot], depth: int = TREE_DEPTH) -> bool:
    """True when some robot tops a filled triangle ``depth`` rows deep."""
    occupied = {robot.position for robot in robots}
    return any(_tree_at(robot.position, occupied, depth) for robot in robots)


def find_tree(
    robots: Iterable[Robot], bounds: tuple[int, int] = BOUNDS, limit: int = SEARCH_LIMIT
) -> int | None:
    """Seconds until a tree first appears, or None once ``limit`` is passed."""
    moved = _moved(robots)
    seconds = 0
    while True:
        for robot in moved:
            robot.step(bounds)
        seconds += 1
        if tree_located(moved):
            return seconds
        if seconds > limit:
            return None


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="day14", description="Simulate restroom robots.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    robots = parse_robots(args.input.read_text())
    print(f"The total safety factor is {safety_factor(robots)}")
    seconds = find_tree(robots)
    if seconds is None:
        print("Not found\nSuggest trying smaller tree search")
    else:
        print(f"The tree was spotted after {seconds} iterations")


if __name__ == "__main__":
    main()