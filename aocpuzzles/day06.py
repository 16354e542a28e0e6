"""Guard patrol: cells the guard covers and obstructions that trap her in a loop."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path

UP = (-1, 0)
OBSTACLE = "#"
GUARD = "^"
OPEN = "."
LOOP_LIMIT = 500_000

Position = tuple[int, int]


class _Exit(Enum):
    VERTICAL = auto()
    LEFT = auto()
    RIGHT = auto()
    LOOP = auto()


@dataclass
class _Patrol:
    visited: set[Position]
    final: Position
    exit: _Exit
    steps: int


def parse_grid(text: str) -> list[list[str]]:
    """The map as rows of single characters; rows must share one length."""
    grid = [list(line) for line in text.splitlines()]
    if not grid:
        raise ValueError("map is empty")
    width = len(grid[0])
    if any(len(row) != width for row in grid):
        raise ValueError("map rows differ in length")
    return grid


def find_guard(grid: list[list[str]]) -> Position:
    """(row, column) of the guard, taken from the last row that holds one."""
    found = None
    for row, cells in enumerate(grid):
        if GUARD in cells:
            found = (row, cells.index(GUARD))
    if found is None:
        raise ValueError("map has no guard")
    return found


def rotate(direction: tuple[int, int]) -> tuple[int, int]:
    """Turn a (row, column) direction a quarter to the right."""
    dr, dc = direction
    return (dc, -dr)


def _patrol(grid: list[list[str]], start: Position, blocked: Position | None = None) -> _Patrol:
    rows, cols = len(grid), len(grid[0])
    position, direction = start, UP
    visited = {start}
    seen: set[tuple[Position, tuple[int, int]]] = set()
    steps = 0
    while True:
        row, col = position
        dr, dc = direction
        if (row == 0 and dr == -1) or (row == rows - 1 and dr == 1):
            return _Patrol(visited, position, _Exit.VERTICAL, steps)
        state = (position, direction)
        if state in seen:
            return _Patrol(visited, position, _Exit.LOOP, steps)
        seen.add(state)
        steps += 1
        ahead = (row + dr, col + dc)
        if not 0 <= ahead[1] < cols:
            return _Patrol(visited, position, _Exit.LEFT if dc < 0 else _Exit.RIGHT, steps)
        if ahead == blocked or grid[ahead[0]][ahead[1]] == OBSTACLE:
            direction = rotate(direction)
        else:
            position = ahead
            visited.add(position)


def count_visited(text: str) -> int:
    """Marked cells once the guard walks off the map.

    Stepping off the right edge marks one cell past it unless on the top row,
    and a walk that ends on the top row leaves its last cell unmarked.
    """
    grid = parse_grid(text)
    patrol = _patrol(grid, find_guard(grid))
    if patrol.exit is _Exit.LOOP:
        raise ValueError("the guard never leaves the map")
    count = len(patrol.visited)
    final_row = patrol.final[0]
    if patrol.exit is _Exit.RIGHT and final_row != 0:
        count += 1
    elif patrol.exit is _Exit.VERTICAL and final_row == 0:
        count -= 1
    return count


def _traps(grid: list[list[str]], start: Position, blocked: Position, limit: int) -> bool:
    patrol = _patrol(grid, start, blocked)
    return patrol.exit is _Exit.LOOP or patrol.steps > limit


def count_loop_positions(text: str, limit: int = LOOP_LIMIT) -> int:
    """Open cells where a new obstacle keeps the guard walking past ``limit`` moves."""
    grid = parse_grid(text)
    start = find_guard(grid)
    return sum(
        1
        for row, cells in enumerate(grid)
        for col, cell in enumerate(cells)
        if cell == OPEN and _traps(grid, start, (row, col), limit)
    )


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="day06", description="Follow the guard's patrol.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    parser.add_argument("--limit", type=int, default=LOOP_LIMIT)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(f"She visited {count_visited(text)} distinct locations.")
    print(f"We can use {count_loop_positions(text, args.limit)} distinct locations.")


if __name__ == "__main__":
    main()