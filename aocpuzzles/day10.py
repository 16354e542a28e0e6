"""Hoof It: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from pathlib import Path

TRAILHEAD = "0"
SUMMIT = 9
_STEPS = ((0, 1), (0, -1), (1, 0), (-1, 0))


def _check(grid: Sequence[str]) -> None:
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("map rows differ in length")


def parse_map(text: str) -> list[str]:
    """The map as a list of equally long rows of height digits."""
    grid = text.splitlines()
    _check(grid)
    return grid


def _summits(grid: Sequence[str], row: int, col: int, height: int) -> Iterator[tuple[int, int]]:
    """Every summit reached by each distinct uphill path, one yield per path."""
    wanted = str(height + 1)
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if not (0 <= r < len(grid) and 0 <= c < len(grid[0])):
            continue
        if grid[r][c] != wanted:
            continue
        if height + 1 == SUMMIT:
            yield (r, c)
        else:
            yield from _summits(grid, r, c, height + 1)


def rate_trailhead(grid: Sequence[str], row: int, col: int, distinct: bool = False) -> int:
    """Summits reachable from a trailhead, or with ``distinct`` the number of trails."""
    _check(grid)
    reached = _summits(grid, row, col, 0)
    if distinct:
        return sum(1 for _ in reached)
    return len(set(reached))


def _total(text: str, distinct: bool) -> int:
    grid = parse_map(text)
    return sum(
        rate_trailhead(grid, row, col, distinct)
        for row, line in enumerate(grid)
        for col, cell in enumerate(line)
        if cell == TRAILHEAD
    )


def total_score(text: str) -> int:
    """Sum of trailhead scores: distinct summits reachable from each."""
    return _total(text, distinct=False)


def total_rating(text: str) -> int:
    """Sum of trailhead ratings: distinct trails starting at each."""
    return _total(text, distinct=True)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="day10", description="Score hiking trails.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(f"The total score is {total_score(text)}")
    print(f"The total rating is {total_rating(text)}")


if __name__ == "__main__":
    main()