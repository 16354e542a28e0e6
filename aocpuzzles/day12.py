"""Garden groups: fencing price from each region's area and perimeter."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence
from pathlib import Path

UNPRICED = "."
_STEPS = ((-1, 0), (1, 0), (0, 1), (0, -1))


def _check(grid: Sequence[str]) -> None:
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("garden rows differ in length")


def parse_garden(text: str) -> list[str]:
    """The garden as equally long rows of plant letters."""
    grid = text.splitlines()
    _check(grid)
    return grid


def _neighbours(grid: Sequence[str], row: int, col: int) -> Iterator[tuple[int, int]]:
    for dr, dc in _STEPS:
        r, c = row + dr, col + dc
        if 0 <= r < len(grid) and 0 <= c < len(grid[0]):
            yield r, c


def plot_perimeters(grid: Sequence[str]) -> list[list[int]]:
    """Fence sides each plot needs: edges facing the border or another plant."""
    _check(grid)
    return [
        [
            4 - sum(1 for r, c in _neighbours(grid, row, col) if grid[r][c] == plant)
            for col, plant in enumerate(line)
        ]
        for row, line in enumerate(grid)
    ]


def fencing_price(text: str) -> int:
    """Sum over all regions of area times perimeter; '.' plots are never priced."""
    grid = parse_garden(text)
    perimeters = plot_perimeters(grid)
    seen: set[tuple[int, int]] = set()
    price = 0
    for row, line in enumerate(grid):
        for col, plant in enumerate(line):
            if plant == UNPRICED or (row, col) in seen:
                continue
            area = perimeter = 0
            seen.add((row, col))
            stack = [(row, col)]
            while stack:
                r, c = stack.pop()
                area += 1
                perimeter += perimeters[r][c]
                for spot in _neighbours(grid, r, c):
                    if spot not in seen and grid[spot[0]][spot[1]] == plant:
                        seen.add(spot)
                        stack.append(spot)
            price += area * perimeter
    return price


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="day12", description="Price garden fencing.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    print(f"it will cost {fencing_price(args.input.read_text())}")


if __name__ == "__main__":
    main()