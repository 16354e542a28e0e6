"""Resonant antennas: marking antinodes, with and without harmonics."""

from __future__ import annotations

import argparse
from collections import defaultdict
from pathlib import Path

EMPTY = "."
ANTINODE = "#"


def parse_grid(text: str) -> list[list[str]]:
    """The map as rows of single characters."""
    return [list(line) for line in text.splitlines()]


def _antennas(grid: list[list[str]]) -> dict[str, list[tuple[int, int]]]:
    groups: dict[str, list[tuple[int, int]]] = defaultdict(list)
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell != EMPTY:
                groups[cell].append((x, y))
    return groups


def mark_antinodes(grid: list[list[str]], harmonics: bool = False) -> list[list[str]]:
    """A copy of the map with every antinode marked '#'.

    With harmonics, antinodes repeat along each antenna pair's line up to one
    more multiple than the map has rows.
    """
    board = [list(row) for row in grid]
    if not board:
        return board
    height, width = len(board), len(board[0])
    if any(len(row) != width for row in board):
        raise ValueError("map rows differ in length")
    factors = range(1, height + 2) if harmonics else range(1, 2)
    for positions in _antennas(grid).values():
        for center in positions:
            for other in positions:
                if other == center:
                    continue
                dx, dy = center[0] - other[0], center[1] - other[1]
                for factor in factors:
                    candidates = (
                        (center[0] + dx * factor, center[1] + dy * factor),
                        (other[0] - dx * factor, other[1] - dy * factor),
                    )
                    for x, y in candidates:
                        if 0 <= x < width and 0 <= y < height:
                            board[y][x] = ANTINODE
    return board


def count_antinodes(text: str) -> int:
    """Cells marked as antinodes without harmonics."""
    board = mark_antinodes(parse_grid(text))
    return sum(row.count(ANTINODE) for row in board)


def count_harmonic_antinodes(text: str) -> int:
    """Every non-empty cell after marking harmonic antinodes, antennas included."""
    board = mark_antinodes(parse_grid(text), harmonics=True)
    return sum(1 for row in board for cell in row if cell != EMPTY)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="day08", description="Find antenna antinodes.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(f"There were {count_antinodes(text)} antinodes in the map")
    print(f"There were {count_harmonic_antinodes(text)} antinodes with harmonics")


if __name__ == "__main__":
    main()