"""Word search: XMAS in every direction, and MAS crossed in the shape of an X."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

WIDTH = 140
_FORWARD = re.compile("XMAS")
_BACKWARD = re.compile("SAMX")
_TAIL = "MAS"
# Corner letters of each X-MAS orientation: top-left, top-right, bottom-left, bottom-right.
_CORNERS = ("MSMS", "SSMM", "SMSM", "MMSS")


def _lines(text: str) -> list[str]:
    lines = text.splitlines()
    if not lines:
        raise ValueError("word search is empty")
    return lines


def _count_straight(text: str) -> int:
    return len(_FORWARD.findall(text)) + len(_BACKWARD.findall(text))


def _columns(lines: list[str]) -> list[str]:
    columns: list[list[str]] = [[] for _ in lines[0]]
    for line in lines:
        if len(line) > len(columns):
            raise ValueError(f"line is longer than the first line: {line!r}")
        for column, char in zip(columns, line):
            column.append(char)
    return ["".join(column) for column in columns]


def _count_diagonal(lines: list[str]) -> int:
    def char_at(row: int, col: int) -> str | None:
        if 0 <= row < len(lines) and 0 <= col < len(lines[row]):
            return lines[row][col]
        return None

    total = 0
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char != "X":
                continue
            row_steps = []
            if row > 2:
                row_steps.append(-1)
            if row + 3 < len(lines):
                row_steps.append(1)
            col_steps = (-1, 1) if col >= 3 else (1,)
            for dr in row_steps:
                for dc in col_steps:
                    if all(
                        char_at(row + dr * step, col + dc * step) == letter
                        for step, letter in enumerate(_TAIL, start=1)
                    ):
                        total += 1
    return total


def count_xmas(text: str) -> int:
    """Occurrences of XMAS forwards, backwards, vertically and diagonally."""
    lines = _lines(text)
    total = _count_straight(text)
    total += sum(_count_straight(column) for column in _columns(lines))
    return total + _count_diagonal(lines)


def count_x_mas(text: str, width: int = WIDTH) -> int:
    """Two MAS crossing in an X, scanned over the lines joined with ';'.

    The window starting at the very last possible offset is not examined.
    """
    if width < 1:
        raise ValueError("width must be positive")
    gap = width - 1
    patterns = [
        re.compile(f"{a}[^;]{b}.{{{gap}}}A.{{{gap}}}{c}[^;]{d}")
        for a, b, c, d in _CORNERS
    ]
    window = 7 + 2 * gap
    joined = ";".join(text.splitlines())
    if len(joined) < window:
        raise ValueError("word search is too small for the given width")
    return sum(
        1
        for pattern in patterns
        for start in range(len(joined) - window)
        if pattern.fullmatch(joined, start, start + window)
    )


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="day04", description="Search for XMAS.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    parser.add_argument("--width", type=int, default=WIDTH)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(f"XMAS appears {count_xmas(text)} times")
    print(f"X-MAS appears {count_x_mas(text, args.width)} times")


if __name__ == "__main__":
    main()