"""Sonar sweep: counting increases between three-measurement windows."""

from __future__ import annotations

import argparse
import re
from itertools import pairwise
from pathlib import Path

_UNSIGNED = re.compile(r"\+?[0-9]+")
_U32_MAX = 2**32 - 1


def split_lines(text: str) -> list[str]:
    """Lines that end in a newline; an unterminated trailing piece is dropped."""
    return text.split("\n")[:-1]


def _depth(line: str) -> int:
    token = line.strip()
    if not _UNSIGNED.fullmatch(token):
        raise ValueError(f"not a depth: {line!r}")
    value = int(token)
    if value > _U32_MAX:
        raise ValueError(f"depth out of range: {line!r}")
    return value


def count_window_increases(text: str) -> int:
    """One plus the number of windows whose sum beats the window before it."""
    lines = split_lines(text)
    if len(lines) < 2:
        raise ValueError("need at least two measurements")
    depths = [_depth(line) for line in lines]
    windows = [sum(depths[start:start + 3]) for start in range(len(depths) - 2)]
    return 1 + sum(1 for before, after in pairwise(windows) if before < after)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="practice_day01", description="Sonar sweep.")
    parser.add_argument("input", nargs="?", default="input.txt", type=Path)
    args = parser.parse_args(argv)
    print(count_window_increases(args.input.read_text()))


if __name__ == "__main__":
    main()