"""Location ID lists: total pairwise distance and similarity score."""

from __future__ import annotations

import argparse
from collections import Counter
from collections.abc import Sequence
from pathlib import Path


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Split each line into a left and a right location ID."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2:
            raise ValueError(f"expected two location IDs, got {line!r}")
        first, second = (int(field) for field in fields)
        left.append(first)
        right.append(second)
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of distances between the lists after sorting both."""
    return sum(
        abs(b - a) for a, b in zip(sorted(left), sorted(right), strict=True)
    )


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Each left number times how often it appears on the right, summed."""
    occurrences = Counter(right)
    return sum(number * occurrences[number] for number in left)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(
        prog="day01", description="Compare two lists of location IDs."
    )
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    left, right = parse_lists(args.input.read_text())
    print(f"Total distance: {total_distance(left, right)}")
    print(f"Similarity score: {similarity_score(left, right)}")


if __name__ == "__main__":
    main()