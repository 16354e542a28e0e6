"""Reactor reports: which level sequences are safe, with and without a dampener."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from itertools import pairwise
from pathlib import Path


def parse_reports(text: str) -> list[list[int]]:
    """One report of integer levels per non-blank line."""
    return [[int(level) for level in line.split()] for line in text.splitlines() if line.strip()]


def _steady(levels: Sequence[int]) -> bool:
    """True when every step is 1 to 3 and all steps point the same way."""
    steps = [b - a for a, b in pairwise(levels)]
    if not all(1 <= abs(step) <= 3 for step in steps):
        return False
    return all(step > 0 for step in steps) or all(step < 0 for step in steps)


def is_safe(report: Sequence[int]) -> bool:
    """A report needs at least two levels that change steadily."""
    return len(report) >= 2 and _steady(report)


def is_safe_greedy_dampener(report: Sequence[int]) -> bool:
    """Single pass that skips the first offending level once."""
    last: int | None = None
    increasing = decreasing = True
    dampener_used = False
    final_index = len(report) - 1

    for index, level in enumerate(report):
        if last is None:
            last = level
            continue

        if not 1 <= abs(level - last) <= 3:
            if not dampener_used:
                dampener_used = True
                continue
            return False

        if level > last:
            if not increasing and decreasing:
                if not dampener_used:
                    dampener_used = True
                    continue
                return False
            decreasing = False

        if level < last:
            if increasing and not decreasing:
                if not dampener_used:
                    dampener_used = True
                    continue
                return False
            increasing = False

        if index == final_index:
            return True
        last = level
    return False


def is_safe_with_dampener(report: Sequence[int]) -> bool:
    """Safe as is, or safe once any single level is removed."""
    if len(report) < 2:
        return False
    if is_safe(report):
        return True
    return any(
        _steady([*report[:skip], *report[skip + 1:]]) for skip in range(len(report))
    )


def count_safe(reports: Iterable[Sequence[int]]) -> int:
    return sum(1 for report in reports if is_safe(report))


def count_safe_greedy(reports: Iterable[Sequence[int]]) -> int:
    return sum(1 for report in reports if is_safe_greedy_dampener(report))


def count_safe_dampened(reports: Iterable[Sequence[int]]) -> int:
    return sum(1 for report in reports if is_safe_with_dampener(report))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="day02", description="Count safe reactor reports.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    reports = parse_reports(args.input.read_text())
    print(f"Safe reports: {count_safe(reports)}")
    print(f"Safe with greedy dampener: {count_safe_greedy(reports)}")
    print(f"Safe with dampener: {count_safe_dampened(reports)}")


if __name__ == "__main__":
    main()