"""Binary diagnostic: power consumption and life support ratings."""

from __future__ import annotations

import argparse
import re
from collections.abc import Sequence
from pathlib import Path

_BINARY = re.compile(r"[01]+")


def _rows(lines: Sequence[str]) -> list[str]:
    rows = [line.strip() for line in lines]
    if not rows:
        raise ValueError("no diagnostic lines")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("diagnostic lines differ in length")
    return rows


def _binary(text: str) -> int:
    if not _BINARY.fullmatch(text):
        raise ValueError(f"not a binary number: {text!r}")
    return int(text, 2)


def power_consumption(lines: Sequence[str]) -> tuple[int, int]:
    """Gamma and epsilon rates: a bit is 1 in gamma when over half the lines have it."""
    rows = _rows(lines)
    half = len(rows) // 2
    gamma_bits = "".join(
        "1" if sum(row[bit] == "1" for row in rows) > half else "0"
        for bit in range(len(rows[0]))
    )
    if not gamma_bits:
        raise ValueError("diagnostic lines are empty")
    epsilon_bits = "".join("0" if bit == "1" else "1" for bit in gamma_bits)
    return int(gamma_bits, 2), int(epsilon_bits, 2)


def filter_rating(lines: Sequence[str], least_common: bool = False) -> int:
    """Keep lines matching the most (or least) common bit, position by position.

    Ties favour 1 for the most common and 0 for the least common bit. If more
    than one line survives every position, line 1 wins when it is among them,
    otherwise the first survivor.
    """
    rows = _rows(lines)
    remaining = list(range(len(rows)))
    for bit in range(len(rows[0])):
        if len(remaining) == 1:
            break
        ones = sum(rows[index][bit] == "1" for index in remaining)
        most = "1" if ones * 2 >= len(remaining) else "0"
        wanted = ("0" if most == "1" else "1") if least_common else most
        remaining = [index for index in remaining if rows[index][bit] == wanted]
    if not remaining:
        raise ValueError("no line matches the bit criteria")
    chosen = 1 if 1 in remaining else remaining[0]
    return _binary(rows[chosen])


def life_support_rating(lines: Sequence[str]) -> int:
    """Oxygen generator rating times CO2 scrubber rating."""
    return filter_rating(lines) * filter_rating(lines, least_common=True)


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="practice_day03", description="Binary diagnostic.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    lines = [line for line in args.input.read_text().splitlines() if line.strip()]
    gamma, epsilon = power_consumption(lines)
    print(f"Gamma: {gamma}\nEpsilon: {epsilon}\nAnswer: {gamma * epsilon}")
    oxygen = filter_rating(lines)
    co2 = filter_rating(lines, least_common=True)
    print(f"Carbon Dioxide: {co2}\nOxygen: {oxygen}\nAnswer: {co2 * oxygen}")


if __name__ == "__main__":
    main()