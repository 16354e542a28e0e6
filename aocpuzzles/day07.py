"""Bridge repair: which calibration equations can be made true with operators."""

from __future__ import annotations

import argparse
import logging
import re
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r"[ :]")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

Equation = tuple[int, list[int]]


def parse_equations(text: str) -> list[Equation]:
    """Read ``target: n1 n2 ...`` rows; malformed rows are logged and skipped."""
    equations: list[Equation] = []
    for row in text.splitlines():
        if not row.strip():
            continue
        tokens = [token for token in _SEPARATOR.split(row) if token.strip()]
        if not tokens or not all(_INTEGER.fullmatch(token) for token in tokens):
            logger.warning("Skipping malformed or empty row: %s", row)
            continue
        target, *numbers = (int(token) for token in tokens)
        equations.append((target, numbers))
    return equations


def format_radix(value: int, radix: int) -> str:
    """Digits of a non-negative ``value`` in base ``radix`` (2 to 36)."""
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be between 2 and 36, got {radix}")
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    digits: list[str] = []
    while True:
        value, remainder = divmod(value, radix)
        digits.append(_DIGITS[remainder])
        if value == 0:
            break
    return "".join(reversed(digits))


def _split(numbers: Sequence[int]) -> tuple[int, Sequence[int]]:
    if len(numbers) < 2:
        raise ValueError("an equation needs at least two numbers")
    return numbers[0], numbers[1:]


def _i64(value: int) -> int | None:
    return value if _I64_MIN <= value <= _I64_MAX else None


def _concat(left: int, right: int) -> int | None:
    try:
        value = int(f"{left}{right}")
    except ValueError:
        return None
    return _i64(value)


def solvable(target: int, numbers: Sequence[int]) -> bool:
    """True when some left-to-right mix of + and * turns ``numbers`` into ``target``."""
    first, rest = _split(numbers)

    def reach(value: int, index: int) -> bool:
        if index == len(rest):
            return value == target
        number = rest[index]
        return reach(value + number, index + 1) or reach(value * number, index + 1)

    return reach(first, 0)


def solvable_with_concat(target: int, numbers: Sequence[int]) -> bool:
    """Like :func:`solvable`, also allowing digit concatenation.

    A partial result above the target is abandoned, and any step that leaves
    the signed 64-bit range fails.
    """
    first, rest = _split(numbers)

    def reach(value: int, index: int) -> bool:
        if index == len(rest):
            return value == target
        if value > target:
            return False
        number = rest[index]
        candidates = (_i64(value + number), _i64(value * number), _concat(value, number))
        return any(
            candidate is not None and reach(candidate, index + 1) for candidate in candidates
        )

    return reach(first, 0)


def total_calibration(text: str) -> int:
    """Sum of the targets reachable with + and *."""
    return sum(target for target, numbers in parse_equations(text) if solvable(target, numbers))


def total_calibration_with_concat(text: str) -> int:
    """Sum of the targets reachable with +, * and concatenation."""
    return sum(
        target
        for target, numbers in parse_equations(text)
        if solvable_with_concat(target, numbers)
    )


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="day07", description="Check calibration equations.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(f"Your total calibration result is {total_calibration(text)}")
    print(f"With concatenation it is {total_calibration_with_concat(text)}")


if __name__ == "__main__":
    main()