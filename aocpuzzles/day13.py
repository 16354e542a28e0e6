"""Claw machines: the cheapest token cost to reach each prize."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass
from pathlib import Path

PRIZE_OFFSET = 10_000_000_000_000
_MAX_PRESSES = 100
_TOLERANCE = 0.0001
_A_COST = 3
_B_COST = 1
_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class ClawMachine:
    """Button movements and prize location of one machine."""

    button_a: tuple[int, int]
    button_b: tuple[int, int]
    prize: tuple[int, int]

    def estimated_cost(self) -> int:
        """Token cost found with floating point, or 0 if unreachable within 100 presses."""
        (ax, ay), (bx, by), (px, py) = self.button_a, self.button_b, self.prize
        if ax == 0:
            return 0
        denominator = by - (bx * ay) / ax
        if denominator == 0:
            return 0
        b = (py - (px * ay) / ax) / denominator
        a = (px - b * bx) / ax

        if abs(abs(a) - abs(round(a))) > _TOLERANCE or abs(abs(b) - abs(round(b))) > _TOLERANCE:
            return 0
        a_presses, b_presses = round(a), round(b)
        if a_presses > _MAX_PRESSES or b_presses > _MAX_PRESSES:
            return 0
        return max(0, _A_COST * a_presses + _B_COST * b_presses)

    def exact_cost(self) -> int:
        """Token cost found with exact integer arithmetic, or 0 if there is no solution."""
        (ax, ay), (bx, by), (px, py) = self.button_a, self.button_b, self.prize
        b_denominator = by * ax - bx * ay
        if b_denominator == 0:
            return 0
        b_numerator = py * ax - px * ay
        if b_numerator % b_denominator != 0:
            return 0
        b = b_numerator // b_denominator

        a_numerator = px - b * bx
        if ax == 0:
            raise ValueError("button A does not move along X")
        if a_numerator % ax != 0:
            return 0
        a = a_numerator // ax
        return _A_COST * a + _B_COST * b


def _number(row: str, start: str, end: str | None = None) -> int:
    begin = row.find(start)
    if begin < 0:
        raise ValueError(f"missing {start!r} in {row!r}")
    stop = len(row) if end is None else row.find(end)
    if stop < 0:
        raise ValueError(f"missing {end!r} in {row!r}")
    token = row[begin + len(start):stop]
    if not _INTEGER.fullmatch(token):
        raise ValueError(f"not a number: {token!r} in {row!r}")
    return int(token)


def parse_machines(text: str, offset: int = 0) -> list[ClawMachine]:
    """Read machines; each Prize line closes one, its position shifted by ``offset``."""
    button_a = (0, 0)
    button_b = (0, 0)
    machines: list[ClawMachine] = []
    for row in text.splitlines():
        if "Button" in row:
            move = (_number(row, "X+", ","), _number(row, "Y+"))
            if "A" in row:
                button_a = move
            else:
                button_b = move
        elif "Prize" in row:
            prize = (_number(row, "X=", ",") + offset, _number(row, "Y=") + offset)
            machines.append(ClawMachine(button_a, button_b, prize))
    return machines


def total_estimated_cost(text: str) -> int:
    return sum(machine.estimated_cost() for machine in parse_machines(text))


def total_exact_cost(text: str) -> int:
    return sum(machine.exact_cost() for machine in parse_machines(text, PRIZE_OFFSET))


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="day13", description="Price out claw machines.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(f"The total price to win each game is {total_estimated_cost(text)} tokens")
    print(f"With far prizes the total price is {total_exact_cost(text)} tokens")


if __name__ == "__main__":
    main()