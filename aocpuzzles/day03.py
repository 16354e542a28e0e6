"""Corrupted memory: summing mul(a,b) instructions, optionally gated by do()/don't()."""

from __future__ import annotations

import argparse
import re
from pathlib import Path

_PAREN = re.compile(r"[()]")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_MUL = re.compile(r"mul\([0-9]{1,3},[0-9]{1,3}\)")
_NUMBER = re.compile(r"[0-9]{1,3}")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1


def _parse_i64(text: str) -> int | None:
    if not _INTEGER.fullmatch(text):
        return None
    value = int(text)
    if not _I64_MIN <= value <= _I64_MAX:
        return None
    return value


def _product_at(pieces: list[str], index: int) -> int | None:
    """Product of an 'a,b' piece that directly follows a piece ending in 'mul'."""
    operands = pieces[index].split(",")
    if len(operands) != 2:
        return None
    numbers = [_parse_i64(operand) for operand in operands]
    if None in numbers or -1 in numbers:
        return None
    if index == 0 or not pieces[index - 1].endswith("mul"):
        return None
    first, second = numbers
    return first * second


def sum_multiplications(text: str) -> int:
    """Sum every mul(a,b) found by splitting lines at parentheses."""
    total = 0
    for line in text.splitlines():
        pieces = _PAREN.split(line)
        for index in range(len(pieces)):
            product = _product_at(pieces, index)
            if product is not None:
                total += product
    return total


def sum_multiplications_regex(text: str) -> int:
    """Sum every strict mul(a,b) with one to three digit operands."""
    total = 0
    for match in _MUL.finditer(text):
        numbers = [int(number) for number in _NUMBER.findall(match.group(0))]
        if len(numbers) == 2:
            total += numbers[0] * numbers[1]
    return total


def sum_enabled_multiplications(text: str) -> int:
    """Like sum_multiplications, but don't() disables and do() re-enables."""
    total = 0
    active = True
    for line in text.splitlines():
        pieces = _PAREN.split(line)
        for index, piece in enumerate(pieces):
            empty_call = index + 1 < len(pieces) and pieces[index + 1] == ""
            if empty_call and piece.endswith("don't"):
                active = False
                continue
            if empty_call and piece.endswith("do"):
                active = True
                continue
            product = _product_at(pieces, index)
            if product is not None and active:
                total += product
    return total


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="day03", description="Add up mul instructions.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(f"Sum of multiplications: {sum_multiplications(text)}")
    print(f"Sum of strict multiplications: {sum_multiplications_regex(text)}")
    print(f"Sum of enabled multiplications: {sum_enabled_multiplications(text)}")


if __name__ == "__main__":
    main()