"""Print queue: page ordering rules, checking and repairing updates."""

from __future__ import annotations

import argparse
import logging
import re
from collections.abc import Mapping, Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")

Rules = dict[int, list[int]]


def _parse_page(token: str) -> int | None:
    token = token.strip()
    if not _INTEGER.fullmatch(token):
        return None
    return int(token)


def parse_manual(text: str) -> tuple[Rules, list[list[int]]]:
    """Split the input into ordering rules and page updates.

    A rule ``X|Y`` is stored as ``rules[Y]`` containing ``X``: every page listed
    under a key must come before that key when both appear in an update.
    """
    rules: Rules = {}
    updates: list[list[int]] = []
    for line in text.splitlines():
        if "|" in line:
            parts = line.split("|")
            before = _parse_page(parts[0])
            after = _parse_page(parts[1])
            if before is None or after is None:
                logger.warning("Failed to parse line: %s", line)
                continue
            rules.setdefault(after, []).append(before)
        elif line:
            pages = [page for page in map(_parse_page, line.split(",")) if page is not None]
            if not pages:
                raise ValueError(f"update holds no pages: {line!r}")
            updates.append(pages)
    return rules, updates


def is_ordered(update: Sequence[int], rules: Mapping[int, Sequence[int]]) -> bool:
    """True when no page is followed by a page that must precede it."""
    for position, page in enumerate(update):
        for required in rules.get(page, ()):
            if required in update and position <= update.index(required):
                return False
    return True


def reorder(update: Sequence[int], rules: Mapping[int, Sequence[int]]) -> list[int]:
    """Swap pages around until the update satisfies every rule."""
    working = list(update)
    while True:
        for position, page in enumerate(list(working)):
            required = rules.get(page)
            if required is None:
                continue
            last = len(working) - 1
            for offset, candidate in enumerate(reversed(list(working))):
                if candidate == page:
                    break
                if candidate in required:
                    target = last - offset
                    working[position], working[target] = working[target], working[position]
                    break
        if is_ordered(working, rules):
            return working


def _middle(update: Sequence[int]) -> int:
    return update[(len(update) - 1) // 2]


def sum_ordered_middles(text: str) -> int:
    """Sum of the middle pages of updates that are already in order."""
    rules, updates = parse_manual(text)
    return sum(_middle(update) for update in updates if is_ordered(update, rules))


def sum_reordered_middles(text: str) -> int:
    """Sum of the middle pages of out-of-order updates after repairing them."""
    rules, updates = parse_manual(text)
    return sum(
        _middle(reorder(update, rules))
        for update in updates
        if not is_ordered(update, rules)
    )


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="day05", description="Check page update ordering.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(f"Sum of ordered middle pages: {sum_ordered_middles(text)}")
    print(f"Sum of reordered middle pages: {sum_reordered_middles(text)}")


if __name__ == "__main__":
    main()