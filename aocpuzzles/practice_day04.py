"""Giant squid bingo: the score of the first and of the last winning board."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

Board = list[list["int | None"]]


def parse_bingo(text: str) -> tuple[list[int], list[list[list[int | None]]]]:
    """Drawn numbers from the first line; boards follow, the second line skipped."""
    lines = text.splitlines()
    if len(lines) < 2:
        raise ValueError("bingo input needs the numbers and a separator line")
    numbers = [int(token) for token in lines[0].strip().split(",")]
    boards: list[list[list[int | None]]] = []
    current: list[list[int | None]] = []
    for line in lines[2:]:
        if not line.strip():
            if current:
                boards.append(current)
            current = []
            continue
        current.append([int(token) for token in line.split()])
    if current:
        boards.append(current)
    for board in boards:
        if any(len(row) != len(board[0]) for row in board):
            raise ValueError("board rows differ in length")
    return numbers, boards


def mark(board: Sequence[Sequence[int | None]], number: int) -> list[list[int | None]]:
    """A copy of the board with every cell holding ``number`` marked as None."""
    return [[None if cell == number else cell for cell in row] for row in board]


def has_bingo(board: Sequence[Sequence[int | None]]) -> bool:
    """True when a whole row or a whole column is marked."""
    if any(all(cell is None for cell in row) for row in board):
        return True
    return any(all(cell is None for cell in column) for column in zip(*board))


def board_score(board: Sequence[Sequence[int | None]], number: int) -> int:
    """Sum of the unmarked cells times the number just drawn."""
    return sum(cell for row in board for cell in row if cell is not None) * number


def first_winner_score(text: str) -> int | None:
    """Score of the first board to win, or None if none ever does."""
    numbers, boards = parse_bingo(text)
    for number in numbers:
        for index, board in enumerate(boards):
            boards[index] = board = mark(board, number)
            if has_bingo(board):
                return board_score(board, number)
    return None


def last_winner_score(text: str) -> int | None:
    """Score of the board left to win last, or None if it never wins."""
    numbers, boards = parse_bingo(text)
    for number in numbers:
        index = 0
        while index < len(boards):
            board = boards[index] = mark(boards[index], number)
            if has_bingo(board):
                if len(boards) == 1:
                    return board_score(board, number)
                del boards[index]
                continue
            index += 1
    return None


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="practice_day04", description="Play squid bingo.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    text = args.input.read_text()
    print(f"The first winner scores {first_winner_score(text)}")
    print(f"The last winner scores {last_winner_score(text)}")


if __name__ == "__main__":
    main()