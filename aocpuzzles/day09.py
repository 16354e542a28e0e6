"""Disk fragmenter: compacting file blocks and whole files, then checksumming."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from pathlib import Path

Block = "int | None"
Segment = tuple["int | None", int]

_DIGITS = frozenset("0123456789")


def _lengths(disk_map: str) -> list[int]:
    for char in disk_map:
        if char not in _DIGITS:
            raise ValueError(f"disk map holds a non-digit: {char!r}")
    return [int(char) for char in disk_map]


def expand_blocks(disk_map: str) -> list[int | None]:
    """One entry per block: the file id, or None for free space."""
    blocks: list[int | None] = []
    for index, length in enumerate(_lengths(disk_map)):
        file_id = index // 2 if index % 2 == 0 else None
        blocks.extend([file_id] * length)
    return blocks


def compact_blocks(blocks: Sequence[int | None]) -> list[int | None]:
    """Move blocks one at a time from the end into the leftmost free block."""
    result = list(blocks)
    try:
        free = result.index(None)
    except ValueError:
        return result
    for position in range(len(result) - 1, -1, -1):
        if position <= free:
            break
        result[position], result[free] = result[free], result[position]
        next_free = next(
            (index for index in range(free, len(result)) if result[index] is None), None
        )
        if next_free is None:
            return result
        free = next_free
    return result


def block_checksum(blocks: Iterable[int | None]) -> int:
    """Sum of position times file id, up to the first free block."""
    total = 0
    for position, file_id in enumerate(blocks):
        if file_id is None:
            break
        total += position * file_id
    return total


def expand_segments(disk_map: str) -> list[tuple[int | None, int]]:
    """Runs of ``(file_id, length)``; free runs have id None, empty runs are dropped."""
    return [
        (index // 2 if index % 2 == 0 else None, length)
        for index, length in enumerate(_lengths(disk_map))
        if length > 0
    ]


def _merge_free(segments: Iterable[tuple[int | None, int]]) -> list[tuple[int | None, int]]:
    merged: list[tuple[int | None, int]] = []
    for segment in segments:
        if merged and segment[0] is None and merged[-1][0] is None:
            merged[-1] = (None, merged[-1][1] + segment[1])
        else:
            merged.append(segment)
    return merged


def compact_segments(
    segments: Sequence[tuple[int | None, int]],
) -> list[tuple[int | None, int]]:
    """Move whole files, from the right, into the leftmost free run that fits."""
    segs = _merge_free(segments)
    if not segs:
        return segs
    index = len(segs) - 1
    while True:
        segs = _merge_free(segs)
        file_id, length = segs[index]
        if file_id is None:
            if index == 0:
                break
            index -= 1
            continue

        target = next(
            (
                position
                for position, (other_id, size) in enumerate(segs)
                if other_id is None and size >= length
            ),
            None,
        )
        if target is None or index < target:
            if index == 0:
                break
            index -= 1
            continue

        free_length = segs[target][1]
        if free_length == length:
            segs[index], segs[target] = segs[target], segs[index]
        else:
            segs[target] = (None, free_length - length)
            segs.insert(target, (None, length))
            index += 1
            segs[index], segs[target] = segs[target], segs[index]

        if index == 0:
            break
        index -= 1
    return _merge_free(segs)


def segment_checksum(segments: Iterable[tuple[int | None, int]]) -> int:
    """Sum of position times file id over every block, free blocks counting as zero."""
    total = 0
    position = 0
    for file_id, length in segments:
        if file_id is not None:
            total += file_id * sum(range(position, position + length))
        position += length
    return total


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(prog="day09", description="Compact a disk map.")
    parser.add_argument("input", nargs="?", default="Input.txt", type=Path)
    args = parser.parse_args(argv)
    lines = args.input.read_text().splitlines()
    if not lines:
        raise ValueError("input is empty")
    disk_map = lines[0]
    print(f"Block checksum: {block_checksum(compact_blocks(expand_blocks(disk_map)))}")
    print(
        "File checksum: "
        f"{segment_checksum(compact_segments(expand_segments(disk_map)))}"
    )


if __name__ == "__main__":
    main()