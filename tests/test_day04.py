import pytest

from aocpuzzles.day04 import count_x_mas, count_xmas

EXAMPLE = """MMMSXXMASM
MSAMXMSMSA
AMXSXMAAMM
MSAMASMSMX
XMASAMXAMM
XXAMMXXAMA
SMSMSASXSS
SAXAMASAAA
MAMMMXMMMM
MXMXAXMASX
"""

SMALL_CROSS = "M.S.\n.A..\nM.S.\n"


def _mirror(text):
    return "\n".join(line[::-1] for line in text.splitlines()) + "\n"


def _transpose(text):
    lines = text.splitlines()
    return "\n".join("".join(column) for column in zip(*lines)) + "\n"


def test_example_xmas():
    assert count_xmas(EXAMPLE) == 18


def test_example_x_mas():
    assert count_x_mas(EXAMPLE, 10) == 9


def test_mirror_keeps_xmas_count():
    assert count_xmas(_mirror(EXAMPLE)) == count_xmas(EXAMPLE)


def test_transpose_keeps_xmas_count():
    assert count_xmas(_transpose(EXAMPLE)) == count_xmas(EXAMPLE)


def test_reversed_line_counts_same():
    line = "XMASAMXXMAS\n"
    assert count_xmas(line) == count_xmas(line[-2::-1] + "\n")


def test_small_cross():
    assert count_x_mas(SMALL_CROSS, 4) == 1


def test_cross_without_center_is_not_counted():
    broken = SMALL_CROSS.replace("A", ".")
    assert count_x_mas(broken, 4) < count_x_mas(SMALL_CROSS, 4)


def test_empty_search_raises():
    with pytest.raises(ValueError):
        count_xmas("")


def test_line_longer_than_first_raises():
    with pytest.raises(ValueError):
        count_xmas("XM\nXMAS\n")


def test_too_small_for_width_raises():
    with pytest.raises(ValueError):
        count_x_mas("MAS\n", 140)


def test_non_positive_width_raises():
    with pytest.raises(ValueError):
        count_x_mas(EXAMPLE, 0)