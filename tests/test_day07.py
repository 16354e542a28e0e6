import math

import pytest

from aocpuzzles.day07 import (
    format_radix,
    parse_equations,
    solvable,
    solvable_with_concat,
    total_calibration,
    total_calibration_with_concat,
)

EXAMPLE = """190: 10 19
3267: 81 40 27
83: 17 5
156: 15 6
7290: 6 8 6 15
161011: 16 10 13
192: 17 8 14
21037: 9 7 18 13
292: 11 6 16 20
"""


def test_parse_equations_reads_target_and_numbers():
    assert parse_equations("190: 10 19\n3267: 81 40 27\n") == [
        (190, [10, 19]),
        (3267, [81, 40, 27]),
    ]


def test_parse_equations_skips_malformed_rows():
    assert parse_equations("abc: 1 2\n\n10: 4 6\n") == [(10, [4, 6])]


@pytest.mark.parametrize("numbers", [[2, 3], [1, 2, 3, 4], [5, 5, 5], [10, 19]])
def test_sum_and_product_are_solvable(numbers):
    assert solvable(sum(numbers), numbers)
    assert solvable(math.prod(numbers), numbers)
    assert solvable_with_concat(sum(numbers), numbers)


def test_unreachable_target_is_not_solvable():
    assert not solvable(7, [2, 3])
    assert not solvable_with_concat(7, [2, 3])


def test_concatenation_opens_new_targets():
    assert not solvable(156, [15, 6])
    assert solvable_with_concat(156, [15, 6])


@pytest.mark.parametrize("numbers", [[], [5]])
def test_too_few_numbers_raise(numbers):
    with pytest.raises(ValueError):
        solvable(5, numbers)
    with pytest.raises(ValueError):
        solvable_with_concat(5, numbers)


@pytest.mark.parametrize("value,radix", [(0, 2), (7, 2), (26, 3), (1000, 3), (35, 36)])
def test_format_radix_round_trip(value, radix):
    assert int(format_radix(value, radix), radix) == value


def test_format_radix_zero():
    assert format_radix(0, 3) == "0"


@pytest.mark.parametrize("value,radix", [(5, 1), (5, 37), (-1, 3)])
def test_format_radix_rejects_bad_input(value, radix):
    with pytest.raises(ValueError):
        format_radix(value, radix)


def test_totals_count_only_solvable_targets():
    text = "5: 2 3\n6: 2 3\n7: 2 3\n23: 2 3\n"
    assert total_calibration(text) == 5 + 6
    assert total_calibration_with_concat(text) == 5 + 6 + 23


def test_worked_example():
    assert total_calibration(EXAMPLE) == 3749
    assert total_calibration_with_concat(EXAMPLE) == 11387


def test_concat_total_never_below_plain_total():
    assert total_calibration_with_concat(EXAMPLE) >= total_calibration(EXAMPLE)