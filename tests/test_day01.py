import pytest

from aocpuzzles.day01 import main, parse_lists, similarity_score, total_distance

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_parse_lists_splits_columns():
    left, right = parse_lists(EXAMPLE)
    assert left == [3, 4, 2, 1, 3, 3]
    assert right == [4, 3, 5, 3, 9, 3]


def test_parse_lists_fixed_width_columns():
    left, right = parse_lists("12345   67890\n00001   00002")
    assert left == [12345, 1]
    assert right == [67890, 2]


def test_parse_lists_rejects_malformed_line():
    with pytest.raises(ValueError):
        parse_lists("1 2 3")


def test_parse_lists_rejects_non_numbers():
    with pytest.raises(ValueError):
        parse_lists("abc   4")


def test_total_distance_example():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == 11


def test_total_distance_is_symmetric_and_order_free():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == total_distance(right, left)
    assert total_distance(left, right) == total_distance(left[::-1], right)


def test_total_distance_of_identical_lists():
    numbers = [5, 1, 9, 3]
    assert total_distance(numbers, list(reversed(numbers))) == 0


def test_total_distance_length_mismatch():
    with pytest.raises(ValueError):
        total_distance([1, 2], [1])


def test_similarity_score_example():
    left, right = parse_lists(EXAMPLE)
    assert similarity_score(left, right) == 31


def test_similarity_score_counts_repeats():
    assert similarity_score([7, 7], [7, 7, 7]) == 7 * 3 * 2


def test_main_prints_both_answers(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    out = capsys.readouterr().out
    assert "Total distance: 11" in out
    assert "Similarity score: 31" in out