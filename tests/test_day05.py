import pytest

from aocpuzzles.day05 import (
    is_ordered,
    main,
    parse_manual,
    reorder,
    sum_ordered_middles,
    sum_reordered_middles,
)

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


@pytest.fixture
def manual():
    return parse_manual(EXAMPLE)


def test_parse_manual_keys_rules_by_later_page(manual):
    rules, updates = manual
    assert 47 in rules[53]
    assert 97 in rules[13]
    assert len(updates) == 6
    assert updates[0] == [75, 47, 61, 53, 29]


def test_rule_count_matches_lines(manual):
    rules, _ = manual
    assert sum(len(before) for before in rules.values()) == EXAMPLE.count("|")


def test_unparseable_rule_is_skipped():
    rules, updates = parse_manual("a|1\n\n1,2,3")
    assert rules == {}
    assert updates == [[1, 2, 3]]


def test_update_without_pages_is_rejected():
    with pytest.raises(ValueError):
        parse_manual("1|2\n\n , \n")


def test_is_ordered_on_example(manual):
    rules, updates = manual
    flags = [is_ordered(update, rules) for update in updates]
    assert flags == [True, True, True, False, False, False]


def test_is_ordered_without_rules():
    assert is_ordered([5, 4, 3], {})


def test_sum_ordered_middles_example():
    assert sum_ordered_middles(EXAMPLE) == 143


def test_sum_reordered_middles_example():
    assert sum_reordered_middles(EXAMPLE) == 123


def test_reorder_example_update(manual):
    rules, _ = manual
    assert reorder([97, 13, 75, 29, 47], rules) == [97, 75, 47, 29, 13]


def test_reorder_produces_ordered_permutation(manual):
    rules, updates = manual
    for update in updates:
        fixed = reorder(update, rules)
        assert sorted(fixed) == sorted(update)
        assert is_ordered(fixed, rules)


def test_reorder_leaves_ordered_update_alone(manual):
    rules, updates = manual
    for update in updates[:3]:
        assert reorder(update, rules) == update


def test_reorder_does_not_mutate_input(manual):
    rules, updates = manual
    original = list(updates[3])
    reorder(updates[3], rules)
    assert updates[3] == original


def test_main_prints_both_sums(tmp_path, capsys):
    path = tmp_path / "input.txt"
    path.write_text(EXAMPLE)
    main([str(path)])
    out = capsys.readouterr().out
    assert "143" in out
    assert "123" in out