# aocpuzzles

Solutions to the Advent of Code 2024 puzzles for days 1 to 14, plus four
practice days from the 2021 event. Every day is a small module of plain
functions that take puzzle text, and a command that solves a puzzle input
file. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Each day has its own command. Pass it the path of your puzzle input; with no
path it reads `Input.txt` in the current directory (`input.txt` for
`aoc2021-day01`). Each command prints the answers for both parts of the day.

```
aoc2024-day01 input.txt
aoc2024-day11 input.txt
aoc2021-day04 input.txt
```

The 2024 commands are `aoc2024-day01` through `aoc2024-day14`; the 2021
practice commands are `aoc2021-day01` through `aoc2021-day04`.

Two commands take an extra option:

- `aoc2024-day04 --width N` sets the grid width used for the X-MAS search
  (default 140).
- `aoc2024-day06 --limit N` sets how many guard moves count as being trapped
  when searching for loop-making obstacles (default 500000).

## Library use

The modules are named after the day they solve: `aocpuzzles.day01` to
`aocpuzzles.day14` for 2024, and `aocpuzzles.practice_day01` to
`aocpuzzles.practice_day04` for 2021.

```python
from aocpuzzles.day11 import count_stones, parse_stones

print(count_stones(parse_stones("125 17"), 25))  # 55312
```

```python
from pathlib import Path

from aocpuzzles.day01 import parse_lists, similarity_score, total_distance

left, right = parse_lists(Path("input.txt").read_text())
print(total_distance(left, right))
print(similarity_score(left, right))
```

What each module offers:

| Module | Functions and classes |
| --- | --- |
| `day01` | `parse_lists`, `total_distance`, `similarity_score` |
| `day02` | `parse_reports`, `is_safe`, `is_safe_greedy_dampener`, `is_safe_with_dampener`, `count_safe`, `count_safe_greedy`, `count_safe_dampened` |
| `day03` | `sum_multiplications`, `sum_multiplications_regex`, `sum_enabled_multiplications` |
| `day04` | `count_xmas`, `count_x_mas` |
| `day05` | `parse_manual`, `is_ordered`, `reorder`, `sum_ordered_middles`, `sum_reordered_middles` |
| `day06` | `parse_grid`, `find_guard`, `rotate`, `count_visited`, `count_loop_positions` |
| `day07` | `parse_equations`, `format_radix`, `solvable`, `solvable_with_concat`, `total_calibration`, `total_calibration_with_concat` |
| `day08` | `parse_grid`, `mark_antinodes`, `count_antinodes`, `count_harmonic_antinodes` |
| `day09` | `expand_blocks`, `compact_blocks`, `block_checksum`, `expand_segments`, `compact_segments`, `segment_checksum` |
| `day10` | `parse_map`, `rate_trailhead`, `total_score`, `total_rating` |
| `day11` | `parse_stones`, `blink`, `count_stones` |
| `day12` | `parse_garden`, `plot_perimeters`, `fencing_price` |
| `day13` | `ClawMachine` (`estimated_cost`, `exact_cost`), `parse_machines`, `total_estimated_cost`, `total_exact_cost` |
| `day14` | `Robot` (`parse`, `step`, `quadrant`), `parse_robots`, `safety_factor`, `tree_located`, `find_tree` |
| `practice_day01` | `split_lines`, `count_window_increases` |
| `practice_day02` | `parse_commands`, `navigate`, `navigate_with_aim` |
| `practice_day03` | `power_consumption`, `filter_rating`, `life_support_rating` |
| `practice_day04` | `parse_bingo`, `mark`, `has_bingo`, `board_score`, `first_winner_score`, `last_winner_score` |

Malformed input raises `ValueError`.

## What it does not do

The package does not fetch puzzle inputs or submit answers; you supply the
input text yourself. Only 2024 days 1 to 14 and 2021 days 1 to 4 are covered,
and 2024 day 12 solves the first part (area times perimeter) only.