import pytest

from aocpuzzles.day14 import Robot, find_tree, parse_robots, safety_factor, tree_located

SMALL = (11, 7)


def _pyramid(apex, depth):
    x, y = apex
    return [(x + dx, y + k) for k in range(depth + 1) for dx in range(-k, k + 1)]


def _still(positions):
    return [Robot(position, (0, 0)) for position in positions]


def test_parse_reads_position_and_velocity():
    robot = Robot.parse("p=0,4 v=3,-3")
    assert robot.position == (0, 4)
    assert robot.velocity == (3, -3)


def test_parse_robots_skips_blank_lines():
    robots = parse_robots("p=1,2 v=-1,5\n\np=6,3 v=0,0\n")
    assert [r.position for r in robots] == [(1, 2), (6, 3)]
    assert robots[0].velocity == (-1, 5)


def test_parse_rejects_malformed_line():
    with pytest.raises(ValueError):
        Robot.parse("p=1,2 v=x,3")


def test_step_wraps_negative_edges():
    robot = Robot((0, 0), (-1, -1))
    robot.step(SMALL)
    assert robot.position == (SMALL[0] - 1, SMALL[1] - 1)


@pytest.mark.parametrize("velocity", [(2, -3), (-7, 12), (25, 40)])
def test_step_returns_to_start_after_full_period(velocity):
    robot = Robot((2, 4), velocity)
    for _ in range(SMALL[0] * SMALL[1]):
        robot.step(SMALL)
        assert 0 <= robot.position[0] < SMALL[0]
        assert 0 <= robot.position[1] < SMALL[1]
    assert robot.position == (2, 4)


def test_quadrant_none_on_middle_lines():
    assert Robot((5, 0), (0, 0)).quadrant(SMALL) is None
    assert Robot((0, 3), (0, 0)).quadrant(SMALL) is None


def test_quadrant_corners_are_distinct():
    corners = [(0, 0), (10, 0), (0, 6), (10, 6)]
    quadrants = {Robot(c, (0, 0)).quadrant(SMALL) for c in corners}
    assert quadrants == set(range(4))
    assert Robot((0, 0), (0, 0)).quadrant(SMALL) == 3


def test_safety_factor_ignores_middle_robots():
    corners = [(0, 0), (10, 0), (0, 6), (10, 6)]
    base = safety_factor(_still(corners), SMALL, 100)
    extra = safety_factor(_still(corners + [(5, 2), (1, 3)]), SMALL, 100)
    assert extra == base


def test_safety_factor_multiplies_counts():
    corners = [(0, 0), (10, 0), (0, 6), (10, 6)]
    base = safety_factor(_still(corners), SMALL, 0)
    doubled = safety_factor(_still(corners + [(1, 1)]), SMALL, 0)
    assert doubled == 2 * base


def test_safety_factor_zero_with_empty_quadrant():
    assert safety_factor(_still([(0, 0), (10, 0), (0, 6)]), SMALL, 5) == 0


def test_safety_factor_periodic_and_does_not_mutate():
    robots = [Robot((1, 1), (3, 2)), Robot((9, 5), (-4, 1)), Robot((2, 5), (1, -5))]
    start = [r.position for r in robots]
    assert safety_factor(robots, SMALL, 0) == safety_factor(robots, SMALL, SMALL[0] * SMALL[1])
    assert [r.position for r in robots] == start


def test_tree_located_full_pyramid():
    assert tree_located(_still(_pyramid((50, 20), 5)))


def test_tree_located_missing_corner():
    positions = _pyramid((50, 20), 5)
    positions.remove((55, 25))
    assert not tree_located(_still(positions))


def test_tree_located_respects_depth():
    robots = _still(_pyramid((10, 10), 2))
    assert tree_located(robots, 2)
    assert not tree_located(robots, 3)


def test_find_tree_reports_seconds_until_tree():
    bounds = (101, 103)
    wait = 7
    robots = []
    for index, (x, y) in enumerate(_pyramid((50, 20), 5)):
        dx, dy = index + 1, 2 * index + 3
        start = ((x - wait * dx) % bounds[0], (y - wait * dy) % bounds[1])
        robots.append(Robot(start, (dx, dy)))
    starts = [r.position for r in robots]
    assert find_tree(robots, bounds, 50) == wait
    assert [r.position for r in robots] == starts


def test_find_tree_gives_up_past_limit():
    assert find_tree([Robot((3, 3), (1, 2))], SMALL, 3) is None