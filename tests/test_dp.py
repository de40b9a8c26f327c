import itertools

import pytest

from algodrills.dp import (
    can_sum_bottom_up,
    can_sum_top_down,
    climb_stairs,
    climb_stairs_table,
    fibonacci,
    grid_traveler,
    max_profit,
    max_ribbon_pieces,
    min_cost_climbing_stairs,
    rob,
    rob_circular,
)

COINS = [1, 5, 10, 25, 100, 500, 1000]


def test_can_sum_strategies_agree_on_coins():
    for target in range(0, 1001):
        assert can_sum_top_down(target, COINS) == can_sum_bottom_up(target, COINS)


def test_can_sum_zero_target_is_reachable():
    assert can_sum_top_down(0, [7]) is True
    assert can_sum_bottom_up(0, [7]) is True


@pytest.mark.parametrize("target", range(0, 40))
def test_can_sum_even_steps_reach_only_even_targets(target):
    expected = target % 2 == 0
    assert can_sum_top_down(target, [2, 4]) is expected
    assert can_sum_bottom_up(target, [2, 4]) is expected


def test_can_sum_negative_target_is_unreachable():
    assert can_sum_top_down(-3, [1]) is False
    assert can_sum_bottom_up(-3, [1]) is False


@pytest.mark.parametrize("func", [can_sum_top_down, can_sum_bottom_up])
def test_can_sum_rejects_non_positive_numbers(func):
    with pytest.raises(ValueError):
        func(5, [1, 0])


def test_fibonacci_first_values():
    assert [fibonacci(n) for n in range(8)] == [0, 1, 1, 2, 3, 5, 8, 13]


def test_fibonacci_recurrence():
    for n in range(2, 60):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_rejects_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)


def test_grid_traveler_empty_and_single_line():
    assert grid_traveler(0, 5) == 0
    assert grid_traveler(5, 0) == 0
    assert grid_traveler(1, 1) == 1
    assert grid_traveler(1, 9) == grid_traveler(9, 1) == 1


@pytest.mark.parametrize("cols", range(1, 12))
def test_grid_traveler_two_rows_gives_column_count(cols):
    assert grid_traveler(2, cols) == cols


def test_grid_traveler_symmetry_and_recurrence():
    for rows, cols in itertools.product(range(2, 9), repeat=2):
        assert grid_traveler(rows, cols) == grid_traveler(cols, rows)
        assert grid_traveler(rows, cols) == grid_traveler(rows - 1, cols) + grid_traveler(
            rows, cols - 1
        )


def test_grid_traveler_rejects_negative():
    with pytest.raises(ValueError):
        grid_traveler(-1, 2)


def test_climb_stairs_sequence():
    assert [climb_stairs(n) for n in range(1, 9)] == [1, 2, 3, 5, 8, 13, 21, 34]


def test_climb_stairs_small_values_are_identity():
    assert [climb_stairs(n) for n in range(3)] == [0, 1, 2]


def test_climb_stairs_table_matches_recursive_count():
    for n in range(0, 40):
        assert climb_stairs_table(n) == climb_stairs(n)


def test_climb_stairs_rejects_negative():
    with pytest.raises(ValueError):
        climb_stairs(-2)
    with pytest.raises(ValueError):
        climb_stairs_table(-2)


def test_rob_trivial_rows():
    assert rob([]) == 0
    assert rob([9]) == 9
    assert rob([4, 11]) == 11


def test_rob_known_row():
    assert rob([2, 7, 9, 3, 1]) == 12


def test_rob_bounded_by_total_and_monotone():
    houses = [2, 2, 3, 12, 2, 3, 23, 2, 9, 23, 7, 0, 8, 3, 7, 4, 3]
    assert max(houses) <= rob(houses) <= sum(houses)
    for size in range(1, len(houses)):
        assert rob(houses[:size]) <= rob(houses[: size + 1])


def test_rob_equal_houses_takes_every_other():
    for size in range(1, 12):
        assert rob([5] * size) == 5 * ((size + 1) // 2)


def test_rob_circular_small_rows():
    assert rob_circular([1, 2]) == 2
    assert rob_circular([3, 4, 3]) == 4
    assert rob_circular([6]) == 6


def test_rob_circular_is_rotation_invariant():
    rows = [
        [1, 2, 3, 1],
        [1, 5, 1, 1, 5],
        [2, 2, 3, 12, 2, 3, 23, 2, 9, 23, 7, 0, 8, 3, 7, 4, 3],
        [4, 1, 2, 7, 5, 3, 1],
    ]
    for houses in rows:
        expected = rob_circular(houses)
        for shift in range(len(houses)):
            assert rob_circular(houses[shift:] + houses[:shift]) == expected


def test_rob_circular_never_beats_straight_row():
    houses = [2, 2, 3, 12, 2, 3, 23, 2, 9, 23, 7, 0, 8, 3, 7, 4, 3]
    for size in range(1, len(houses) + 1):
        assert rob_circular(houses[:size]) <= rob(houses[:size])


def test_rob_circular_rejects_empty():
    with pytest.raises(ValueError):
        rob_circular([])


def test_min_cost_short_staircases():
    assert min_cost_climbing_stairs([]) == 0
    assert min_cost_climbing_stairs([8]) == 0
    assert min_cost_climbing_stairs([8, 3]) == 3


def test_min_cost_known_staircase():
    assert min_cost_climbing_stairs([10, 15, 20]) == 15


def test_min_cost_bounds():
    cost = [1, 2, 1, 2, 1, 1, 1]
    assert 0 <= min_cost_climbing_stairs(cost) <= sum(cost)
    assert min_cost_climbing_stairs([0] * 10) == 0


def test_max_ribbon_pieces_example():
    assert max_ribbon_pieces(5, [5, 3, 2]) == 2


def test_max_ribbon_pieces_impossible():
    assert max_ribbon_pieces(7, [2, 4, 6]) is None


def test_max_ribbon_pieces_unit_cut_gives_length():
    for length in range(0, 30):
        assert max_ribbon_pieces(length, [1, 4, 7]) == length


def test_max_ribbon_pieces_rejects_bad_input():
    with pytest.raises(ValueError):
        max_ribbon_pieces(5, [0, 2, 3])
    with pytest.raises(ValueError):
        max_ribbon_pieces(-1, [1, 2, 3])


def test_max_profit_monotone_prices():
    rising = [1, 3, 4, 8, 10]
    falling = [9, 7, 4, 2, 1]
    assert max_profit(rising) == rising[-1] - rising[0]
    assert max_profit(falling) == 0
    assert max_profit([]) == 0


def test_max_profit_beats_any_single_trade():
    for prices in ([1, 2, 3, 0, 5], [5, 4, 3, 2, 1, 0, 5, 1, 2], [3, 3, 5, 0, 0, 3, 1, 4]):
        best_single = max(
            (later - earlier for earlier, later in itertools.combinations(prices, 2)),
            default=0,
        )
        assert max_profit(prices) >= max(best_single, 0)