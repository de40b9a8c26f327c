"""Classic dynamic-programming exercises: sums, counting paths, robbing and trading."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import accumulate


def _positive_steps(nums: Iterable[int]) -> list[int]:
    steps = list(nums)
    if any(step <= 0 for step in steps):
        raise ValueError("all numbers must be positive")
    return steps


def can_sum_top_down(target: int, nums: Iterable[int]) -> bool:
    """Tell whether ``target`` is a sum of values from ``nums``, reusing them freely.

    Works down from ``target``, remembering remainders that already failed.
    """
    steps = _positive_steps(nums)
    if target < 0:
        return False
    seen: set[int] = set()
    stack = [target]
    while stack:
        remaining = stack.pop()
        if remaining == 0:
            return True
        if remaining in seen:
            continue
        seen.add(remaining)
        stack.extend(remaining - step for step in steps if remaining - step >= 0)
    return False


def can_sum_bottom_up(target: int, nums: Iterable[int]) -> bool:
    """Tell whether ``target`` is a sum of values from ``nums``, building up from zero."""
    steps = _positive_steps(nums)
    if target < 0:
        return False
    if target == 0:
        return True
    reached = {0}
    queue = deque([0])
    while queue:
        current = queue.popleft()
        for step in steps:
            following = current + step
            if following == target:
                return True
            if following < target and following not in reached:
                reached.add(following)
                queue.append(following)
    return False


def fibonacci(n: int) -> int:
    """Return the ``n``-th Fibonacci number, with ``fibonacci(0) == 0``."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def grid_traveler(rows: int, cols: int) -> int:
    """Count the paths from the top-left to the bottom-right cell moving only down or right."""
    if rows < 0 or cols < 0:
        raise ValueError("grid dimensions must be non-negative")
    if rows == 0 or cols == 0:
        return 0
    ways = [1] * cols
    for _ in range(rows - 1):
        ways = list(accumulate(ways))
    return ways[-1]


def climb_stairs(n: int) -> int:
    """Count the ways to climb ``n`` stairs taking one or two steps at a time."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n <= 2:
        return n
    previous, current = 1, 2
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def climb_stairs_table(n: int) -> int:
    """Same count as :func:`climb_stairs`, filled in as a table from the top stair down."""
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if n <= 3:
        return n
    ways = [0] * n
    ways[-1], ways[-2] = 1, 2
    for index in reversed(range(n - 2)):
        ways[index] = ways[index + 1] + ways[index + 2]
    return ways[0]


def rob(houses: Sequence[int]) -> int:
    """Largest haul from a row of houses where no two adjacent houses are robbed."""
    count = len(houses)
    best = [0] * (count + 3)
    for index in reversed(range(count)):
        best[index] = houses[index] + max(best[index + 2], best[index + 3])
    return max(best[0], best[1])


def _circular_chain(houses: Sequence[int], robbed_first: bool) -> list[int]:
    count = len(houses)
    best = [0] * count
    for index in reversed(range(count)):
        if index == count - 1:
            best[index] = 0 if robbed_first else houses[index]
        elif index == count - 2:
            best[index] = houses[index]
        elif index == count - 3:
            best[index] = houses[index] + (0 if robbed_first else houses[index + 2])
        else:
            best[index] = houses[index] + max(best[index + 2], best[index + 3])
    return best


def rob_circular(houses: Sequence[int]) -> int:
    """Largest haul from houses in a circle, where the first and last are adjacent."""
    if not houses:
        raise ValueError("there must be at least one house")
    if len(houses) == 1:
        return houses[0]
    if len(houses) == 2:
        return max(houses)
    with_first = _circular_chain(houses, robbed_first=True)
    without_first = _circular_chain(houses, robbed_first=False)
    return max(with_first[0], without_first[1], without_first[2])


def min_cost_climbing_stairs(cost: Sequence[int]) -> int:
    """Cheapest way past the top, starting on step 0 or 1 and climbing one or two steps."""
    count = len(cost)
    if count < 2:
        return 0
    best = list(cost)
    for index in reversed(range(count - 2)):
        best[index] = cost[index] + min(best[index + 1], best[index + 2])
    return min(best[0], best[1])


def max_ribbon_pieces(length: int, cuts: Iterable[int]) -> int | None:
    """Most pieces a ribbon of ``length`` can be cut into using only the given piece lengths.

    Returns None when no exact cutting exists.
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")
    sizes = sorted(_positive_steps(cuts))
    pieces: list[int | None] = [None] * (length + 1)
    pieces[0] = 0
    for total in range(1, length + 1):
        options = [
            pieces[total - size] + 1
            for size in sizes
            if size <= total and pieces[total - size] is not None
        ]
        if options:
            pieces[total] = max(options)
    return pieces[length]


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from buying and selling any number of times, holding one share at most."""
    if not prices:
        return 0
    buy = sell = prices[0]
    profit = 0
    for price in prices[1:]:
        if price < sell:
            profit += sell - buy
            buy = sell = price
        elif price > sell:
            sell = price
    return profit + max(sell - buy, 0)