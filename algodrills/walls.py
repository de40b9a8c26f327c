"""Break through as many walls as possible on a line with limited energy.

Walls stand between integer cells. Walking one cell costs one unit of energy and
breaking through a wall costs that wall's cost, every time it is crossed. The
walker starts at cell 0 and counts each distinct wall broken.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple


@dataclass(frozen=True, order=True)
class Wall:
    """A wall at ``position`` that costs ``cost`` energy to break through."""

    position: float
    cost: int

    @property
    def left_cell(self) -> int:
        """Cell just left of the wall."""
        return math.floor(self.position)

    @property
    def right_cell(self) -> int:
        """Cell just right of the wall."""
        return math.floor(self.position) + 1


class _State(NamedTuple):
    energy: int
    position: int
    left: int  # index of the wall to the left; the wall to the right is left + 1
    broken_low: int
    broken_high: int


def _moves(walls: list[Wall], state: _State) -> Iterator[tuple[_State, int]]:
    if state.energy <= 0:
        return
    low, high = state.broken_low, state.broken_high

    right = state.left + 1
    if right < len(walls):
        wall = walls[right]
        spent = max(wall.left_cell - state.position, 0) + wall.cost
        if spent <= state.energy:
            yield (
                _State(
                    state.energy - spent,
                    wall.right_cell,
                    right,
                    min(low, right),
                    max(high, right),
                ),
                0 if low <= right <= high else 1,
            )

    left = state.left
    if left >= 0:
        wall = walls[left]
        spent = max(state.position - wall.right_cell, 0) + wall.cost
        if spent <= state.energy:
            yield (
                _State(
                    state.energy - spent,
                    wall.left_cell,
                    left - 1,
                    min(low, left),
                    max(high, left),
                ),
                0 if low <= left <= high else 1,
            )


def run_through_walls(
    wall_positions: Iterable[float], wall_costs: Iterable[int], energy: int
) -> int:
    """Return the largest number of distinct walls that ``energy`` can break through."""
    positions = list(wall_positions)
    costs = list(wall_costs)
    if len(positions) != len(costs):
        raise ValueError("every wall needs exactly one cost")
    walls = sorted(Wall(float(position), int(cost)) for position, cost in zip(positions, costs))
    if any(wall.cost <= 0 for wall in walls):
        raise ValueError("wall costs must be positive")
    if not walls or energy <= 0:
        return 0

    start_left = sum(1 for wall in walls if wall.position < 0) - 1
    start = _State(energy, 0, start_left, start_left + 1, start_left)

    best: dict[_State, int] = {}
    stack = [start]
    while stack:
        state = stack[-1]
        if state in best:
            stack.pop()
            continue
        moves = list(_moves(walls, state))
        pending = [following for following, _ in moves if following not in best]
        if pending:
            stack.extend(pending)
            continue
        best[state] = max((gain + best[following] for following, gain in moves), default=0)
        stack.pop()
    return best[start]