"""Greedy one-step policy for snakes without a human player."""

from __future__ import annotations

from snake_engine.engine import GameState
from snake_engine.grid import BoundaryMode, is_out_of_bounds, wrap_position
from snake_engine.snake import (
    Direction,
    check_self_collision,
    is_opposite_direction,
    next_head_position,
)


def get_ai_direction(state: GameState) -> Direction:
    """Pick the safe direction that moves the head closest to the food.

    Only the next step is considered. Candidates are tried in
    ``Direction`` order and the first one with the smallest Manhattan
    distance wins. When every move is fatal the current heading is kept.
    """
    food = state.food
    best = state.direction
    best_distance: int | None = None

    for direction in Direction:
        if is_opposite_direction(state.direction, direction):
            continue

        pos = next_head_position(state.head, direction)
        if state.mode is BoundaryMode.WRAP:
            pos = wrap_position(pos, state.grid_size)
        elif is_out_of_bounds(pos, state.grid_size):
            continue

        if check_self_collision(pos, state.snake):
            continue

        distance = abs(pos.x - food.x) + abs(pos.y - food.y)
        if best_distance is None or distance < best_distance:
            best, best_distance = direction, distance

    return best
