"""Directions and snake movement helpers."""

from __future__ import annotations

import enum
from collections.abc import Iterable

from snake_engine.exceptions import InvalidArgumentError
from snake_engine.grid import Position


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @classmethod
    def parse(cls, value: Direction | str) -> Direction:
        """Coerce a direction or its case-insensitive name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                pass
        raise InvalidArgumentError(f"Unknown direction: {value!r}.")


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


def is_opposite_direction(current: Direction, new: Direction) -> bool:
    """Return True if *new* reverses *current*."""
    return _OPPOSITES[current] is new


def next_head_position(pos: Position, direction: Direction) -> Position:
    """Shift *pos* one cell along *direction* without bounds checking."""
    dx, dy = direction.value
    return Position(pos[0] + dx, pos[1] + dy)


def check_self_collision(head: Position, body: Iterable[Position]) -> bool:
    """Check whether *head* overlaps any segment of *body*."""
    return any(seg == head for seg in body)
