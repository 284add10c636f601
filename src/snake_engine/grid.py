"""Grid coordinates and boundary handling."""

from __future__ import annotations

import enum
from typing import NamedTuple

from snake_engine.exceptions import InvalidArgumentError


class Position(NamedTuple):
    """A grid cell as (x, y); y grows downward."""

    x: int
    y: int


class BoundaryMode(enum.Enum):
    """Defines behavior when a snake crosses the grid edge."""

    WALLS = "walls"
    WRAP = "wrap"

    @classmethod
    def parse(cls, value: BoundaryMode | str) -> BoundaryMode:
        """Coerce a mode or its name into a :class:`BoundaryMode`.

        ``"passthrough"`` is accepted as an alias for :attr:`WRAP`.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            if name == "passthrough":
                return cls.WRAP
            try:
                return cls(name)
            except ValueError:
                pass
        raise InvalidArgumentError(f"Unknown boundary mode: {value!r}.")


def wrap_position(pos: Position, grid_size: int) -> Position:
    """Wrap a position around the grid edges.

    Handles one step of overflow in either direction.
    """
    return Position(
        (pos[0] + grid_size) % grid_size,
        (pos[1] + grid_size) % grid_size,
    )


def is_out_of_bounds(pos: Position, grid_size: int) -> bool:
    """Check whether a position lies outside the ``grid_size`` square."""
    x, y = pos
    return x < 0 or x >= grid_size or y < 0 or y >= grid_size
