"""Food placement logic."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from snake_engine.grid import Position

logger = logging.getLogger(__name__)

MAX_PLACEMENT_ATTEMPTS = 100


def generate_food(
    snake: Sequence[Position],
    grid_size: int,
    rng: np.random.Generator | None = None,
) -> Position:
    """Pick a random cell for the next piece of food.

    Samples uniformly until a cell off the snake is found. After
    :data:`MAX_PLACEMENT_ATTEMPTS` tries the last candidate is returned
    even if the snake covers it, so on a nearly full grid food may land
    on the body.
    """
    rng = rng if rng is not None else np.random.default_rng()
    occupied = set(snake)

    candidate = Position(0, 0)
    for _ in range(MAX_PLACEMENT_ATTEMPTS):
        x, y = rng.integers(0, grid_size, size=2).tolist()
        candidate = Position(x, y)
        if candidate not in occupied:
            logger.debug("Food placed at %s.", candidate)
            return candidate

    logger.warning(
        "No free cell found after %d attempts; placing food at %s.",
        MAX_PLACEMENT_ATTEMPTS, candidate,
    )
    return candidate
