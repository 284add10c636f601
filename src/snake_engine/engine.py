"""Step-based game engine built from grid, snake, and food helpers.

The engine is a set of pure functions over an immutable :class:`GameState`.
A driver holds the current state and replaces it with the value returned by
:func:`update_game_state` on every tick; earlier states stay valid.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass

import numpy as np

from snake_engine.exceptions import InvalidArgumentError
from snake_engine.food import generate_food
from snake_engine.grid import (
    BoundaryMode,
    Position,
    is_out_of_bounds,
    wrap_position,
)
from snake_engine.snake import (
    Direction,
    check_self_collision,
    is_opposite_direction,
    next_head_position,
)

logger = logging.getLogger(__name__)

INITIAL_SNAKE_LENGTH = 3
DEFAULT_GRID_SIZE = 20
FOOD_REWARD = 10


@dataclass(frozen=True)
class GameState:
    """A single snapshot of a game.

    ``snake`` is ordered head first and is stored as a tuple of
    :class:`Position`.
    """

    snake: tuple[Position, ...]
    direction: Direction
    food: Position
    score: int = 0
    is_game_over: bool = False
    mode: BoundaryMode = BoundaryMode.WALLS
    grid_size: int = DEFAULT_GRID_SIZE

    def __post_init__(self) -> None:
        if not self.snake:
            raise InvalidArgumentError("Snake must have at least one segment.")
        if self.grid_size < 1:
            raise InvalidArgumentError("grid_size must be at least 1.")
        if self.score < 0:
            raise InvalidArgumentError("score must be non-negative.")
        object.__setattr__(
            self, "snake", tuple(Position(*seg) for seg in self.snake),
        )
        object.__setattr__(self, "food", Position(*self.food))
        object.__setattr__(self, "direction", Direction.parse(self.direction))
        object.__setattr__(self, "mode", BoundaryMode.parse(self.mode))

    @property
    def head(self) -> Position:
        """Return the head coordinate."""
        return self.snake[0]

    def to_dict(self) -> dict:
        """Serialize the state to a JSON-friendly dictionary."""
        return {
            "snake": [list(seg) for seg in self.snake],
            "direction": self.direction.name,
            "food": list(self.food),
            "score": self.score,
            "is_game_over": self.is_game_over,
            "mode": self.mode.value,
            "grid_size": self.grid_size,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GameState:
        """Rebuild a state from :meth:`to_dict` output."""
        return cls(
            snake=tuple(Position(*seg) for seg in data["snake"]),
            direction=Direction.parse(data["direction"]),
            food=Position(*data["food"]),
            score=data.get("score", 0),
            is_game_over=data.get("is_game_over", False),
            mode=BoundaryMode.parse(data.get("mode", BoundaryMode.WALLS)),
            grid_size=data.get("grid_size", DEFAULT_GRID_SIZE),
        )


def _initial_snake(grid_size: int) -> list[Position]:
    center = grid_size // 2
    return [Position(center, center + i) for i in range(INITIAL_SNAKE_LENGTH)]


def create_initial_game_state(
    mode: BoundaryMode | str,
    grid_size: int = DEFAULT_GRID_SIZE,
    rng: np.random.Generator | None = None,
) -> GameState:
    """Create a fresh game with the snake centred and heading up."""
    mode = BoundaryMode.parse(mode)
    if grid_size // 2 + INITIAL_SNAKE_LENGTH > grid_size:
        raise InvalidArgumentError(
            f"grid_size {grid_size} is too small for a snake of length "
            f"{INITIAL_SNAKE_LENGTH}."
        )

    snake = _initial_snake(grid_size)
    return GameState(
        snake=tuple(snake),
        direction=Direction.UP,
        food=generate_food(snake, grid_size, rng),
        score=0,
        is_game_over=False,
        mode=mode,
        grid_size=grid_size,
    )


def resolve_direction(
    current: Direction, requested: Direction | str | None,
) -> Direction:
    """Return the heading for the next tick, ignoring 180° reversals."""
    if requested is None:
        return current
    requested = Direction.parse(requested)
    if is_opposite_direction(current, requested):
        return current
    return requested


def _step_head(state: GameState, heading: Direction) -> Position:
    new_head = next_head_position(state.head, heading)
    if state.mode is BoundaryMode.WRAP:
        new_head = wrap_position(new_head, state.grid_size)
    return new_head


def collision_cause(
    state: GameState, direction: Direction | str | None = None,
) -> str | None:
    """Return ``"wall"`` or ``"self"`` if the next tick would end the game.

    Self collisions are checked against the full pre-move body, tail
    included. Returns ``None`` when the move is safe.
    """
    heading = resolve_direction(state.direction, direction)
    new_head = _step_head(state, heading)

    if state.mode is BoundaryMode.WALLS and is_out_of_bounds(
        new_head, state.grid_size,
    ):
        return "wall"
    if check_self_collision(new_head, state.snake):
        return "self"
    return None


def update_game_state(
    state: GameState,
    direction: Direction | str | None = None,
    rng: np.random.Generator | None = None,
) -> GameState:
    """Advance the game by one tick.

    A terminal state is returned unchanged. Wall and self collisions end
    the game by flipping ``is_game_over``; every other field keeps its
    pre-tick value in that case.
    """
    if state.is_game_over:
        return state

    heading = resolve_direction(state.direction, direction)
    cause = collision_cause(state, heading)
    if cause is not None:
        return _end_game(state, cause)

    new_head = _step_head(state, heading)

    # --- move ---
    snake: list[Position] = [new_head, *state.snake]
    if new_head == state.food:
        return dataclasses.replace(
            state,
            snake=tuple(snake),
            direction=heading,
            food=generate_food(snake, state.grid_size, rng),
            score=state.score + FOOD_REWARD,
        )

    snake.pop()
    return dataclasses.replace(state, snake=tuple(snake), direction=heading)


def _end_game(state: GameState, cause: str) -> GameState:
    """Return *state* marked as over."""
    logger.info(
        "Snake of length %d died (%s collision) with score %d.",
        len(state.snake), cause, state.score,
    )
    return dataclasses.replace(state, is_game_over=True)
