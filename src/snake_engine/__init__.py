"""Snake engine — pure, tick-based game state transitions."""

from snake_engine.autopilot import get_ai_direction
from snake_engine.config import GameConfig
from snake_engine.engine import (
    DEFAULT_GRID_SIZE,
    FOOD_REWARD,
    INITIAL_SNAKE_LENGTH,
    GameState,
    collision_cause,
    create_initial_game_state,
    update_game_state,
)
from snake_engine.exceptions import InvalidArgumentError, UnknownSessionError
from snake_engine.food import generate_food
from snake_engine.grid import BoundaryMode, Position, is_out_of_bounds, wrap_position
from snake_engine.leaderboard import Leaderboard, LeaderboardEntry
from snake_engine.session import GameSession
from snake_engine.snake import (
    Direction,
    check_self_collision,
    is_opposite_direction,
    next_head_position,
)
from snake_engine.spectator import SpectatorHub, SpectatorSession

__all__ = [
    "DEFAULT_GRID_SIZE",
    "FOOD_REWARD",
    "INITIAL_SNAKE_LENGTH",
    "BoundaryMode",
    "Direction",
    "GameConfig",
    "GameSession",
    "GameState",
    "InvalidArgumentError",
    "Leaderboard",
    "LeaderboardEntry",
    "Position",
    "SpectatorHub",
    "SpectatorSession",
    "UnknownSessionError",
    "check_self_collision",
    "collision_cause",
    "create_initial_game_state",
    "generate_food",
    "get_ai_direction",
    "is_opposite_direction",
    "is_out_of_bounds",
    "next_head_position",
    "update_game_state",
    "wrap_position",
]
