"""Autopilot benchmarking utilities."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from snake_engine.autopilot import get_ai_direction
from snake_engine.engine import (
    DEFAULT_GRID_SIZE,
    create_initial_game_state,
    update_game_state,
)
from snake_engine.exceptions import InvalidArgumentError
from snake_engine.grid import BoundaryMode

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from an autopilot benchmark run."""

    mode: str
    total_games: int
    total_steps: int
    mean_score: float
    max_score: int
    wall_time_seconds: float
    games_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_games} games ({self.mode}), "
            f"{self.total_steps} steps in {self.wall_time_seconds:.2f}s | "
            f"mean score {self.mean_score:.1f}, max score {self.max_score} | "
            f"{self.games_per_second:.1f} games/s"
        )


def benchmark_autopilot(
    *,
    num_games: int = 100,
    mode: BoundaryMode | str = BoundaryMode.WALLS,
    grid_size: int = DEFAULT_GRID_SIZE,
    max_steps: int = 1_000,
    seed: int | None = 42,
) -> BenchmarkResult:
    """Play *num_games* autopilot games and report score statistics.

    A game stops at game over or after *max_steps* ticks.
    """
    if num_games < 1:
        raise InvalidArgumentError("num_games must be at least 1.")
    if max_steps < 1:
        raise InvalidArgumentError("max_steps must be at least 1.")
    mode = BoundaryMode.parse(mode)
    rng = np.random.default_rng(seed)

    scores = np.zeros(num_games, dtype=np.int64)
    total_steps = 0
    start = time.perf_counter()

    for game in range(num_games):
        state = create_initial_game_state(mode, grid_size, rng)
        for _ in range(max_steps):
            state = update_game_state(state, get_ai_direction(state), rng)
            total_steps += 1
            if state.is_game_over:
                break
        scores[game] = state.score

    elapsed = time.perf_counter() - start
    result = BenchmarkResult(
        mode=mode.value,
        total_games=num_games,
        total_steps=total_steps,
        mean_score=float(scores.mean()),
        max_score=int(scores.max()),
        wall_time_seconds=elapsed,
        games_per_second=num_games / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
