"""Driver that owns a single game's state across ticks."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

import numpy as np

from snake_engine.config import GameConfig
from snake_engine.engine import (
    GameState,
    collision_cause,
    create_initial_game_state,
    update_game_state,
)
from snake_engine.grid import BoundaryMode
from snake_engine.snake import Direction

logger = logging.getLogger(__name__)

ScoreSink = Callable[[str, int, BoundaryMode], object]
Policy = Callable[[GameState], Direction]


class GameSession:
    """Holds the current :class:`GameState` and advances it on demand.

    At most one requested direction is buffered between ticks; a newer
    request replaces an older one. When a game ends the final score is
    reported to ``score_sink`` exactly once.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        *,
        username: str | None = None,
        score_sink: ScoreSink | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.username = username
        self.score_sink = score_sink
        self.rng = rng if rng is not None else np.random.default_rng(
            self.config.seed,
        )
        self.state = create_initial_game_state(
            self.config.boundary_mode, self.config.grid_size, self.rng,
        )
        self.ticks = 0
        self.death_cause: str | None = None
        self._pending_direction: Direction | None = None
        self._reported = False

    @property
    def game_over(self) -> bool:
        return self.state.is_game_over

    def queue_direction(self, direction: Direction | str) -> None:
        """Buffer a direction for the next tick."""
        self._pending_direction = Direction.parse(direction)

    def tick(self) -> GameState:
        """Advance by one tick and return the new state."""
        if self.state.is_game_over:
            return self.state

        previous = self.state
        self.state = update_game_state(
            previous, self._pending_direction, self.rng,
        )
        self.ticks += 1

        if self.state.is_game_over:
            self.death_cause = collision_cause(previous, self._pending_direction)
            self._report_score()
        self._pending_direction = None
        return self.state

    def reset(self) -> GameState:
        """Start a new game in the same mode."""
        self.state = create_initial_game_state(
            self.config.boundary_mode, self.config.grid_size, self.rng,
        )
        self.ticks = 0
        self.death_cause = None
        self._pending_direction = None
        self._reported = False
        return self.state

    def run(self, max_ticks: int, policy: Policy | None = None) -> GameState:
        """Tick until the game ends or *max_ticks* ticks have run."""
        for _ in range(max_ticks):
            if self.state.is_game_over:
                break
            if policy is not None:
                self.queue_direction(policy(self.state))
            self.tick()
        return self.state

    async def play(self, policy: Policy | None = None) -> GameState:
        """Tick on a timer of ``config.tick_interval_ms`` until game over."""
        interval = self.config.tick_interval_ms / 1000.0
        while not self.state.is_game_over:
            await asyncio.sleep(interval)
            if policy is not None:
                self.queue_direction(policy(self.state))
            self.tick()
        return self.state

    def _report_score(self) -> None:
        """Send the final score to the sink once per game."""
        if self._reported:
            return
        self._reported = True
        logger.info(
            "Game over after %d ticks with score %d.",
            self.ticks, self.state.score,
        )
        if self.score_sink is None or not self.username:
            return
        self.score_sink(self.username, self.state.score, self.state.mode)
