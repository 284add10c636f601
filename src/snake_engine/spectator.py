"""In-memory registry of self-playing games and their tick loop."""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass

import numpy as np

from snake_engine.autopilot import get_ai_direction
from snake_engine.config import GameConfig
from snake_engine.engine import (
    GameState,
    create_initial_game_state,
    update_game_state,
)
from snake_engine.exceptions import UnknownSessionError
from snake_engine.grid import BoundaryMode

logger = logging.getLogger(__name__)


@dataclass
class SpectatorSession:
    """A watched game driven by the autopilot."""

    session_id: str
    username: str
    mode: BoundaryMode
    state: GameState
    restarts: int = 0
    ticks: int = 0

    @property
    def score(self) -> int:
        return self.state.score

    def to_dict(self) -> dict:
        return {
            "id": self.session_id,
            "username": self.username,
            "mode": self.mode.value,
            "restarts": self.restarts,
            "ticks": self.ticks,
            "state": self.state.to_dict(),
        }


class SpectatorHub:
    """Central registry for spectator sessions.

    Every call to :meth:`tick_all` advances each session by one
    autopilot move; finished games are replaced by a fresh one.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng(
            self.config.seed,
        )
        self._sessions: dict[str, SpectatorSession] = {}
        self._running = False

    def add_session(
        self, username: str, mode: BoundaryMode | str,
    ) -> SpectatorSession:
        """Register a new autopilot game and return it."""
        mode = BoundaryMode.parse(mode)
        session = SpectatorSession(
            session_id=uuid.uuid4().hex[:12],
            username=username,
            mode=mode,
            state=self._new_state(mode),
        )
        self._sessions[session.session_id] = session
        logger.info(
            "Spectator session %s added for '%s' (%s).",
            session.session_id, username, mode.value,
        )
        return session

    def get_session(self, session_id: str) -> SpectatorSession:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise UnknownSessionError(session_id) from None

    def list_sessions(self) -> list[SpectatorSession]:
        return list(self._sessions.values())

    def remove_session(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise UnknownSessionError(session_id)

    def tick_all(self) -> None:
        """Advance every session by one tick."""
        for session in self._sessions.values():
            if session.state.is_game_over:
                session.state = self._new_state(session.mode)
                session.restarts += 1
                logger.debug("Session %s restarted.", session.session_id)
                continue
            direction = get_ai_direction(session.state)
            session.state = update_game_state(session.state, direction, self.rng)
            session.ticks += 1

    async def run(self, ticks: int | None = None) -> None:
        """Tick all sessions on a timer until stopped or *ticks* run out."""
        interval = self.config.spectator_tick_interval_ms / 1000.0
        self._running = True
        done = 0
        try:
            while self._running and (ticks is None or done < ticks):
                await asyncio.sleep(interval)
                self.tick_all()
                done += 1
        except asyncio.CancelledError:
            logger.info("Spectator loop cancelled after %d ticks.", done)
            raise
        finally:
            self._running = False

    def stop(self) -> None:
        """Ask a running :meth:`run` loop to exit after its current tick."""
        self._running = False

    def _new_state(self, mode: BoundaryMode) -> GameState:
        return create_initial_game_state(
            mode, self.config.spectator_grid_size, self.rng,
        )
