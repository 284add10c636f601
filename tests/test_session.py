"""Tests for the single-game driver."""

import dataclasses

import numpy as np
import pytest

from snake_engine.autopilot import get_ai_direction
from snake_engine.config import GameConfig
from snake_engine.exceptions import InvalidArgumentError
from snake_engine.grid import BoundaryMode
from snake_engine.leaderboard import Leaderboard
from snake_engine.session import GameSession
from snake_engine.snake import Direction


def _session(**kwargs):
    config = kwargs.pop("config", GameConfig(grid_size=10, tick_interval_ms=1))
    return GameSession(config, rng=np.random.default_rng(0), **kwargs)


class TestGameSession:
    def test_initial_state(self):
        session = _session()
        assert session.state.grid_size == 10
        assert session.state.mode is BoundaryMode.WALLS
        assert session.ticks == 0
        assert not session.game_over

    def test_tick_moves_snake(self):
        session = _session()
        head = session.state.head
        state = session.tick()
        assert state is session.state
        assert session.ticks == 1
        assert state.head == (head.x, head.y - 1)

    def test_queued_direction_applied_once(self):
        session = _session()
        session.queue_direction(Direction.LEFT)
        session.tick()
        assert session.state.direction is Direction.LEFT
        session.tick()
        assert session.state.direction is Direction.LEFT

    def test_latest_queued_direction_wins(self):
        session = _session()
        session.queue_direction(Direction.LEFT)
        session.queue_direction("right")
        session.tick()
        assert session.state.direction is Direction.RIGHT

    def test_queue_rejects_unknown(self):
        with pytest.raises(InvalidArgumentError):
            _session().queue_direction("diagonal")

    def test_previous_state_kept_by_observer(self):
        session = _session()
        before = session.state
        snapshot = before.to_dict()
        session.tick()
        assert before.to_dict() == snapshot
        assert session.state is not before

    def test_run_until_wall(self):
        session = _session()
        state = session.run(max_ticks=50)
        # Heading straight up from the centre of a 10 grid hits the wall.
        assert state.is_game_over
        assert session.ticks <= 6

    def test_run_respects_max_ticks(self):
        session = _session(config=GameConfig(mode="wrap", grid_size=10))
        session.run(max_ticks=3)
        assert session.ticks == 3

    def test_run_with_policy(self):
        session = _session()
        session.run(max_ticks=5, policy=get_ai_direction)
        assert not session.game_over

    def test_ticks_stop_after_game_over(self):
        session = _session()
        session.run(max_ticks=50)
        ticks = session.ticks
        final = session.state
        assert session.tick() is final
        assert session.ticks == ticks

    def test_reset(self):
        session = _session()
        session.run(max_ticks=50)
        state = session.reset()
        assert not state.is_game_over
        assert session.ticks == 0
        assert session.death_cause is None
        assert len(state.snake) == 3


class TestDeathCause:
    def test_wall_cause(self):
        session = _session()
        session.run(max_ticks=50)
        assert session.death_cause == "wall"

    def test_no_cause_while_alive(self):
        session = _session()
        session.tick()
        assert session.death_cause is None

    def test_self_cause_uses_queued_direction(self):
        session = _session()
        session.state = dataclasses.replace(
            session.state,
            snake=[(5, 5), (5, 6), (6, 6), (6, 5)],
            direction=Direction.RIGHT,
        )
        session.queue_direction(Direction.DOWN)
        session.tick()
        assert session.game_over
        assert session.death_cause == "self"


class TestScoreReporting:
    def test_reports_once_on_game_over(self):
        submitted = []
        session = _session(
            username="alice",
            score_sink=lambda *args: submitted.append(args),
        )
        session.run(max_ticks=50)
        session.tick()
        assert submitted == [("alice", session.state.score, BoundaryMode.WALLS)]

    def test_reports_to_leaderboard(self):
        board = Leaderboard()
        session = _session(username="bob", score_sink=board.submit_score)
        session.run(max_ticks=50)
        assert [e.username for e in board.top()] == ["bob"]

    def test_anonymous_game_not_reported(self):
        board = Leaderboard()
        session = _session(score_sink=board.submit_score)
        session.run(max_ticks=50)
        assert len(board) == 0

    def test_reset_allows_new_report(self):
        board = Leaderboard()
        session = _session(username="carol", score_sink=board.submit_score)
        session.run(max_ticks=50)
        session.reset()
        session.run(max_ticks=50)
        assert len(board) == 2


class TestAsyncPlay:
    @pytest.mark.asyncio
    async def test_play_until_game_over(self):
        session = _session()
        state = await session.play()
        assert state.is_game_over
        assert session.ticks > 0
