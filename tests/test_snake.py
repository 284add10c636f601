"""Tests for the snake movement helpers."""

import pytest

from snake_engine.exceptions import InvalidArgumentError
from snake_engine.grid import Position
from snake_engine.snake import (
    Direction,
    check_self_collision,
    is_opposite_direction,
    next_head_position,
)


class TestNextHeadPosition:
    @pytest.mark.parametrize(
        ("direction", "expected"),
        [
            (Direction.UP, (5, 4)),
            (Direction.DOWN, (5, 6)),
            (Direction.LEFT, (4, 5)),
            (Direction.RIGHT, (6, 5)),
        ],
    )
    def test_moves(self, direction, expected):
        assert next_head_position(Position(5, 5), direction) == expected

    def test_no_bounds_checking(self):
        assert next_head_position(Position(0, 0), Direction.UP) == (0, -1)

    def test_returns_position(self):
        pos = next_head_position(Position(1, 1), Direction.RIGHT)
        assert isinstance(pos, Position)
        assert pos.x == 2


class TestOppositeDirection:
    def test_up_down(self):
        assert is_opposite_direction(Direction.UP, Direction.DOWN)
        assert is_opposite_direction(Direction.DOWN, Direction.UP)

    def test_left_right(self):
        assert is_opposite_direction(Direction.LEFT, Direction.RIGHT)
        assert is_opposite_direction(Direction.RIGHT, Direction.LEFT)

    def test_not_opposite(self):
        assert not is_opposite_direction(Direction.UP, Direction.LEFT)
        assert not is_opposite_direction(Direction.UP, Direction.RIGHT)
        assert not is_opposite_direction(Direction.UP, Direction.UP)


class TestSelfCollision:
    def test_detects_collision(self):
        body = [Position(5, 6), Position(5, 5), Position(5, 4)]
        assert check_self_collision(Position(5, 5), body)

    def test_no_collision(self):
        body = [Position(5, 6), Position(5, 7), Position(5, 8)]
        assert not check_self_collision(Position(5, 5), body)

    def test_empty_body(self):
        assert not check_self_collision(Position(0, 0), [])


class TestDirectionParse:
    def test_case_insensitive(self):
        assert Direction.parse("up") is Direction.UP
        assert Direction.parse(" Left ") is Direction.LEFT

    def test_enum_passes_through(self):
        assert Direction.parse(Direction.DOWN) is Direction.DOWN

    def test_rejects_unknown(self):
        with pytest.raises(InvalidArgumentError, match="Unknown direction"):
            Direction.parse("NORTH")
