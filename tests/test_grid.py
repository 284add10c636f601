"""Tests for the grid module."""

import pytest

from snake_engine.exceptions import InvalidArgumentError
from snake_engine.grid import (
    BoundaryMode,
    Position,
    is_out_of_bounds,
    wrap_position,
)


class TestWrapPosition:
    def test_wraps_negative_x(self):
        assert wrap_position(Position(-1, 5), 20) == Position(19, 5)

    def test_wraps_x_beyond_grid(self):
        assert wrap_position(Position(20, 5), 20) == Position(0, 5)

    def test_wraps_negative_y(self):
        assert wrap_position(Position(5, -1), 20) == Position(5, 19)

    def test_wraps_y_beyond_grid(self):
        assert wrap_position(Position(5, 20), 20) == Position(5, 0)

    def test_in_bounds_unchanged(self):
        assert wrap_position(Position(3, 7), 20) == Position(3, 7)

    def test_accepts_plain_tuple(self):
        assert wrap_position((-1, -1), 10) == (9, 9)


class TestIsOutOfBounds:
    @pytest.mark.parametrize(
        "pos", [(-1, 5), (5, -1), (20, 5), (5, 20)],
    )
    def test_outside(self, pos):
        assert is_out_of_bounds(Position(*pos), 20)

    def test_inside(self):
        assert not is_out_of_bounds(Position(10, 10), 20)

    def test_corners_inside(self):
        assert not is_out_of_bounds(Position(0, 0), 20)
        assert not is_out_of_bounds(Position(19, 19), 20)


class TestBoundaryMode:
    def test_parse_names(self):
        assert BoundaryMode.parse("walls") is BoundaryMode.WALLS
        assert BoundaryMode.parse("WRAP") is BoundaryMode.WRAP

    def test_parse_passthrough_alias(self):
        assert BoundaryMode.parse("passthrough") is BoundaryMode.WRAP

    def test_parse_enum_passes_through(self):
        assert BoundaryMode.parse(BoundaryMode.WALLS) is BoundaryMode.WALLS

    def test_parse_rejects_unknown(self):
        with pytest.raises(InvalidArgumentError, match="Unknown boundary mode"):
            BoundaryMode.parse("lava")

    def test_parse_rejects_non_string(self):
        with pytest.raises(InvalidArgumentError):
            BoundaryMode.parse(3)
