"""Tests for snakes_ladders.board."""

import pytest

from snakes_ladders.board import (
    LADDERS,
    SNAKES,
    STANDARD_BOARD,
    BoardConfig,
    ConfigurationError,
)


# ── constants ────────────────────────────────────────────────────────

def test_standard_board_has_9_ladders_and_10_snakes():
    assert len(LADDERS) == 9
    assert len(SNAKES) == 10


def test_snakes_go_down_and_ladders_go_up():
    assert all(tail < head for head, tail in SNAKES.items())
    assert all(top > bottom for bottom, top in LADDERS.items())


def test_standard_board_dimensions():
    assert STANDARD_BOARD.size == 100
    assert STANDARD_BOARD.width == 10


# ── lookups ──────────────────────────────────────────────────────────

def test_snake_at():
    assert STANDARD_BOARD.snake_at(16) == 6
    assert STANDARD_BOARD.snake_at(98) == 78
    assert STANDARD_BOARD.snake_at(50) is None
    assert STANDARD_BOARD.snake_at(1) is None   # ladder, not snake


def test_ladder_at():
    assert STANDARD_BOARD.ladder_at(1) == 38
    assert STANDARD_BOARD.ladder_at(80) == 100
    assert STANDARD_BOARD.ladder_at(50) is None
    assert STANDARD_BOARD.ladder_at(16) is None  # snake, not ladder


def test_board_cannot_be_edited_in_place():
    with pytest.raises(TypeError):
        STANDARD_BOARD.snakes[50] = 2


# ── layout ───────────────────────────────────────────────────────────

def test_square_at_is_serpentine():
    assert STANDARD_BOARD.square_at(0, 0) == 1
    assert STANDARD_BOARD.square_at(0, 9) == 10
    assert STANDARD_BOARD.square_at(1, 0) == 20    # odd row runs right-to-left
    assert STANDARD_BOARD.square_at(1, 9) == 11
    assert STANDARD_BOARD.square_at(9, 0) == 100


def test_rows_top_first():
    rows = STANDARD_BOARD.rows()
    assert len(rows) == 10
    assert rows[0] == list(range(100, 90, -1))
    assert rows[-1] == list(range(1, 11))
    assert sorted(sq for row in rows for sq in row) == list(range(1, 101))


# ── validation ───────────────────────────────────────────────────────

def test_overlapping_snake_and_ladder_rejected():
    with pytest.raises(ConfigurationError, match="both a snake head and a ladder bottom"):
        BoardConfig(snakes={40: 10}, ladders={40: 60})


def test_off_board_square_rejected():
    with pytest.raises(ConfigurationError, match="off the board"):
        BoardConfig(snakes={}, ladders={95: 105})


def test_snake_pointing_up_rejected():
    with pytest.raises(ConfigurationError, match="wrong way"):
        BoardConfig(snakes={10: 20}, ladders={})


def test_size_must_fill_whole_rows():
    with pytest.raises(ConfigurationError):
        BoardConfig(size=95, width=10, snakes={}, ladders={})


def test_configuration_error_is_value_error():
    assert issubclass(ConfigurationError, ValueError)
