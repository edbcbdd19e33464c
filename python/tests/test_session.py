"""GameSession — move counting, clock, time limit and win handling."""

from __future__ import annotations

import random

import pytest

from helpers import FakeClock, assert_invariants
from tilegrid.config import GameSettings
from tilegrid.engine.gamesession import GameSession
from tilegrid.engine.gridengine import GridEngine
from tilegrid.models.board import Direction, Position
from tilegrid.models.move import MoveError


def _session(clock: FakeClock, **settings) -> GameSession:
    engine = GridEngine(2, rng=random.Random(7))
    return GameSession(engine, GameSettings(**settings), clock=clock)


def _solving_move(session: GameSession) -> Position:
    """After a one-slide shuffle, the tile in the corner goes back."""
    size = session.engine.size
    return Position(size - 1, size - 1)


# -- start --------------------------------------------------------------------


@pytest.mark.parametrize("shuffle_moves", [1, 2, 12, 24, 100])
def test_start_deals_unsolved_board(clock: FakeClock, shuffle_moves: int) -> None:
    session = _session(clock, grid_size=2, shuffle_moves=shuffle_moves)
    session.start()

    assert not session.engine.is_solved()
    assert session.moves == 0
    assert not session.is_won
    assert_invariants(session.board)


def test_start_with_zero_shuffle_is_solved_board(clock: FakeClock) -> None:
    session = _session(clock, grid_size=3, shuffle_moves=0)
    session.start()

    assert session.engine.size == 3
    assert session.engine.is_solved()


def test_start_resets_moves_and_clock(clock: FakeClock) -> None:
    session = _session(clock, grid_size=3, shuffle_moves=50)
    session.start()
    session.move_tile(session.engine.movable_positions()[0])
    clock.advance(30)

    session.start()

    assert session.moves == 0
    assert session.elapsed_time == 0


# -- moves --------------------------------------------------------------------


def test_only_accepted_moves_are_counted(clock: FakeClock) -> None:
    session = _session(clock, grid_size=3, shuffle_moves=50)
    session.start()

    rejected = session.move_tile(session.engine.empty_pos)
    assert rejected is not None and rejected.error is MoveError.EMPTY_CELL_SELECTED
    assert session.moves == 0

    accepted = session.move_tile(session.engine.movable_positions()[0])
    assert accepted is not None and accepted.ok
    assert session.moves == 1


def test_move_by_direction(clock: FakeClock) -> None:
    session = _session(clock, grid_size=3, shuffle_moves=0)
    session.start()

    result = session.move(Direction.DOWN)

    assert result is not None and result.moved_tile == 6
    assert session.moves == 1


def test_win_stops_clock_and_blocks_moves(clock: FakeClock) -> None:
    session = _session(clock, grid_size=3, shuffle_moves=1)
    session.start()
    clock.advance(12)

    result = session.move_tile(_solving_move(session))

    assert result is not None and result.ok
    assert session.is_won
    assert session.moves == 1
    assert session.elapsed_time == 12

    clock.advance(50)
    assert session.elapsed_time == 12
    assert session.move_tile(session.engine.movable_positions()[0]) is None
    assert session.engine.is_solved()


# -- clock --------------------------------------------------------------------


def test_pause_and_resume(clock: FakeClock) -> None:
    session = _session(clock, grid_size=2, shuffle_moves=5)
    session.start()
    clock.advance(4)
    session.pause()
    clock.advance(100)

    assert session.elapsed_time == 4
    assert session.move_tile(session.engine.movable_positions()[0]) is None

    session.resume()
    clock.advance(1)
    assert session.elapsed_time == 5


def test_untimed_has_no_remaining_time(clock: FakeClock) -> None:
    session = _session(clock, grid_size=2, shuffle_moves=5)
    session.start()
    clock.advance(10_000)

    assert session.remaining_time is None
    assert not session.is_timed_out


def test_time_limit_expiry_blocks_moves(clock: FakeClock) -> None:
    session = _session(clock, grid_size=3, shuffle_moves=30, time_limit=10)
    session.start()
    clock.advance(4)
    assert session.remaining_time == 6

    clock.advance(7)
    before = session.board

    assert session.is_timed_out
    assert session.remaining_time == 0
    assert session.move_tile(session.engine.movable_positions()[0]) is None
    assert session.board == before
    assert session.moves == 0

    session.resume()
    assert session.is_timed_out
    assert session.move_tile(session.engine.movable_positions()[0]) is None
