"""Test helpers shared across modules."""

from __future__ import annotations

import random

from tilegrid.models.board import EMPTY, Board


class FakeClock:
    """Manually advanced stand-in for ``time.monotonic``."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


class RecordingRandom(random.Random):
    """Seeded RNG that remembers every ``choice`` it makes."""

    def __init__(self, seed: int) -> None:
        super().__init__(seed)
        self.picks: list = []

    def choice(self, seq):
        pick = super().choice(seq)
        self.picks.append(pick)
        return pick


def assert_invariants(board: Board) -> None:
    """Exactly one empty cell, tiles 1..N²-1 once each, empty_pos in sync."""
    flat = board.flat()
    assert flat.count(EMPTY) == 1
    assert sorted(v for v in flat if v != EMPTY) == list(range(1, board.size**2))
    ex, ey = board.empty_pos
    assert board.tiles[ey][ex] == EMPTY


def is_solvable(board: Board) -> bool:
    """Permutation-parity test for reachability of the goal state.

    A vertical slide moves a tile past N-1 others. For odd N that keeps the
    inversion parity, for even N it flips it together with the empty row.
    """
    tiles = [v for v in board.flat() if v != EMPTY]
    inversions = sum(
        1
        for i in range(len(tiles))
        for j in range(i + 1, len(tiles))
        if tiles[i] > tiles[j]
    )
    if board.size % 2 == 1:
        return inversions % 2 == 0
    return (inversions + board.empty_pos.y) % 2 == (board.size - 1) % 2
