"""Board model for the sliding puzzle grid."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import NamedTuple

EMPTY = 0


class Position(NamedTuple):
    """A cell coordinate. ``x`` is the column, ``y`` the row."""

    x: int
    y: int


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored row-major as ``tiles[y][x]``. ``EMPTY`` (0) marks the
    empty cell, whose position is cached in ``empty_pos``.
    """

    size: int
    tiles: list[list[int]]
    empty_pos: Position

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (tiles in order, empty bottom-right)."""
        if size < 2:
            raise ValueError(f"Grid size must be at least 2, got {size}.")
        tiles: list[list[int]] = []
        num = 1
        for y in range(size):
            row: list[int] = []
            for x in range(size):
                if x == size - 1 and y == size - 1:
                    row.append(EMPTY)
                else:
                    row.append(num)
                    num += 1
            tiles.append(row)
        return cls(size=size, tiles=tiles, empty_pos=Position(size - 1, size - 1))

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if size < 2:
            raise ValueError(f"Grid size must be at least 2, got {size}.")
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be 1..{size * size - 1} once each plus a "
                f"single {EMPTY} for the empty cell."
            )
        tiles: list[list[int]] = []
        empty_pos = Position(0, 0)
        for y in range(size):
            row = list(flat[y * size : (y + 1) * size])
            for x, v in enumerate(row):
                if v == EMPTY:
                    empty_pos = Position(x, y)
            tiles.append(row)
        return cls(size=size, tiles=tiles, empty_pos=empty_pos)

    # -- queries --------------------------------------------------------------

    def in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self.size and 0 <= pos.y < self.size

    def get_tile(self, pos: Position) -> int:
        return self.tiles[pos.y][pos.x]

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = self.size - 1
        if self.empty_pos != (last, last):
            return False
        expected = 1
        for y in range(self.size):
            for x in range(self.size):
                if x == last and y == last:
                    return True
                if self.tiles[y][x] != expected:
                    return False
                expected += 1
        return True

    def is_tile_correct(self, pos: Position) -> bool:
        """Check if a specific cell holds its goal value."""
        val = self.get_tile(pos)
        if val == EMPTY:
            return pos.x == self.size - 1 and pos.y == self.size - 1
        return pos.x == (val - 1) % self.size and pos.y == (val - 1) // self.size

    def flat(self) -> list[int]:
        return [v for row in self.tiles for v in row]

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=[row[:] for row in self.tiles],
            empty_pos=self.empty_pos,
        )
