"""Move outcomes reported by the grid engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from tilegrid.models.board import Position


class MoveError(StrEnum):
    """Why a move request was rejected. None of these change the board."""

    OUT_OF_BOUNDS = "out_of_bounds"
    EMPTY_CELL_SELECTED = "empty_cell_selected"
    NOT_ADJACENT = "not_adjacent"


@dataclass(frozen=True)
class MoveResult:
    """Outcome of a single move request.

    An accepted move carries the new empty position and the id of the tile
    that slid. A rejected one carries only ``error``. Truthiness follows
    ``ok`` so callers can write ``if engine.apply_move(pos): ...``.
    """

    empty_pos: Position | None = None
    moved_tile: int | None = None
    error: MoveError | None = None

    @classmethod
    def accepted(cls, empty_pos: Position, moved_tile: int) -> MoveResult:
        return cls(empty_pos=empty_pos, moved_tile=moved_tile)

    @classmethod
    def rejected(cls, error: MoveError) -> MoveResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok
