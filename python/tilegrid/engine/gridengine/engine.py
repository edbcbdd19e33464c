"""Authoritative grid state: move legality, shuffling and the win check."""

from __future__ import annotations

import logging
import random

from tilegrid.models.board import EMPTY, Board, Direction, Position
from tilegrid.models.move import MoveError, MoveResult

logger = logging.getLogger(__name__)

# Above this the puzzle is tedious to play, but still valid.
RECOMMENDED_MAX_SIZE = 6

# Offset from the empty cell to the tile that slides in each direction.
# UP    → tile below the empty cell moves up
# DOWN  → tile above moves down
# LEFT  → tile to the right moves left
# RIGHT → tile to the left moves right
_DIRECTION_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (1, 0),
    Direction.RIGHT: (-1, 0),
}

_NEIGHBOR_OFFSETS = ((0, -1), (0, 1), (-1, 0), (1, 0))


class GridEngine:
    """Owns the board of one puzzle round.

    The engine never calls into host code: hosts call an operation and
    read the result, then poll ``is_solved()`` after accepted moves.
    Board copies handed out by ``snapshot()`` are detached from the engine.

    Not thread-safe. Hosts sharing an engine between threads must
    serialize every call through a single writer.
    """

    def __init__(self, size: int, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._board: Board
        self.initialize(size)

    @classmethod
    def from_board(cls, board: Board, rng: random.Random | None = None) -> GridEngine:
        """Create an engine over a validated copy of an existing board.

        Raises ``ValueError`` if the tiles are not a valid layout or
        ``board.empty_pos`` does not point at the empty cell.
        """
        checked = Board.from_flat(board.size, board.flat())
        if any(len(row) != board.size for row in board.tiles):
            raise ValueError(f"Every row must hold {board.size} cells.")
        if tuple(board.empty_pos) != tuple(checked.empty_pos):
            raise ValueError(
                f"empty_pos {tuple(board.empty_pos)} does not match the empty "
                f"cell at {tuple(checked.empty_pos)}."
            )
        obj = cls.__new__(cls)
        obj._rng = rng if rng is not None else random.Random()
        obj._board = checked
        return obj

    # -- lifecycle ------------------------------------------------------------

    def initialize(self, size: int) -> None:
        """Reset to the solved configuration for a *size*×*size* grid."""
        if size > RECOMMENDED_MAX_SIZE:
            logger.warning(
                "Grid size %d exceeds the recommended maximum of %d.",
                size,
                RECOMMENDED_MAX_SIZE,
            )
        self._board = Board.solved(size)
        logger.debug("Initialized %dx%d grid.", size, size)

    def shuffle(self, move_count: int, avoid_backtrack: bool = False) -> None:
        """Scramble the board with *move_count* random legal slides.

        Only legal moves are applied starting from a solvable board, so the
        result is always solvable. With *avoid_backtrack* the slide that
        would undo the previous step is skipped whenever another one exists.
        """
        if move_count < 0:
            raise ValueError(f"Shuffle move count must be >= 0, got {move_count}.")

        prev_pos: Position | None = None
        for _ in range(move_count):
            candidates = self.movable_positions()
            if avoid_backtrack and prev_pos in candidates and len(candidates) > 1:
                candidates.remove(prev_pos)
            target = self._rng.choice(candidates)
            prev_pos = self._board.empty_pos
            self._swap(target)

        logger.debug(
            "Shuffled %dx%d grid with %d moves; empty cell at %s.",
            self.size,
            self.size,
            move_count,
            tuple(self._board.empty_pos),
        )

    # -- queries --------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._board.size

    @property
    def empty_pos(self) -> Position:
        return self._board.empty_pos

    def snapshot(self) -> Board:
        """Return a detached copy of the current board."""
        return self._board.copy()

    def tile_at(self, pos: Position) -> int | None:
        """Return the tile at *pos*, or ``None`` for the empty cell or off-grid."""
        pos = Position(*pos)
        if not self._board.in_bounds(pos):
            return None
        tile = self._board.get_tile(pos)
        return None if tile == EMPTY else tile

    def adjacent_to_empty(self, pos: Position) -> bool:
        pos = Position(*pos)
        if not self._board.in_bounds(pos):
            return False
        ex, ey = self._board.empty_pos
        x, y = pos
        return abs(x - ex) + abs(y - ey) == 1

    def movable_positions(self) -> list[Position]:
        """Positions of the tiles that can currently slide (2 to 4 of them)."""
        ex, ey = self._board.empty_pos
        positions: list[Position] = []
        for dx, dy in _NEIGHBOR_OFFSETS:
            pos = Position(ex + dx, ey + dy)
            if self._board.in_bounds(pos):
                positions.append(pos)
        return positions

    def is_solved(self) -> bool:
        return self._board.is_solved()

    # -- moves ----------------------------------------------------------------

    def apply_move(self, pos: Position) -> MoveResult:
        """Slide the tile at *pos* into the empty cell.

        Rejected requests leave the board untouched and report why.
        """
        pos = Position(*pos)
        if not self._board.in_bounds(pos):
            error = MoveError.OUT_OF_BOUNDS
        elif pos == self._board.empty_pos:
            error = MoveError.EMPTY_CELL_SELECTED
        elif not self.adjacent_to_empty(pos):
            error = MoveError.NOT_ADJACENT
        else:
            tile = self._board.get_tile(pos)
            self._swap(pos)
            return MoveResult.accepted(empty_pos=pos, moved_tile=tile)

        logger.debug("Rejected move at %s: %s", tuple(pos), error.value)
        return MoveResult.rejected(error)

    def apply_direction(self, direction: Direction) -> MoveResult:
        """Slide whichever tile would travel in *direction* into the empty cell.

        E.g. ``Direction.UP`` moves the tile **below** the empty cell upward.
        """
        return self.apply_move(self.direction_target(direction))

    def direction_target(self, direction: Direction) -> Position:
        """Position of the tile that would travel in *direction* (may be off-grid)."""
        dx, dy = _DIRECTION_OFFSETS[direction]
        ex, ey = self._board.empty_pos
        return Position(ex + dx, ey + dy)

    # -- helpers --------------------------------------------------------------

    def _swap(self, target: Position) -> None:
        board = self._board
        ex, ey = board.empty_pos
        tx, ty = target
        board.tiles[ey][ex], board.tiles[ty][tx] = (
            board.tiles[ty][tx],
            board.tiles[ey][ex],
        )
        board.empty_pos = Position(tx, ty)
