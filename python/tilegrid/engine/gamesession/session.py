"""A round in progress: the engine plus move counter, clock and time limit."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from tilegrid.config import GameSettings
from tilegrid.engine.gridengine import GridEngine
from tilegrid.models.board import Board, Direction, Position
from tilegrid.models.move import MoveResult

logger = logging.getLogger(__name__)


class GameSession:
    """Drives one GridEngine on behalf of a player.

    Move counting and timing live here rather than in the engine. After
    every accepted move the session polls ``is_solved()`` and stops the
    clock on a win.
    """

    def __init__(
        self,
        engine: GridEngine,
        settings: GameSettings,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.engine = engine
        self.settings = settings
        self._clock = clock
        self.moves: int = 0
        self._start_time: float = clock()
        self._elapsed_banked: float = 0.0
        self._running: bool = False
        self._won: bool = False

    # -- round control --------------------------------------------------------

    def start(self) -> None:
        """Deal a fresh scrambled board and reset moves and clock."""
        size = self.settings.grid_size
        self.engine.initialize(size)
        self.engine.shuffle(self.settings.shuffle_moves, avoid_backtrack=True)
        if self.settings.shuffle_moves > 0 and self.engine.is_solved():
            # The walk came back to the goal; any single slide leaves it.
            self.engine.shuffle(1)

        self.moves = 0
        self._won = False
        self._elapsed_banked = 0.0
        self._start_time = self._clock()
        self._running = True
        logger.info(
            "Started %dx%d round (%d shuffle moves, time limit %s).",
            size,
            size,
            self.settings.shuffle_moves,
            self.settings.time_limit,
        )

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (self._clock() - self._start_time)
        return self._elapsed_banked

    @property
    def remaining_time(self) -> float | None:
        if self.settings.time_limit is None:
            return None
        return max(0.0, self.settings.time_limit - self.elapsed_time)

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += self._clock() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running and not self._won and not self.is_timed_out:
            self._start_time = self._clock()
            self._running = True

    # -- moves ----------------------------------------------------------------

    def move_tile(self, pos: Position) -> MoveResult | None:
        """Forward a move to the engine.

        Returns ``None`` without touching the board once the round is won,
        has timed out, or is paused.
        """
        if self._won or not self._running:
            return None
        if self.is_timed_out:
            self.pause()
            logger.info("Time limit of %.0fs reached.", self.settings.time_limit)
            return None

        result = self.engine.apply_move(pos)
        if result:
            self.moves += 1
            if self.engine.is_solved():
                self.pause()
                self._won = True
                logger.info(
                    "Solved in %d moves, %.1fs.", self.moves, self.elapsed_time
                )
        return result

    def move(self, direction: Direction) -> MoveResult | None:
        """Slide the tile that travels in *direction*, if the round allows it."""
        return self.move_tile(self.engine.direction_target(direction))

    # -- queries --------------------------------------------------------------

    @property
    def board(self) -> Board:
        return self.engine.snapshot()

    @property
    def is_won(self) -> bool:
        return self._won

    @property
    def is_timed_out(self) -> bool:
        limit = self.settings.time_limit
        if limit is None or self._won:
            return False
        return self.elapsed_time >= limit
