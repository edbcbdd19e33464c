"""Game settings and difficulty presets.

Settings are plain values handed to the host; the grid engine itself only
ever sees a grid size and a shuffle budget.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum

DEFAULT_GRID_SIZE = 3
DEFAULT_SHUFFLE_MOVES = 100

# Random slides per cell needed for a well-mixed board.
SHUFFLE_MOVES_PER_CELL = 20


def recommended_shuffle_moves(size: int) -> int:
    return SHUFFLE_MOVES_PER_CELL * size * size


class Difficulty(StrEnum):
    easy = "easy"
    medium = "medium"
    hard = "hard"


@dataclass(frozen=True)
class GameSettings:
    """Grid size, shuffle intensity and optional time limit (seconds)."""

    grid_size: int = DEFAULT_GRID_SIZE
    shuffle_moves: int = DEFAULT_SHUFFLE_MOVES
    time_limit: float | None = None

    def __post_init__(self) -> None:
        if self.grid_size < 2:
            raise ValueError(f"Grid size must be at least 2, got {self.grid_size}.")
        if self.shuffle_moves < 0:
            raise ValueError(
                f"Shuffle moves must be >= 0, got {self.shuffle_moves}."
            )
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(
                f"Time limit must be positive, got {self.time_limit}."
            )

    @property
    def timed(self) -> bool:
        return self.time_limit is not None

    @classmethod
    def for_difficulty(cls, difficulty: Difficulty) -> GameSettings:
        return _PRESETS[difficulty]

    def with_overrides(self, **changes: object) -> GameSettings:
        """Return a copy with the non-``None`` *changes* applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})

    def without_time_limit(self) -> GameSettings:
        return replace(self, time_limit=None)


_PRESETS: dict[Difficulty, GameSettings] = {
    Difficulty.easy: GameSettings(grid_size=3, shuffle_moves=50),
    Difficulty.medium: GameSettings(grid_size=4, shuffle_moves=150),
    Difficulty.hard: GameSettings(grid_size=5, shuffle_moves=300, time_limit=600.0),
}
