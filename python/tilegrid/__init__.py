"""Sliding-tile puzzle grid engine."""

from tilegrid.engine.gridengine import GridEngine
from tilegrid.models import Board, Direction, MoveError, MoveResult, Position

__all__ = ["Board", "Direction", "GridEngine", "MoveError", "MoveResult", "Position"]
