from tilegrid.models.board import EMPTY, Board, Direction, Position
from tilegrid.models.move import MoveError, MoveResult

__all__ = ["EMPTY", "Board", "Direction", "MoveError", "MoveResult", "Position"]
