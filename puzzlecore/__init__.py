"""8-puzzle search core: boards, move generation, heuristics and solvers."""

from puzzlecore.errors import IllegalMoveError, InvalidBoardError
from puzzlecore.models.board import GOAL, Board, Direction

__all__ = ["GOAL", "Board", "Direction", "IllegalMoveError", "InvalidBoardError"]
