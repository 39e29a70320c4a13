from puzzlecore.models.board import GOAL, SIZE, Board, Direction
from puzzlecore.models.node import NodeArena, PathStep, SearchNode

__all__ = ["GOAL", "SIZE", "Board", "Direction", "NodeArena", "PathStep", "SearchNode"]
