from puzzlecore.engine.search.astar import astar
from puzzlecore.engine.search.bfs import bfs
from puzzlecore.engine.search.path import reconstruct_path
from puzzlecore.engine.search.result import (
    NoSolution,
    SearchLimits,
    SearchOutcome,
    Solution,
    Termination,
)

__all__ = [
    "NoSolution",
    "SearchLimits",
    "SearchOutcome",
    "Solution",
    "Termination",
    "astar",
    "bfs",
    "reconstruct_path",
]
