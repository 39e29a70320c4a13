"""8-puzzle solver."""

from __future__ import annotations

import logging
from enum import StrEnum

from puzzlecore.engine.heuristics import Heuristic
from puzzlecore.engine.search import (
    NoSolution,
    SearchLimits,
    SearchOutcome,
    Solution,
    Termination,
    astar,
    bfs,
)
from puzzlecore.engine.solvability import is_solvable
from puzzlecore.models.board import GOAL, Board, Direction
from puzzlecore.models.node import PathStep

logger = logging.getLogger(__name__)


class Algorithm(StrEnum):
    ASTAR_MANHATTAN = "astar-manhattan"
    ASTAR_EUCLIDEAN = "astar-euclidean"
    BFS = "bfs"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Algorithm.ASTAR_MANHATTAN: "A* (Manhattan)",
    Algorithm.ASTAR_EUCLIDEAN: "A* (Euclidean)",
    Algorithm.BFS: "BFS",
}


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        goal: Board = GOAL,
        algorithm: Algorithm = Algorithm.ASTAR_MANHATTAN,
        limits: SearchLimits | None = None,
    ) -> SearchOutcome:
        """Return the optimal path from *board* to *goal*, or a ``NoSolution``."""
        algorithm = Algorithm(algorithm)
        label = algorithm.label

        if board == goal:
            return Solution((PathStep(board),), 0, label)

        if not Solver.is_solvable(board, goal):
            logger.info("Board %s cannot reach the goal; not searching", board.cells)
            return NoSolution(0, label, Termination.EXHAUSTED)

        logger.debug("Solving %s with %s", board.cells, label)
        if algorithm is Algorithm.BFS:
            outcome = bfs(board, goal, limits=limits, label=label)
        else:
            heuristic = (
                Heuristic.EUCLIDEAN
                if algorithm is Algorithm.ASTAR_EUCLIDEAN
                else Heuristic.MANHATTAN
            )
            outcome = astar(board, goal, heuristic.fn, limits=limits, label=label)

        if isinstance(outcome, Solution):
            logger.info(
                "%s solved in %d moves (%d expanded, %.3fs)",
                label, outcome.moves, outcome.nodes_expanded, outcome.elapsed,
            )
        return outcome

    @staticmethod
    def hint(board: Board, goal: Board = GOAL) -> Direction | None:
        """Return the single best next move, or ``None`` if solved / unsolvable."""
        if board == goal:
            return None
        outcome = Solver.solve(board, goal)
        if not outcome:
            return None
        return outcome.directions[0]

    @staticmethod
    def is_solvable(board: Board, goal: Board = GOAL) -> bool:
        """Return True if *board* can reach *goal*."""
        return is_solvable(board, goal)
