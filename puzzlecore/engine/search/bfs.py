"""Breadth-first search over 8-puzzle boards."""

from __future__ import annotations

import logging
from collections import deque

from puzzlecore.engine.moves import successors
from puzzlecore.engine.search.path import reconstruct_path
from puzzlecore.engine.search.result import (
    NoSolution,
    SearchLimits,
    SearchOutcome,
    Solution,
    Termination,
)
from puzzlecore.models.board import GOAL, Board
from puzzlecore.models.node import NodeArena

logger = logging.getLogger(__name__)


def bfs(
    initial: Board,
    goal: Board = GOAL,
    limits: SearchLimits | None = None,
    label: str = "BFS",
) -> SearchOutcome:
    """Return a fewest-moves path using a FIFO frontier and no heuristic.

    Boards are marked visited when enqueued, so each is queued once.
    """
    budget = (limits or SearchLimits()).start()
    arena = NodeArena()
    root = arena.add(initial, g=0)
    queue: deque[int] = deque([root.id])
    visited: set[int] = {initial.key}
    expanded = 0

    while queue:
        if budget.exceeded(expanded):
            logger.info("%s stopped by limit after %d expansions", label, expanded)
            return NoSolution(expanded, label, Termination.LIMIT, budget.elapsed)

        node_id = queue.popleft()
        node = arena[node_id]
        if node.board == goal:
            logger.debug(
                "%s reached goal: g=%d expanded=%d generated=%d",
                label, node.g, expanded, len(arena),
            )
            return Solution(
                reconstruct_path(arena, node_id), expanded, label, budget.elapsed
            )

        expanded += 1
        for direction, child in successors(node.board):
            if child.key in visited:
                continue
            visited.add(child.key)
            nxt = arena.add(child, g=node.g + 1, parent=node_id, move=direction)
            queue.append(nxt.id)

    logger.info("%s exhausted the frontier after %d expansions", label, expanded)
    return NoSolution(expanded, label, Termination.EXHAUSTED, budget.elapsed)
