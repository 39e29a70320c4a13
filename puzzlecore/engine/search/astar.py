"""A* search over 8-puzzle boards."""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable

from puzzlecore.engine.heuristics import manhattan
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


def astar(
    initial: Board,
    goal: Board = GOAL,
    heuristic: Callable[[Board, Board], int] = manhattan,
    limits: SearchLimits | None = None,
    label: str = "A*",
) -> SearchOutcome:
    """Return a fewest-moves path from *initial* to *goal*.

    The frontier is ordered by ``f = g + h``; equal ``f`` values are popped
    in insertion order. A board is expanded at most once. *heuristic* must
    be consistent for the returned path to be optimal.
    """
    budget = (limits or SearchLimits()).start()
    arena = NodeArena()
    counter = itertools.count()

    h0 = heuristic(initial, goal)
    root = arena.add(initial, g=0, h=h0)
    open_heap: list[tuple[int, int, int]] = [(root.f, next(counter), root.id)]
    best_g: dict[int, int] = {initial.key: 0}
    closed: set[int] = set()
    expanded = 0

    while open_heap:
        if budget.exceeded(expanded):
            logger.info("%s stopped by limit after %d expansions", label, expanded)
            return NoSolution(expanded, label, Termination.LIMIT, budget.elapsed)

        _, _, node_id = heapq.heappop(open_heap)
        node = arena[node_id]
        key = node.board.key
        if key in closed:
            continue

        if node.board == goal:
            logger.debug(
                "%s reached goal: g=%d expanded=%d generated=%d",
                label, node.g, expanded, len(arena),
            )
            return Solution(
                reconstruct_path(arena, node_id), expanded, label, budget.elapsed
            )

        closed.add(key)
        expanded += 1

        g2 = node.g + 1
        for direction, child in successors(node.board):
            ckey = child.key
            if ckey in closed or g2 >= best_g.get(ckey, g2 + 1):
                continue
            best_g[ckey] = g2
            h2 = heuristic(child, goal)
            nxt = arena.add(child, g=g2, h=h2, parent=node_id, move=direction)
            heapq.heappush(open_heap, (nxt.f, next(counter), nxt.id))

    logger.info("%s exhausted the frontier after %d expansions", label, expanded)
    return NoSolution(expanded, label, Termination.EXHAUSTED, budget.elapsed)
