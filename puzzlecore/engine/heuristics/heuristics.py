"""Distance heuristics for A*.

Both estimates ignore the blank and never exceed the true number of
slides left, so A* with either one returns an optimal path.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from enum import StrEnum
from functools import lru_cache

from puzzlecore.models.board import GOAL, SIZE, Board


@lru_cache(maxsize=32)
def _goal_positions(goal: Board) -> dict[int, tuple[int, int]]:
    return {v: divmod(i, SIZE) for i, v in enumerate(goal.cells)}


def manhattan(board: Board, goal: Board = GOAL) -> int:
    """Sum of ``|Δrow| + |Δcol|`` between each tile and its goal cell."""
    targets = _goal_positions(goal)
    dist = 0
    for idx, tile in enumerate(board.cells):
        if tile == 0:
            continue
        r, c = divmod(idx, SIZE)
        gr, gc = targets[tile]
        dist += abs(r - gr) + abs(c - gc)
    return dist


def euclidean(board: Board, goal: Board = GOAL) -> int:
    """Sum of straight-line tile distances, truncated once at the end.

    Never larger than :func:`manhattan`, so it is the weaker guide.
    """
    targets = _goal_positions(goal)
    dist = 0.0
    for idx, tile in enumerate(board.cells):
        if tile == 0:
            continue
        r, c = divmod(idx, SIZE)
        gr, gc = targets[tile]
        dist += math.hypot(r - gr, c - gc)
    # Absorb float noise so exact integer sums are not truncated down.
    return int(dist + 1e-9)


class Heuristic(StrEnum):
    MANHATTAN = "manhattan"
    EUCLIDEAN = "euclidean"

    @property
    def fn(self) -> Callable[[Board, Board], int]:
        return _FUNCTIONS[self]


_FUNCTIONS: dict[Heuristic, Callable[[Board, Board], int]] = {
    Heuristic.MANHATTAN: manhattan,
    Heuristic.EUCLIDEAN: euclidean,
}
