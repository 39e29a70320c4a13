"""Inversion-parity solvability test."""

from __future__ import annotations

from bisect import bisect_left, insort

from puzzlecore.models.board import GOAL, Board


def count_inversions(board: Board) -> int:
    """Count pairs of non-blank tiles that appear out of ascending order."""
    inv = 0
    seen: list[int] = []
    for v in board.cells:
        if v == 0:
            continue
        inv += len(seen) - bisect_left(seen, v)
        insort(seen, v)
    return inv


def is_solvable(board: Board, goal: Board = GOAL) -> bool:
    """Return True if *goal* can be reached from *board* by legal slides.

    On a board of odd width a slide never changes inversion parity, so
    the two boards must share it. Against the standard goal (zero
    inversions) this means an even count.
    """
    return count_inversions(board) % 2 == count_inversions(goal) % 2
