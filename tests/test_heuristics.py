from __future__ import annotations

import random

import pytest

from puzzlecore.engine.heuristics import Heuristic, euclidean, manhattan
from puzzlecore.engine.moves import successors
from puzzlecore.models.board import GOAL, Board


def _random_boards(n: int, seed: int = 3) -> list[Board]:
    rng = random.Random(seed)
    out = []
    for _ in range(n):
        cells = list(range(9))
        rng.shuffle(cells)
        out.append(Board.from_flat(cells))
    return out


@pytest.mark.parametrize("fn", [manhattan, euclidean], ids=["manhattan", "euclidean"])
def test_goal_scores_zero(fn) -> None:
    assert fn(GOAL) == 0


def test_manhattan_single_displaced_tile() -> None:
    assert manhattan(Board.parse("123450786")) == 1


def test_manhattan_two_displaced_tiles() -> None:
    assert manhattan(Board.parse("123406758")) == 2


def test_manhattan_hardest_board() -> None:
    assert manhattan(Board.parse("867254301")) == 21


def test_euclidean_diagonal_displacement() -> None:
    board = Board.parse("523416780")  # 5 and 1 swapped across a diagonal
    assert manhattan(board) == 4
    assert euclidean(board) == 2


def test_heuristics_are_non_negative_and_ordered() -> None:
    for board in _random_boards(300):
        m = manhattan(board)
        e = euclidean(board)
        assert m >= 0
        assert 0 <= e <= m


def test_manhattan_is_consistent_along_edges() -> None:
    for board in _random_boards(100, seed=11):
        h = manhattan(board)
        for _, nxt in successors(board):
            assert abs(h - manhattan(nxt)) == 1


def test_euclidean_is_consistent_along_edges() -> None:
    for board in _random_boards(100, seed=12):
        h = euclidean(board)
        for _, nxt in successors(board):
            assert abs(h - euclidean(nxt)) <= 1


def test_custom_goal() -> None:
    goal = Board.parse("012345678")
    assert manhattan(goal, goal) == 0
    assert manhattan(GOAL, goal) > 0


def test_heuristic_enum_dispatch() -> None:
    board = Board.parse("523416780")
    assert Heuristic.MANHATTAN.fn(board, GOAL) == 4
    assert Heuristic("euclidean").fn(board, GOAL) == 2
