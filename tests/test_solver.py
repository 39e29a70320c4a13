"""Solver test suite — fixture boards and randomised scrambles.

Fixture boards live in ``tests/fixtures/boards.json`` with their known
optimal move counts. Every returned move list is replayed through the
move generator to verify it really reaches the goal.
"""

from __future__ import annotations

import json
import random
from pathlib import Path

import pytest

from puzzlecore.engine.gamegenerator import GameGenerator
from puzzlecore.engine.gamesolver import Algorithm, Solver
from puzzlecore.engine.moves import replay
from puzzlecore.engine.search import NoSolution, SearchLimits, Solution, Termination
from puzzlecore.models.board import GOAL, Board, Direction

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


_BOARDS = _load("boards.json")
_QUICK = [b for b in _BOARDS if b["moves"] < 20]


# -- helpers ------------------------------------------------------------------


def _assert_solve(board: Board, algorithm: Algorithm, expected: int | None = None) -> Solution:
    """Solve the board and verify the returned path reaches the goal."""
    result = Solver.solve(board, GOAL, algorithm)

    # ---- result sanity ------------------------------------------------------
    assert isinstance(result, Solution), f"{algorithm} found no path for {board.cells}"
    assert result.path[0].board == board
    assert result.path[0].move is None
    assert all(isinstance(m, Direction) for m in result.directions), (
        "Every move after the first board must be a Direction"
    )
    if expected is not None:
        assert result.moves == expected, (
            f"{algorithm} took {result.moves} moves, optimum is {expected}"
        )

    # ---- replay the moves and compare every board ---------------------------
    boards = replay(board, result.directions)
    assert boards == result.boards
    assert boards[-1] == GOAL
    return result


# -- fixture boards -----------------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_astar_manhattan_fixtures(board_data: dict) -> None:
    _assert_solve(Board.from_flat(board_data["cells"]), Algorithm.ASTAR_MANHATTAN, board_data["moves"])


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_astar_euclidean_fixtures(board_data: dict) -> None:
    _assert_solve(Board.from_flat(board_data["cells"]), Algorithm.ASTAR_EUCLIDEAN, board_data["moves"])


@pytest.mark.parametrize("board_data", _QUICK, ids=_ids)
def test_bfs_fixtures(board_data: dict) -> None:
    _assert_solve(Board.from_flat(board_data["cells"]), Algorithm.BFS, board_data["moves"])


# -- randomised scrambles -----------------------------------------------------


def test_astar_and_bfs_agree_on_length() -> None:
    rng = random.Random(2024)
    for _ in range(12):
        board = GameGenerator.shuffle(GOAL, 18, rng)
        a = _assert_solve(board, Algorithm.ASTAR_MANHATTAN)
        e = _assert_solve(board, Algorithm.ASTAR_EUCLIDEAN)
        b = _assert_solve(board, Algorithm.BFS)
        assert a.moves == e.moves == b.moves
        assert a.nodes_expanded <= b.nodes_expanded


def test_solvable_boards_always_solve() -> None:
    rng = random.Random(5)
    for _ in range(40):
        board = GameGenerator.shuffle(GOAL, 150, rng)
        assert Solver.is_solvable(board)
        result = Solver.solve(board)
        assert result, f"Solvable board {board.cells} returned {result}"
        assert result.path[-1].board == GOAL


def test_random_permutations_solve_iff_solvable() -> None:
    rng = random.Random(77)
    for _ in range(25):
        cells = list(range(9))
        rng.shuffle(cells)
        board = Board.from_flat(cells)
        result = Solver.solve(board)
        assert bool(result) == Solver.is_solvable(board)


# -- facade behaviour ---------------------------------------------------------


def test_solved_board_short_circuits() -> None:
    result = Solver.solve(GOAL)
    assert isinstance(result, Solution)
    assert result.moves == 0
    assert result.nodes_expanded == 0
    assert result.rating == "excellent"


def test_unsolvable_board_is_not_searched() -> None:
    result = Solver.solve(Board.parse("213456780"))
    assert isinstance(result, NoSolution)
    assert result.nodes_expanded == 0
    assert result.termination is Termination.EXHAUSTED


def test_limits_are_forwarded() -> None:
    result = Solver.solve(
        Board.parse("867254301"), GOAL, Algorithm.BFS, SearchLimits(max_expansions=10)
    )
    assert isinstance(result, NoSolution)
    assert result.termination is Termination.LIMIT


def test_algorithm_accepts_its_name() -> None:
    result = Solver.solve(Board.parse("123405786"), GOAL, "bfs")
    assert result.algorithm == "BFS"
    assert result.moves == 2


@pytest.mark.parametrize(
    ("text", "rating"),
    [("123405786", "excellent"), ("867254301", "average")],
)
def test_rating(text: str, rating: str) -> None:
    assert Solver.solve(Board.parse(text)).rating == rating


def test_hint() -> None:
    assert Solver.hint(Board.parse("123450786")) == Direction.UP
    assert Solver.hint(GOAL) is None
    assert Solver.hint(Board.parse("213456780")) is None
