from __future__ import annotations

import pytest

from puzzlecore.errors import InvalidBoardError
from puzzlecore.models.board import GOAL, Board


@pytest.mark.parametrize(
    "cells",
    [
        [1, 2, 3, 4, 5, 6, 7, 8],
        [1, 2, 3, 4, 5, 6, 7, 8, 0, 9],
        [1, 1, 3, 4, 5, 6, 7, 8, 0],
        [1, 2, 3, 4, 5, 6, 7, 8, 9],
        [1, 2, 3, 4, 5, 6, 7, 8, -1],
        [1, 2, 3, 4, 5, 6, 7, 8, "0"],
        [1, 2, 3, 4, 5, 6, 7, 8, 0.0],
    ],
    ids=["short", "long", "duplicate", "no_blank", "negative", "string", "float"],
)
def test_malformed_boards_are_rejected(cells: list) -> None:
    with pytest.raises(InvalidBoardError):
        Board.from_flat(cells)


def test_invalid_board_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        Board((0, 0, 0, 0, 0, 0, 0, 0, 0))


@pytest.mark.parametrize(
    "text",
    ["1,2,3,4,5,6,7,8,0", "1 2 3 4 5 6 7 8 0", "123456780", " 1, 2 ,3;4 5 6 7 8 0 "],
)
def test_parse_formats(text: str) -> None:
    assert Board.parse(text) == GOAL


def test_parse_rejects_garbage() -> None:
    with pytest.raises(InvalidBoardError, match="non-integer"):
        Board.parse("1,2,3,x,5,6,7,8,0")


def test_boards_compare_by_value() -> None:
    a = Board.from_flat([1, 2, 3, 4, 5, 6, 7, 8, 0])
    assert a == GOAL
    assert a is not GOAL
    assert hash(a) == hash(GOAL)
    assert len({a, GOAL}) == 1


def test_board_is_immutable() -> None:
    with pytest.raises(AttributeError):
        GOAL.cells = (0, 1, 2, 3, 4, 5, 6, 7, 8)  # type: ignore[misc]


def test_blank_position_and_tiles() -> None:
    board = Board.parse("123405786")
    assert board.blank_index == 4
    assert board.blank_pos == (1, 1)
    assert board.get_tile(2, 1) == 8
    assert list(board.rows()) == [(1, 2, 3), (4, 0, 5), (7, 8, 6)]


def test_goal_checks() -> None:
    board = Board.parse("123405786")
    assert GOAL.is_goal()
    assert not board.is_goal()
    assert board.is_goal(board)
    assert board.is_tile_correct(0, 0)
    assert not board.is_tile_correct(1, 2)


def test_key_round_trips_and_is_unique() -> None:
    boards = [GOAL, Board.parse("867254301"), Board.parse("012345678")]
    keys = {b.key for b in boards}
    assert len(keys) == len(boards)
    for b in boards:
        assert Board.from_key(b.key) == b


def test_swap_blank_returns_new_board() -> None:
    moved = GOAL.swap_blank(5)
    assert moved.cells == (1, 2, 3, 4, 5, 0, 7, 8, 6)
    assert GOAL.cells == (1, 2, 3, 4, 5, 6, 7, 8, 0)


def test_str_shows_grid() -> None:
    assert str(GOAL) == "1 2 3\n4 5 6\n7 8 ."
