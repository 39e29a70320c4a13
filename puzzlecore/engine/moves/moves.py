"""Move generation: every legal slide from a board."""

from __future__ import annotations

from collections.abc import Iterable

from puzzlecore.errors import IllegalMoveError
from puzzlecore.models.board import SIZE, Board, Direction

# The offset points to the tile that will slide into the blank.
# UP   → tile at (br+1, bc) moves up   → blank shifts down
# DOWN → tile at (br-1, bc) moves down → blank shifts up
# LEFT → tile at (br, bc+1) moves left → blank shifts right
# RIGHT→ tile at (br, bc-1) moves right→ blank shifts left
_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


def _source(board: Board, direction: Direction) -> int | None:
    """Index of the tile that *direction* would slide, or None if off-grid."""
    br, bc = board.blank_pos
    dr, dc = _OFFSETS[direction]
    tr, tc = br + dr, bc + dc
    if 0 <= tr < SIZE and 0 <= tc < SIZE:
        return tr * SIZE + tc
    return None


def legal_moves(board: Board) -> list[Direction]:
    return [d for d in Direction if _source(board, d) is not None]


def successors(board: Board) -> list[tuple[Direction, Board]]:
    """Return ``(direction, board)`` for every legal slide, in Direction order.

    A corner blank yields 2 successors, an edge blank 3, the centre 4.
    """
    out: list[tuple[Direction, Board]] = []
    for direction in Direction:
        src = _source(board, direction)
        if src is not None:
            out.append((direction, board.swap_blank(src)))
    return out


def apply_move(board: Board, direction: Direction) -> Board:
    src = _source(board, Direction(direction))
    if src is None:
        raise IllegalMoveError(
            f"Cannot move {Direction(direction).value}: blank at {board.blank_pos}."
        )
    return board.swap_blank(src)


def replay(initial: Board, directions: Iterable[Direction]) -> list[Board]:
    """Apply *directions* in order; return every board visited, *initial* first."""
    boards = [initial]
    for direction in directions:
        boards.append(apply_move(boards[-1], direction))
    return boards
