"""Search tree storage.

Nodes live in a :class:`NodeArena` owned by a single search call and refer
to their parent by integer id, never by object reference.
"""

from __future__ import annotations

from dataclasses import dataclass

from puzzlecore.models.board import Board, Direction


@dataclass(frozen=True, slots=True)
class SearchNode:
    id: int
    board: Board
    g: int
    h: int = 0
    parent: int | None = None
    move: Direction | None = None

    @property
    def f(self) -> int:
        return self.g + self.h


@dataclass(frozen=True, slots=True)
class PathStep:
    """One entry of a reconstructed solution: a board and the move that made it."""

    board: Board
    move: Direction | None = None


class NodeArena:
    """Append-only node store for one search invocation."""

    def __init__(self) -> None:
        self._nodes: list[SearchNode] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __getitem__(self, node_id: int) -> SearchNode:
        return self._nodes[node_id]

    def add(
        self,
        board: Board,
        g: int,
        h: int = 0,
        parent: int | None = None,
        move: Direction | None = None,
    ) -> SearchNode:
        node = SearchNode(len(self._nodes), board, g, h, parent, move)
        self._nodes.append(node)
        return node
