"""Path reconstruction from a terminal search node."""

from __future__ import annotations

from puzzlecore.models.node import NodeArena, PathStep


def reconstruct_path(arena: NodeArena, node_id: int) -> tuple[PathStep, ...]:
    """Walk parent ids from *node_id* to the root; return root-first steps.

    The root's step carries ``move=None``.
    """
    steps: list[PathStep] = []
    current: int | None = node_id
    while current is not None:
        node = arena[current]
        steps.append(PathStep(node.board, node.move))
        current = node.parent
    steps.reverse()
    return tuple(steps)
