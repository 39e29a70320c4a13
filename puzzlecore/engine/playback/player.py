"""Steps through a solution one board at a time."""

from __future__ import annotations

from dataclasses import dataclass

from puzzlecore.engine.search import Solution
from puzzlecore.models.board import Board, Direction


@dataclass(frozen=True)
class PlaybackStep:
    index: int
    total: int
    board: Board
    move: Direction | None
    moved_tile: int | None
    progress: float


class SolutionPlayer:
    """Orchestrates the replay of a single solution."""

    def __init__(self, solution: Solution) -> None:
        self.solution = solution
        self._cursor = 0

    # -- queries --------------------------------------------------------------

    @property
    def total(self) -> int:
        return len(self.solution.path)

    @property
    def finished(self) -> bool:
        return self._cursor >= self.total

    @property
    def current(self) -> Board:
        """The last board handed out, or the initial board before any step."""
        return self.solution.path[max(self._cursor - 1, 0)].board

    # -- movement -------------------------------------------------------------

    def step(self) -> PlaybackStep | None:
        """Advance one board. Returns None once the goal has been shown."""
        if self.finished:
            return None
        index = self._cursor
        entry = self.solution.path[index]
        moved = None
        if index > 0:
            moved = _moved_tile(self.solution.path[index - 1].board, entry.board)
        progress = index / (self.total - 1) if self.total > 1 else 1.0
        self._cursor += 1
        return PlaybackStep(index, self.total, entry.board, entry.move, moved, progress)

    def reset(self) -> None:
        self._cursor = 0


def _moved_tile(before: Board, after: Board) -> int | None:
    # The slid tile now occupies the cell the blank used to hold.
    tile = after.cells[before.blank_index]
    return tile or None
