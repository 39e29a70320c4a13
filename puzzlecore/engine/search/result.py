"""Search outcomes and caps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from time import perf_counter

from puzzlecore import config
from puzzlecore.models.board import Board, Direction
from puzzlecore.models.node import PathStep


class Termination(StrEnum):
    EXHAUSTED = "exhausted"
    LIMIT = "limit"


@dataclass(frozen=True)
class SearchLimits:
    """External caps on one search, checked once per frontier pop."""

    max_expansions: int | None = None
    timeout: float | None = None

    def start(self) -> _Budget:
        return _Budget(self, perf_counter())


class _Budget:
    __slots__ = ("limits", "t0")

    def __init__(self, limits: SearchLimits, t0: float) -> None:
        self.limits = limits
        self.t0 = t0

    @property
    def elapsed(self) -> float:
        return perf_counter() - self.t0

    def exceeded(self, expanded: int) -> bool:
        cap = self.limits.max_expansions
        if cap is not None and expanded >= cap:
            return True
        timeout = self.limits.timeout
        return timeout is not None and self.elapsed > timeout


@dataclass(frozen=True)
class Solution:
    path: tuple[PathStep, ...]
    nodes_expanded: int
    algorithm: str
    elapsed: float = 0.0

    def __bool__(self) -> bool:
        return True

    @property
    def moves(self) -> int:
        return len(self.path) - 1

    @property
    def directions(self) -> list[Direction]:
        return [step.move for step in self.path[1:] if step.move is not None]

    @property
    def boards(self) -> list[Board]:
        return [step.board for step in self.path]

    @property
    def rating(self) -> str:
        if len(self.path) > config.RATING_GOOD_MAX:
            return "average"
        if len(self.path) > config.RATING_EXCELLENT_MAX:
            return "good"
        return "excellent"


@dataclass(frozen=True)
class NoSolution:
    """The search ended without reaching the goal. Not an error."""

    nodes_expanded: int
    algorithm: str
    termination: Termination = Termination.EXHAUSTED
    elapsed: float = 0.0

    def __bool__(self) -> bool:
        return False


SearchOutcome = Solution | NoSolution
