"""Shared fixtures for the solver test suite."""

from __future__ import annotations

import random
from collections import deque

import pytest

from puzzlecore.engine.moves import successors
from puzzlecore.models.board import GOAL, Board


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture(scope="session")
def reachable_keys() -> set[int]:
    """Keys of every board reachable from the goal, found by brute force."""
    seen = {GOAL.key}
    queue: deque[Board] = deque([GOAL])
    while queue:
        board = queue.popleft()
        for _, nxt in successors(board):
            if nxt.key not in seen:
                seen.add(nxt.key)
                queue.append(nxt)
    return seen
