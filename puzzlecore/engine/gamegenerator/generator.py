"""Generates solvable 8-puzzle boards."""

from __future__ import annotations

import logging
import random

from puzzlecore import config
from puzzlecore.engine.moves import successors
from puzzlecore.models.board import GOAL, Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles by sliding tiles away from a goal board.

    Only legal slides are applied, so every result can be solved back to
    the board it started from.
    """

    @staticmethod
    def solved() -> Board:
        """Return the goal-state board (tiles in order, blank bottom-right)."""
        return GOAL

    @staticmethod
    def shuffle(
        goal: Board = GOAL,
        steps: int = config.SHUFFLE_STEPS,
        rng: random.Random | None = None,
    ) -> Board:
        """Apply *steps* random slides to *goal*.

        A slide never undoes the one before it.
        """
        if steps < 0:
            raise ValueError(f"steps must be >= 0, got {steps}")
        rng = rng or random.Random()
        board = goal
        prev_blank: int | None = None

        for _ in range(steps):
            options = successors(board)
            if len(options) > 1:
                options = [o for o in options if o[1].blank_index != prev_blank]
            _, nxt = rng.choice(options)
            prev_blank = board.blank_index
            board = nxt

        return board

    @staticmethod
    def generate(
        steps: int = config.SHUFFLE_STEPS,
        rng: random.Random | None = None,
    ) -> Board:
        """Return a random *solvable* board that is not already solved."""
        rng = rng or random.Random()
        board = GameGenerator.shuffle(GOAL, steps, rng)

        # Ensure the board is not already solved
        while steps > 0 and board.is_goal():
            logger.debug("Scramble landed on the goal; reshuffling")
            board = GameGenerator.shuffle(GOAL, steps, rng)

        return board
