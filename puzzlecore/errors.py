"""Exceptions raised by the puzzle core."""

from __future__ import annotations


class InvalidBoardError(ValueError):
    """Raised when a tile sequence is not a permutation of 0..8."""


class IllegalMoveError(ValueError):
    """Raised when a named move would slide a tile from outside the grid."""
