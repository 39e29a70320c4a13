"""Board model for the 8-puzzle."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from puzzlecore.errors import InvalidBoardError

SIZE = 3
CELLS = SIZE * SIZE


class Direction(StrEnum):
    """Direction the displaced *tile* travels when it slides into the blank."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"


@dataclass(frozen=True)
class Board:
    """An immutable 3×3 tile configuration.

    Cells are stored row-major as a tuple of 9 ints. 0 represents the
    blank. Index ``i`` sits at ``(i // 3, i % 3)``.
    """

    cells: tuple[int, ...]
    key: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        cells = self.cells
        if not isinstance(cells, tuple):
            cells = tuple(cells)
            object.__setattr__(self, "cells", cells)
        _validate(cells)
        key = 0
        for v in cells:
            key = key * CELLS + v
        object.__setattr__(self, "key", key)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat([1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        return cls(tuple(flat))

    @classmethod
    def parse(cls, text: str) -> Board:
        """Parse ``"1,2,3,4,5,6,7,8,0"``, ``"1 2 3 ..."`` or ``"123456780"``."""
        text = text.strip()
        if re.fullmatch(r"\d{9}", text):
            parts = list(text)
        else:
            parts = [p for p in re.split(r"[\s,;]+", text) if p]
        try:
            values = [int(p) for p in parts]
        except ValueError as exc:
            raise InvalidBoardError(f"Board contains a non-integer tile: {text!r}") from exc
        return cls(tuple(values))

    @classmethod
    def from_key(cls, key: int) -> Board:
        """Inverse of :attr:`key`."""
        cells = [0] * CELLS
        for i in range(CELLS - 1, -1, -1):
            key, cells[i] = divmod(key, CELLS)
        return cls(tuple(cells))

    # -- queries --------------------------------------------------------------

    @property
    def blank_index(self) -> int:
        return self.cells.index(0)

    @property
    def blank_pos(self) -> tuple[int, int]:
        return divmod(self.blank_index, SIZE)

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[row * SIZE + col]

    def rows(self) -> Iterator[tuple[int, ...]]:
        for r in range(SIZE):
            yield self.cells[r * SIZE : (r + 1) * SIZE]

    def is_goal(self, goal: Board | None = None) -> bool:
        return self.cells == (goal or GOAL).cells

    def is_tile_correct(self, row: int, col: int, goal: Board | None = None) -> bool:
        """Check if a specific tile is in its goal position."""
        return self.get_tile(row, col) == (goal or GOAL).get_tile(row, col)

    # -- transformation -------------------------------------------------------

    def swap_blank(self, index: int) -> Board:
        """Return a new board with the blank and the tile at *index* exchanged."""
        cells = list(self.cells)
        bi = self.blank_index
        cells[bi], cells[index] = cells[index], cells[bi]
        return Board(tuple(cells))

    def __str__(self) -> str:
        return "\n".join(
            " ".join(str(v) if v else "." for v in row) for row in self.rows()
        )


def _validate(cells: tuple[int, ...]) -> None:
    if len(cells) != CELLS:
        raise InvalidBoardError(
            f"Expected {CELLS} tiles for a {SIZE}×{SIZE} board, got {len(cells)}."
        )
    for v in cells:
        if isinstance(v, bool) or not isinstance(v, int):
            raise InvalidBoardError(f"Tile {v!r} is not an integer.")
        if not 0 <= v < CELLS:
            raise InvalidBoardError(f"Tile {v} is outside 0..{CELLS - 1}.")
    if len(set(cells)) != CELLS:
        dupes = sorted({v for v in cells if cells.count(v) > 1})
        raise InvalidBoardError(f"Duplicate tiles: {dupes}.")


GOAL = Board((1, 2, 3, 4, 5, 6, 7, 8, 0))
