#!/usr/bin/env python3
"""8-Puzzle Solver.

Usage::

    python main.py solve 123450786            # A* with Manhattan distance
    python main.py solve "1 2 3 4 0 6 7 5 8" -a bfs
    python main.py compare 867254301          # all algorithms side by side
    python main.py check 213456780            # inversion parity
    python main.py shuffle --steps 40 --seed 7
    python main.py play                       # interactive session
"""

from __future__ import annotations

import logging
import random
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from puzzlecore import config
from puzzlecore.engine.gamegenerator import GameGenerator
from puzzlecore.engine.gamesolver import Algorithm, Solver
from puzzlecore.engine.search import SearchLimits
from puzzlecore.engine.solvability import count_inversions
from puzzlecore.errors import InvalidBoardError
from puzzlecore.models.board import GOAL, Board
from puzzleview.cli.render import (
    render_board,
    render_check,
    render_comparison,
    render_path,
    render_summary,
)

console = Console()

app = typer.Typer(add_completion=False, no_args_is_help=True)


# -- helpers ------------------------------------------------------------------


def _parse_board(text: str) -> Board:
    try:
        return Board.parse(text)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _limits(max_expansions: Optional[int], timeout: Optional[float]) -> SearchLimits:
    return SearchLimits(max_expansions=max_expansions, timeout=timeout)


_BOARD_HELP = "Nine tiles, 0 for the blank: '123456780', '1,2,3,...' or '1 2 3 ...'."
_GOAL_OPTION = typer.Option(
    None, "-g", "--goal",
    help="Target board (defaults to 1..8 with the blank last).",
)
_MAX_EXPANSIONS_OPTION = typer.Option(
    config.MAX_EXPANSIONS, "--max-expansions",
    envvar=config.MAX_EXPANSIONS_ENV, min=1,
    help="Give up after this many expanded nodes.",
)
_TIMEOUT_OPTION = typer.Option(
    config.TIMEOUT, "--timeout",
    envvar=config.TIMEOUT_ENV, min=0.0,
    help="Give up after this many seconds.",
)


# -- CLI entry point ----------------------------------------------------------


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """8-Puzzle solver: A* (Manhattan / Euclidean) and breadth-first search."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


@app.command()
def solve(
    board: str = typer.Argument(..., help=_BOARD_HELP),
    algorithm: Algorithm = typer.Option(
        Algorithm.ASTAR_MANHATTAN, "-a", "--algorithm",
        help="Search strategy.",
    ),
    goal: Optional[str] = _GOAL_OPTION,
    max_expansions: Optional[int] = _MAX_EXPANSIONS_OPTION,
    timeout: Optional[float] = _TIMEOUT_OPTION,
    animate: bool = typer.Option(
        False, "--animate/--no-animate",
        help="Replay the solution one board at a time.",
    ),
    delay: float = typer.Option(
        config.STEP_DELAY, "--delay",
        envvar=config.STEP_DELAY_ENV, min=0.0,
        help="Seconds between boards when animating.",
    ),
) -> None:
    """Solve BOARD and print every step of the optimal path."""
    initial = _parse_board(board)
    target = _parse_board(goal) if goal else GOAL

    outcome = Solver.solve(initial, target, algorithm, _limits(max_expansions, timeout))
    if not outcome:
        console.print(render_summary(outcome))
        raise typer.Exit(code=1)

    if animate:
        from puzzleview.cli.app import animate_solution

        animate_solution(outcome, delay, out=console)
    else:
        console.print(render_path(outcome, target))
    console.print(render_summary(outcome))


@app.command()
def compare(
    board: str = typer.Argument(..., help=_BOARD_HELP),
    goal: Optional[str] = _GOAL_OPTION,
    max_expansions: Optional[int] = _MAX_EXPANSIONS_OPTION,
    timeout: Optional[float] = _TIMEOUT_OPTION,
) -> None:
    """Run every algorithm on BOARD and tabulate moves and expansions."""
    initial = _parse_board(board)
    target = _parse_board(goal) if goal else GOAL
    limits = _limits(max_expansions, timeout)

    outcomes = [Solver.solve(initial, target, algo, limits) for algo in Algorithm]
    console.print(render_board(initial, target))
    console.print(render_comparison(outcomes))
    if not all(outcomes):
        raise typer.Exit(code=1)


@app.command()
def check(
    board: str = typer.Argument(..., help=_BOARD_HELP),
    goal: Optional[str] = _GOAL_OPTION,
) -> None:
    """Report whether BOARD can reach the goal."""
    initial = _parse_board(board)
    target = _parse_board(goal) if goal else GOAL
    solvable = Solver.is_solvable(initial, target)

    console.print(render_check(initial, count_inversions(initial), solvable))
    if not solvable:
        raise typer.Exit(code=1)


@app.command()
def shuffle(
    steps: int = typer.Option(
        config.SHUFFLE_STEPS, "-n", "--steps",
        envvar=config.SHUFFLE_STEPS_ENV, min=0,
        help="Random slides applied to the goal.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible scramble.",
    ),
) -> None:
    """Print a random board that is solvable by construction."""
    board = GameGenerator.shuffle(GOAL, steps, random.Random(seed))
    console.print(render_board(board))
    console.print(",".join(str(v) for v in board.cells), highlight=False)


@app.command()
def play(
    steps: int = typer.Option(
        config.SHUFFLE_STEPS, "-n", "--steps",
        envvar=config.SHUFFLE_STEPS_ENV, min=1,
        help="Random slides per shuffle.",
    ),
    max_expansions: Optional[int] = _MAX_EXPANSIONS_OPTION,
    timeout: Optional[float] = _TIMEOUT_OPTION,
    delay: float = typer.Option(
        config.STEP_DELAY, "--delay",
        envvar=config.STEP_DELAY_ENV, min=0.0,
        help="Seconds between boards during playback.",
    ),
) -> None:
    """Interactive session: shuffle, choose an algorithm, solve, and step."""
    from puzzleview.cli.app import run

    run(shuffle_steps=steps, limits=_limits(max_expansions, timeout), delay=delay)


if __name__ == "__main__":
    app()
