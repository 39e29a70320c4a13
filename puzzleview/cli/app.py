"""Interactive rich session: scramble, pick an algorithm, solve, and step.

The search runs to completion before anything is shown; the session only
replays the returned path, one board per key press or timer tick.
"""

from __future__ import annotations

import sys
import time

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from puzzlecore import config
from puzzlecore.engine.gamegenerator import GameGenerator
from puzzlecore.engine.gamesolver import Algorithm, Solver
from puzzlecore.engine.heuristics import manhattan
from puzzlecore.engine.moves import apply_move
from puzzlecore.engine.playback import SolutionPlayer
from puzzlecore.engine.search import SearchLimits, Solution
from puzzlecore.errors import IllegalMoveError
from puzzlecore.models.board import GOAL, Board, Direction
from puzzleview.cli.input_handler import get_key, get_key_timeout
from puzzleview.cli.render import render_board, render_step

console = Console()

_ALGORITHMS = list(Algorithm)

_DIRECTION_KEYS = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


# -- non-interactive animation -------------------------------------------------


def animate_solution(
    solution: Solution,
    delay: float = config.STEP_DELAY,
    out: Console | None = None,
) -> None:
    """Print every step of *solution*, pausing *delay* seconds between boards."""
    out = out or console
    player = SolutionPlayer(solution)
    while (step := player.step()) is not None:
        if step.index > 0 and delay > 0:
            time.sleep(delay)
        out.print(Align.center(render_step(step)))


# -- screens ------------------------------------------------------------------


def _draw(session: _Session, status: str = "") -> None:
    console.clear()

    board = session.board
    info = Text()
    info.append("  Algorithm: ", style="dim")
    info.append(session.algorithm.label, style="bold cyan")
    info.append("    Manhattan: ", style="dim")
    info.append(str(manhattan(board)), style="bold yellow")
    if session.player is not None:
        info.append("    Step: ", style="dim")
        shown = max(session.player_index, 0)
        info.append(f"{shown}/{session.player.total - 1}", style="bold yellow")

    controls = Text()
    for key, label in (("M", "shuffle"), ("A", "algorithm"), ("V", "solve"),
                       ("N", "next"), ("P", "play"), ("R", "reset"), ("Q", "quit")):
        controls.append(f"  {key}", style="bold cyan")
        controls.append(f" {label} ", style="dim")

    title = (
        "[bold green]8-Puzzle  solved[/bold green]"
        if board.is_goal()
        else "[bold cyan]8-Puzzle[/bold cyan]"
    )
    panel = Panel(
        Align.center(render_board(board, highlight=session.highlight)),
        title=title,
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(info))
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


# -- session state ------------------------------------------------------------


class _Session:
    def __init__(self, shuffle_steps: int, limits: SearchLimits, delay: float) -> None:
        self.board: Board = GOAL
        self.algorithm: Algorithm = Algorithm.ASTAR_MANHATTAN
        self.player: SolutionPlayer | None = None
        self.player_index = -1
        self.highlight: int | None = None
        self.shuffle_steps = shuffle_steps
        self.limits = limits
        self.delay = delay

    def clear_solution(self) -> None:
        self.player = None
        self.player_index = -1
        self.highlight = None

    def advance(self) -> str:
        if self.player is None:
            return "[yellow]No solution loaded. Press V to solve first.[/yellow]"
        step = self.player.step()
        if step is None:
            return "[bold green]Solution complete.[/bold green]"
        self.board = step.board
        self.highlight = step.moved_tile
        self.player_index = step.index
        move = step.move.value if step.move else "initial"
        return f"[cyan]{move}[/cyan]  ({step.progress:.0%})"


# -- actions ------------------------------------------------------------------


def _solve(session: _Session) -> str:
    session.clear_solution()
    outcome = Solver.solve(session.board, GOAL, session.algorithm, session.limits)
    if not outcome:
        return "[red]No solution found. Try shuffling again.[/red]"
    session.player = SolutionPlayer(outcome)
    session.player.step()  # the first board is the one on screen
    session.player_index = 0
    return (
        f"[bold green]Solved in {outcome.moves} moves[/bold green] "
        f"[dim]({outcome.nodes_expanded} expanded, {outcome.rating})[/dim]"
    )


def _play(session: _Session) -> str:
    status = ""
    while session.player is not None and not session.player.finished:
        status = session.advance()
        _draw(session, status)
        sys.stdout.flush()
        if get_key_timeout(session.delay) == "quit":
            return "[yellow]Playback paused.[/yellow]"
    return status or session.advance()


# -- main loop ----------------------------------------------------------------


def _loop(session: _Session) -> None:
    status = ""
    while True:
        _draw(session, status)
        status = ""
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))
            return
        elif key == "shuffle":
            session.board = GameGenerator.generate(session.shuffle_steps)
            session.clear_solution()
            status = f"[yellow]Shuffled![/yellow] Manhattan {manhattan(session.board)}"
        elif key == "algorithm":
            i = _ALGORITHMS.index(session.algorithm)
            session.algorithm = _ALGORITHMS[(i + 1) % len(_ALGORITHMS)]
            session.clear_solution()
        elif key == "solve":
            status = _solve(session)
        elif key == "next":
            status = session.advance()
        elif key == "play":
            status = _play(session)
        elif key == "reset":
            session.board = GameGenerator.solved()
            session.clear_solution()
        elif key in _DIRECTION_KEYS:
            try:
                session.board = apply_move(session.board, _DIRECTION_KEYS[key])
            except IllegalMoveError:
                status = "[dim]Nothing to slide that way.[/dim]"
            else:
                session.clear_solution()


# -- public entry point -------------------------------------------------------


def run(
    shuffle_steps: int = config.SHUFFLE_STEPS,
    limits: SearchLimits | None = None,
    delay: float = config.STEP_DELAY,
) -> None:
    """Launch the interactive rich session."""
    _loop(_Session(shuffle_steps, limits or SearchLimits(), delay))

