"""Rich renderables for boards, solutions, and search summaries."""

from __future__ import annotations

from collections.abc import Sequence

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from puzzlecore.engine.playback import PlaybackStep
from puzzlecore.engine.search import NoSolution, SearchOutcome, Solution
from puzzlecore.models.board import GOAL, Board

_RATING_STYLE = {
    "excellent": "bold green",
    "good": "bold yellow",
    "average": "bold red",
}


# -- board rendering ----------------------------------------------------------


def render_board(
    board: Board,
    goal: Board = GOAL,
    highlight: int | None = None,
) -> Table:
    """Return a Rich Table representing the puzzle grid.

    Tiles already on their goal cell are green; *highlight* marks the
    tile that just moved.
    """
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(3):
        table.add_column(width=2, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif val == highlight:
                cells.append(f"[bold black on yellow]{val}[/bold black on yellow]")
            elif board.is_tile_correct(r, c, goal):
                cells.append(f"[bold green]{val}[/bold green]")
            else:
                cells.append(f"[bold white]{val}[/bold white]")
        table.add_row(*cells)

    return table


def render_step(step: PlaybackStep, goal: Board = GOAL) -> Panel:
    move = step.move.value if step.move else "initial"
    title = f"[bold cyan]Step {step.index}/{step.total - 1}[/bold cyan]  [dim]{move}[/dim]"
    return Panel(
        Align.center(render_board(step.board, goal, step.moved_tile)),
        title=title,
        border_style="cyan",
        padding=(0, 1),
    )


def render_path(solution: Solution, goal: Board = GOAL) -> Columns:
    """Every board of *solution* side by side, in order."""
    panels = []
    for i, entry in enumerate(solution.path):
        label = entry.move.value if entry.move else "initial"
        panels.append(
            Panel(
                render_board(entry.board, goal),
                title=f"{i}. {label}",
                border_style="dim",
                box=rich.box.ROUNDED,
            )
        )
    return Columns(panels)


# -- summaries ----------------------------------------------------------------


def render_summary(outcome: SearchOutcome) -> Panel:
    table = Table.grid(padding=(0, 2))
    table.add_column(style="dim")
    table.add_column(style="bold yellow")
    table.add_row("Algorithm", outcome.algorithm)

    if isinstance(outcome, NoSolution):
        table.add_row("Result", f"[bold red]no solution ({outcome.termination.value})[/bold red]")
        table.add_row("Expanded", str(outcome.nodes_expanded))
        table.add_row("Time", f"{outcome.elapsed * 1000:.1f} ms")
        return Panel(table, title="[bold red]Search failed[/bold red]", border_style="red")

    style = _RATING_STYLE[outcome.rating]
    table.add_row("Moves", str(outcome.moves))
    table.add_row("Expanded", str(outcome.nodes_expanded))
    table.add_row("Time", f"{outcome.elapsed * 1000:.1f} ms")
    table.add_row("Rating", f"[{style}]{outcome.rating}[/{style}]")
    if outcome.directions:
        table.add_row("Sequence", " ".join(d.value for d in outcome.directions))
    return Panel(table, title="[bold green]Solved[/bold green]", border_style="green")


def render_comparison(outcomes: Sequence[SearchOutcome]) -> Table:
    table = Table(
        title="Algorithm comparison",
        title_style="bold cyan",
        box=rich.box.ROUNDED,
        border_style="dim",
    )
    table.add_column("Algorithm")
    table.add_column("Moves", justify="right", style="yellow")
    table.add_column("Expanded", justify="right", style="yellow")
    table.add_column("Time", justify="right", style="dim")

    for outcome in outcomes:
        moves = str(outcome.moves) if isinstance(outcome, Solution) else "-"
        table.add_row(
            outcome.algorithm,
            moves,
            str(outcome.nodes_expanded),
            f"{outcome.elapsed * 1000:.1f} ms",
        )
    return table


def render_check(board: Board, inversions: int, solvable: bool) -> Group:
    verdict = (
        Text("solvable", style="bold green")
        if solvable
        else Text("unsolvable", style="bold red")
    )
    line = Text.assemble(("Inversions: ", "dim"), (str(inversions), "bold yellow"), "   ", verdict)
    return Group(render_board(board), line)
