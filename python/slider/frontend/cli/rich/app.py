"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the same solver
as the vanilla CLI. Each board of the solution is drawn as a grid with the
tiles already in their goal cell highlighted.
"""

from __future__ import annotations

import rich.box
from rich.align import Align
from rich.columns import Columns
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from slider.engine.puzzlesolver import Heuristic, Solver
from slider.models.board import Board


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif board.is_tile_correct(r, c):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _step_panel(board: Board, step: int) -> Panel:
    return Panel(
        Align.center(_render_board(board)),
        title=f"[cyan]{step}[/cyan]" if step else "[cyan]start[/cyan]",
        border_style="green" if board.is_goal() else "bright_blue",
        padding=(0, 1),
    )


# -- report -------------------------------------------------------------------


def render(solver: Solver) -> RenderableType:
    """Return a renderable report for a finished *solver*."""
    size = solver.initial.size
    title = f"[bold]Sliding Puzzle  {size}×{size}[/bold]"
    solution = solver.solution()

    if solution is None:
        body = Group(
            Align.center(_render_board(solver.initial)),
            Text(""),
            Align.center(Text("No solution possible", style="bold red")),
        )
        return Panel(body, title=title, border_style="red", padding=(1, 2))

    summary = Text()
    summary.append("Minimum number of moves = ", style="dim")
    summary.append(str(solver.moves()), style="bold yellow")
    summary.append(f"    ({solver.expanded} nodes expanded)", style="dim")

    steps = Columns(
        [_step_panel(board, i) for i, board in enumerate(solution)],
        padding=(0, 1),
    )
    body = Group(Align.center(summary), Text(""), steps)
    return Panel(body, title=title, border_style="bright_blue", padding=(1, 2))


# -- public entry point -------------------------------------------------------


def run(
    board: Board,
    heuristic: Heuristic = Heuristic.MANHATTAN,
    closed_set: bool = True,
    console: Console | None = None,
) -> Solver:
    """Solve *board* and print a Rich report."""
    console = console or Console()
    with console.status("[cyan]Solving…[/cyan]"):
        solver = Solver(board, heuristic=heuristic, closed_set=closed_set)
    console.print(render(solver))
    return solver
