"""Vanilla terminal frontend — no third-party dependencies.

Prints the solver result in the classic plain-text layout: either
``No solution possible`` or the minimum move count followed by every board
of the solution, each rendered with ``str(board)``.
"""

from __future__ import annotations

import sys
from typing import TextIO

from slider.engine.puzzlesolver import Heuristic, Solver
from slider.models.board import Board

UNSOLVABLE_MESSAGE = "No solution possible"


# -- rendering ----------------------------------------------------------------


def render(solver: Solver) -> str:
    """Return the full text report for a finished *solver*."""
    solution = solver.solution()
    if solution is None:
        return UNSOLVABLE_MESSAGE + "\n"
    parts = [f"Minimum number of moves = {solver.moves()}\n"]
    parts.extend(f"{board}\n" for board in solution)
    return "".join(parts)


# -- public entry point -------------------------------------------------------


def run(
    board: Board,
    heuristic: Heuristic = Heuristic.MANHATTAN,
    closed_set: bool = True,
    out: TextIO | None = None,
) -> Solver:
    """Solve *board* and print the report."""
    solver = Solver(board, heuristic=heuristic, closed_set=closed_set)
    stream = out or sys.stdout
    stream.write(render(solver))
    stream.flush()
    return solver
