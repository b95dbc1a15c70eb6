#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    slider solve puzzle04.txt              # plain-text report
    slider solve puzzle04.txt -f rich      # Rich terminal report
    slider solve puzzle04.txt --heuristic hamming --no-closed-set
    slider generate 3 --steps 20 --seed 7  # print a scrambled 3×3 board
"""

from __future__ import annotations

import importlib
import logging
import random
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from slider.engine.puzzlegenerator import PuzzleGenerator
from slider.engine.puzzleloader import load_board
from slider.engine.puzzlesolver import Heuristic

LOG_LEVEL_ENV = "SLIDER_LOG_LEVEL"
MIN_SIZE = 2
MAX_SIZE = 8

err_console = Console(stderr=True)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class LogLevel(StrEnum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


_RUNNERS = {
    Frontend.vanilla: "slider.frontend.cli.vanilla.app",
    Frontend.rich: "slider.frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False, help="Sliding Puzzle Solver.")


@app.callback()
def main(
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level",
        envvar=LOG_LEVEL_ENV,
        help="Logging level.",
    ),
) -> None:
    """Sliding Puzzle Solver."""
    _configure_logging(log_level)


@app.command()
def solve(
    path: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True,
        help="Puzzle file: N followed by N×N tiles, 0 for the blank.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output renderer.",
    ),
    heuristic: Heuristic = typer.Option(
        Heuristic.MANHATTAN, "--heuristic",
        help="A* heuristic.",
    ),
    closed_set: bool = typer.Option(
        True, "--closed-set/--no-closed-set",
        help="Skip boards that were already expanded.",
    ),
) -> None:
    """Solve the puzzle stored in PATH."""
    try:
        board = load_board(path)
    except ValueError as exc:
        err_console.print(f"[red]Cannot read {path}:[/red] {exc}")
        raise typer.Exit(code=1)

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(board, heuristic=heuristic, closed_set=closed_set)


@app.command()
def generate(
    size: int = typer.Argument(
        ..., min=MIN_SIZE, max=MAX_SIZE,
        help=f"Grid size ({MIN_SIZE}-{MAX_SIZE}).",
    ),
    steps: Optional[int] = typer.Option(
        None, "--steps", min=0,
        help="Random blank moves away from the goal (default 10·N²).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed for a reproducible board.",
    ),
) -> None:
    """Print a random solvable board in puzzle-file format."""
    board = PuzzleGenerator.generate(size, steps=steps, rng=random.Random(seed))
    typer.echo(PuzzleGenerator.to_text(board), nl=False)


if __name__ == "__main__":
    app()
