"""Optimal sliding puzzle solver (A* with twin-board unsolvability detection)."""

from slider.engine.puzzlesolver import Heuristic, Solver
from slider.models import Board, InvalidBoardError

__all__ = ["Board", "Heuristic", "InvalidBoardError", "Solver"]
__version__ = "1.0.0"
