from slider.engine.puzzlesolver.solver import Heuristic, SearchNode, Solver

__all__ = ["Heuristic", "SearchNode", "Solver"]
