"""Solver test suite.

Boards with hand-verified optimal move counts are JSON fixtures under
``<project_root>/fixtures/``. Small state spaces are also cross-checked
against an exhaustive breadth-first search, which gives the true optimal
distance independently of any heuristic.
"""

from __future__ import annotations

import itertools
import json
import random
from collections import deque
from pathlib import Path

import pytest

from slider.engine.puzzlegenerator import PuzzleGenerator
from slider.engine.puzzlesolver import Heuristic, SearchNode, Solver
from slider.models.board import Board

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


# Loaded once at import time; each entry becomes one parametrised case.
_SOLVABLE = _load("solvable.json")
_UNSOLVABLE = _load("unsolvable.json")


# -- helpers ------------------------------------------------------------------


def _distances_from_goal(size: int) -> dict[Board, int]:
    """BFS over every board reachable from the goal (moves are reversible)."""
    goal = Board.goal(size)
    dist = {goal: 0}
    queue = deque([goal])
    while queue:
        board = queue.popleft()
        for nb in board.neighbors():
            if nb not in dist:
                dist[nb] = dist[board] + 1
                queue.append(nb)
    return dist


def _bfs_moves(board: Board) -> int:
    """Optimal move count for a solvable board, by plain BFS."""
    dist = {board: 0}
    queue = deque([board])
    while queue:
        current = queue.popleft()
        if current.is_goal():
            return dist[current]
        for nb in current.neighbors():
            if nb not in dist:
                dist[nb] = dist[current] + 1
                queue.append(nb)
    raise AssertionError("board is not solvable")


def _assert_solution(solver: Solver, initial: Board) -> None:
    """Check the returned path is a valid, goal-reaching slide sequence."""
    solution = solver.solution()
    assert solution is not None
    assert solution[0] == initial
    assert solution[-1].is_goal()
    assert len(solution) - 1 == solver.moves()
    for before, after in zip(solution, solution[1:]):
        assert after in before.neighbors()


_ALL_2X2 = [
    Board(size=2, tiles=p) for p in itertools.permutations(range(4))
]
_DIST_2X2 = _distances_from_goal(2)


# -- fixtures -----------------------------------------------------------------


@pytest.mark.parametrize("board_data", _SOLVABLE, ids=_ids)
def test_solve_fixture(board_data: dict) -> None:
    initial = Board.from_rows(board_data["tiles"])
    solver = Solver(initial)

    assert solver.is_solvable()
    assert solver.moves() == board_data["moves"]
    _assert_solution(solver, initial)


@pytest.mark.parametrize("board_data", _UNSOLVABLE, ids=_ids)
def test_unsolvable_fixture(board_data: dict) -> None:
    solver = Solver(Board.from_rows(board_data["tiles"]))

    assert not solver.is_solvable()
    assert solver.moves() == -1
    assert solver.solution() is None


@pytest.mark.parametrize("heuristic", list(Heuristic))
@pytest.mark.parametrize("closed_set", [True, False], ids=["closed", "pred-only"])
@pytest.mark.parametrize("board_data", _SOLVABLE, ids=_ids)
def test_solve_fixture_with_every_option(
    board_data: dict, heuristic: Heuristic, closed_set: bool
) -> None:
    initial = Board.from_rows(board_data["tiles"])
    solver = Solver(initial, heuristic=heuristic, closed_set=closed_set)

    assert solver.moves() == board_data["moves"]
    _assert_solution(solver, initial)


# -- concrete scenarios -------------------------------------------------------


def test_goal_board_short_circuits() -> None:
    goal = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
    solver = Solver(goal)

    assert solver.is_solvable()
    assert solver.moves() == 0
    assert solver.solution() == [goal]
    assert solver.expanded == 0


def test_classic_unsolvable_3x3() -> None:
    solver = Solver(Board.from_rows([[1, 2, 3], [4, 5, 6], [8, 7, 0]]))

    assert solver.is_solvable() is False
    assert solver.moves() == -1
    assert solver.solution() is None


def test_2x2_blank_in_top_row_is_unsolvable() -> None:
    board = Board.from_rows([[1, 0], [2, 3]])

    assert board not in _DIST_2X2
    assert not Solver(board).is_solvable()
    assert Solver(board.twin()).is_solvable()


def test_single_cell_board_never_builds_a_twin(monkeypatch) -> None:
    def _no_twin(self):
        raise AssertionError("twin() must not be called for a 1×1 board")

    monkeypatch.setattr(Board, "twin", _no_twin)
    board = Board.from_rows([[0]])
    solver = Solver(board)

    assert solver.is_solvable()
    assert solver.moves() == 0
    assert solver.solution() == [board]


def test_unsolved_board_without_twin_raises(monkeypatch) -> None:
    monkeypatch.setattr(Board, "twin", lambda self: None)

    with pytest.raises(ValueError, match="no twin"):
        Solver(Board.from_rows([[1, 2], [0, 3]]))


# -- exhaustive 2x2 -----------------------------------------------------------


@pytest.mark.parametrize("closed_set", [True, False], ids=["closed", "pred-only"])
def test_every_2x2_board_matches_bfs(closed_set: bool) -> None:
    assert len(_DIST_2X2) == 12
    for board in _ALL_2X2:
        solver = Solver(board, closed_set=closed_set)
        if board in _DIST_2X2:
            assert solver.moves() == _DIST_2X2[board]
            _assert_solution(solver, board)
        else:
            assert not solver.is_solvable()


def test_exactly_one_of_2x2_board_and_twin_is_solvable() -> None:
    for board in _ALL_2X2:
        assert (board in _DIST_2X2) != (board.twin() in _DIST_2X2)


def test_heuristics_are_admissible_on_2x2() -> None:
    for board, distance in _DIST_2X2.items():
        assert board.manhattan() <= distance
        assert board.hamming() <= distance


# -- random 3x3 ---------------------------------------------------------------


@pytest.mark.parametrize("seed", range(12))
def test_random_scramble_matches_bfs(seed: int) -> None:
    rng = random.Random(seed)
    board = PuzzleGenerator.generate(3, steps=14, rng=rng)
    optimal = _bfs_moves(board)

    assert board.manhattan() <= optimal
    for closed_set in (True, False):
        solver = Solver(board, closed_set=closed_set)
        assert solver.moves() == optimal
        _assert_solution(solver, board)


@pytest.mark.parametrize("seed", range(6))
def test_twin_of_scramble_is_unsolvable(seed: int) -> None:
    rng = random.Random(seed)
    board = PuzzleGenerator.generate(3, steps=10, rng=rng)
    solver = Solver(board.twin())

    assert not solver.is_solvable()
    assert solver.moves() == -1
    assert solver.solution() is None


# -- search nodes -------------------------------------------------------------


def test_search_node_path_walks_predecessors() -> None:
    goal = Board.goal(2)
    a, b = goal.neighbors()
    root = SearchNode(a, 0)
    child = SearchNode(goal, 1, root)
    sibling = SearchNode(b, 1, root)

    assert child.path() == [a, goal]
    assert sibling.path() == [a, b]
    assert root.path() == [a]
