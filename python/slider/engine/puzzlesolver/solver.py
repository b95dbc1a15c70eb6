"""Sliding puzzle solver.

A* search ordered by ``heuristic(board) + moves``. Unsolvable boards are
detected without a parity formula: the same search runs in lockstep on the
board's twin (one adjacent same-row swap), and exactly one of the two can
ever reach the goal.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from slider.models.board import Board

logger = logging.getLogger(__name__)


class Heuristic(StrEnum):
    MANHATTAN = "manhattan"
    HAMMING = "hamming"


@dataclass(frozen=True, eq=False)
class SearchNode:
    """One step of a search path: a board, its depth and where it came from."""

    board: Board
    moves: int
    previous: SearchNode | None = None

    def path(self) -> list[Board]:
        """Boards from the root to this node, in forward order."""
        boards: list[Board] = []
        node: SearchNode | None = self
        while node is not None:
            boards.append(node.board)
            node = node.previous
        boards.reverse()
        return boards


Priority = Callable[[SearchNode], int]


def priority_for(heuristic: Heuristic) -> Priority:
    """Return the A* priority function for *heuristic*."""
    if heuristic is Heuristic.HAMMING:
        return lambda node: node.board.hamming() + node.moves
    return lambda node: node.board.manhattan() + node.moves


class _Search:
    """A single best-first search that advances one expansion per step."""

    def __init__(self, root: Board, priority: Priority, closed_set: bool) -> None:
        self._priority = priority
        self._heap: list[tuple[int, int, SearchNode]] = []
        self._counter = itertools.count()
        self._closed: set[Board] | None = set() if closed_set else None
        self.current: SearchNode | None = SearchNode(root, 0)
        self.expanded = 0

    @property
    def exhausted(self) -> bool:
        return self.current is None

    @property
    def reached_goal(self) -> bool:
        return self.current is not None and self.current.board.is_goal()

    def step(self) -> None:
        """Expand the current minimum and pop the next one."""
        node = self.current
        if node is None:
            return
        self.expanded += 1
        if self._closed is not None:
            self._closed.add(node.board)
        undo = node.previous.board if node.previous is not None else None
        for board in node.board.neighbors():
            if board == undo:
                continue
            if self._closed is not None and board in self._closed:
                continue
            child = SearchNode(board, node.moves + 1, node)
            heapq.heappush(
                self._heap, (self._priority(child), next(self._counter), child)
            )
        self.current = self._pop()

    def _pop(self) -> SearchNode | None:
        while self._heap:
            node = heapq.heappop(self._heap)[2]
            if self._closed is None or node.board not in self._closed:
                return node
        return None


class Solver:
    """Finds a minimum-move solution for a board, or proves there is none.

    The whole search runs in the constructor; afterwards the results are
    available from :meth:`is_solvable`, :meth:`moves` and :meth:`solution`.
    """

    def __init__(
        self,
        initial: Board,
        heuristic: Heuristic = Heuristic.MANHATTAN,
        closed_set: bool = True,
    ) -> None:
        self.initial = initial
        self.heuristic = heuristic
        self.expanded = 0
        self._goal: SearchNode | None = None
        self._solve(priority_for(heuristic), closed_set)

    def _solve(self, priority: Priority, closed_set: bool) -> None:
        primary = _Search(self.initial, priority, closed_set)
        logger.debug(
            "Solving %d×%d board (%s, closed set %s)",
            self.initial.size, self.initial.size, self.heuristic, closed_set,
        )

        # A goal board (always the case for 1×1) never needs a twin.
        if primary.reached_goal:
            self._goal = primary.current
            logger.debug("Board is already solved")
            return

        twin_board = self.initial.twin()
        if twin_board is None:
            raise ValueError(
                f"Board of size {self.initial.size} is not solved and has no twin."
            )
        twin = _Search(twin_board, priority, closed_set)

        while not primary.reached_goal and not twin.reached_goal:
            if primary.exhausted:
                break
            primary.step()
            twin.step()

        self.expanded = primary.expanded + twin.expanded
        if primary.reached_goal:
            self._goal = primary.current
            logger.debug(
                "Solved in %d moves after %d expansions",
                self._goal.moves, self.expanded,
            )
        else:
            logger.debug("Board is unsolvable (%d expansions)", self.expanded)

    # -- results --------------------------------------------------------------

    def is_solvable(self) -> bool:
        return self._goal is not None

    def moves(self) -> int:
        """Minimum number of moves to solve the board; -1 if unsolvable."""
        if self._goal is None:
            return -1
        return self._goal.moves

    def solution(self) -> list[Board] | None:
        """Boards from the initial one to the goal; ``None`` if unsolvable."""
        if self._goal is None:
            return None
        return self._goal.path()
