"""Generates sliding puzzle boards for the CLI and the test suite."""

from __future__ import annotations

import random

from slider.models.board import Board


class PuzzleGenerator:
    """Creates boards by walking the blank from the solved state, or by shuffling."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.goal(size)

    @staticmethod
    def scramble(
        board: Board, steps: int, rng: random.Random | None = None
    ) -> Board:
        """Return *board* after *steps* random blank moves.

        The blank never steps straight back to where it just was, so short
        walks do not cancel themselves out. The result is reachable from
        *board* and therefore shares its solvability.
        """
        rng = rng or random.Random()
        previous: Board | None = None
        for _ in range(steps):
            neighbors = board.neighbors()
            if previous in neighbors and len(neighbors) > 1:
                neighbors.remove(previous)
            previous, board = board, rng.choice(neighbors)
        return board

    @staticmethod
    def generate(
        size: int, steps: int | None = None, rng: random.Random | None = None
    ) -> Board:
        """Return a random *solvable* board of the given size."""
        if size < 2:
            raise ValueError(f"Cannot scramble a {size}×{size} board.")
        rng = rng or random.Random()
        if steps is None:
            steps = size * size * 10
        board = PuzzleGenerator.scramble(PuzzleGenerator.solved(size), steps, rng)

        # Ensure the board is not already solved
        while board.is_goal():
            board = PuzzleGenerator.scramble(board, max(steps, 1), rng)

        return board

    @staticmethod
    def shuffle(size: int, rng: random.Random | None = None) -> Board:
        """Return a uniformly random permutation, solvable or not."""
        rng = rng or random.Random()
        tiles = list(range(size * size))
        rng.shuffle(tiles)
        return Board(size=size, tiles=tuple(tiles))

    @staticmethod
    def to_text(board: Board) -> str:
        """Serialise *board* in the loader's ``N`` + tiles text format."""
        width = len(str(board.size * board.size - 1))
        lines = [str(board.size)]
        for row in board.rows():
            lines.append(" ".join(f"{v:>{width}}" for v in row))
        return "\n".join(lines) + "\n"
