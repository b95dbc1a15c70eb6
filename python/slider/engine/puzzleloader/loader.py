"""Reads puzzle boards from the plain-text ``N`` followed by ``N²`` tiles format.

Example file::

    3
     0  1  3
     4  2  5
     7  8  6
"""

from __future__ import annotations

import logging
from pathlib import Path

from slider.models.board import Board

logger = logging.getLogger(__name__)


class BoardFormatError(ValueError):
    """Raised when puzzle text cannot be read as ``N`` and ``N²`` integers."""


def parse_board(text: str) -> Board:
    """Parse a board from puzzle text.

    Raises ``BoardFormatError`` for malformed text and
    ``InvalidBoardError`` when the tiles are not a permutation.
    """
    tokens = text.split()
    if not tokens:
        raise BoardFormatError("Puzzle text is empty.")
    try:
        values = [int(t) for t in tokens]
    except ValueError as exc:
        raise BoardFormatError(f"Puzzle text must contain only integers: {exc}") from exc

    size, tiles = values[0], values[1:]
    if size < 1:
        raise BoardFormatError(f"Board size must be at least 1, got {size}.")
    if len(tiles) != size * size:
        raise BoardFormatError(
            f"Expected {size * size} tiles for a {size}×{size} board, "
            f"got {len(tiles)}."
        )
    return Board.from_flat(size, tiles)


def load_board(path: Path) -> Board:
    """Read and parse the board stored at *path*."""
    logger.debug("Loading board from %s", path)
    return parse_board(Path(path).read_text())
