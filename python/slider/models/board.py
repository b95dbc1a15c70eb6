"""Board model for the sliding puzzle solver."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


class InvalidBoardError(ValueError):
    """Raised when a tile matrix is not a valid N×N permutation."""


@dataclass(frozen=True)
class Board:
    """An immutable N×N sliding puzzle configuration.

    Tiles are stored as a flat row-major tuple of ints. 0 represents the
    blank. The raw constructor trusts its input; use :meth:`from_rows` or
    :meth:`from_flat` for anything that comes from outside.
    """

    size: int
    tiles: tuple[int, ...]

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Board:
        """Create a board from an N×N matrix.

        Example::

            Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 0, 8]])
        """
        size = len(rows)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise InvalidBoardError(
                    f"Row {r} has {len(row)} tiles, expected {size} "
                    f"for a {size}×{size} board."
                )
        return cls.from_flat(size, [v for row in rows for v in row])

    @classmethod
    def from_flat(cls, size: int, flat: Iterable[int]) -> Board:
        """Create a board from a flat row-major tile list."""
        tiles = tuple(flat)
        if size < 1:
            raise InvalidBoardError(f"Board size must be at least 1, got {size}.")
        if len(tiles) != size * size:
            raise InvalidBoardError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(tiles)}."
            )
        if sorted(tiles) != list(range(size * size)):
            raise InvalidBoardError(
                f"Tiles must be a permutation of 0..{size * size - 1}."
            )
        return cls(size=size, tiles=tiles)

    @classmethod
    def goal(cls, size: int) -> Board:
        """Return the goal board (tiles in order, blank bottom-right)."""
        return cls(size=size, tiles=tuple(range(1, size * size)) + (0,))

    # -- queries --------------------------------------------------------------

    def dimension(self) -> int:
        return self.size

    def get_tile(self, row: int, col: int) -> int:
        return self.tiles[row * self.size + col]

    def rows(self) -> list[tuple[int, ...]]:
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def hamming(self) -> int:
        """Number of tiles out of place (the blank is not counted)."""
        return sum(
            1 for i, v in enumerate(self.tiles) if v != 0 and v != i + 1
        )

    def manhattan(self) -> int:
        """Sum of row and column distances of every tile to its goal cell."""
        n = self.size
        total = 0
        for i, v in enumerate(self.tiles):
            if v == 0 or v == i + 1:
                continue
            r, c = divmod(i, n)
            gr, gc = divmod(v - 1, n)
            total += abs(r - gr) + abs(c - gc)
        return total

    def is_goal(self) -> bool:
        """Check the numbered tiles only; the blank is last for any valid permutation."""
        last = len(self.tiles) - 1
        return all(self.tiles[i] == i + 1 for i in range(last))

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific tile is in its goal position."""
        i = row * self.size + col
        val = self.tiles[i]
        if val == 0:
            return i == len(self.tiles) - 1
        return val == i + 1

    def blank_index(self) -> int | None:
        try:
            return self.tiles.index(0)
        except ValueError:
            return None

    # -- derived boards -------------------------------------------------------

    def twin(self) -> Board | None:
        """Return the board with one fixed pair of same-row tiles exchanged.

        The first two cells of the top row are swapped unless one of them
        is the blank, in which case the first two cells of the second row
        are swapped. A 1×1 board has no twin and yields ``None``.
        """
        if self.size == 1:
            return None
        if self.tiles[0] != 0 and self.tiles[1] != 0:
            return self._swapped(0, 1)
        return self._swapped(self.size, self.size + 1)

    def neighbors(self) -> list[Board]:
        """Boards reachable by sliding one tile into the blank.

        Ordered by where the blank goes: up, down, left, right.
        """
        blank = self.blank_index()
        if blank is None:
            return []
        n = self.size
        r, c = divmod(blank, n)
        targets: list[int] = []
        if r > 0:
            targets.append(blank - n)
        if r < n - 1:
            targets.append(blank + n)
        if c > 0:
            targets.append(blank - 1)
        if c < n - 1:
            targets.append(blank + 1)
        return [self._swapped(blank, t) for t in targets]

    def _swapped(self, i: int, j: int) -> Board:
        tiles = list(self.tiles)
        tiles[i], tiles[j] = tiles[j], tiles[i]
        return Board(size=self.size, tiles=tuple(tiles))

    # -- rendering ------------------------------------------------------------

    def __str__(self) -> str:
        width = max(2, len(str(self.size * self.size - 1)))
        lines = [str(self.size)]
        for row in self.rows():
            lines.append("".join(f"{v:>{width}} " for v in row))
        return "\n".join(lines) + "\n"
