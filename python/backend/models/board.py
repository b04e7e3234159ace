"""Board model for the M×N sliding puzzle."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

BLANK = 0


# -- errors -------------------------------------------------------------------


class PuzzleError(Exception):
    """Base class for every puzzle error."""


class NotFoundError(PuzzleError, LookupError):
    """A value that must be on the board is missing."""


class OutOfBoundsError(PuzzleError, IndexError):
    """The blank was asked to slide off the grid."""


class SolverError(PuzzleError, RuntimeError):
    """A solver routine was called outside its precondition."""


# -- directions ---------------------------------------------------------------


class Direction(StrEnum):
    """Direction the *blank* slides in."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITE[self]

    @property
    def transposed(self) -> Direction:
        """Mirror across the main diagonal (rows become columns)."""
        return _TRANSPOSED[self]

    @classmethod
    def between(cls, src: tuple[int, int], dst: tuple[int, int]) -> Direction:
        """Return the direction leading from *src* to the adjacent *dst*."""
        delta = (dst[0] - src[0], dst[1] - src[1])
        for d, dd in _DELTAS.items():
            if dd == delta:
                return d
        raise ValueError(f"Cells {src} and {dst} are not adjacent.")


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}
_OPPOSITE = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}
_TRANSPOSED = {
    Direction.UP: Direction.LEFT,
    Direction.LEFT: Direction.UP,
    Direction.DOWN: Direction.RIGHT,
    Direction.RIGHT: Direction.DOWN,
}


# -- board --------------------------------------------------------------------


@dataclass
class Board:
    """Represents a rows × cols sliding puzzle.

    Cells are stored flat in row-major order; ``0`` is the blank.  The
    blank index is cached and only changes through :meth:`slide`.
    """

    rows: int
    cols: int
    cells: list[int]
    blank: int = field(init=False)

    def __post_init__(self) -> None:
        if self.rows < 2 or self.cols < 2:
            raise ValueError(
                f"Boards need at least 2 rows and 2 columns, "
                f"got {self.rows}×{self.cols}."
            )
        total = self.rows * self.cols
        if len(self.cells) != total:
            raise ValueError(
                f"Expected {total} cells for a {self.rows}×{self.cols} board, "
                f"got {len(self.cells)}."
            )
        if sorted(self.cells) != list(range(total)):
            raise ValueError(
                f"Cells must be a permutation of 0..{total - 1}."
            )
        self.blank = self.cells.index(BLANK)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_flat(cls, rows: int, cols: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major list.

        Example::

            Board.from_flat(2, 3, [1, 2, 3, 4, 0, 5])
        """
        return cls(rows=rows, cols=cols, cells=list(flat))

    @classmethod
    def from_rows(cls, tiles: list[list[int]]) -> Board:
        """Create a board from a list of rows."""
        if not tiles or any(len(row) != len(tiles[0]) for row in tiles):
            raise ValueError("Rows must be non-empty and of equal length.")
        return cls(
            rows=len(tiles),
            cols=len(tiles[0]),
            cells=[v for row in tiles for v in row],
        )

    @classmethod
    def solved(cls, rows: int, cols: int) -> Board:
        """Return the goal board: ascending tiles, blank bottom-right."""
        return cls(
            rows=rows, cols=cols, cells=list(range(1, rows * cols)) + [BLANK]
        )

    # -- coordinates ----------------------------------------------------------

    def index(self, row: int, col: int) -> int:
        return row * self.cols + col

    def position(self, index: int) -> tuple[int, int]:
        return divmod(index, self.cols)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbors(self, index: int) -> list[tuple[Direction, int]]:
        """Adjacent cells of *index*, in UP, DOWN, LEFT, RIGHT order."""
        r, c = self.position(index)
        out: list[tuple[Direction, int]] = []
        for d in Direction:
            dr, dc = d.delta
            if self.in_bounds(r + dr, c + dc):
                out.append((d, self.index(r + dr, c + dc)))
        return out

    # -- queries --------------------------------------------------------------

    @property
    def blank_pos(self) -> tuple[int, int]:
        return self.position(self.blank)

    def get_tile(self, row: int, col: int) -> int:
        return self.cells[self.index(row, col)]

    def locate(self, value: int) -> int:
        """Return the cell index holding *value*."""
        for i, v in enumerate(self.cells):
            if v == value:
                return i
        raise NotFoundError(f"Value {value} is not on the board.")

    def is_solved(self) -> bool:
        """Check if all tiles are in their goal positions."""
        last = self.rows * self.cols - 1
        if self.cells[last] != BLANK:
            return False
        return all(self.cells[k] == k + 1 for k in range(last))

    def is_tile_correct(self, row: int, col: int) -> bool:
        """Check if a specific cell holds its goal value."""
        i = self.index(row, col)
        val = self.cells[i]
        if val == BLANK:
            return i == self.rows * self.cols - 1
        return val == i + 1

    def tiles(self) -> list[list[int]]:
        return [
            self.cells[r * self.cols : (r + 1) * self.cols]
            for r in range(self.rows)
        ]

    def copy(self) -> Board:
        return Board(rows=self.rows, cols=self.cols, cells=self.cells[:])

    # -- mutation -------------------------------------------------------------

    def can_slide(self, direction: Direction) -> bool:
        r, c = self.blank_pos
        dr, dc = direction.delta
        return self.in_bounds(r + dr, c + dc)

    def slide(self, direction: Direction) -> None:
        """Swap the blank with its neighbour in *direction*."""
        r, c = self.blank_pos
        dr, dc = direction.delta
        if not self.in_bounds(r + dr, c + dc):
            raise OutOfBoundsError(
                f"Blank at {(r, c)} cannot move {direction.value} "
                f"on a {self.rows}×{self.cols} board."
            )
        target = self.index(r + dr, c + dc)
        cells = self.cells
        cells[self.blank], cells[target] = cells[target], BLANK
        self.blank = target

    def transpose_tiles(self, a: int, b: int) -> None:
        """Exchange two non-blank tiles (parity repair only)."""
        if BLANK in (self.cells[a], self.cells[b]):
            raise ValueError("transpose_tiles() cannot move the blank.")
        self.cells[a], self.cells[b] = self.cells[b], self.cells[a]

    def __str__(self) -> str:
        width = len(str(self.rows * self.cols - 1))
        return "\n".join(
            " ".join(
                f"{'.' if v == BLANK else v:>{width}}" for v in row
            )
            for row in self.tiles()
        )
