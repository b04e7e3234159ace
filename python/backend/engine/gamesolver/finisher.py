"""Row and bottom-rows finishers.

The last two cells of a row (and the two cells of a column in the bottom
pair of rows) cannot be placed one after the other: once the first is
fixed, the second may sit in the dead-end *notch* beside it with no way
out that keeps the first in place.  Both are therefore staged together
and dropped in with one recipe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import NamedTuple

from backend.engine.gamesolver.macros import (
    COLUMN_CLOSE,
    COLUMN_RESCUE,
    ROW_CLOSE,
    ROW_RESCUE,
    Recipe,
)
from backend.engine.gamesolver.mover import Mover
from backend.engine.gamesolver.relocator import relocate
from backend.models.board import Direction

logger = logging.getLogger(__name__)


class PairLayout(NamedTuple):
    """Cells and recipes for placing two neighbouring tiles as a unit.

    ``first`` ends in ``notch`` and ``second`` in ``corner``.  ``first``
    is staged in ``corner`` and ``second`` in ``staging``; ``pivot`` is
    the open cell beside both ``notch`` and ``staging``.
    """

    first: int
    second: int
    notch: int
    corner: int
    staging: int
    pivot: int
    escape: Direction
    close: Recipe
    rescue: Recipe


def row_layout(rows: int, cols: int, row: int) -> PairLayout:
    """Layout for the last two cells of *row* (needs ``row <= rows - 3``)."""
    notch = row * cols + cols - 2
    return PairLayout(
        first=notch + 1,
        second=notch + 2,
        notch=notch,
        corner=notch + 1,
        staging=notch + 1 + cols,
        pivot=notch + cols,
        escape=Direction.DOWN,
        close=ROW_CLOSE,
        rescue=ROW_RESCUE,
    )


def column_layout(rows: int, cols: int, col: int) -> PairLayout:
    """Layout for column *col* of the last two rows (needs ``col <= cols - 3``)."""
    notch = (rows - 2) * cols + col
    corner = notch + cols
    return PairLayout(
        first=notch + 1,
        second=corner + 1,
        notch=notch,
        corner=corner,
        staging=corner + 1,
        pivot=notch + 1,
        escape=Direction.RIGHT,
        close=COLUMN_CLOSE,
        rescue=COLUMN_RESCUE,
    )


def finish_pair(mover: Mover, frozen: bytearray, layout: PairLayout) -> None:
    """Place ``layout.first`` and ``layout.second``; freeze both cells."""
    board = mover.board
    cells = board.cells
    if cells[layout.notch] == layout.first and cells[layout.corner] == layout.second:
        frozen[layout.notch] = frozen[layout.corner] = 1
        return

    relocate(mover, frozen, layout.first, layout.corner)
    frozen[layout.corner] = 1

    if board.blank == layout.notch:
        mover.move(layout.escape)

    if cells[layout.notch] == layout.second:
        logger.debug("pair %d/%d: second tile in notch, rescuing",
                     layout.first, layout.second)
        mover.route(layout.pivot, frozen, avoid=(layout.notch,))
        mover.macro(layout.rescue)
    else:
        frozen[layout.notch] = 1
        relocate(mover, frozen, layout.second, layout.staging)
        frozen[layout.notch] = 0
        frozen[layout.staging] = 1
        mover.route(layout.notch, frozen)
        mover.macro(layout.close)
        frozen[layout.staging] = 0

    frozen[layout.notch] = frozen[layout.corner] = 1


def finish_row(mover: Mover, frozen: bytearray, row: int) -> None:
    """Place the last two cells of *row* together."""
    board = mover.board
    finish_pair(mover, frozen, row_layout(board.rows, board.cols, row))


def solve_2x1(mover: Mover, frozen: bytearray, col: int) -> None:
    """Place the vertical pair in column *col* of the last two rows."""
    board = mover.board
    finish_pair(mover, frozen, column_layout(board.rows, board.cols, col))


def place_row(mover: Mover, frozen: bytearray, row: int) -> None:
    """Solve *row* completely: leading cells one by one, then the pair."""
    cols = mover.board.cols
    for col in range(cols - 2):
        target = row * cols + col
        relocate(mover, frozen, target + 1, target)
        frozen[target] = 1
    finish_row(mover, frozen, row)


def finish_bottom_rows(
    mover: Mover,
    frozen: bytearray,
    on_phase: Callable[[str], object] | None = None,
) -> None:
    """Solve row M-3 and the leading column pairs of the last two rows.

    *on_phase* is called with a label after each row or column pair;
    it defaults to cutting the mover's log into a segment.
    """
    board = mover.board
    close = on_phase or mover.cut
    if board.rows >= 3:
        place_row(mover, frozen, board.rows - 3)
        close(f"row {board.rows - 3}")
    for col in range(board.cols - 2):
        solve_2x1(mover, frozen, col)
        close(f"column {col}")
