"""Endgame rotator for the bottom-right 2×2 block."""

from __future__ import annotations

from backend.engine.gamesolver.macros import ROTATION
from backend.engine.gamesolver.mover import Mover
from backend.models.board import SolverError

# Three rotations bring the block back to where it started.
ROTATION_PERIOD = 3


def rotate_endgame(mover: Mover, frozen: bytearray) -> int:
    """Park the blank bottom-right and rotate until solved.

    Every cell outside the 2×2 block must already be frozen.  Returns the
    number of rotations applied, at most two on a solvable board.
    """
    board = mover.board
    mover.route(board.rows * board.cols - 1, frozen)
    for applied in range(ROTATION_PERIOD):
        if board.is_solved():
            return applied
        mover.macro(ROTATION)
    raise SolverError("Final 2×2 block did not converge; board is unsolvable.")
