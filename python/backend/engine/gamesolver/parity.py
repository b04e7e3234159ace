"""Solvability oracle and parity repair."""

from __future__ import annotations

import logging

from backend.models.board import BLANK, Board

logger = logging.getLogger(__name__)


def count_inversions(board: Board) -> int:
    """Number of out-of-order pairs among the non-blank tiles."""
    flat = [v for v in board.cells if v != BLANK]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    return inversions


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach the goal state.

    With an odd column count every slide keeps the inversion parity, so
    the inversions alone decide.  With an even count a vertical slide
    flips it, so the blank's distance from the last row is added in.
    """
    inversions = count_inversions(board)
    if board.cols % 2 == 1:
        return inversions % 2 == 0
    blank_row = board.blank // board.cols
    return (inversions + (board.rows - 1 - blank_row)) % 2 == 0


def repair_to_solvable(board: Board) -> Board:
    """Make *board* solvable in place and return it.

    Swaps the first row-major pair of neighbouring non-blank tiles.  A
    single transposition flips the parity, so at most one swap happens.
    """
    cells = board.cells
    while not is_solvable(board):
        for k in range(len(cells) - 1):
            if cells[k] != BLANK and cells[k + 1] != BLANK:
                logger.info(
                    "Unsolvable board: swapping tiles %d and %d",
                    cells[k],
                    cells[k + 1],
                )
                board.transpose_tiles(k, k + 1)
                break
    return board
