"""Tile relocator tests."""

from __future__ import annotations

import random

import pytest

from backend.engine.gamesolver.mover import Mover
from backend.engine.gamesolver.relocator import relocate
from backend.models.board import Board, SolverError


def _shuffled(rows: int, cols: int, seed: int) -> Board:
    cells = list(range(rows * cols))
    random.Random(seed).shuffle(cells)
    return Board.from_flat(rows, cols, cells)


@pytest.mark.parametrize("seed", range(25))
def test_relocate_to_origin(seed: int) -> None:
    board = _shuffled(5, 5, seed)
    mover = Mover(board)
    relocate(mover, bytearray(25), 1, 0)
    assert board.cells[0] == 1


def test_relocate_in_place_is_free() -> None:
    board = Board.solved(4, 4)
    mover = Mover(board)
    relocate(mover, bytearray(16), 6, 5)
    assert mover.log == []


def test_relocate_to_frozen_target() -> None:
    board = _shuffled(3, 3, 0)
    frozen = bytearray(9)
    frozen[4] = 1
    value = 5 if board.cells[4] != 5 else 6
    with pytest.raises(SolverError):
        relocate(Mover(board), frozen, value, 4)


def test_straight_push_uses_nudges() -> None:
    # Tile 7 at (1, 1) with the blank behind it, pushed to (1, 4).
    board = Board.from_flat(3, 5, [1, 2, 3, 4, 5, 0, 7, 8, 9, 10, 11, 12, 13, 14, 6])
    mover = Mover(board)
    relocate(mover, bytearray(15), 7, 9)
    assert board.cells[9] == 7
    assert len(mover.log) == 15
    assert board.blank == 8


@pytest.mark.parametrize("seed", range(10))
@pytest.mark.parametrize(
    "rows, cols", [(3, 3), (4, 4), (3, 7), (7, 3), (6, 5)], ids=str
)
def test_frozen_cells_are_never_touched(rows: int, cols: int, seed: int) -> None:
    board = _shuffled(rows, cols, seed)
    frozen = bytearray(rows * cols)
    mover = Mover(board)

    # Fill the first row left to right, leaving the last two cells open.
    for col in range(cols - 2):
        before = list(board.cells)
        relocate(mover, frozen, col + 1, col)
        for i in range(rows * cols):
            if frozen[i]:
                assert board.cells[i] == before[i]
        frozen[col] = 1

    assert board.cells[: cols - 2] == list(range(1, cols - 1))
