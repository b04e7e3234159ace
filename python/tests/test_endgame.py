"""Endgame rotator tests."""

from __future__ import annotations

import pytest

from backend.engine.gamesolver.endgame import rotate_endgame
from backend.engine.gamesolver.macros import ROTATION
from backend.engine.gamesolver.mover import Mover
from backend.models.board import Board, Direction, SolverError


def test_already_solved() -> None:
    mover = Mover(Board.solved(2, 2))
    assert rotate_endgame(mover, bytearray(4)) == 0
    assert mover.log == []


def test_parks_blank_then_rotates_twice() -> None:
    board = Board.from_flat(2, 2, [2, 0, 1, 3])
    mover = Mover(board)
    assert rotate_endgame(mover, bytearray(4)) == 2
    assert board.is_solved()
    assert mover.log == [Direction.DOWN, *ROTATION, *ROTATION]


def test_single_rotation() -> None:
    board = Board.from_flat(2, 2, [3, 1, 2, 0])
    mover = Mover(board)
    assert rotate_endgame(mover, bytearray(4)) == 1
    assert board.is_solved()


def test_block_of_a_larger_board() -> None:
    board = Board.from_flat(3, 3, [1, 2, 3, 4, 6, 8, 7, 5, 0])
    frozen = bytearray(9)
    for i in (0, 1, 2, 3, 6):
        frozen[i] = 1
    mover = Mover(board)
    rotate_endgame(mover, frozen)
    assert board.is_solved()


def test_unsolvable_block_raises() -> None:
    board = Board.from_flat(2, 2, [2, 1, 3, 0])
    mover = Mover(board)
    with pytest.raises(SolverError):
        rotate_endgame(mover, bytearray(4))
    assert len(mover.log) == 3 * len(ROTATION)
