"""Recipe pre/postconditions on small synthetic boards."""

from __future__ import annotations

import pytest

from backend.engine.gamesolver.macros import (
    COLUMN_CLOSE,
    COLUMN_RESCUE,
    NUDGES,
    ROTATION,
    ROW_CLOSE,
    ROW_RESCUE,
    transpose,
)
from backend.engine.gamesolver.mover import Mover
from backend.models.board import Board, Direction


def _run(board: Board, recipe) -> Board:
    Mover(board).macro(recipe)
    return board


# -- nudges -------------------------------------------------------------------


@pytest.mark.parametrize(
    "travel, side", list(NUDGES), ids=lambda d: d.value
)
def test_nudge_advances_tile_inside_window(travel: Direction, side: Direction) -> None:
    # 5×5 board, tile in the centre, blank directly behind it.
    board = Board.solved(5, 5)
    tile = board.index(2, 2)
    tr, tc = travel.delta
    sr, sc = side.delta
    behind = board.index(2 - tr, 2 - tc)
    front = board.index(2 + tr, 2 + tc)

    mover = Mover(board)
    mover.route(behind, bytearray(25), avoid=(tile,))
    before = list(board.cells)
    value = board.cells[tile]

    _run(board, NUDGES[(travel, side)])

    assert board.cells[front] == value
    assert board.blank == tile
    window = set()
    for cell in (behind, tile, front):
        r, c = board.position(cell)
        window.add(cell)
        window.add(board.index(r + sr, c + sc))
    for i, v in enumerate(before):
        if i not in window:
            assert board.cells[i] == v, board.position(i)


def test_every_nudge_is_a_five_move_loop() -> None:
    for (travel, side), recipe in NUDGES.items():
        assert len(recipe) == 5
        assert recipe[0] is side and recipe[-1] is travel.opposite
        assert recipe.count(travel) == 2


# -- row pair -----------------------------------------------------------------
#
# 3×2 boards: the whole board is the P00..P21 block, first tile 1,
# second tile 2.


def test_row_close() -> None:
    board = _run(Board.from_flat(3, 2, [0, 1, 3, 2, 4, 5]), ROW_CLOSE)
    assert board.cells == [1, 2, 3, 0, 4, 5]


def test_row_rescue() -> None:
    board = _run(Board.from_flat(3, 2, [2, 1, 0, 3, 4, 5]), ROW_RESCUE)
    assert board.cells == [1, 2, 4, 0, 3, 5]


def test_row_rescue_stays_in_its_block() -> None:
    # Same shape in the top-right of a wider, taller board.
    board = Board.from_flat(
        4, 4,
        [1, 2, 4, 3,
         5, 6, 0, 7,
         9, 10, 11, 8,
         12, 13, 14, 15],
    )
    _run(board, ROW_RESCUE)
    assert board.tiles()[0] == [1, 2, 3, 4]
    assert board.blank_pos == (1, 3)
    assert board.cells[4:6] == [5, 6]
    assert board.cells[8:10] == [9, 10]
    assert board.tiles()[3] == [12, 13, 14, 15]


# -- column pair --------------------------------------------------------------
#
# 2×3 boards: first tile 1 ends at (0, 0), second tile 4 at (1, 0).


def test_column_close() -> None:
    board = _run(Board.from_flat(2, 3, [0, 2, 3, 1, 4, 5]), COLUMN_CLOSE)
    assert board.cells == [1, 2, 3, 4, 0, 5]


def test_column_rescue() -> None:
    board = _run(Board.from_flat(2, 3, [4, 0, 2, 1, 3, 5]), COLUMN_RESCUE)
    assert board.cells == [1, 2, 3, 4, 0, 5]


def test_column_recipes_mirror_row_recipes() -> None:
    assert COLUMN_CLOSE == (Direction.DOWN, Direction.RIGHT)
    assert transpose(COLUMN_RESCUE) == ROW_RESCUE
    assert len(ROW_RESCUE) == 17


# -- endgame rotation ---------------------------------------------------------


def test_rotation_cycles_three_tiles() -> None:
    board = _run(Board.from_flat(2, 2, [3, 1, 2, 0]), ROTATION)
    assert board.is_solved()


def test_rotation_has_period_three() -> None:
    board = Board.from_flat(2, 2, [2, 3, 1, 0])
    seen = []
    for _ in range(3):
        _run(board, ROTATION)
        seen.append(list(board.cells))
    assert seen == [[3, 1, 2, 0], [1, 2, 3, 0], [2, 3, 1, 0]]
