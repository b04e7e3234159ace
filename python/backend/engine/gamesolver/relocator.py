"""Tile relocator — moves one tile to a target cell around frozen cells."""

from __future__ import annotations

import logging

from backend.engine.gamesolver.macros import NUDGE_SIDES, NUDGES
from backend.engine.gamesolver.mover import Mover, find_route
from backend.models.board import Board, Direction, SolverError

logger = logging.getLogger(__name__)


def relocate(mover: Mover, frozen: bytearray, value: int, target: int) -> None:
    """Move the tile holding *value* to *target*.

    The tile walks a shortest path through unfrozen cells.  For every
    step the blank is brought in front of the tile, either with a nudge
    recipe when it waits directly behind, or by routing it around the
    tile; the tile then slides one cell.  Frozen cells are never touched.
    """
    board = mover.board
    tile = board.locate(value)
    if tile == target:
        return
    if frozen[target]:
        raise SolverError(f"Target cell {board.position(target)} is frozen.")

    path = find_route(board, tile, target, frozen)
    if path is None:
        raise SolverError(
            f"Tile {value} at {board.position(tile)} cannot reach "
            f"{board.position(target)}."
        )
    logger.debug(
        "relocate %d: %s -> %s (%d steps)",
        value,
        board.position(tile),
        board.position(target),
        len(path),
    )
    for travel in path:
        tile = _advance(mover, frozen, tile, travel)


def _advance(mover: Mover, frozen: bytearray, tile: int, travel: Direction) -> int:
    """Slide the tile at *tile* one cell in *travel*; return its new cell."""
    board = mover.board
    r, c = board.position(tile)
    dr, dc = travel.delta
    front = board.index(r + dr, c + dc)

    if board.blank == front:
        mover.move(travel.opposite)
    elif not _try_nudge(mover, frozen, tile, travel):
        mover.route(front, frozen, avoid=(tile,))
        mover.move(travel.opposite)
    return front


def _try_nudge(mover: Mover, frozen: bytearray, tile: int, travel: Direction) -> bool:
    """Apply a nudge recipe if the blank is behind the tile and one fits."""
    board = mover.board
    r, c = board.position(tile)
    dr, dc = travel.delta
    if not board.in_bounds(r - dr, c - dc) or board.blank != board.index(r - dr, c - dc):
        return False
    for side in NUDGE_SIDES[travel]:
        recipe = NUDGES[(travel, side)]
        if _fits(board, frozen, tile, recipe):
            mover.macro(recipe)
            return True
    return False


def _fits(board: Board, frozen: bytearray, tile: int, recipe: tuple[Direction, ...]) -> bool:
    """Whether *recipe* walks the blank over open cells and ends on *tile*."""
    r, c = board.blank_pos
    last = len(recipe) - 1
    for step, direction in enumerate(recipe):
        dr, dc = direction.delta
        r, c = r + dr, c + dc
        if not board.in_bounds(r, c):
            return False
        cell = board.index(r, c)
        if step == last:
            return cell == tile
        if frozen[cell] or cell == tile:
            return False
    return False
