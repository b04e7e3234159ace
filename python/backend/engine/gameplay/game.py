"""Core gameplay logic — processes moves and checks win condition."""

from __future__ import annotations

import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamestate import GameState
from backend.models.board import Board, Direction


class GamePlay:
    """Orchestrates a single play session."""

    def __init__(self, rows: int, cols: int, rng: random.Random | None = None) -> None:
        self.rows = rows
        self.cols = cols
        board = GameGenerator.generate(rows, cols, rng)
        self.state = GameState(board)

    @classmethod
    def from_board(cls, board: Board) -> GamePlay:
        """Create a session from an existing board."""
        obj = object.__new__(cls)
        obj.rows = board.rows
        obj.cols = board.cols
        obj.state = GameState(board)
        return obj

    # -- movement (direction = where the *blank* moves) -----------------------

    def move(self, direction: Direction) -> bool:
        """Slide the blank one cell in *direction*.

        E.g. ``Direction.UP`` swaps the blank with the tile **above** it.
        Returns False, leaving the board unchanged, if there is no such tile.
        """
        board = self.state.board
        if not board.can_slide(direction):
            return False
        board.slide(direction)
        self.state.record(direction)
        return True

    # -- queries --------------------------------------------------------------

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
