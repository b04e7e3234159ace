"""Generates M×N sliding puzzle boards."""

from __future__ import annotations

import random

from backend.models.board import BLANK, Board, Direction


class GameGenerator:
    """Creates boards either by shuffling tiles or by walking the blank."""

    @staticmethod
    def solved(rows: int, cols: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(rows, cols)

    @staticmethod
    def shuffled(rows: int, cols: int, rng: random.Random | None = None) -> Board:
        """Return a uniformly random permutation; half of them are unsolvable."""
        rng = rng or random.Random()
        cells = list(range(1, rows * cols)) + [BLANK]
        rng.shuffle(cells)
        return Board(rows=rows, cols=cols, cells=cells)

    @staticmethod
    def scramble(board: Board, rng: random.Random | None = None) -> None:
        """Scramble *board* in-place using random valid moves."""
        rng = rng or random.Random()
        num_shuffles = board.rows * board.cols * 100
        previous: Direction | None = None

        for _ in range(num_shuffles):
            options = [d for d in Direction if board.can_slide(d)]
            if previous is not None and len(options) > 1:
                options.remove(previous.opposite)
            direction = rng.choice(options)
            board.slide(direction)
            previous = direction

    @staticmethod
    def generate(rows: int, cols: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable* board that is not already solved."""
        rng = rng or random.Random()
        board = GameGenerator.solved(rows, cols)
        while board.is_solved():
            GameGenerator.scramble(board, rng)
        return board
