"""Sliding puzzle solver — constructive, deterministic.

Row-by-row placement:
  - Rows 0..M-4: leading cells one tile at a time, last two as a pair.
  - Row M-3 and the bottom two rows: the same row routine, then the
    bottom rows column pair by column pair.
  - Final 2×2: at most two rotations.

Boards of up to nine cells can instead be solved in the fewest moves
by breadth-first search (``Solver.solve_optimal``).
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from backend.engine.gamesolver import parity
from backend.engine.gamesolver.endgame import rotate_endgame
from backend.engine.gamesolver.finisher import finish_bottom_rows, place_row
from backend.engine.gamesolver.mover import Mover, Segment
from backend.engine.gamesolver.search import OPTIMAL_MAX_CELLS, bfs_solve
from backend.models.board import Board, Direction, SolverError

logger = logging.getLogger(__name__)

Renderer = Callable[[Board], None]


@dataclass(frozen=True)
class SolverConfig:
    """Observation settings; they never change the moves produced."""

    render: bool = False
    pace_ms: int = 0


@dataclass
class Solution:
    moves: list[Direction] = field(default_factory=list)
    elapsed: float = 0.0
    segments: list[Segment] = field(default_factory=list)
    solved: bool = True

    @property
    def steps(self) -> int:
        return len(self.moves)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        config: SolverConfig | None = None,
        renderer: Renderer | None = None,
    ) -> Solution:
        """Solve *board* in place and return the moves that did it.

        An unsolvable board is left untouched and yields an empty
        solution with ``solved=False``.
        """
        config = config or SolverConfig()
        start = time.perf_counter()

        if not parity.is_solvable(board):
            logger.warning(
                "Refusing to solve an unsolvable %dx%d board",
                board.rows,
                board.cols,
            )
            return Solution(solved=False)

        def on_move(current: Board, _direction: Direction) -> None:
            if config.render and renderer is not None:
                renderer(current)

        mover = Mover(board, on_move=on_move)
        frozen = bytearray(board.rows * board.cols)

        def close(label: str) -> None:
            segment = mover.cut(label)
            logger.info("%s: %d moves", label, len(segment.moves))
            if config.pace_ms:
                time.sleep(config.pace_ms / 1000)

        for row in range(board.rows - 3):
            place_row(mover, frozen, row)
            close(f"row {row}")

        finish_bottom_rows(mover, frozen, on_phase=close)

        rotations = rotate_endgame(mover, frozen)
        logger.debug("endgame: %d rotations", rotations)
        close("endgame")

        elapsed = time.perf_counter() - start
        logger.info(
            "Solved %dx%d board in %d steps (%.3f s)",
            board.rows,
            board.cols,
            len(mover.log),
            elapsed,
        )
        return Solution(
            moves=mover.log,
            elapsed=elapsed,
            segments=mover.segments,
        )

    @staticmethod
    def solve_optimal(
        board: Board,
        config: SolverConfig | None = None,
        renderer: Renderer | None = None,
    ) -> Solution:
        """Solve a board of at most ``OPTIMAL_MAX_CELLS`` cells in the fewest moves.

        Same contract as :meth:`solve`, but the moves come from a
        breadth-first search and form a single ``"search"`` segment.
        """
        config = config or SolverConfig()
        start = time.perf_counter()

        if not parity.is_solvable(board):
            logger.warning(
                "Refusing to solve an unsolvable %dx%d board",
                board.rows,
                board.cols,
            )
            return Solution(solved=False)

        path = bfs_solve(board)
        if path is None:
            raise SolverError("Breadth-first search exhausted a solvable board.")

        def on_move(current: Board, _direction: Direction) -> None:
            if config.render and renderer is not None:
                renderer(current)

        mover = Mover(board, on_move=on_move)
        mover.macro(path)
        segment = mover.cut("search")
        logger.info("search: %d moves", len(segment.moves))

        elapsed = time.perf_counter() - start
        return Solution(moves=mover.log, elapsed=elapsed, segments=mover.segments)

    @staticmethod
    def can_solve_optimal(board: Board) -> bool:
        """Return True if *board* is small enough for :meth:`solve_optimal`."""
        return board.rows * board.cols <= OPTIMAL_MAX_CELLS

    @staticmethod
    def hint(board: Board) -> Direction | None:
        """Return the next move towards the goal, or ``None`` if solved / unsolvable."""
        if board.is_solved():
            return None
        solution = Solver.solve(board.copy())
        return solution.moves[0] if solution.moves else None

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state."""
        return parity.is_solvable(board)

    @staticmethod
    def repair(board: Board) -> Board:
        """Make *board* solvable with at most one tile swap."""
        return parity.repair_to_solvable(board)
