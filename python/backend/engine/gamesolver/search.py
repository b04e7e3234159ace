"""Breadth-first search over whole-board states, for small boards only."""

from __future__ import annotations

import logging
from collections import deque

from backend.models.board import BLANK, Board, Direction, SolverError

logger = logging.getLogger(__name__)

# 9!/2 = 181440 reachable states on 3×3; 3×4 would already be 239 million.
OPTIMAL_MAX_CELLS = 9

State = tuple[int, ...]


def bfs_solve(board: Board) -> list[Direction] | None:
    """Shortest list of blank slides that solves *board*.

    Returns ``None`` when the goal is unreachable.  Raises ``SolverError``
    for boards with more than ``OPTIMAL_MAX_CELLS`` cells.
    """
    total = board.rows * board.cols
    if total > OPTIMAL_MAX_CELLS:
        raise SolverError(
            f"A {board.rows}×{board.cols} board is too large for "
            f"breadth-first search (limit {OPTIMAL_MAX_CELLS} cells)."
        )

    start: State = tuple(board.cells)
    goal: State = tuple(Board.solved(board.rows, board.cols).cells)
    # Neighbours never change, so they are computed once per cell.
    moves = [board.neighbors(i) for i in range(total)]

    parent: dict[State, tuple[State, Direction] | None] = {start: None}
    queue = deque([start])
    while queue:
        state = queue.popleft()
        if state == goal:
            path: list[Direction] = []
            step = parent[state]
            while step is not None:
                state, direction = step
                path.append(direction)
                step = parent[state]
            path.reverse()
            logger.debug(
                "bfs: %d moves, %d states seen", len(path), len(parent)
            )
            return path

        blank = state.index(BLANK)
        for direction, nxt in moves[blank]:
            cells = list(state)
            cells[blank], cells[nxt] = cells[nxt], BLANK
            child = tuple(cells)
            if child in parent:
                continue
            parent[child] = (state, direction)
            queue.append(child)

    logger.debug("bfs: goal unreachable after %d states", len(parent))
    return None
