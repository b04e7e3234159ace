"""Tracks the mutable state of a session in progress."""

from __future__ import annotations

import time

from backend.models.board import Board, Direction


class GameState:
    """Holds the current board, the moves made so far, and elapsed time."""

    def __init__(self, board: Board) -> None:
        self.board = board
        self.history: list[Direction] = []
        self._start_time: float = time.perf_counter()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.perf_counter() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.perf_counter() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.perf_counter()
            self._running = True

    # -- moves ----------------------------------------------------------------

    @property
    def moves(self) -> int:
        return len(self.history)

    def record(self, direction: Direction) -> None:
        self.history.append(direction)

    @property
    def is_solved(self) -> bool:
        return self.board.is_solved()
