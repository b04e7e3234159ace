"""Primitive mover, macro sequencer and move log."""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Container, Iterable
from dataclasses import dataclass

from backend.models.board import Board, Direction, SolverError

MoveHook = Callable[[Board, Direction], None]


@dataclass
class Segment:
    """Moves made during one logical phase of a solve."""

    label: str
    moves: list[Direction]


class Mover:
    """The only thing that mutates a board while it is being solved.

    Every slide is appended to :attr:`log`; :meth:`cut` closes the moves
    made since the previous cut into a labelled :class:`Segment`.
    """

    def __init__(self, board: Board, on_move: MoveHook | None = None) -> None:
        self.board = board
        self.log: list[Direction] = []
        self.segments: list[Segment] = []
        self._mark = 0
        self._on_move = on_move

    # -- primitives -----------------------------------------------------------

    def move(self, direction: Direction) -> None:
        self.board.slide(direction)
        self.log.append(direction)
        if self._on_move is not None:
            self._on_move(self.board, direction)

    def macro(self, sequence: Iterable[Direction]) -> None:
        for direction in sequence:
            self.move(direction)

    # -- blank routing --------------------------------------------------------

    def route(
        self,
        goal: int,
        frozen: bytearray,
        avoid: Container[int] = (),
    ) -> None:
        """Slide the blank to *goal* without entering frozen or avoided cells."""
        path = find_route(self.board, self.board.blank, goal, frozen, avoid)
        if path is None:
            raise SolverError(
                f"No route for the blank from {self.board.blank_pos} "
                f"to {self.board.position(goal)}."
            )
        self.macro(path)

    # -- log ------------------------------------------------------------------

    def cut(self, label: str) -> Segment:
        segment = Segment(label, self.log[self._mark :])
        self._mark = len(self.log)
        self.segments.append(segment)
        return segment


def find_route(
    board: Board,
    start: int,
    goal: int,
    frozen: bytearray,
    avoid: Container[int] = (),
) -> list[Direction] | None:
    """Shortest list of slides from *start* to *goal* over open cells.

    Returns ``None`` if *goal* cannot be reached.
    """
    if start == goal:
        return []
    parent: dict[int, tuple[int, Direction]] = {}
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for direction, nxt in board.neighbors(cell):
            if nxt in seen or frozen[nxt] or nxt in avoid:
                continue
            seen.add(nxt)
            parent[nxt] = (cell, direction)
            if nxt == goal:
                path: list[Direction] = []
                while nxt != start:
                    nxt, step = parent[nxt]
                    path.append(step)
                path.reverse()
                return path
            queue.append(nxt)
    return None
