from backend.models.board import (
    BLANK,
    Board,
    Direction,
    NotFoundError,
    OutOfBoundsError,
    PuzzleError,
    SolverError,
)

__all__ = [
    "BLANK",
    "Board",
    "Direction",
    "NotFoundError",
    "OutOfBoundsError",
    "PuzzleError",
    "SolverError",
]
