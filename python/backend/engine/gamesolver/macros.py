"""Named move recipes.

Every recipe is a fixed tuple of blank slides.  Pre/postconditions are
stated in coordinates relative to the cells each routine works on, so
each recipe can be checked on a small synthetic board in isolation.
"""

from __future__ import annotations

from backend.models.board import Direction

U = Direction.UP
D = Direction.DOWN
L = Direction.LEFT
R = Direction.RIGHT

Recipe = tuple[Direction, ...]


def transpose(recipe: Recipe) -> Recipe:
    """Mirror *recipe* across the main diagonal."""
    return tuple(d.transposed for d in recipe)


# -- nudges -------------------------------------------------------------------
#
# Pre:  blank directly behind the tile (opposite to the travel direction).
# Post: tile advanced one cell, blank directly behind it again.  Only the
#       2×3 window spanned by the tile, its front cell and the detour side
#       is touched.
#
# Keyed by (travel, side): *travel* is where the tile goes, *side* is the
# side the blank walks around on.

NUDGES: dict[tuple[Direction, Direction], Recipe] = {
    (R, D): (D, R, R, U, L),
    (R, U): (U, R, R, D, L),
    (L, D): (D, L, L, U, R),
    (L, U): (U, L, L, D, R),
    (U, R): (R, U, U, L, D),
    (U, L): (L, U, U, R, D),
    (D, R): (R, D, D, L, U),
    (D, L): (L, D, D, R, U),
}

# Detour sides in order of preference: away from the frozen rows/columns.
NUDGE_SIDES: dict[Direction, tuple[Direction, Direction]] = {
    R: (D, U),
    L: (D, U),
    U: (R, L),
    D: (R, L),
}


# -- row pair -----------------------------------------------------------------
#
# Cells are named P<dr><dc> relative to (row, N-2):
#
#     P00 P01        row
#     P10 P11        row + 1
#     P20 P21        row + 2
#
# ROW_CLOSE
#   Pre:  blank P00, first tile P01, second tile P11.
#   Post: first tile P00, second tile P01, blank P11.
#
# ROW_RESCUE
#   Pre:  second tile P00, first tile P01, blank P10.
#   Post: first tile P00, second tile P01, blank P11.  Only the 3×2 block
#         P00..P21 is touched.

ROW_CLOSE: Recipe = (R, D)

ROW_RESCUE: Recipe = (
    U, R, D, L,
    D, R, U,
    U, L, D,
    R, D, L, U,
    U, R, D,
)


# -- column pair --------------------------------------------------------------
#
# The same shapes mirrored for the two bottom rows, P<dr><dc> becoming
# Q<dc><dr> relative to (M-2, col):
#
#     Q00 Q10 Q20    M-2
#     Q01 Q11 Q21    M-1

COLUMN_CLOSE: Recipe = transpose(ROW_CLOSE)
COLUMN_RESCUE: Recipe = transpose(ROW_RESCUE)


# -- endgame ------------------------------------------------------------------
#
# Pre:  blank in the bottom-right cell of a 2×2 block.
# Post: the three tiles rotated one step counter-clockwise, blank back in
#       place.

ROTATION: Recipe = (L, U, R, D)
