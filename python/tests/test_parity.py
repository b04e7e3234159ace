"""Solvability oracle checked against brute-force reachability."""

from __future__ import annotations

import itertools
import math
import random
from collections import deque

import pytest

from backend.engine.gamesolver.parity import (
    count_inversions,
    is_solvable,
    repair_to_solvable,
)
from backend.models.board import Board, Direction


# -- helpers ------------------------------------------------------------------


def _reachable(rows: int, cols: int) -> set[tuple[int, ...]]:
    """Every arrangement reachable from the goal by legal slides."""
    goal = Board.solved(rows, cols)
    seen = {tuple(goal.cells)}
    queue = deque([goal])
    while queue:
        board = queue.popleft()
        for direction in Direction:
            if not board.can_slide(direction):
                continue
            nxt = board.copy()
            nxt.slide(direction)
            key = tuple(nxt.cells)
            if key not in seen:
                seen.add(key)
                queue.append(nxt)
    return seen


# -- oracle -------------------------------------------------------------------


def test_count_inversions() -> None:
    assert count_inversions(Board.solved(3, 3)) == 0
    assert count_inversions(Board.from_flat(2, 2, [3, 2, 1, 0])) == 3
    assert count_inversions(Board.from_flat(2, 2, [0, 3, 2, 1])) == 3


@pytest.mark.parametrize("rows, cols", [(2, 2), (2, 3), (3, 2)], ids=str)
def test_oracle_matches_reachability_exhaustive(rows: int, cols: int) -> None:
    reachable = _reachable(rows, cols)
    total = rows * cols
    for perm in itertools.permutations(range(total)):
        board = Board.from_flat(rows, cols, list(perm))
        assert is_solvable(board) == (perm in reachable), perm
    assert len(reachable) * 2 == math.factorial(total)


@pytest.mark.parametrize("rows, cols", [(3, 3), (2, 4), (4, 2)], ids=str)
def test_oracle_matches_reachability_sampled(rows: int, cols: int) -> None:
    reachable = _reachable(rows, cols)
    rng = random.Random(rows * 100 + cols)
    cells = list(range(rows * cols))
    for _ in range(2000):
        rng.shuffle(cells)
        board = Board.from_flat(rows, cols, list(cells))
        assert is_solvable(board) == (tuple(cells) in reachable), cells


def test_adjacent_swap_is_unsolvable() -> None:
    assert not is_solvable(Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 8, 7, 0]))
    assert not is_solvable(Board.from_flat(4, 4, [2, 1, *range(3, 16), 0]))


def test_blank_row_matters_for_even_width() -> None:
    # One vertical slide from the goal is still solvable.
    board = Board.solved(4, 4)
    board.slide(Direction.UP)
    assert count_inversions(board) % 2 == 1
    assert is_solvable(board)


# -- repair -------------------------------------------------------------------


@pytest.mark.parametrize("seed", range(20))
@pytest.mark.parametrize("rows, cols", [(2, 2), (3, 3), (4, 4), (3, 5), (5, 4)], ids=str)
def test_repair_swaps_one_adjacent_pair(rows: int, cols: int, seed: int) -> None:
    rng = random.Random(seed)
    cells = list(range(rows * cols))
    rng.shuffle(cells)
    board = Board.from_flat(rows, cols, cells)
    before = list(board.cells)
    was_solvable = is_solvable(board)

    assert repair_to_solvable(board) is board
    assert is_solvable(board)

    changed = [i for i in range(len(before)) if before[i] != board.cells[i]]
    if was_solvable:
        assert changed == []
    else:
        assert len(changed) == 2
        k = changed[0]
        assert changed[1] == k + 1
        assert board.cells[k] == before[k + 1] and board.cells[k + 1] == before[k]
        assert board.blank == before.index(0)


def test_repair_picks_first_pair() -> None:
    board = Board.from_flat(3, 3, [1, 2, 3, 4, 5, 6, 8, 7, 0])
    repair_to_solvable(board)
    assert board.cells == [2, 1, 3, 4, 5, 6, 8, 7, 0]


def test_repair_skips_the_blank() -> None:
    board = Board.from_flat(3, 3, [0, 2, 1, 3, 4, 5, 6, 7, 8])
    assert not is_solvable(board)
    repair_to_solvable(board)
    assert board.cells[:3] == [0, 1, 2]
