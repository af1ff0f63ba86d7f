"""
Positional scoring of candidate cells for the computer player.

Teaching notes:
- A candidate is scored as if the AI mark were already placed there.
- Center proximity: max(0, 10 - manhattan distance to the center cell).
- Line potential: every in-bounds window of win_length cells through the
  candidate, in the four directions. Windows free of opponent marks reward
  the AI count quadratically; contested windows are penalized by the
  opponent count, also quadratically. Near-complete lines get a flat bonus
  or penalty on top.
- Corners get a small bonus, larger on 3x3 where corners sit on 3 lines.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from .board import Board, O, opponent_of

# right, down, down-right, down-left
DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]


@dataclass(frozen=True)
class HeuristicWeights:
    center_reach: int = 10
    open_line: int = 25
    near_win: int = 200
    contested_line: int = 20
    near_loss: int = 150
    corner_small_board: int = 15
    corner: int = 5


DEFAULT_WEIGHTS = HeuristicWeights()


def center_index(size: int) -> int:
    center = size // 2
    return center * size + center


def corner_indices(size: int) -> Tuple[int, int, int, int]:
    return (0, size - 1, size * (size - 1), size * size - 1)


def windows_through(index: int, size: int, win_length: int) -> Iterator[List[int]]:
    """Yield every in-bounds window of ``win_length`` cells containing ``index``."""
    row, col = divmod(index, size)
    for dr, dc in DIRECTIONS:
        for t in range(-(win_length - 1), 1):
            cells: List[int] = []
            for k in range(win_length):
                rr = row + (t + k) * dr
                cc = col + (t + k) * dc
                if rr < 0 or rr >= size or cc < 0 or cc >= size:
                    break
                cells.append(rr * size + cc)
            else:
                yield cells


def evaluate_cell(
    board: Board,
    size: int,
    win_length: int,
    index: int,
    ai_mark: str = O,
    weights: HeuristicWeights = DEFAULT_WEIGHTS,
) -> int:
    opp_mark = opponent_of(ai_mark)
    score = 0

    cr, cc = divmod(center_index(size), size)
    r, c = divmod(index, size)
    score += max(0, weights.center_reach - (abs(r - cr) + abs(c - cc)))

    for window in windows_through(index, size, win_length):
        ai_count = 0
        opp_count = 0
        for pos in window:
            v = ai_mark if pos == index else board[pos]
            if v == ai_mark:
                ai_count += 1
            elif v == opp_mark:
                opp_count += 1
        if opp_count == 0:
            score += ai_count * ai_count * weights.open_line
            if ai_count == win_length - 1:
                score += weights.near_win
        else:
            score -= opp_count * opp_count * weights.contested_line
            if opp_count == win_length - 1:
                score -= weights.near_loss

    if index in corner_indices(size):
        score += weights.corner_small_board if size == 3 else weights.corner
    return score


def score_grid(
    board: Board,
    size: int,
    win_length: int,
    ai_mark: str = O,
    weights: HeuristicWeights = DEFAULT_WEIGHTS,
) -> np.ndarray:
    """Heuristic score of every cell as a size x size array; occupied cells are nan."""
    grid = np.full(size * size, np.nan, dtype=float)
    for i, v in enumerate(board):
        if v is None:
            grid[i] = evaluate_cell(board, size, win_length, i, ai_mark, weights)
    return grid.reshape(size, size)
