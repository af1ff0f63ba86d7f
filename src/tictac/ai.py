"""
Heuristic move selection for the computer player.

Tiers, evaluated strictly in order:
- win: the lowest empty cell that completes a window for the AI;
- block: the lowest empty cell that would complete one for the opponent;
- heuristic: the empty cell with the highest evaluate_cell score.

The selector is stateless and never mutates the caller's board.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .board import Board, O, empty_cells, opponent_of
from .heuristic import DEFAULT_WEIGHTS, HeuristicWeights, evaluate_cell
from .tactics import find_immediate_move


@dataclass(frozen=True)
class MoveDecision:
    index: Optional[int]
    tier: str  # "win" | "block" | "heuristic" | "none"
    score: Optional[int] = None


def explain_move(
    board: Board,
    size: int,
    win_length: int,
    ai_mark: str = O,
    weights: HeuristicWeights = DEFAULT_WEIGHTS,
) -> MoveDecision:
    win_move = find_immediate_move(board, size, win_length, ai_mark)
    if win_move is not None:
        logging.debug("ai: winning move at %d", win_move)
        return MoveDecision(win_move, "win")
    block_move = find_immediate_move(board, size, win_length, opponent_of(ai_mark))
    if block_move is not None:
        logging.debug("ai: blocking move at %d", block_move)
        return MoveDecision(block_move, "block")

    empty = empty_cells(board)
    if not empty:
        return MoveDecision(None, "none")

    best_idx = empty[0]
    best_score: Optional[int] = None
    for idx in empty:
        score = evaluate_cell(board, size, win_length, idx, ai_mark, weights)
        # strict comparison: on equal scores the lower index stays
        if best_score is None or score > best_score:
            best_score = score
            best_idx = idx
    logging.debug("ai: heuristic move at %d (score=%s)", best_idx, best_score)
    return MoveDecision(best_idx, "heuristic", best_score)


def select_move(board: Board, size: int, win_length: int, ai_mark: str = O) -> Optional[int]:
    return explain_move(board, size, win_length, ai_mark).index
