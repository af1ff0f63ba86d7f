"""
Interactive game session: the state a front end keeps between clicks.

Notes:
- X always opens a round. In "ai" mode the computer plays O.
- The winner and draw flags are recomputed after every placed mark; a newly
  found winner is tallied once.
- Restarting keeps the size and the scores; changing mode or size starts a
  fresh round, scores persist.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .ai import select_move
from .board import Board, O, X, new_board
from .config import AI_MARK, DEFAULT_SIZE, MODES, SUPPORTED_SIZES, win_length_for
from .scoreboard import Scoreboard
from .winner import detect_winner, is_draw, winning_line


@dataclass
class GameSession:
    size: int = DEFAULT_SIZE
    mode: str = "pvp"
    board: Board = field(default_factory=list)
    x_next: bool = True
    winner: Optional[str] = None
    is_draw: bool = False
    scores: Scoreboard = field(default_factory=Scoreboard)

    def __post_init__(self) -> None:
        if self.size not in SUPPORTED_SIZES:
            raise ValueError(f"Unsupported board size: {self.size}")
        if self.mode not in MODES:
            raise ValueError(f"Unknown mode: {self.mode}")
        if not self.board:
            self.board = new_board(self.size)

    @property
    def win_length(self) -> int:
        return win_length_for(self.size)

    @property
    def is_over(self) -> bool:
        return self.winner is not None or self.is_draw

    @property
    def to_move(self) -> str:
        return X if self.x_next else O

    @property
    def ai_pending(self) -> bool:
        return self.mode == "ai" and self.to_move == AI_MARK and not self.is_over

    @property
    def winning_line(self) -> Optional[Tuple[int, ...]]:
        if self.winner is None:
            return None
        return winning_line(self.board, self.size, self.win_length)

    @property
    def status_message(self) -> str:
        if self.winner:
            return f"Winner: Player {self.winner}"
        if self.is_draw:
            return "It's a draw. No moves left."
        if self.ai_pending:
            return "AI is thinking…"
        return f"Player {self.to_move}'s Turn"

    def _place(self, index: int, mark: str) -> None:
        board = self.board[:]
        board[index] = mark
        self.board = board
        self.x_next = not self.x_next
        self._evaluate()

    def _evaluate(self) -> None:
        w = detect_winner(self.board, self.size, self.win_length)
        if w is not None and self.winner is None:
            self.scores.increment(w)
            logging.info("Player %s wins", w)
        self.winner = w
        self.is_draw = is_draw(self.board, self.size, self.win_length)

    def play(self, index: int) -> bool:
        """Place the current player's mark; invalid clicks are ignored."""
        if self.is_over:
            return False
        if index < 0 or index >= len(self.board) or self.board[index] is not None:
            return False
        if self.mode == "ai" and self.to_move == AI_MARK:
            return False
        self._place(index, self.to_move)
        return True

    def ai_move(self) -> Optional[int]:
        if not self.ai_pending:
            return None
        idx = select_move(self.board, self.size, self.win_length, AI_MARK)
        if idx is None:
            return None
        self._place(idx, AI_MARK)
        return idx

    def restart(self) -> None:
        self.board = new_board(self.size)
        self.x_next = True
        self.winner = None
        self.is_draw = False

    def change_mode(self, mode: str) -> None:
        if mode not in MODES:
            raise ValueError(f"Unknown mode: {mode}")
        self.mode = mode
        self.restart()

    def change_size(self, size: int) -> None:
        if size not in SUPPORTED_SIZES:
            raise ValueError(f"Unsupported board size: {size}")
        self.size = size
        self.restart()
