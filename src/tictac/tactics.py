"""
Tactics and simple motifs: immediate wins/blocks and forks.
Notes:
- Each probe copies the board, places one mark and re-runs full win detection.
- Only one ply is examined; multi-move threats are not the selector's concern.
"""
from typing import List, Optional

from .board import Board, empty_cells
from .winner import detect_winner


def immediate_winning_moves(board: Board, size: int, win_length: int, mark: str) -> List[int]:
    wins: List[int] = []
    for i in empty_cells(board):
        b = board[:]
        b[i] = mark
        if detect_winner(b, size, win_length) == mark:
            wins.append(i)
    return wins


def find_immediate_move(board: Board, size: int, win_length: int, mark: str) -> Optional[int]:
    """Lowest empty index that completes a window for ``mark``, if any."""
    for i in empty_cells(board):
        b = board[:]
        b[i] = mark
        if detect_winner(b, size, win_length) == mark:
            return i
    return None


def fork_moves(board: Board, size: int, win_length: int, mark: str) -> List[int]:
    forks: List[int] = []
    for i in empty_cells(board):
        b = board[:]
        b[i] = mark
        if len(immediate_winning_moves(b, size, win_length, mark)) >= 2:
            forks.append(i)
    return forks
