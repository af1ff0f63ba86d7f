"""
Line-win detection over a flat board of any size and win length.
Notes:
- A window is a run of exactly win_length cells along one direction.
- Scan order is rows, columns, down-right diagonals, down-left diagonals;
  the first full window is reported.
- Out-of-range sizes simply produce no windows, so no winner.
"""
from functools import lru_cache
from typing import Iterator, Optional, Tuple

from .board import Board


def iter_windows(size: int, win_length: int) -> Iterator[Tuple[int, ...]]:
    if win_length < 1:
        return
    span = size - win_length
    # rows
    for r in range(size):
        for c in range(span + 1):
            i0 = r * size + c
            yield tuple(i0 + k for k in range(win_length))
    # columns
    for c in range(size):
        for r in range(span + 1):
            i0 = r * size + c
            yield tuple(i0 + k * size for k in range(win_length))
    # diagonal down-right
    for r in range(span + 1):
        for c in range(span + 1):
            i0 = r * size + c
            yield tuple(i0 + k * (size + 1) for k in range(win_length))
    # diagonal down-left
    for r in range(span + 1):
        for c in range(win_length - 1, size):
            i0 = r * size + c
            yield tuple(i0 + k * (size - 1) for k in range(win_length))


@lru_cache(maxsize=None)
def all_windows(size: int, win_length: int) -> Tuple[Tuple[int, ...], ...]:
    return tuple(iter_windows(size, win_length))


def winning_line(board: Board, size: int, win_length: int) -> Optional[Tuple[int, ...]]:
    """Return the indices of the first complete window, or None."""
    for window in all_windows(size, win_length):
        v = board[window[0]]
        if v is None:
            continue
        if all(board[i] == v for i in window[1:]):
            return window
    return None


def detect_winner(board: Board, size: int, win_length: int) -> Optional[str]:
    line = winning_line(board, size, win_length)
    return board[line[0]] if line is not None else None


def is_draw(board: Board, size: int, win_length: int) -> bool:
    return None not in board and detect_winner(board, size, win_length) is None
