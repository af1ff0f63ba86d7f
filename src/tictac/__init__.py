"""tictac package.

Shared tic-tac-toe engine (win detection and heuristic move selection) used by
the terminal client and the HTTP API.

Convenience imports are exposed for common workflows.
"""

from .ai import explain_move, select_move
from .board import O, X, BoardError, validate_board
from .winner import detect_winner, is_draw

__all__ = [
    "detect_winner",
    "is_draw",
    "select_move",
    "explain_move",
    "validate_board",
    "BoardError",
    "X",
    "O",
]
