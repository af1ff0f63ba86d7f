"""
Board basics: marks, flat row-major representation, parsing and validation.
Notes:
- A board is a list of size*size cells: None=empty, "X", "O". X always starts.
- Cell index = row * size + col.
- The engine trusts its input; boundaries call validate_board first.
"""
import math
from typing import List, Optional

X = "X"
O = "O"
EMPTY = None
MARKS = (X, O)

EMPTY_CHARS = ".-_"

Board = List[Optional[str]]


class BoardError(ValueError):
    """Raised when a board payload is not a well-formed size*size grid."""


def opponent_of(mark: str) -> str:
    return O if mark == X else X


def new_board(size: int) -> Board:
    return [EMPTY] * (size * size)


def empty_cells(board: Board) -> List[int]:
    return [i for i, v in enumerate(board) if v is None]


def is_full(board: Board) -> bool:
    return all(v is not None for v in board)


def current_player(board: Board) -> str:
    return X if board.count(X) == board.count(O) else O


def parse_board(text: str) -> Board:
    """Parse a compact board string such as ``"XX.OO...."``.

    The size is inferred from the length, which must be a perfect square.
    """
    raw = "".join(text.split()).upper()
    size = math.isqrt(len(raw))
    if not raw or size * size != len(raw):
        raise BoardError(f"Board string length {len(raw)} is not a perfect square")
    board: Board = []
    for ch in raw:
        if ch in MARKS:
            board.append(ch)
        elif ch in EMPTY_CHARS:
            board.append(EMPTY)
        else:
            raise BoardError(f"Invalid cell character: {ch!r}")
    return board


def board_size(board: Board) -> int:
    return math.isqrt(len(board))


def format_board(board: Board) -> str:
    return "".join(v if v is not None else "." for v in board)


def render_board(board: Board, size: int, highlight: Optional[tuple] = None) -> str:
    """Render the board as text rows with cell indices shown in empty cells."""
    highlight = highlight or ()
    width = max(len(str(size * size - 1)), 3 if highlight else 1)
    lines = []
    for r in range(size):
        cells = []
        for c in range(size):
            i = r * size + c
            v = board[i]
            if v is None:
                cells.append(str(i).rjust(width))
            elif i in highlight:
                cells.append(f"[{v}]".rjust(width))
            else:
                cells.append(v.rjust(width))
        lines.append(" | ".join(cells))
    sep = "\n" + "-" * len(lines[0]) + "\n" if lines else ""
    return sep.join(lines)


def validate_board(board, size, win_length) -> None:
    """Check a request-shaped board before handing it to the engine.

    Raises BoardError describing the first problem found.
    """
    if not isinstance(board, list):
        raise BoardError("board must be an array")
    for name, value in (("size", size), ("winLength", win_length)):
        if not value:
            raise BoardError(f"{name} is required")
        if isinstance(value, bool) or not isinstance(value, int):
            raise BoardError(f"{name} must be an integer")
        if value < 1:
            raise BoardError(f"{name} must be positive")
    if len(board) != size * size:
        raise BoardError(f"board has {len(board)} cells, expected {size * size}")
    for i, v in enumerate(board):
        if v is not None and v not in MARKS:
            raise BoardError(f"cell {i} holds {v!r}; expected 'X', 'O' or null")
