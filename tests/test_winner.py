import pytest

from tictac.board import O, X, new_board, parse_board
from tictac.winner import all_windows, detect_winner, is_draw, winning_line

WIN_PATTERNS = [
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
]


def test_classic_windows_in_scan_order():
    assert list(all_windows(3, 3)) == WIN_PATTERNS


def test_window_counts_5x5_win4():
    windows = all_windows(5, 4)
    # 10 horizontal, 10 vertical, 4 per diagonal direction
    assert len(windows) == 28
    assert all(len(w) == 4 for w in windows)


def test_no_windows_when_win_length_exceeds_size():
    assert all_windows(3, 4) == ()
    full = parse_board("XXXXXXXXX")
    assert detect_winner(full, 3, 4) is None


@pytest.mark.parametrize(
    "cells, mark",
    [
        ([5, 6, 7, 8], X),          # row 1, cols 0-3
        ([9, 14, 19, 24], O),       # column 4, rows 1-4
        ([6, 12, 18, 24], X),       # down-right from (1,1)
        ([4, 8, 12, 16], O),        # down-left from (0,4)
        ([9, 13, 17, 21], X),       # down-left from (1,4)
    ],
)
def test_detects_every_direction_on_5x5(cells, mark):
    board = new_board(5)
    for i in cells:
        board[i] = mark
    assert detect_winner(board, 5, 4) == mark
    assert winning_line(board, 5, 4) == tuple(cells)


def test_gap_is_not_a_win():
    board = parse_board("XX.XX" + "." * 20)
    assert detect_winner(board, 5, 4) is None
    board = parse_board("XXOXX" + "." * 20)
    assert detect_winner(board, 5, 4) is None


def test_three_in_a_row_is_not_enough_on_5x5():
    board = parse_board(".XXX." + "." * 20)
    assert detect_winner(board, 5, 4) is None
    assert detect_winner(board, 5, 3) == X


def test_full_board_without_line_is_draw():
    board = parse_board("XXOOOXXOX")
    assert detect_winner(board, 3, 3) is None
    assert is_draw(board, 3, 3)


def test_win_on_last_cell_is_not_draw():
    board = parse_board("XOXOXOOXX")
    assert detect_winner(board, 3, 3) == X
    assert not is_draw(board, 3, 3)


def test_relabelling_marks_relabels_verdict():
    board = parse_board("OX.OX.O..")
    swapped = [None if v is None else (X if v == O else O) for v in board]
    assert detect_winner(board, 3, 3) == O
    assert detect_winner(swapped, 3, 3) == X


def test_does_not_mutate_board():
    board = parse_board("XX.OO....")
    before = board[:]
    detect_winner(board, 3, 3)
    assert board == before
