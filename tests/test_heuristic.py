import math

import numpy as np

from tictac.board import O, X, new_board, parse_board
from tictac.heuristic import (
    DEFAULT_WEIGHTS,
    center_index,
    corner_indices,
    evaluate_cell,
    score_grid,
    windows_through,
)


def test_center_and_corners():
    assert center_index(3) == 4
    assert center_index(5) == 12
    assert corner_indices(3) == (0, 2, 6, 8)
    assert corner_indices(5) == (0, 4, 20, 24)


def test_windows_through_center_of_3x3():
    windows = list(windows_through(4, 3, 3))
    assert sorted(tuple(w) for w in windows) == [(0, 4, 8), (1, 4, 7), (2, 4, 6), (3, 4, 5)]


def test_windows_through_edge_of_5x5():
    # (2,0): one horizontal window, two vertical, no diagonal fits
    windows = list(windows_through(10, 5, 4))
    assert len(windows) == 3
    assert all(10 in w for w in windows)


def test_empty_3x3_scores():
    board = new_board(3)
    # center: 10 proximity + 4 open lines * 25
    assert evaluate_cell(board, 3, 3, 4) == 110
    # corner: 8 proximity + 3 open lines * 25 + 15 corner bonus
    assert evaluate_cell(board, 3, 3, 0) == 98
    # edge: 9 proximity + 2 open lines * 25
    assert evaluate_cell(board, 3, 3, 1) == 59


def test_contested_and_near_loss_penalties_can_go_negative():
    board = parse_board("XX.......")
    # row 0 holds two X: -(2*2*20) - 150; column and anti-diagonal stay open
    assert evaluate_cell(board, 3, 3, 2, O) == 8 - 230 + 25 + 25 + 15


def test_near_win_bonus():
    board = parse_board("O........")
    # row 0 holds two O: 2*2*25 + 200; column and anti-diagonal one each
    assert evaluate_cell(board, 3, 3, 2, O) == 8 + 300 + 25 + 25 + 15


def test_open_three_extension_beats_distant_cells():
    board = new_board(5)
    for i in (11, 12, 13):
        board[i] = O
    ends = [evaluate_cell(board, 5, 4, i, O) for i in (10, 14)]
    distant = [evaluate_cell(board, 5, 4, i, O) for i in (0, 4, 20, 24)]
    assert min(ends) > max(distant)


def test_win_length_larger_than_size_scores_only_position():
    board = new_board(3)
    assert evaluate_cell(board, 3, 4, 4) == 10
    assert evaluate_cell(board, 3, 4, 0) == 8 + 15


def test_ai_mark_is_symmetric():
    board = parse_board("X...O....")
    swapped = [None if v is None else (X if v == O else O) for v in board]
    for i in range(9):
        if board[i] is None:
            assert evaluate_cell(board, 3, 3, i, O) == evaluate_cell(swapped, 3, 3, i, X)


def test_score_grid_matches_evaluate_cell():
    board = parse_board("X...O....")
    grid = score_grid(board, 3, 3)
    assert grid.shape == (3, 3)
    assert math.isnan(grid[0, 0])
    assert math.isnan(grid[1, 1])
    for i in range(9):
        if board[i] is None:
            assert grid[i // 3, i % 3] == evaluate_cell(board, 3, 3, i)
    assert np.count_nonzero(np.isnan(grid)) == 2


def test_default_weights():
    w = DEFAULT_WEIGHTS
    assert (w.open_line, w.near_win, w.contested_line, w.near_loss) == (25, 200, 20, 150)
    assert (w.center_reach, w.corner_small_board, w.corner) == (10, 15, 5)
