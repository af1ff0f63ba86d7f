from tictac.ai import explain_move, select_move
from tictac.board import O, X, new_board, parse_board


def test_takes_own_win_before_blocking():
    # X threatens 2, but O completes row 1 at 5 first
    board = parse_board("XX.OO....")
    assert select_move(board, 3, 3) == 5
    assert explain_move(board, 3, 3).tier == "win"


def test_blocks_opponent_threat():
    board = parse_board("XX.O.....")
    d = explain_move(board, 3, 3)
    assert d.index == 2
    assert d.tier == "block"
    assert d.score is None


def test_lowest_index_wins_among_several_wins():
    # O wins at 2 (row 0) and at 6 (column 0)
    board = parse_board("OO.O.X.X.")
    assert select_move(board, 3, 3) == 2


def test_full_board_has_no_move():
    board = parse_board("XXOOOXXOX")
    d = explain_move(board, 3, 3)
    assert d.index is None
    assert d.tier == "none"


def test_empty_boards_open_in_the_center():
    assert select_move(new_board(3), 3, 3) == 4
    assert select_move(new_board(5), 5, 4) == 12


def test_equal_scores_keep_lowest_index():
    # after X takes the center all four corners score the same
    board = parse_board("....X....")
    d = explain_move(board, 3, 3)
    assert d.tier == "heuristic"
    assert d.index == 0
    assert d.score == 53


def test_degenerate_win_length_prefers_corner_bonus():
    # no window fits: only proximity and corner bonus remain
    assert select_move(new_board(3), 3, 4) == 0


def test_ai_can_play_x():
    board = parse_board("OO.X.....")
    assert select_move(board, 3, 3, ai_mark=X) == 2
    board = parse_board("OO.XX....")
    assert select_move(board, 3, 3, ai_mark=X) == 5


def test_blocks_on_5x5():
    board = new_board(5)
    for i in (0, 6, 12):
        board[i] = X
    board[1] = O
    board[2] = O
    assert select_move(board, 5, 4, O) == 18


def test_board_is_not_mutated():
    board = parse_board("X...O...X")
    before = board[:]
    select_move(board, 3, 3)
    assert board == before


def test_deterministic():
    board = parse_board("X.O..X..." + "." * 16)
    assert len(board) == 25
    assert len({select_move(board, 5, 4) for _ in range(5)}) == 1
