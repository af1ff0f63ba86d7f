from __future__ import annotations

import argparse
import logging
import math
import time
from typing import Optional, Tuple

from .ai import explain_move
from .board import Board, BoardError, board_size, current_player, opponent_of, parse_board, render_board
from .config import AI_DELAY_SECONDS, AI_MARK, DEFAULT_SIZE, MODES, SUPPORTED_SIZES, ServerConfig, win_length_for
from .heuristic import score_grid
from .session import GameSession
from .tactics import fork_moves, immediate_winning_moves
from .winner import detect_winner, is_draw

BOARD_HELP = 'Board string, row-major, X/O and "." for empty, e.g. XX.OO....'


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tictac", description="Tic-tac-toe engine CLI")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print environment and dependency info and exit",
    )

    def add_board_args(sp: argparse.ArgumentParser, allow_stdin: bool = False) -> None:
        sp.add_argument("--board", required=not allow_stdin, help=BOARD_HELP)
        sp.add_argument(
            "--win-length",
            type=int,
            default=None,
            help="Marks in a row needed to win (default: 3 on 3x3, otherwise 4)",
        )
        if allow_stdin:
            sp.add_argument(
                "--stdin", action="store_true", help="Read many boards from stdin and stream CSV output"
            )

    p_win = sub.add_parser("winner", help="Report the winner and draw flag for a board")
    add_board_args(p_win)

    p_move = sub.add_parser("move", help="Pick the computer's move for a board")
    add_board_args(p_move, allow_stdin=True)
    p_move.add_argument("--ai-mark", choices=["X", "O"], default=AI_MARK, help="Mark played by the AI")

    p_tac = sub.add_parser("tactics", help="List immediate wins, blocks and forks for side-to-move")
    add_board_args(p_tac)

    p_sc = sub.add_parser("scores", help="Show the heuristic score of every empty cell")
    add_board_args(p_sc)
    p_sc.add_argument("--ai-mark", choices=["X", "O"], default=AI_MARK, help="Mark played by the AI")

    p_play = sub.add_parser("play", help="Play in the terminal")
    p_play.add_argument("--size", type=int, choices=SUPPORTED_SIZES, default=DEFAULT_SIZE)
    p_play.add_argument("--mode", choices=MODES, default="ai")
    p_play.add_argument(
        "--delay", type=float, default=AI_DELAY_SECONDS, help="Seconds to wait before the AI moves"
    )

    p_srv = sub.add_parser("serve", help="Run the HTTP API")
    p_srv.add_argument("--host", default=None, help="Bind address (default: TICTAC_HOST or 127.0.0.1)")
    p_srv.add_argument("--port", type=int, default=None, help="Port (default: TICTAC_PORT, PORT or 3001)")

    return p


def _print_info() -> None:
    import importlib.util
    import platform
    import sys

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")
    for pkg in ["numpy", "starlette", "uvicorn"]:
        spec = importlib.util.find_spec(pkg)
        if spec is None:
            print(f"{pkg}=<not installed>")
        else:
            mod = __import__(pkg)
            ver = getattr(mod, "__version__", "?")
            print(f"{pkg}={ver}")


def _load_board(raw: str, win_length: Optional[int]) -> Tuple[Board, int, int]:
    board = parse_board(raw)
    size = board_size(board)
    wl = win_length if win_length is not None else win_length_for(size)
    if wl < 1:
        raise BoardError("win length must be positive")
    return board, size, wl


def _stream_moves(ai_mark: str, win_length: Optional[int]) -> int:
    import csv as _csv
    import sys as _sys

    w = _csv.writer(_sys.stdout)
    w.writerow(["board", "winner", "is_draw", "move", "tier"])
    for line in _sys.stdin:
        raw = line.strip()
        if not raw:
            continue
        try:
            board, size, wl = _load_board(raw, win_length)
        except BoardError as e:
            logging.debug("skipping %r: %s", raw, e)
            continue
        win = detect_winner(board, size, wl)
        draw = is_draw(board, size, wl)
        if win is not None or draw:
            w.writerow([raw, win or "", int(draw), "", "terminal"])
            continue
        decision = explain_move(board, size, wl, ai_mark)
        w.writerow([raw, "", 0, decision.index, decision.tier])
    return 0


def _format_grid(grid) -> str:
    rows = []
    for row in grid:
        rows.append(" ".join("    ." if math.isnan(v) else f"{int(v):5d}" for v in row))
    return "\n".join(rows)


def _play(ns: argparse.Namespace) -> int:
    session = GameSession(size=ns.size, mode=ns.mode)
    print("Enter a cell index, 'r' to restart, 'm pvp|ai', 's 3|5' or 'q' to quit.")
    while True:
        print(render_board(session.board, session.size, session.winning_line))
        print(session.status_message)
        if session.ai_pending:
            time.sleep(ns.delay)
            idx = session.ai_move()
            logging.info("AI plays %s", idx)
            continue
        try:
            line = input("> ").strip().lower()
        except EOFError:
            break
        if line in ("q", "quit"):
            break
        if line == "r":
            session.restart()
            continue
        parts = line.split()
        try:
            if len(parts) == 2 and parts[0] == "m":
                session.change_mode(parts[1])
                continue
            if len(parts) == 2 and parts[0] == "s":
                session.change_size(int(parts[1]))
                continue
            if not session.play(int(line)):
                logging.warning("Move ignored")
        except ValueError as e:
            logging.error("%s", e)
    scores = session.scores.snapshot()
    print(f"Scores: X={scores['X']} O={scores['O']}")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if getattr(ns, "verbose", False) else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    # Early exits
    if getattr(ns, "version", False):
        try:
            from importlib.metadata import version as _ver

            print(_ver("tictac-engine"))
        except Exception:
            print("unknown")
        return 0
    if getattr(ns, "info", False):
        _print_info()
        return 0

    if ns.cmd == "move" and ns.stdin:
        return _stream_moves(ns.ai_mark, ns.win_length)

    if ns.cmd in ("winner", "move", "tactics", "scores"):
        if not ns.board:
            logging.error("--board is required unless --stdin is given.")
            return 2
        try:
            board, size, wl = _load_board(ns.board, ns.win_length)
        except BoardError as e:
            logging.error("Invalid board: %s", e)
            return 2

        if ns.cmd == "winner":
            logging.info("winner=%s draw=%s", detect_winner(board, size, wl), is_draw(board, size, wl))
            return 0

        if ns.cmd == "move":
            decision = explain_move(board, size, wl, ns.ai_mark)
            logging.info("move=%s tier=%s score=%s", decision.index, decision.tier, decision.score)
            return 0

        if ns.cmd == "tactics":
            p = current_player(board)
            logging.info(
                "to_move=%s wins=%s blocks=%s forks=%s",
                p,
                immediate_winning_moves(board, size, wl, p),
                immediate_winning_moves(board, size, wl, opponent_of(p)),
                fork_moves(board, size, wl, p),
            )
            return 0

        grid = score_grid(board, size, wl, ns.ai_mark)
        print(_format_grid(grid))
        return 0

    if ns.cmd == "play":
        return _play(ns)

    if ns.cmd == "serve":
        from .server import run

        cfg = ServerConfig.from_env()
        if ns.host:
            cfg.host = ns.host
        if ns.port:
            cfg.port = ns.port
        run(cfg)
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
