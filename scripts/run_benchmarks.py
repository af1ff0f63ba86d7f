#!/usr/bin/env python3
from __future__ import annotations

import math
import random
import statistics as stats
import time
from dataclasses import dataclass
from typing import List, Tuple

from tictac.ai import select_move
from tictac.board import O, X, new_board
from tictac.config import win_length_for
from tictac.winner import detect_winner


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    seeds: int = 10
    boards_per_seed: int = 200
    sizes: Tuple[int, ...] = (3, 5)


def random_position(size: int, rnd: random.Random) -> list:
    """Play random alternating moves until a random depth or a win."""
    wl = win_length_for(size)
    board = new_board(size)
    plies = rnd.randrange(0, size * size)
    for ply in range(plies):
        empty = [i for i, v in enumerate(board) if v is None]
        board[rnd.choice(empty)] = X if ply % 2 == 0 else O
        if detect_winner(board, size, wl) is not None:
            break
    return board


def main() -> int:
    cfg = Config()
    for size in cfg.sizes:
        wl = win_length_for(size)
        times: List[float] = []
        for s in range(cfg.seeds):
            rnd = random.Random(s)
            boards = [random_position(size, rnd) for _ in range(cfg.boards_per_seed)]
            t0 = time.perf_counter()
            for b in boards:
                select_move(b, size, wl)
            t1 = time.perf_counter()
            times.append((t1 - t0) / len(boards))
        m, h = ci95(times)
        print(f"select_move {size}x{size}: mean={m * 1e6:.1f}us ± {h * 1e6:.1f}us (95% CI, N={cfg.seeds})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
