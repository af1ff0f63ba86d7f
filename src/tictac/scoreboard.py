"""In-memory win tally keyed by mark."""
from __future__ import annotations

import threading
from typing import Dict

from .board import MARKS


class Scoreboard:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._scores: Dict[str, int] = {m: 0 for m in MARKS}

    def snapshot(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._scores)

    def increment(self, winner: str) -> Dict[str, int]:
        if winner not in MARKS:
            raise ValueError(f"Invalid winner: {winner!r}")
        with self._lock:
            self._scores[winner] += 1
            return dict(self._scores)

    def reset(self) -> Dict[str, int]:
        with self._lock:
            for m in self._scores:
                self._scores[m] = 0
            return dict(self._scores)
