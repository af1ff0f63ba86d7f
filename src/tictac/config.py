"""Game and server settings.

Environment-first for the server (TICTAC_* variables, then PORT), with plain
module constants for the game rules the UI offers.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List

from .board import O

SUPPORTED_SIZES = (3, 5)
DEFAULT_SIZE = 5
AI_MARK = O
AI_DELAY_SECONDS = 0.35
MODES = ("pvp", "ai")


def win_length_for(size: int) -> int:
    """3 in a row on 3x3, otherwise 4."""
    return 3 if size == 3 else 4


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass
class ServerConfig:
    host: str = "127.0.0.1"
    port: int = 3001
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "info"

    @classmethod
    def from_env(cls) -> "ServerConfig":
        port = os.getenv("TICTAC_PORT") or os.getenv("PORT")
        origins = os.getenv("TICTAC_CORS_ORIGINS")
        return cls(
            host=os.getenv("TICTAC_HOST", "127.0.0.1"),
            port=int(port) if port else 3001,
            cors_origins=_split_origins(origins) if origins else ["*"],
            log_level=os.getenv("TICTAC_LOG_LEVEL", "info").lower(),
        )
