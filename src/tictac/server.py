"""tictac HTTP API.

Stateless JSON endpoints over the shared engine plus an in-memory score
tally. Built on Starlette (ASGI) and served with uvicorn:

    POST /api/winner            {board, size, winLength} -> {winner, isDraw}
    POST /api/ai/move           {board, size, winLength} -> {index}
    GET  /api/score                                      -> {X, O}
    POST /api/score/increment   {winner}                 -> {X, O}
    POST /api/score/reset                                -> {X, O}
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional, Tuple

from starlette.applications import Starlette
from starlette.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from .ai import select_move
from .board import Board, BoardError, validate_board
from .config import AI_MARK, ServerConfig
from .scoreboard import Scoreboard
from .winner import detect_winner, is_draw


async def _read_body(request: Request) -> Dict[str, Any]:
    raw = await request.body()
    if not raw:
        return {}
    body = json.loads(raw)
    return body if isinstance(body, dict) else {}


async def _read_game_payload(request: Request) -> Tuple[Board, int, int]:
    try:
        body = await _read_body(request)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise BoardError("Invalid JSON") from e
    board = body.get("board")
    size = body.get("size")
    win_length = body.get("winLength")
    validate_board(board, size, win_length)
    return board, size, win_length


def _invalid_payload(e: Exception) -> Response:
    logging.debug("rejected payload: %s", e)
    return JSONResponse({"error": "Invalid payload", "detail": str(e)}, status_code=400)


async def winner(request: Request) -> Response:
    try:
        board, size, win_length = await _read_game_payload(request)
    except BoardError as e:
        return _invalid_payload(e)
    w = detect_winner(board, size, win_length)
    return JSONResponse({"winner": w, "isDraw": is_draw(board, size, win_length)})


async def ai_move(request: Request) -> Response:
    try:
        board, size, win_length = await _read_game_payload(request)
    except BoardError as e:
        return _invalid_payload(e)
    idx = select_move(board, size, win_length, AI_MARK)
    return JSONResponse({"index": idx})


async def get_score(request: Request) -> Response:
    return JSONResponse(request.app.state.scoreboard.snapshot())


async def increment_score(request: Request) -> Response:
    try:
        body = await _read_body(request)
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = {}
    try:
        scores = request.app.state.scoreboard.increment(body.get("winner"))
    except ValueError:
        return JSONResponse({"error": "Invalid winner"}, status_code=400)
    return JSONResponse(scores)


async def reset_score(request: Request) -> Response:
    return JSONResponse(request.app.state.scoreboard.reset())


async def health(request: Request) -> Response:
    return JSONResponse({"status": "ok", "version": _package_version()})


def _package_version() -> str:
    try:
        from importlib.metadata import version as _ver

        return _ver("tictac-engine")
    except Exception:
        return "unknown"


routes = [
    Route("/api/health", health, methods=["GET"]),
    Route("/api/winner", winner, methods=["POST"]),
    Route("/api/ai/move", ai_move, methods=["POST"]),
    Route("/api/score", get_score, methods=["GET"]),
    Route("/api/score/increment", increment_score, methods=["POST"]),
    Route("/api/score/reset", reset_score, methods=["POST"]),
]


def create_app(config: Optional[ServerConfig] = None, scoreboard: Optional[Scoreboard] = None) -> Starlette:
    config = config or ServerConfig.from_env()
    app = Starlette(routes=routes)
    app.state.scoreboard = scoreboard or Scoreboard()
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    return app


def run(config: Optional[ServerConfig] = None) -> None:
    import uvicorn

    config = config or ServerConfig.from_env()
    logging.info("API server listening on http://%s:%d", config.host, config.port)
    uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level)
