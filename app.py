from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Optional

from flask import Flask, jsonify, request

from cardflip_core.settings import Settings, configure_logging
from game import (
    PRESETS,
    CardState,
    GameConfig,
    GameSnapshot,
    GameState,
    InvalidArgument,
    InvalidConfig,
    preset,
)

log = logging.getLogger("cardflip.app")

SETTINGS = Settings.from_env()
app = Flask(__name__)

# A single in-memory game per process; commands are serialized by GameState.
_GAME: Optional[GameState] = None
_LATEST: Optional[GameSnapshot] = None
_UNSUBSCRIBE = None
_GAME_LOCK = threading.RLock()


def _on_change(snap: GameSnapshot) -> None:
    global _LATEST
    _LATEST = snap


def install_game(game: GameState) -> GameState:
    """Replaces the process-wide game and subscribes to its change notifications."""
    global _GAME, _LATEST, _UNSUBSCRIBE
    with _GAME_LOCK:
        if _UNSUBSCRIBE is not None:
            _UNSUBSCRIBE()
        _GAME = game
        _UNSUBSCRIBE = game.subscribe(_on_change)
        _LATEST = game.snapshot()
        return game


def get_game() -> GameState:
    with _GAME_LOCK:
        if _GAME is None:
            return install_game(GameState(preset(SETTINGS.difficulty), seed=SETTINGS.seed))
        return _GAME


def latest_snapshot() -> GameSnapshot:
    game = get_game()
    return _LATEST if _LATEST is not None else game.snapshot()


# ---------- JSON encoding ----------

def config_to_json(cfg: GameConfig) -> Dict[str, Any]:
    return {
        "difficulty": cfg.difficulty.value,
        "name": cfg.difficulty_name,
        "description": cfg.description,
        "rows": int(cfg.rows),
        "cols": int(cfg.cols),
        "totalPairs": int(cfg.total_pairs),
        "totalCards": int(cfg.total_cards),
    }


def state_to_json(snap: GameSnapshot) -> Dict[str, Any]:
    cards = []
    for i, visual in enumerate(snap.cards):
        card: Dict[str, Any] = {"index": i, "state": visual.value}
        if visual is not CardState.HIDDEN:
            pair_id = snap.grid[i]
            card["pairId"] = int(pair_id)
            card["symbol"] = snap.symbols[pair_id]
            card["color"] = snap.colors[pair_id]
        cards.append(card)
    out = config_to_json(snap.config)
    out.update({
        "moves": int(snap.moves),
        "matchedPairs": int(snap.matched_pairs),
        "phase": snap.phase.value,
        "won": snap.won,
        "version": int(snap.version),
        "recentMatches": list(snap.recent_matches),
        "pending": [int(i) for i in snap.pending],
        "cards": cards,
    })
    return out


def _error(message: str, status: int = 400) -> Any:
    return jsonify({"ok": False, "error": message}), status


# ---------- Game API ----------

@app.get("/api/presets")
def api_presets() -> Any:
    return jsonify({"ok": True, "presets": [config_to_json(cfg) for cfg in PRESETS.values()]})


@app.get("/api/state")
def api_state() -> Any:
    return jsonify({"ok": True, "state": state_to_json(latest_snapshot())})


@app.post("/api/new")
def api_new() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    if not isinstance(body, dict):
        return _error("JSON object body required")
    difficulty = body.get("difficulty", None)
    seed = body.get("seed", None)
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        return _error("seed must be an integer")
    try:
        get_game().new_game(difficulty, seed=seed)
    except (InvalidArgument, InvalidConfig) as e:
        return _error(str(e))
    return jsonify({"ok": True, "state": state_to_json(latest_snapshot())})


@app.post("/api/difficulty")
def api_difficulty() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    if not isinstance(body, dict):
        return _error("JSON object body required")
    if "difficulty" not in body:
        return _error("difficulty required")
    try:
        get_game().select_difficulty(body["difficulty"])
    except (InvalidArgument, InvalidConfig) as e:
        return _error(str(e))
    return jsonify({"ok": True, "state": state_to_json(latest_snapshot())})


@app.post("/api/flip")
def api_flip() -> Any:
    body = request.get_json(force=True, silent=True) or {}
    if not isinstance(body, dict):
        return _error("JSON object body required")
    if "index" not in body:
        return _error("index required")
    game = get_game()
    before = game.snapshot().version
    try:
        snap = game.flip(body["index"])
    except InvalidArgument as e:
        return _error(str(e))
    return jsonify({"ok": True, "accepted": snap.version != before, "state": state_to_json(snap)})


# Entrypoint for "python app.py"
if __name__ == "__main__":
    configure_logging(SETTINGS.log_level)
    app.run(host=SETTINGS.host, port=SETTINGS.port, debug=SETTINGS.debug)
