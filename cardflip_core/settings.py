"""
Runtime settings for the card flip adapters.

Read from environment variables only:
- CARDFLIP_DIFFICULTY: preset used for the first game (easy/medium/hard)
- CARDFLIP_SEED: optional integer seed for reproducible deals
- CARDFLIP_LOG_LEVEL: logging level name
- HOST, PORT, FLASK_DEBUG/DEBUG: Flask server knobs
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

_TRUTHY = ("1", "true", "yes", "on")
_DIFFICULTIES = ("easy", "medium", "hard")


def _get(env: Mapping[str, str], name: str, default: Any, cast: Optional[Callable[[str], Any]] = None) -> Any:
    val = env.get(name)
    if val is None or val == "":
        return default
    if cast is None:
        return val
    try:
        return cast(val)
    except ValueError:
        logging.getLogger("cardflip.settings").warning("ignoring bad %s=%r", name, val)
        return default


def _difficulty(env: Mapping[str, str]) -> str:
    val = _get(env, "CARDFLIP_DIFFICULTY", "easy").strip().lower()
    if val not in _DIFFICULTIES:
        logging.getLogger("cardflip.settings").warning("ignoring bad %s=%r", "CARDFLIP_DIFFICULTY", val)
        return "easy"
    return val


@dataclass(frozen=True)
class Settings:
    difficulty: str = "easy"
    seed: Optional[int] = None
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 5000
    debug: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        debug_raw = env.get("FLASK_DEBUG", env.get("DEBUG", "0"))
        return cls(
            difficulty=_difficulty(env),
            seed=_get(env, "CARDFLIP_SEED", None, int),
            log_level=_get(env, "CARDFLIP_LOG_LEVEL", "INFO").upper(),
            host=_get(env, "HOST", "127.0.0.1"),
            port=_get(env, "PORT", 5000, int),
            debug=str(debug_raw).lower() in _TRUTHY,
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
