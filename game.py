from __future__ import annotations

# Facade module that re-exports the card flip core.
# The Flask app, the CLI entry point and the tests import from here;
# single-responsibility modules live under cardflip_core/*.

from cardflip_core.board import Board, Coord, PairId
from cardflip_core.config import EASY, HARD, MEDIUM, PRESETS, Difficulty, GameConfig, preset
from cardflip_core.deal import deal_board, fisher_yates, paired_sequence
from cardflip_core.errors import InvalidArgument, InvalidConfig
from cardflip_core.history import MAX_RECENT_MATCHES, MatchHistory
from cardflip_core.palette import DEFAULT_SYMBOLS, color_for, symbol_for
from cardflip_core.scheduler import ManualScheduler, ThreadingScheduler, TimerHandle
from cardflip_core.settings import Settings, configure_logging
from cardflip_core.state import (
    MATCH_DELAY_MS,
    MISMATCH_DELAY_MS,
    CardState,
    GameSnapshot,
    GameState,
    Phase,
)

__all__ = [
    "Board", "Coord", "PairId",
    "EASY", "MEDIUM", "HARD", "PRESETS", "Difficulty", "GameConfig", "preset",
    "deal_board", "fisher_yates", "paired_sequence",
    "InvalidArgument", "InvalidConfig",
    "MAX_RECENT_MATCHES", "MatchHistory",
    "DEFAULT_SYMBOLS", "color_for", "symbol_for",
    "ManualScheduler", "ThreadingScheduler", "TimerHandle",
    "Settings", "configure_logging",
    "MATCH_DELAY_MS", "MISMATCH_DELAY_MS", "CardState", "GameSnapshot", "GameState", "Phase",
]


def main() -> None:
    # CLI driver delegated to cardflip_core.cli
    from cardflip_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
