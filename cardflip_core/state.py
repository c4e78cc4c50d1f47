from __future__ import annotations

import logging
import random
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple, Union

from .board import Board, PairId
from .config import EASY, Difficulty, GameConfig, preset
from .deal import deal_board
from .errors import InvalidArgument, InvalidConfig
from .history import MatchHistory
from .palette import DEFAULT_SYMBOLS, color_for, symbol_for
from .scheduler import ThreadingScheduler, TimerHandle

log = logging.getLogger("cardflip.state")

MATCH_DELAY_MS = 500
MISMATCH_DELAY_MS = 1000


class CardState(Enum):
    HIDDEN = "hidden"
    REVEALED = "revealed"
    SOLVED = "solved"
    MATCH_GLOW = "match_glow"  # visual only: the pair matched most recently


class Phase(Enum):
    IDLE = "idle"
    RESOLVING = "resolving"
    WON = "won"


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view of the game handed to adapters after every change."""
    config: GameConfig
    grid: Tuple[PairId, ...]
    cards: Tuple[CardState, ...]  # visual state per index
    moves: int
    matched_pairs: int
    phase: Phase
    recent_matches: Tuple[str, ...]
    pending: Tuple[int, ...]
    version: int
    symbols: Tuple[str, ...]  # per pair id
    colors: Tuple[str, ...]  # per pair id, '#RRGGBB'

    @property
    def won(self) -> bool:
        return self.phase is Phase.WON

    @property
    def total_pairs(self) -> int:
        return self.config.total_pairs


Subscriber = Callable[[GameSnapshot], None]


class GameState:
    """
    The card-matching state machine.

    Owns the dealt board, per-card solved/revealed flags, the two-card turn
    buffer, the move counter and the recent-matches history. Two flips start a
    timed resolution on the scheduler; while it is pending the board ignores
    flips. Every accepted change produces a new GameSnapshot for subscribers.
    """

    def __init__(
        self,
        config: Union[GameConfig, Difficulty, str] = EASY,
        *,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        scheduler=None,
        symbols: Sequence[str] = DEFAULT_SYMBOLS,
        match_delay_ms: float = MATCH_DELAY_MS,
        mismatch_delay_ms: float = MISMATCH_DELAY_MS,
    ):
        if not symbols:
            raise InvalidConfig("symbol table is empty")
        self._rng = rng if rng is not None else random.Random(seed)
        self._scheduler = scheduler if scheduler is not None else ThreadingScheduler()
        self._symbol_table: Tuple[str, ...] = tuple(symbols)
        self._match_delay_ms = match_delay_ms
        self._mismatch_delay_ms = mismatch_delay_ms

        self._lock = threading.RLock()
        self._subscribers: List[Subscriber] = []
        self._history = MatchHistory()
        self._pending_handle: Optional[TimerHandle] = None
        self._generation = 0
        self._version = 0

        self._reset(preset(config))

    # ---------- commands ----------

    def flip(self, index: int) -> GameSnapshot:
        """Reveals one card. Illegal flips are ignored and return the current snapshot."""
        with self._lock:
            self._check_index(index)
            if self._phase is not Phase.IDLE or self._solved[index] or self._revealed[index]:
                log.debug("ignored flip of %d (phase=%s)", index, self._phase.value)
                return self.snapshot()

            self._revealed[index] = True
            self._last_match = ()
            self._turn.append(index)

            if len(self._turn) == 2:
                self._moves += 1
                self._phase = Phase.RESOLVING
                first, second = self._turn
                matched = self._board.at(first) == self._board.at(second)
                delay = self._match_delay_ms if matched else self._mismatch_delay_ms
                generation = self._generation
                self._pending_handle = self._scheduler.schedule(
                    delay, lambda: self._resolve(generation)
                )
                log.debug("cards %d and %d %s; resolving in %.0f ms",
                          first, second, "match" if matched else "differ", delay)
            return self._changed()

    def new_game(
        self,
        config: Union[GameConfig, Difficulty, str, None] = None,
        seed: Optional[int] = None,
    ) -> GameSnapshot:
        """Deals a fresh board, optionally for another difficulty. Cancels any pending resolution."""
        with self._lock:
            cfg = self._config if config is None else preset(config)
            if seed is not None:
                self._rng = random.Random(seed)
            self._reset(cfg)
            return self._changed()

    def select_difficulty(self, difficulty: Union[GameConfig, Difficulty, str]) -> GameSnapshot:
        return self.new_game(preset(difficulty))

    def request_new_game(self) -> GameSnapshot:
        return self.new_game()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Registers a change listener; returns a function that removes it."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    # ---------- queries ----------

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def board(self) -> Board:
        return self._board

    def card_state(self, index: int) -> CardState:
        with self._lock:
            self._check_index(index)
            if self._solved[index]:
                return CardState.SOLVED
            if self._revealed[index]:
                return CardState.REVEALED
            return CardState.HIDDEN

    def visual_state(self, index: int) -> CardState:
        with self._lock:
            state = self.card_state(index)
            if state is CardState.SOLVED and index in self._last_match:
                return CardState.MATCH_GLOW
            return state

    def is_solved(self, index: int) -> bool:
        return self.card_state(index) is CardState.SOLVED

    def is_revealed(self, index: int) -> bool:
        with self._lock:
            self._check_index(index)
            return self._revealed[index]

    def pair_at(self, index: int) -> PairId:
        self._check_index(index)
        return self._board.at(index)

    def symbol_for(self, pair_id: PairId) -> str:
        self._check_pair(pair_id)
        return self._symbols[pair_id]

    def color_for(self, pair_id: PairId) -> str:
        self._check_pair(pair_id)
        return self._colors[pair_id]

    def move_count(self) -> int:
        return self._moves

    def matched_pair_count(self) -> int:
        return self._matched_pairs

    def phase(self) -> Phase:
        return self._phase

    def is_won(self) -> bool:
        return self._phase is Phase.WON

    def is_resolving(self) -> bool:
        return self._phase is Phase.RESOLVING

    def recent_matches(self) -> List[str]:
        with self._lock:
            return self._history.items()

    def stats_line(self) -> str:
        return "Moves: {}  •  Pairs: {}/{}  •  Cards: {}".format(
            self._moves, self._matched_pairs, self._config.total_pairs, self._config.total_cards
        )

    def snapshot(self) -> GameSnapshot:
        with self._lock:
            return GameSnapshot(
                config=self._config,
                grid=self._board.grid,
                cards=tuple(self.visual_state(i) for i in range(len(self._board))),
                moves=self._moves,
                matched_pairs=self._matched_pairs,
                phase=self._phase,
                recent_matches=tuple(self._history.items()),
                pending=tuple(self._turn),
                version=self._version,
                symbols=self._symbols,
                colors=self._colors,
            )

    # ---------- internals ----------

    def _reset(self, config: GameConfig) -> None:
        if self._pending_handle is not None:
            self._pending_handle.cancel()
            self._pending_handle = None
        self._generation += 1

        self._config = config
        self._board = deal_board(config, rng=self._rng)
        self._solved = [False] * config.total_cards
        self._revealed = [False] * config.total_cards
        self._turn: List[int] = []
        self._moves = 0
        self._matched_pairs = 0
        self._phase = Phase.IDLE
        self._last_match: Tuple[int, ...] = ()
        self._history.clear()

        pairs = range(config.total_pairs)
        self._symbols = tuple(symbol_for(p, self._symbol_table) for p in pairs)
        self._colors = tuple(color_for(p, config.total_pairs) for p in pairs)
        log.info("new %s game: %dx%d, %d pairs",
                 config.difficulty_name, config.rows, config.cols, config.total_pairs)

    def _resolve(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._phase is not Phase.RESOLVING:
                log.debug("dropped stale resolution for game %d", generation)
                return
            self._pending_handle = None
            first, second = self._turn
            pair_id = self._board.at(first)
            if pair_id == self._board.at(second):
                self._solved[first] = self._solved[second] = True
                self._matched_pairs += 1
                self._history.push(self._symbols[pair_id])
                self._last_match = (first, second)
                log.info("matched pair %d (%d/%d)", pair_id, self._matched_pairs, self._config.total_pairs)
            else:
                self._revealed[first] = self._revealed[second] = False
            self._turn = []
            if self._matched_pairs == self._config.total_pairs:
                self._phase = Phase.WON
                log.info("game won in %d moves", self._moves)
            else:
                self._phase = Phase.IDLE
            self._changed()

    def _changed(self) -> GameSnapshot:
        self._version += 1
        snap = self.snapshot()
        for callback in list(self._subscribers):
            try:
                callback(snap)
            except Exception:
                log.exception("state subscriber %r failed", callback)
        return snap

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgument(f"card index must be an int, got {index!r}")
        if not 0 <= index < self._config.total_cards:
            raise InvalidArgument(
                f"card index {index} outside [0, {self._config.total_cards})"
            )

    def _check_pair(self, pair_id: PairId) -> None:
        if isinstance(pair_id, bool) or not isinstance(pair_id, int):
            raise InvalidArgument(f"pair id must be an int, got {pair_id!r}")
        if not 0 <= pair_id < self._config.total_pairs:
            raise InvalidArgument(
                f"pair id {pair_id} outside [0, {self._config.total_pairs})"
            )
