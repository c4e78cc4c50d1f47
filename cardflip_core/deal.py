from __future__ import annotations

import random
from typing import List, MutableSequence, Optional, TypeVar

from .board import Board, PairId
from .config import GameConfig
from .errors import InvalidConfig

T = TypeVar("T")


def paired_sequence(total_cards: int) -> List[PairId]:
    """Builds [0, 0, 1, 1, ..., n/2-1, n/2-1] for an even card count."""
    if total_cards < 0 or total_cards % 2 != 0:
        raise InvalidConfig(f"cannot pair {total_cards} cards")
    deck: List[PairId] = []
    for pair_id in range(total_cards // 2):
        deck.extend((pair_id, pair_id))
    return deck


def fisher_yates(items: MutableSequence[T], rng: random.Random) -> MutableSequence[T]:
    """Shuffles in place, swapping each position i (from the end) with a uniform pick in 0..i."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]
    return items


def deal_board(
    config: GameConfig,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> Board:
    """Creates and deals a shuffled board for the given difficulty."""
    if rng is None:
        rng = random.Random(seed)
    deck = fisher_yates(paired_sequence(config.total_cards), rng)
    return Board(rows=config.rows, cols=config.cols, grid=tuple(deck))
