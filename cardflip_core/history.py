from __future__ import annotations

from collections import deque
from typing import Deque, List

MAX_RECENT_MATCHES = 3


class MatchHistory:
    """Most-recently-matched symbols, newest first, capped at a few entries."""

    def __init__(self, limit: int = MAX_RECENT_MATCHES):
        self._items: Deque[str] = deque(maxlen=limit)

    def push(self, symbol: str) -> None:
        # appendleft on a bounded deque drops the oldest entry from the right
        self._items.appendleft(symbol)

    def clear(self) -> None:
        self._items.clear()

    def items(self) -> List[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)
