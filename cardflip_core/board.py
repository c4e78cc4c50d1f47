from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Set, Tuple

PairId = int
Coord = Tuple[int, int]


@dataclass(frozen=True)
class Board:
    """Represents the dealt board: grid dimensions and the pair id at every position."""
    rows: int
    cols: int
    grid: Tuple[PairId, ...]  # row-major, length == rows * cols

    def __len__(self) -> int:
        return len(self.grid)

    def index(self, r: int, c: int) -> int:
        """Row-major position of cell (r, c)."""
        return r * self.cols + c

    def coord(self, index: int) -> Coord:
        return divmod(index, self.cols)

    def at(self, index: int) -> PairId:
        return self.grid[index]

    def coords(self) -> Iterable[Coord]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield (r, c)

    def positions_of(self, pair_id: PairId) -> List[int]:
        return [i for i, p in enumerate(self.grid) if p == pair_id]

    def pretty(
        self,
        shown: Optional[Set[int]] = None,
        labels: Optional[List[str]] = None,
    ) -> str:
        """Generates a text grid; cards in `shown` print their label, the rest print '?'."""
        lines: List[str] = []
        width = max(2, len(str(len(self.grid) - 1)))
        for r in range(self.rows):
            row: List[str] = []
            for c in range(self.cols):
                i = self.index(r, c)
                if shown is None or i in shown:
                    cell = labels[self.grid[i]] if labels else str(self.grid[i])
                else:
                    cell = "?"
                row.append(cell.rjust(width))
            lines.append(" ".join(row))
        return "\n".join(lines)
