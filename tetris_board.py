"""Board: occupancy grid, legality checks, row sweep, shadow"""
import logging
from typing import Iterator, List, Tuple

from tetris_config import COLS, ROWS
from tetris_piece import Piece

log = logging.getLogger(__name__)


class Board:
    """Fixed ``COLS`` x ``ROWS`` grid of occupied flags, indexed ``grid[y][x]``.

    The active piece is stamped into the grid while it falls; every move is
    done as retract, test, restamp so the grid never holds a stale footprint.
    """

    def __init__(self):
        self.width = COLS
        self.height = ROWS
        self.grid: List[List[bool]] = [[False] * COLS for _ in range(ROWS)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def get(self, x: int, y: int) -> bool:
        return self._inside(x, y) and self.grid[y][x]

    def set(self, x: int, y: int, occupied: bool):
        if not self._inside(x, y):
            log.error("Attempted to set a cell outside of the grid: (%d, %d)", x, y)
            return
        self.grid[y][x] = occupied

    def clear(self):
        self.grid = [[False] * self.width for _ in range(self.height)]

    # ---------- stamping ----------
    def stamp(self, piece: Piece, value: bool):
        for x, y in piece.cells():
            self.set(x, y, value)

    def place(self, piece: Piece):
        self.stamp(piece, True)

    def retract(self, piece: Piece):
        self.stamp(piece, False)

    # ---------- legality ----------
    def is_space_open(self, piece: Piece) -> bool:
        for x, y in piece.cells():
            if not self._inside(x, y) or self.grid[y][x]:
                return False
        return True

    def is_blocked_left(self, piece: Piece) -> bool:
        for r, row in enumerate(piece.matrix):
            if not any(row):
                continue
            left = piece.x + row.index(1)
            if left <= 0 or self.get(left - 1, piece.y + r):
                return True
        return False

    def is_blocked_right(self, piece: Piece) -> bool:
        for r, row in enumerate(piece.matrix):
            if not any(row):
                continue
            right = piece.x + len(row) - 1 - row[::-1].index(1)
            if right >= self.width - 1 or self.get(right + 1, piece.y + r):
                return True
        return False

    def is_at_bottom(self, piece: Piece) -> bool:
        checked = set()
        for r in reversed(range(len(piece.matrix))):
            for c, v in enumerate(piece.matrix[r]):
                if not v or c in checked:
                    continue
                checked.add(c)
                x, y = piece.x + c, piece.y + r
                if y >= self.height - 1 or self.get(x, y + 1):
                    return True
        return False

    # ---------- sweep ----------
    def clear_full_rows(self) -> int:
        """Remove full rows, shift the rest down, return how many went."""
        kept = [row for row in self.grid if not all(row)]
        cleared = self.height - len(kept)
        if cleared:
            self.grid = [[False] * self.width for _ in range(cleared)] + kept
            log.debug("cleared %d row(s)", cleared)
        return cleared

    # ---------- queries ----------
    def occupied_cells(self) -> Iterator[Tuple[int, int]]:
        for y, row in enumerate(self.grid):
            for x, v in enumerate(row):
                if v:
                    yield x, y

    def count(self) -> int:
        return sum(sum(row) for row in self.grid)

    def __str__(self) -> str:
        return "".join("".join("X" if v else "." for v in row) + "\n" for row in self.grid)


def project_shadow(board: Board, piece: Piece) -> Piece:
    """Return a copy of ``piece`` at the row it would land on if dropped."""
    shadow = piece.moved()
    while not board.is_at_bottom(shadow):
        shadow.y += 1
    return shadow
