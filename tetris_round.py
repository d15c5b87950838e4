"""Round controller: one board's spawn / move / gravity / lock lifecycle.

Every mutation of the active piece follows the same three steps:

  1) retract the piece's footprint from the board,
  2) change the piece and ask the board whether the new footprint is legal,
  3) restamp the piece, reverting the change first if it was rejected.

Illegal moves are ordinary no-ops, never errors. Spawning into an occupied
anchor ends the round.
"""
import logging
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from tetris_board import Board, project_shadow
from tetris_input import Intent
from tetris_piece import Kind, Piece, random_kind
from tetris_rng import RandomSource
from tetris_score import ScoreTracker

log = logging.getLogger(__name__)


class RoundState(Enum):
    IN_GAME = "in_game"
    GAME_OVER = "game_over"


class RoundController:
    def __init__(self, seed: Optional[int] = None, name: str = "board"):
        self.name = name
        self.board = Board()
        self.score = ScoreTracker()
        self.rng = RandomSource(seed)
        self.state = RoundState.IN_GAME
        self.piece: Optional[Piece] = None
        self._redraw = True
        self.spawn()

    # ---------- queries ----------
    @property
    def is_over(self) -> bool:
        return self.state is RoundState.GAME_OVER

    def shadow(self) -> Optional[Piece]:
        if self.piece is None:
            return None
        return project_shadow(self.board, self.piece)

    def shadow_cells(self) -> List[Tuple[int, int]]:
        s = self.shadow()
        return list(s.cells()) if s else []

    def invalidate(self):
        self._redraw = True

    def take_redraw(self) -> bool:
        """Return whether occupancy changed since the last call, and clear it."""
        r, self._redraw = self._redraw, False
        return r

    # ---------- lifecycle ----------
    def spawn(self, kind: Optional[Kind] = None) -> bool:
        """Place a new piece at the spawn anchor; False (and game over) if blocked."""
        if kind is None:
            kind = random_kind(self.rng)
        piece = Piece.spawn(kind)
        if not self.board.is_space_open(piece):
            log.info("%s: no room to spawn %s, game over", self.name, kind.value)
            self.piece = None
            self.state = RoundState.GAME_OVER
            self._redraw = True
            return False
        log.debug("%s: spawning %s", self.name, kind.value)
        self.board.place(piece)
        self.piece = piece
        self._redraw = True
        return True

    def restart(self, seed: Optional[int] = None):
        log.info("%s: restarting", self.name)
        self.board.clear()
        self.score.reset()
        self.rng.reseed(seed)
        self.piece = None
        self.state = RoundState.IN_GAME
        self.spawn()

    # ---------- moves ----------
    def move_left(self) -> bool:
        if self.piece is None or self.board.is_blocked_left(self.piece):
            return False
        return self._shift(-1, 0)

    def move_right(self) -> bool:
        if self.piece is None or self.board.is_blocked_right(self.piece):
            return False
        return self._shift(1, 0)

    def soft_drop(self) -> bool:
        if self.piece is None or self.board.is_at_bottom(self.piece):
            return False
        return self._shift(0, 1)

    def rotate(self) -> bool:
        p = self.piece
        if p is None:
            return False
        old = p.rotation
        self.board.retract(p)
        p.rotate()
        ok = self.board.is_space_open(p)
        if not ok:
            p.rotation = old
        self.board.place(p)
        if ok and p.rotation != old:
            self._redraw = True
        return ok

    def hard_drop(self) -> bool:
        p = self.piece
        if p is None:
            return False
        target = project_shadow(self.board, p).y
        if target != p.y:
            self._shift(0, target - p.y)
        return True

    def _shift(self, dx: int, dy: int) -> bool:
        p = self.piece
        self.board.retract(p)
        p.x += dx
        p.y += dy
        ok = self.board.is_space_open(p)
        if not ok:
            p.x -= dx
            p.y -= dy
        self.board.place(p)
        if ok:
            self._redraw = True
        return ok

    def apply(self, intent: Intent) -> bool:
        """Apply one intent; returns True if it changed anything."""
        if intent is Intent.RESTART:
            if self.is_over:
                self.restart()
                return True
            return False
        if self.is_over:
            return False
        handler = {
            Intent.MOVE_LEFT: self.move_left,
            Intent.MOVE_RIGHT: self.move_right,
            Intent.SOFT_DROP: self.soft_drop,
            Intent.ROTATE: self.rotate,
            Intent.HARD_DROP: self.hard_drop,
        }.get(intent)
        if handler is None:
            return False
        done = handler()
        if not done:
            log.debug("%s: %s rejected", self.name, intent.value)
        return done

    # ---------- per-frame step ----------
    def tick(self, dt: float, intents: Iterable[Intent] = ()) -> int:
        """Advance one step: intents first, then gravity. Returns rows cleared."""
        hard_dropped = False
        for intent in intents:
            if self.apply(intent) and intent is Intent.HARD_DROP:
                hard_dropped = True
        if self.is_over or self.piece is None:
            return 0
        finished = self.piece.timer.tick(dt)
        if not (finished or hard_dropped):
            return 0
        if self.board.is_at_bottom(self.piece):
            return self._lock()
        self._shift(0, 1)
        return 0

    def _lock(self) -> int:
        log.debug("%s: %s locked at (%d, %d)", self.name,
                  self.piece.kind.value, self.piece.x, self.piece.y)
        cleared = self.board.clear_full_rows()
        total = self.score.add_cleared_rows(cleared)
        if cleared:
            log.debug("%s: %d row(s) cleared, score %d", self.name, cleared, total)
        self.piece = None
        self._redraw = True
        self.spawn()
        return cleared
