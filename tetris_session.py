"""Multi-board session: N independent rounds sharing one focus index"""
import logging
from typing import Dict, Iterable, List, Optional

from tetris_config import CONFIG
from tetris_input import Intent, PIECE_INTENTS
from tetris_round import RoundController

log = logging.getLogger(__name__)

SESSION_OVER_POLICIES = ("any", "all")


class Session:
    """Owns the boards. Piece intents go to the focused board only, gravity
    advances every board each tick.
    """

    def __init__(self, board_count: Optional[int] = None, seed: Optional[int] = None,
                 over_policy: Optional[str] = None):
        if board_count is None:
            board_count = int(CONFIG["BOARD_COUNT"])
        if over_policy is None:
            over_policy = CONFIG["SESSION_OVER"]
        if board_count < 1:
            raise ValueError(f"need at least one board, got {board_count}")
        if over_policy not in SESSION_OVER_POLICIES:
            raise ValueError(f"unknown session-over policy {over_policy!r}")
        self.over_policy = over_policy
        self.seed = seed
        self.boards: List[RoundController] = [
            RoundController(None if seed is None else seed + i, name=f"board{i}")
            for i in range(board_count)
        ]
        self.focus = 0

    @property
    def focused(self) -> RoundController:
        return self.boards[self.focus]

    @property
    def score(self) -> int:
        return sum(b.score.total for b in self.boards)

    @property
    def is_over(self) -> bool:
        over = [b.is_over for b in self.boards]
        return any(over) if self.over_policy == "any" else all(over)

    def swap_focus(self):
        self.focus = (self.focus + 1) % len(self.boards)
        log.debug("focus -> board%d", self.focus)
        # the focus highlight changes on every board
        for b in self.boards:
            b.invalidate()

    def restart(self):
        for i, b in enumerate(self.boards):
            b.restart(None if self.seed is None else self.seed + i)

    def tick(self, dt: float, intents: Iterable[Intent] = ()) -> int:
        """Route intents, then step every board. Returns rows cleared this tick."""
        routed: Dict[int, List[Intent]] = {i: [] for i in range(len(self.boards))}
        for intent in intents:
            if intent is Intent.RESTART:
                if self.is_over:
                    self.restart()
            elif self.is_over:
                continue
            elif intent is Intent.SWAP_FOCUS:
                self.swap_focus()
            elif intent in PIECE_INTENTS:
                routed[self.focus].append(intent)
        if self.is_over:
            return 0
        return sum(b.tick(dt, routed[i]) for i, b in enumerate(self.boards))
