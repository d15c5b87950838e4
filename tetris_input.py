"""Player intents, already decoded from whatever device produced them"""
from enum import Enum


class Intent(Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"
    SWAP_FOCUS = "swap_focus"
    RESTART = "restart"


# Intents that act on a single board's active piece
PIECE_INTENTS = frozenset({
    Intent.MOVE_LEFT,
    Intent.MOVE_RIGHT,
    Intent.SOFT_DROP,
    Intent.ROTATE,
    Intent.HARD_DROP,
})
