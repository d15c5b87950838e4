"""Piece catalog, active piece model and fall timer"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Tuple

from tetris_config import CONFIG, COLS

Matrix = List[List[int]]


class Kind(str, Enum):
    I = "I"
    O = "O"
    T = "T"
    S = "S"
    Z = "Z"
    J = "J"
    L = "L"


# Draw order for random_kind
KINDS: List[Kind] = [Kind.I, Kind.O, Kind.T, Kind.S, Kind.Z, Kind.J, Kind.L]

# Rotation states per kind, 1s are blocks, top-left is the anchor
ROTATIONS: Dict[Kind, List[Matrix]] = {
    Kind.I: [
        [[1,1,1,1]],
        [[1],[1],[1],[1]],
    ],
    Kind.O: [
        [[1,1],[1,1]],
    ],
    Kind.T: [
        [[0,1,0],[1,1,1]],
        [[1,0],[1,1],[1,0]],
        [[1,1,1],[0,1,0]],
        [[0,1],[1,1],[0,1]],
    ],
    Kind.S: [
        [[0,1,1],[1,1,0]],
        [[1,0],[1,1],[0,1]],
    ],
    Kind.Z: [
        [[1,1,0],[0,1,1]],
        [[0,1],[1,1],[1,0]],
    ],
    Kind.J: [
        [[1,0,0],[1,1,1]],
        [[1,1],[1,0],[1,0]],
        [[1,1,1],[0,0,1]],
        [[0,1],[0,1],[1,1]],
    ],
    Kind.L: [
        [[0,0,1],[1,1,1]],
        [[1,0],[1,0],[1,1]],
        [[1,1,1],[1,0,0]],
        [[1,1],[0,1],[0,1]],
    ],
}


def rotation_states(kind: Kind) -> List[Matrix]:
    return ROTATIONS[kind]


def random_kind(rng) -> Kind:
    """Uniform draw over the seven kinds from a ``RandomSource``."""
    return KINDS[rng.next(0, len(KINDS))]


class FallTimer:
    """Repeating duration accumulator, advanced by caller-supplied seconds."""

    def __init__(self, period: float):
        if period <= 0:
            raise ValueError(f"fall period must be positive, got {period}")
        self.period = period
        self.elapsed = 0.0

    def tick(self, dt: float) -> bool:
        """Advance by ``dt``; True if at least one period completed."""
        self.elapsed += dt
        if self.elapsed < self.period:
            return False
        self.elapsed %= self.period
        return True

    def reset(self):
        self.elapsed = 0.0


def _default_timer() -> FallTimer:
    return FallTimer(float(CONFIG["FALL_PERIOD_S"]))


@dataclass
class Piece:
    kind: Kind
    rotation: int
    x: int
    y: int
    timer: FallTimer = field(default_factory=_default_timer, compare=False, repr=False)

    @staticmethod
    def spawn(kind: Kind) -> "Piece":
        return Piece(kind, 0, COLS // 2 - 1, 0)

    @property
    def states(self) -> List[Matrix]:
        return ROTATIONS[self.kind]

    @property
    def matrix(self) -> Matrix:
        return self.states[self.rotation]

    def rotate(self):
        self.rotation = (self.rotation + 1) % len(self.states)

    def cells(self) -> Iterator[Tuple[int, int]]:
        """Board coordinates of the footprint."""
        for r, row in enumerate(self.matrix):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r

    def size(self) -> int:
        return sum(v for row in self.matrix for v in row)

    def moved(self, dx: int = 0, dy: int = 0) -> "Piece":
        """Copy at an offset anchor; shares no state with this piece."""
        return Piece(self.kind, self.rotation, self.x + dx, self.y + dy)
