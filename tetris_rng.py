"""Seedable random source for piece selection"""
import logging
import random
from typing import Optional

log = logging.getLogger(__name__)


class RandomSource:
    """Wraps a ``random.Random`` so a board can be replayed from a seed.

    ``seed=None`` seeds from OS entropy; an explicit integer gives the same
    piece sequence every time.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def next(self, lo: int, hi: int) -> int:
        """Return an integer in ``[lo, hi)``."""
        return self._rng.randrange(lo, hi)

    def reseed(self, seed: Optional[int] = None):
        if seed is not None:
            self.seed = seed
        log.debug("reseeding random source (seed=%s)", self.seed)
        self._rng = random.Random(self.seed)
