"""Line-clear scoring"""
from typing import Dict

# NES-like line clear points; anything outside the table awards nothing
SCORE_TABLE: Dict[int, int] = {0: 0, 1: 40, 2: 100, 3: 300, 4: 1200}


class ScoreTracker:
    def __init__(self):
        self._total = 0

    @property
    def total(self) -> int:
        return self._total

    def add_cleared_rows(self, n: int) -> int:
        self._total += SCORE_TABLE.get(n, 0)
        return self._total

    def reset(self):
        self._total = 0
