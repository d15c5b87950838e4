# tetris_layout.py
from dataclasses import dataclass
from typing import List, Tuple

from tetris_config import CONFIG, COLS, ROWS


@dataclass
class Dims:
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    boards: List[Tuple[int, int]]   # top-left pixel of each board
    panel_x: int
    panel_y: int


def compute_dims(board_count: int) -> Dims:
    cell = int(CONFIG["CELL_SIZE"])
    margin = 16
    panel_w = 220

    board_w = COLS * cell
    board_h = ROWS * cell

    boards = [(margin + i * (board_w + margin), margin) for i in range(board_count)]
    panel_x = margin + board_count * (board_w + margin)
    panel_y = margin

    total_w = panel_x + panel_w + margin
    total_h = margin + board_h + margin

    return Dims(
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        boards=boards, panel_x=panel_x, panel_y=panel_y,
    )
