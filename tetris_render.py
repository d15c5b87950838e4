"""
Rendering helpers for the pygame front-end.

Only reads engine state:
- Pre-render cell Surfaces (focused, unfocused, shadow outline) and blit them.
- Pre-render the static background (grids + panel frame) once.
- Cache one BOARD SURFACE per board; rebuild it only when the round raises
  its redraw notice.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional

from tetris_config import COLS, ROWS
from tetris_layout import Dims
from tetris_round import RoundController
from tetris_session import Session

FOCUS_COLOR = (255, 26, 26)
IDLE_COLOR = (255, 255, 255)
SHADOW_COLOR = (120, 130, 170)
TEXT_COLOR = (200, 210, 240)


@dataclass
class HudCache:
    score: int = -1
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    controls: Optional[list] = None


class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surfaces: List[pygame.Surface] = [
            pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
            for _ in dims.boards
        ]

    # ---------- Static background (grids + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for bx, by in d.boards:
            for x in range(COLS+1):
                X = bx + x*d.cell
                pygame.draw.line(self.bg, grid_col, (X, by), (X, by + d.board_h))
            for y in range(ROWS+1):
                Y = by + y*d.cell
                pygame.draw.line(self.bg, grid_col, (bx, Y), (bx + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)

    # ---------- Cell sprites ----------
    def _make_cells(self):
        c = self.dims.cell
        self.cell_surf: Dict[bool, pygame.Surface] = {}
        for focused, col in ((True, FOCUS_COLOR), (False, IDLE_COLOR)):
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[focused] = s
        self.shadow_surf = pygame.Surface((c-4, c-4), pygame.SRCALPHA)
        pygame.draw.rect(self.shadow_surf, SHADOW_COLOR, (0,0,c-4,c-4), 2)

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, index: int, rnd: RoundController, focused: bool):
        """Redraws the board surface: shadow first, then every occupied cell."""
        surf = self.board_surfaces[index]
        surf.fill((0,0,0,0))
        c = self.dims.cell
        if not rnd.is_over:
            for x, y in rnd.shadow_cells():
                surf.blit(self.shadow_surf, (x*c + 2, y*c + 2))
        for x, y in rnd.board.occupied_cells():
            surf.blit(self.cell_surf[focused], (x*c + 1, y*c + 1))

    def draw(self, screen: pygame.Surface, session: Session):
        screen.blit(self.bg, (0,0))
        for i, rnd in enumerate(session.boards):
            if rnd.take_redraw():
                self.rebuild_board_surface(i, rnd, i == session.focus)
            screen.blit(self.board_surfaces[i], self.dims.boards[i])
        self.draw_panel_hud(screen, session.score)
        if session.is_over:
            msg = self.big_font.render("Game Over  R: Restart", True, (255,220,220))
            rect = msg.get_rect(center=(self.dims.total_w // 2, self.dims.total_h // 2))
            screen.blit(msg, rect)

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Dual Tetris", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT_COLOR)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        if self.hud.score_s: screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT_COLOR),
                f.render("←/→ Move", True, (165,175,215)),
                f.render("↓ Soft drop", True, (165,175,215)),
                f.render("Space Rotate", True, (165,175,215)),
                f.render("Enter Hard drop", True, (165,175,215)),
                f.render("F Swap board", True, (165,175,215)),
                f.render("R Restart", True, (165,175,215)),
            ]
        y = d.panel_y + 100
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20
