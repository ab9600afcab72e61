"""
Pygame presentation for the neon look.

- Pre-render one glowing block sprite per color & size and blit it.
- Pre-render the static background (board well + side panel) once.
- Cache HUD text surfaces; re-render only when values change.
- Implements the loop's presenter hooks: render / game_over / start_enabled.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from neon_config import COLS, PREVIEW_GRID, ROWS
from neon_game import Game
from neon_layout import Dims, preview_offset
from neon_piece import COLORS

BACKGROUND = (10, 10, 10)
PANEL = (18, 18, 28)
TEXT = (200, 210, 240)
GAME_OVER_RED = (255, 0, 0)

def make_block(color: str, size: int) -> pygame.Surface:
    """A solid block with a soft halo and a translucent white core."""
    s = pygame.Surface((size, size), pygame.SRCALPHA)
    base = pygame.Color(color)
    glow = pygame.Color(base.r, base.g, base.b, 90)
    pygame.draw.rect(s, glow, (0, 0, size, size))
    pygame.draw.rect(s, base, (1, 1, size - 2, size - 2))
    inset = max(1, int(size * 0.1))
    pygame.draw.rect(s, (255, 255, 255, 128), (inset, inset, size - 2 * inset, size - 2 * inset))
    return s

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None

class NeonPresenter:
    """Draws a Game onto a pygame display surface."""
    def __init__(self, screen: pygame.Surface, dims: Dims, font: pygame.font.Font, big_font: pygame.font.Font):
        self.screen = screen
        self.dims = dims
        self.font = font
        self.big_font = big_font
        self.hud = HudCache()
        self.button_label = "Start"
        self.button_enabled = True
        self._make_static()
        self.blocks: Dict[Tuple[str, int], pygame.Surface] = {}

    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill(BACKGROUND)
        pygame.draw.rect(self.bg, (40, 40, 60), (d.board_x - 1, d.board_y - 1, d.board_w + 2, d.board_h + 2), 1)
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, PANEL, panel_rect)
        pygame.draw.rect(self.bg, (50, 60, 100), panel_rect, 1)
        self.bg.blit(self.font.render("Next", True, TEXT), (d.panel_x + 12, d.panel_y + 12))

    def block(self, color: str, size: int) -> pygame.Surface:
        key = (color, size)
        if key not in self.blocks:
            self.blocks[key] = make_block(color, size)
        return self.blocks[key]

    @property
    def button_rect(self) -> pygame.Rect:
        return pygame.Rect(self.dims.button)

    def button_hit(self, pos) -> bool:
        return self.button_enabled and self.button_rect.collidepoint(pos)

    # ---------- pieces & board ----------
    def draw_matrix(self, shape, ox: int, oy: int, color: str, x0: int, y0: int, size: int):
        sprite = self.block(color, size)
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    self.screen.blit(sprite, (x0 + (ox + x) * size, y0 + (oy + y) * size))

    def draw_board(self, game: Game):
        d = self.dims
        for y in range(ROWS):
            for x in range(COLS):
                color = game.board[y][x]
                if color is not None:
                    self.screen.blit(self.block(color, d.cell), (d.board_x + x * d.cell, d.board_y + y * d.cell))

    def draw_next(self, game: Game):
        d = self.dims
        p = game.next_piece
        ox, oy = preview_offset(p.shape)
        self.draw_matrix(p.shape, ox, oy, p.color, d.preview_x, d.preview_y, d.preview_cell)

    # ---------- HUD / button ----------
    def draw_hud(self, score: int, level: int):
        d = self.dims
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = self.font.render(f"Score: {score}", True, TEXT)
        if level != self.hud.level:
            self.hud.level = level
            self.hud.level_s = self.font.render(f"Level: {level}", True, TEXT)
        top = d.preview_y + PREVIEW_GRID * d.preview_cell + 20
        self.screen.blit(self.hud.score_s, (d.panel_x + 12, top))
        self.screen.blit(self.hud.level_s, (d.panel_x + 12, top + 26))

    def draw_button(self):
        r = self.button_rect
        edge = COLORS["I"] if self.button_enabled else "#404050"
        pygame.draw.rect(self.screen, PANEL, r)
        pygame.draw.rect(self.screen, pygame.Color(edge), r, 2)
        label = self.font.render(self.button_label, True, TEXT)
        self.screen.blit(label, label.get_rect(center=r.center))

    def draw_frame(self, game: Game):
        d = self.dims
        self.screen.blit(self.bg, (0, 0))
        self.draw_board(game)
        p = game.current
        if p is not None:
            self.draw_matrix(p.shape, p.x, p.y, p.color, d.board_x, d.board_y, d.cell)
        self.draw_next(game)
        self.draw_hud(game.score, game.level)
        self.draw_button()

    # ---------- presenter hooks ----------
    def render(self, game: Game) -> None:
        self.draw_frame(game)
        pygame.display.flip()

    def game_over(self, game: Game) -> None:
        d = self.dims
        self.draw_frame(game)
        band = pygame.Surface((d.board_w, d.board_h // 3), pygame.SRCALPHA)
        band.fill((0, 0, 0, 190))
        self.screen.blit(band, (d.board_x, d.board_y + d.board_h // 3))
        msg = self.big_font.render("GAME OVER", True, GAME_OVER_RED)
        self.screen.blit(msg, msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2)))
        pygame.display.flip()

    def start_enabled(self, label: str, enabled: bool) -> None:
        self.button_label = label
        self.button_enabled = enabled
        self.draw_button()
        pygame.display.flip()
