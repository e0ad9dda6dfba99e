"""
Rendering for the pygame shell.

- Pre-render one cell Surface per color name (solid + ghost outline).
- Pre-render the static background (grid + panel frame) per Dims.
- Cache a BOARD SURFACE with all locked cells; rebuild it only when the
  board tuple changes (lock / line clear), checked by identity.
- Cache HUD text and the next-piece preview; re-render only on change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_layout import Dims
from tetris_piece import COLS, ROWS, Piece, Shape
from tetris_board import Board
from tetris_engine import GameState, ghost

PALETTE: Dict[str, Tuple[int,int,int]] = {
    "red": (255,102,119),
    "green": (94,224,142),
    "blue": (106,119,255),
    "yellow": (255,224,102),
    "cyan": (102,224,255),
    "purple": (200,119,255),
    "orange": (255,158,94),
}

@dataclass
class HudCache:
    score: int = -1
    lines: int = -1
    next_key: Optional[Tuple[Shape, str]] = None
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    preview: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board: Optional[Board] = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        grid_col = (40,50,90)
        for x in range(COLS+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(ROWS+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        # Next preview frame, 4x4 half-size cells
        pv = d.preview_cell
        self.pv_x = d.panel_x + 12
        self.pv_y = d.panel_y + 110
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, pv*4+12, pv*4+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    def _make_cells(self):
        self.cell_surf: Dict[str, pygame.Surface] = {}
        self.ghost_surf: Dict[str, pygame.Surface] = {}
        c = self.dims.cell
        for name, col in PALETTE.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            self.cell_surf[name] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[name] = g

    # ---------- Board surface cache ----------
    def sync_board(self, board: Board):
        """Rebuild the locked-cell surface if the board changed since last call."""
        if board is self._board:
            return
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(board):
            for x, name in enumerate(row):
                if name:
                    self.board_surface.blit(self.cell_surf[name], (x*c + 1, y*c + 1))
        self._board = board

    def draw_piece(self, screen: pygame.Surface, piece: Piece, outline: bool = False):
        d = self.dims
        surf = (self.ghost_surf if outline else self.cell_surf)[piece.color]
        inset = 4 if outline else 1
        for x, y in piece.cells():
            if y >= 0:
                screen.blit(surf, (d.board_x + x*d.cell + inset, d.board_y + y*d.cell + inset))

    # ---------- HUD / Panel ----------
    def _preview(self, shape: Shape, color: str) -> pygame.Surface:
        pv = self.dims.preview_cell
        s = pygame.Surface((pv*4, pv*4), pygame.SRCALPHA)
        offx = (4 - len(shape[0])) // 2
        offy = (4 - len(shape)) // 2
        for y, row in enumerate(shape):
            for x, v in enumerate(row):
                if v:
                    block = pygame.Surface((pv-2, pv-2))
                    block.fill(PALETTE[color])
                    s.blit(block, ((x + offx)*pv + 1, (y + offy)*pv + 1))
        return s

    def draw_panel_hud(self, screen: pygame.Surface, state: GameState):
        d = self.dims
        f = self.font
        text = (200,210,240)
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
            self.hud.next_label = f.render("Next:", True, text)
        if state.score != self.hud.score:
            self.hud.score = state.score
            self.hud.score_s = f.render(f"Score: {state.score}", True, text)
        if state.lines != self.hud.lines:
            self.hud.lines = state.lines
            self.hud.lines_s = f.render(f"Lines: {state.lines}", True, text)
        key = (state.next_shape, state.next_color)
        if key != self.hud.next_key:
            self.hud.next_key = key
            self.hud.preview = self._preview(*key)
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 66))
        screen.blit(self.hud.next_label, (d.panel_x + 12, d.panel_y + 88))
        screen.blit(self.hud.preview, (self.pv_x, self.pv_y))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, text),
                f.render("A/D Move", True, (165,175,215)),
                f.render("S Soft drop", True, (165,175,215)),
                f.render("W Rotate", True, (165,175,215)),
                f.render("Space Hard drop", True, (165,175,215)),
                f.render("Q Swap next", True, (165,175,215)),
                f.render("F1 Overlay", True, (165,175,215)),
            ]
        y = d.panel_y + 110 + d.preview_cell*4 + 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    def draw_game_over(self, screen: pygame.Surface, big_font: pygame.font.Font):
        d = self.dims
        msg = big_font.render("GAME OVER (R to Restart)", True, (255,220,220))
        screen.blit(msg, msg.get_rect(center=(d.board_x + d.board_w // 2, d.board_y + d.board_h // 2)))

    def draw(self, screen: pygame.Surface, state: GameState):
        """Full frame: background, locked cells, ghost, active piece, HUD."""
        screen.blit(self.bg, (0,0))
        self.sync_board(state.board)
        screen.blit(self.board_surface, (self.dims.board_x, self.dims.board_y))
        if not state.game_over:
            self.draw_piece(screen, ghost(state), outline=True)
            self.draw_piece(screen, state.current)
        self.draw_panel_hud(screen, state)
