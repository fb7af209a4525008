"""
Rendering helpers for the Tetris project.

- Pre-render block cell Surfaces per color id (normal + ghost outline) and blit them.
- Pre-render static background (grid + panel frame) when Dims change.
- Cache a BOARD SURFACE with all *locked* blocks; rebuild it only when the grid changes.
- Cache HUD text surfaces; re-render only when values change.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, Tuple, Optional
from tetris_layout import Dims
from tetris_game import Snapshot
from tetris_input import ButtonPad, start_label
from tetris_piece import Piece

# Colors per color id (I, O, T, S, Z, J, L)
COLORS: Dict[int, Tuple[int,int,int]] = {
    1: (255,107,107),
    2: (78,205,196),
    3: (69,183,209),
    4: (249,202,36),
    5: (108,92,231),
    6: (162,155,254),
    7: (253,121,168),
}

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    next_key: Optional[Tuple] = None
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    preview: Optional[pygame.Surface] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        self.board_rect = pygame.Rect(dims.board_x, dims.board_y, dims.board_w, dims.board_h)
        self.pad = ButtonPad(dims.panel_x + 12, self.pv_y + self.pv_cell*4 + 24, dims.panel_w - 24)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_grid = None

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        pygame.draw.rect(self.bg, (0,0,0), (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (40,50,90)
        for x in range(d.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(d.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.board_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        # Next preview frame
        self.pv_cell = 20
        self.pv_x = d.panel_x + (d.panel_w - self.pv_cell*4)//2
        self.pv_y = d.panel_y + 150
        frame = pygame.Rect(self.pv_x-6, self.pv_y-6, self.pv_cell*4+12, self.pv_cell*4+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Cell sprites (solid with highlight + ghost outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        self.ghost_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        hi = max(1, int(c*0.3))
        for cid, col in COLORS.items():
            s = pygame.Surface((c-2, c-2))
            s.fill(col)
            s.fill(tuple(min(255, v+50) for v in col), (0, 0, hi, hi))
            self.cell_surf[cid] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[cid] = g

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, grid):
        """Rebuilds the "locked blocks" surface from grid contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(grid):
            for x, cid in enumerate(row):
                if cid:
                    self.board_surface.blit(self.cell_surf[cid], (x*c + 1, y*c + 1))
        self._board_grid = grid

    def draw_piece(self, screen: pygame.Surface, piece: Piece, y: Optional[int] = None, ghost: bool = False):
        d = self.dims
        dy = 0 if y is None else y - piece.y
        surf = (self.ghost_surf if ghost else self.cell_surf)[piece.color]
        inset = 4 if ghost else 1
        for bx, by in piece.cells():
            by += dy
            if by >= 0:
                screen.blit(surf, (d.board_x + bx*d.cell + inset, d.board_y + by*d.cell + inset))

    # ---------- Full frame ----------
    def draw(self, screen: pygame.Surface, snap: Snapshot):
        screen.blit(self.bg, (0,0))
        if snap.grid != self._board_grid:
            self.rebuild_board_surface(snap.grid)
        screen.blit(self.board_surface, self.board_rect.topleft)
        if snap.current and snap.running:
            if snap.ghost_y is not None and snap.ghost_y != snap.current.y:
                self.draw_piece(screen, snap.current, snap.ghost_y, ghost=True)
            self.draw_piece(screen, snap.current)
        self.draw_panel_hud(screen, snap)
        self.draw_buttons(screen, snap)

    # ---------- HUD / Panel ----------
    def _render_preview(self, piece: Piece) -> pygame.Surface:
        s = pygame.Surface((self.pv_cell*4, self.pv_cell*4), pygame.SRCALPHA)
        rows = [r for r in piece.shape if any(r)]
        width = max(c for r in rows for c, v in enumerate(r) if v) + 1
        first = min(c for r in rows for c, v in enumerate(r) if v)
        offx = (self.pv_cell*4 - (width - first)*self.pv_cell) // 2
        offy = (self.pv_cell*4 - len(rows)*self.pv_cell) // 2
        block = pygame.Surface((self.pv_cell-2, self.pv_cell-2))
        block.fill(COLORS[piece.color])
        for y, row in enumerate(rows):
            for x, v in enumerate(row):
                if v:
                    s.blit(block, (offx + (x-first)*self.pv_cell + 1, offy + y*self.pv_cell + 1))
        return s

    def draw_panel_hud(self, screen: pygame.Surface, snap: Snapshot):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
            self.hud.next_label = f.render("Next:", True, (200,210,240))
        if snap.score != self.hud.score:
            self.hud.score = snap.score
            self.hud.score_s = f.render(f"Score: {snap.score:,}", True, (200,210,240))
        if snap.level != self.hud.level:
            self.hud.level = snap.level
            self.hud.level_s = f.render(f"Level: {snap.level}", True, (200,210,240))
        if snap.lines != self.hud.lines:
            self.hud.lines = snap.lines
            self.hud.lines_s = f.render(f"Lines: {snap.lines}", True, (200,210,240))
        nxt = snap.next
        key = (nxt.kind, nxt.shape) if nxt else None
        if key != self.hud.next_key:
            self.hud.next_key = key
            self.hud.preview = self._render_preview(nxt) if nxt else None
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(self.hud.next_label, (d.panel_x + 12, d.panel_y + 126))
        if self.hud.preview:
            screen.blit(self.hud.preview, (self.pv_x, self.pv_y))

    def draw_buttons(self, screen: pygame.Surface, snap: Snapshot):
        labels = {"left": "<", "right": ">", "down": "v", "rotate": "Rot", "drop": "Drop",
                  "start": start_label(snap.state)}
        for action, rect in self.pad.buttons:
            pygame.draw.rect(screen, (35,42,80), rect, border_radius=6)
            pygame.draw.rect(screen, (70,82,130), rect, 1, border_radius=6)
            t = self.font.render(labels[action], True, (220,228,250))
            screen.blit(t, t.get_rect(center=rect.center))
