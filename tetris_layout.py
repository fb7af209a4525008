# tetris_layout.py
from dataclasses import dataclass
from typing import Optional
from tetris_config import CONFIG

@dataclass
class Dims:
    cols: int
    rows: int
    cell: int
    margin: int
    panel_w: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int
    panel_x: int
    panel_y: int

def fit_cell(cols: int, rows: int, window_w: Optional[int] = None, window_h: Optional[int] = None) -> int:
    """Largest cell size that fits the board beside the panel, clamped to the configured range."""
    top = int(CONFIG["CELL_SIZE"])
    if window_w is None or window_h is None:
        return top
    margin, panel_w = CONFIG["MARGIN"], CONFIG["PANEL_W"]
    avail_w = window_w - 3 * margin - panel_w
    avail_h = window_h - 2 * margin
    cell = min(avail_w // cols, avail_h // rows)
    return max(CONFIG["MIN_CELL_SIZE"], min(top, cell))

def compute_dims(window_w: Optional[int] = None, window_h: Optional[int] = None,
                 cols: Optional[int] = None, rows: Optional[int] = None) -> Dims:
    cols = cols or CONFIG["COLS"]
    rows = rows or CONFIG["ROWS"]
    cell = fit_cell(cols, rows, window_w, window_h)
    margin = CONFIG["MARGIN"]
    panel_w = CONFIG["PANEL_W"]

    board_w = cols * cell
    board_h = rows * cell

    total_w = max(margin + board_w + margin + panel_w + margin, window_w or 0)
    total_h = max(margin + board_h + margin, window_h or 0)

    board_x = margin
    board_y = margin
    panel_x = board_x + board_w + margin
    panel_y = margin

    return Dims(
        cols=cols, rows=rows,
        cell=cell, margin=margin, panel_w=panel_w,
        board_w=board_w, board_h=board_h,
        total_w=total_w, total_h=total_h,
        board_x=board_x, board_y=board_y,
        panel_x=panel_x, panel_y=panel_y
    )
