"""Grid helpers: create, collides, place, clear_lines, drop_distance"""
import logging
from typing import List, Tuple
from tetris_piece import Piece, SHAPES

log = logging.getLogger(__name__)

Grid = List[List[int]]

EMPTY = 0
MIN_SIZE = max(len(s) for s in SHAPES.values())


def create_grid(cols: int, rows: int) -> Grid:
    if cols < MIN_SIZE or rows < MIN_SIZE:
        raise ValueError(f"grid must be at least {MIN_SIZE}x{MIN_SIZE}, got {cols}x{rows}")
    return [[EMPTY] * cols for _ in range(rows)]


def collides(grid: Grid, piece: Piece, dx: int = 0, dy: int = 0) -> bool:
    rows, cols = len(grid), len(grid[0])
    for x, y in piece.cells():
        bx, by = x + dx, y + dy
        if bx < 0 or bx >= cols or by >= rows: return True
        # rows above the field only check the walls
        if by >= 0 and grid[by][bx]: return True
    return False


def place(grid: Grid, piece: Piece) -> Grid:
    for x, y in piece.cells():
        if y >= 0:
            grid[y][x] = piece.color
    return grid


def clear_lines(grid: Grid) -> Tuple[Grid, int]:
    cols = len(grid[0])
    cleared = 0
    y = len(grid) - 1
    while y >= 0:
        if all(grid[y]):
            del grid[y]
            grid.insert(0, [EMPTY] * cols)
            cleared += 1
        else:
            y -= 1
    if cleared:
        log.debug("cleared %d line(s)", cleared)
    return grid, cleared


def drop_distance(grid: Grid, piece: Piece) -> int:
    """Rows the piece can fall before it would collide."""
    d = 0
    while not collides(grid, piece, 0, d + 1):
        d += 1
    return d
