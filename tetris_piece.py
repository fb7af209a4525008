"""Piece catalog, piece model, rotation with a minimal wall kick"""
import logging
from dataclasses import dataclass, replace
from typing import Tuple

log = logging.getLogger(__name__)

Shape = Tuple[Tuple[int, ...], ...]

# Catalog order defines the color id: I=1, O=2, T=3, S=4, Z=5, J=6, L=7
KINDS = ("I", "O", "T", "S", "Z", "J", "L")

SHAPES = {
    "I": ((0,0,0,0),(1,1,1,1),(0,0,0,0),(0,0,0,0)),
    "O": ((1,1),(1,1)),
    "T": ((0,1,0),(1,1,1),(0,0,0)),
    "S": ((0,1,1),(1,1,0),(0,0,0)),
    "Z": ((1,1,0),(0,1,1),(0,0,0)),
    "J": ((1,0,0),(1,1,1),(0,0,0)),
    "L": ((0,0,1),(1,1,1),(0,0,0)),
}

COLOR_IDS = {t: i + 1 for i, t in enumerate(KINDS)}

# Tried in order after a rotation; first collision-free placement wins
KICK_OFFSETS = ((0, 0), (-1, 0), (1, 0), (0, -1))


def rotate_cw(shape: Shape) -> Shape:
    return tuple(tuple(row) for row in zip(*shape[::-1]))


@dataclass(frozen=True)
class Piece:
    kind: str
    shape: Shape
    x: int
    y: int
    color: int

    @staticmethod
    def create(kind: str, cols: int) -> "Piece":
        shape = SHAPES[kind]
        w = len(shape[0])
        return Piece(kind, shape, cols // 2 - w // 2, 0, COLOR_IDS[kind])

    def cells(self):
        """Yield absolute (x, y) of every occupied cell."""
        for r, row in enumerate(self.shape):
            for c, v in enumerate(row):
                if v:
                    yield self.x + c, self.y + r

    def moved(self, dx: int, dy: int) -> "Piece":
        return replace(self, x=self.x + dx, y=self.y + dy)

    def rotated(self) -> "Piece":
        return replace(self, shape=rotate_cw(self.shape))


# rotation

def rotate(grid, piece: Piece, kicks=KICK_OFFSETS) -> Piece:
    from tetris_board import collides
    turned = piece.rotated()
    for dx, dy in kicks:
        if not collides(grid, turned, dx, dy):
            return turned.moved(dx, dy)
    log.debug("rotation of %s at (%d, %d) rejected", piece.kind, piece.x, piece.y)
    return piece
