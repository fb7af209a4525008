"""Spawn queue: current piece plus a one-piece lookahead"""
import logging
import random
from typing import Optional
from tetris_piece import Piece, KINDS

log = logging.getLogger(__name__)


class PieceQueue:
    """Uniform independent choice over the seven kinds; repeats are allowed."""

    def __init__(self, cols: int, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        if cols <= 0:
            raise ValueError(f"cols must be positive, got {cols}")
        self.cols = cols
        self.rng = rng if rng is not None else random.Random(seed)
        self.next: Optional[Piece] = None

    def generate(self) -> Piece:
        return Piece.create(KINDS[self.rng.randrange(len(KINDS))], self.cols)

    def spawn(self) -> Piece:
        current = self.next or self.generate()
        self.next = self.generate()
        log.debug("spawn %s, next %s", current.kind, self.next.kind)
        return current

    def peek(self) -> Optional[Piece]:
        return self.next

    def reset(self):
        self.next = None
