import pytest
from tetris_piece import KINDS
from tetris_rng import PieceQueue


class FixedRng:
    """Deterministic stand-in for random.Random: replays kind names in order, then repeats the last."""
    def __init__(self, *kinds):
        self.indices = [KINDS.index(k) for k in kinds]
        self.calls = 0

    def randrange(self, n):
        i = self.indices[min(self.calls, len(self.indices) - 1)]
        self.calls += 1
        return i


@pytest.fixture
def queue_of():
    def make(*kinds, cols=10):
        return PieceQueue(cols, rng=FixedRng(*kinds))
    return make
