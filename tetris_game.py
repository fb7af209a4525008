"""Game controller: owns grid, pieces and session; driven by tick() and intents.

The host calls ``tick(elapsed_ms)`` once per frame and forwards player intents
(``move_left``, ``rotate``, ``hard_drop`` ...) between ticks. Renderers only
read ``snapshot()``; nothing outside this class mutates game state.
"""
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from tetris_config import CONFIG
from tetris_board import Grid, create_grid, collides, place, clear_lines, drop_distance
from tetris_piece import Piece, rotate as rotate_piece
from tetris_rng import PieceQueue
from tetris_scoring import Session, drop_interval_for_level

log = logging.getLogger(__name__)


class State(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Snapshot:
    grid: Tuple[Tuple[int, ...], ...]
    current: Optional[Piece]
    next: Optional[Piece]
    ghost_y: Optional[int]
    score: int
    level: int
    lines: int
    drop_interval_ms: int
    state: State

    @property
    def running(self) -> bool:
        return self.state in (State.RUNNING, State.PAUSED)

    @property
    def paused(self) -> bool:
        return self.state is State.PAUSED

    @property
    def game_over(self) -> bool:
        return self.state is State.GAME_OVER


class Game:
    def __init__(self, cols: Optional[int] = None, rows: Optional[int] = None, queue: Optional[PieceQueue] = None):
        self.cols = cols if cols is not None else CONFIG["COLS"]
        self.rows = rows if rows is not None else CONFIG["ROWS"]
        self._grid: Grid = create_grid(self.cols, self.rows)
        self.queue = queue if queue is not None else PieceQueue(self.cols, seed=CONFIG["SEED"])
        if self.queue.cols != self.cols:
            raise ValueError(f"queue spawns for {self.queue.cols} columns, board has {self.cols}")
        self._session = self._new_session()
        self._current: Optional[Piece] = None
        self.state = State.IDLE
        self.drop_counter = 0.0
        self._rebase = False

    def _new_session(self) -> Session:
        return Session(drop_interval_ms=drop_interval_for_level(1))

    # ---------- read-only views ----------
    @property
    def grid(self) -> Tuple[Tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._grid)

    @property
    def current(self) -> Optional[Piece]:
        return self._current

    @property
    def next_piece(self) -> Optional[Piece]:
        return self.queue.peek()

    @property
    def session(self) -> Session:
        return replace(self._session)

    @property
    def score(self) -> int:
        return self._session.score

    @property
    def running(self) -> bool:
        return self.state is State.RUNNING

    def snapshot(self) -> Snapshot:
        s = self._session
        cur = self._current
        gy = cur.y + drop_distance(self._grid, cur) if cur and self.state is not State.GAME_OVER else None
        return Snapshot(self.grid, cur, self.queue.peek(), gy, s.score, s.level, s.lines,
                        s.drop_interval_ms, self.state)

    # ---------- lifecycle ----------
    def start(self) -> bool:
        if self.state in (State.RUNNING, State.PAUSED):
            return False
        self._grid = create_grid(self.cols, self.rows)
        self._session = self._new_session()
        self.queue.reset()
        self._current = None
        self.drop_counter = 0.0
        self._rebase = True
        self.state = State.RUNNING
        log.info("game started (%dx%d)", self.cols, self.rows)
        self._spawn()
        return True

    def pause(self) -> bool:
        if self.state is not State.RUNNING:
            return False
        self.state = State.PAUSED
        log.info("paused at score %d", self._session.score)
        return True

    def resume(self) -> bool:
        if self.state is not State.PAUSED:
            return False
        self.state = State.RUNNING
        self._rebase = True
        log.info("resumed")
        return True

    def toggle_pause(self) -> bool:
        return self.pause() or self.resume()

    # ---------- timing ----------
    def tick(self, elapsed_ms: float):
        if self.state is not State.RUNNING:
            return
        if self._rebase:
            # paused or idle wall-clock time is not drop progress
            self._rebase = False
            elapsed_ms = 0
        self.drop_counter += elapsed_ms
        if self.drop_counter > self._session.drop_interval_ms:
            if not self._move(0, 1):
                self._lock()
            self.drop_counter = 0.0

    # ---------- intents ----------
    def move_left(self) -> bool:
        return self.running and self._move(-1, 0)

    def move_right(self) -> bool:
        return self.running and self._move(1, 0)

    def soft_drop(self) -> bool:
        if not self.running or not self._move(0, 1):
            return False
        self._session.award_soft_drop()
        return True

    def rotate(self) -> bool:
        if not self.running:
            return False
        turned = rotate_piece(self._grid, self._current)
        if turned is self._current:
            return False
        self._current = turned
        return True

    def hard_drop(self) -> int:
        if not self.running:
            return 0
        distance = 0
        while self._move(0, 1):
            distance += 1
        self._session.award_hard_drop(distance)
        self._lock()
        return distance

    # ---------- internals ----------
    def _move(self, dx: int, dy: int) -> bool:
        if collides(self._grid, self._current, dx, dy):
            return False
        self._current = self._current.moved(dx, dy)
        return True

    def _lock(self):
        place(self._grid, self._current)
        _, cleared = clear_lines(self._grid)
        self._session.award_lines(cleared)
        self._spawn()

    def _spawn(self):
        self._current = self.queue.spawn()
        if collides(self._grid, self._current):
            self.state = State.GAME_OVER
            log.info("game over: score %d, level %d, lines %d",
                     self._session.score, self._session.level, self._session.lines)
