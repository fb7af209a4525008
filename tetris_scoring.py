"""Score table, level curve and the session value aggregate"""
import logging
from dataclasses import dataclass
from tetris_config import CONFIG

log = logging.getLogger(__name__)

LINE_SCORES = (0, 100, 300, 500, 800)
SOFT_DROP_POINTS = 1
HARD_DROP_POINTS = 2


def line_clear_points(cleared: int, level: int) -> int:
    return LINE_SCORES[cleared] * level


def level_for_lines(total_lines: int) -> int:
    return total_lines // CONFIG["LINES_PER_LEVEL"] + 1


def drop_interval_for_level(level: int) -> int:
    base, step = CONFIG["BASE_DROP_INTERVAL_MS"], CONFIG["DROP_INTERVAL_STEP_MS"]
    return max(CONFIG["MIN_DROP_INTERVAL_MS"], base - (level - 1) * step)


@dataclass
class Session:
    score: int = 0
    level: int = 1
    lines: int = 0
    drop_interval_ms: int = CONFIG["BASE_DROP_INTERVAL_MS"]

    def award_lines(self, cleared: int) -> int:
        """Credit a lock that cleared `cleared` rows; returns the points added."""
        if not cleared:
            return 0
        points = line_clear_points(cleared, self.level)
        self.score += points
        self.lines += cleared
        new_level = level_for_lines(self.lines)
        if new_level > self.level:
            self.level = new_level
            self.drop_interval_ms = drop_interval_for_level(new_level)
            log.info("level up: %d (drop interval %d ms)", self.level, self.drop_interval_ms)
        return points

    def award_soft_drop(self):
        self.score += SOFT_DROP_POINTS

    def award_hard_drop(self, distance: int):
        self.score += distance * HARD_DROP_POINTS
