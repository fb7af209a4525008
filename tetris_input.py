"""Keyboard/mouse to intent mapping, held-key repeat, on-screen button pad"""
from typing import List, Optional, Tuple
import pygame
from tetris_config import CONFIG
from tetris_game import Game, State

LEFT, RIGHT, DOWN, ROTATE, DROP, START, PAUSE = "left", "right", "down", "rotate", "drop", "start", "pause"
REPEATABLE = (LEFT, RIGHT, DOWN)

KEY_ACTIONS = {
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_DOWN: DOWN,
    pygame.K_UP: ROTATE,
    pygame.K_SPACE: DROP,
    pygame.K_p: PAUSE,
    pygame.K_ESCAPE: PAUSE,
}
START_KEYS = (pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER)


def dispatch(game: Game, action: str):
    if action == LEFT: return game.move_left()
    if action == RIGHT: return game.move_right()
    if action == DOWN: return game.soft_drop()
    if action == ROTATE: return game.rotate()
    if action == DROP: return game.hard_drop()
    if action == PAUSE: return game.toggle_pause()
    if action == START:
        # one button: start a fresh game, otherwise pause/resume
        if game.state in (State.IDLE, State.GAME_OVER): return game.start()
        return game.toggle_pause()
    return None


def key_action(game: Game, key: int) -> Optional[str]:
    if key in START_KEYS and game.state in (State.IDLE, State.GAME_OVER):
        return START
    return KEY_ACTIONS.get(key)


class KeyRepeat:
    """Repeats the most recently pressed movement key while it is held."""
    def __init__(self):
        self.action=None; self.held_ms=0; self.last=0
    def press(self, action):
        if action in REPEATABLE:
            self.action=action; self.held_ms=0; self.last=0
    def release(self, action):
        if action==self.action:
            self.action=None
    def update(self, dt):
        if self.action is None: return None
        self.held_ms+=dt
        if self.held_ms < CONFIG["KEY_REPEAT_DELAY_MS"]: return None
        self.last+=dt
        if self.last>=CONFIG["KEY_REPEAT_INTERVAL_MS"]:
            self.last=0; return self.action
        return None


def start_label(state: State) -> str:
    if state is State.RUNNING: return "Pause"
    if state is State.PAUSED: return "Resume"
    if state is State.GAME_OVER: return "Play Again"
    return "Start"


class ButtonPad:
    """On-screen controls laid out in the side panel."""
    def __init__(self, x: int, y: int, width: int, height: int = 34, gap: int = 6):
        w3 = (width - 2 * gap) // 3
        w2 = (width - gap) // 2
        row2 = y + height + gap
        row3 = row2 + height + gap
        self.buttons: List[Tuple[str, pygame.Rect]] = [
            (LEFT, pygame.Rect(x, y, w3, height)),
            (ROTATE, pygame.Rect(x + w3 + gap, y, w3, height)),
            (RIGHT, pygame.Rect(x + 2 * (w3 + gap), y, w3, height)),
            (DOWN, pygame.Rect(x, row2, w2, height)),
            (DROP, pygame.Rect(x + w2 + gap, row2, w2, height)),
            (START, pygame.Rect(x, row3, width, height)),
        ]

    def hit(self, pos) -> Optional[str]:
        for action, rect in self.buttons:
            if rect.collidepoint(pos):
                return action
        return None
