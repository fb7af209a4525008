import logging
import pygame, sys
from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import KeyRepeat, dispatch, key_action, REPEATABLE
from tetris_layout import compute_dims
from tetris_overlay import Overlay
from tetris_render import RenderAssets

log = logging.getLogger(__name__)


def recreate_window(dims, flags=pygame.DOUBLEBUF | pygame.RESIZABLE):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format='%(asctime)s - %(levelname)s - %(message)s')
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP, pygame.MOUSEBUTTONDOWN, pygame.VIDEORESIZE])

    game = Game()
    dims = compute_dims(cols=game.cols, rows=game.rows)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font)
    overlay = Overlay(font, big_font)
    repeat = KeyRepeat()
    clock = pygame.time.Clock()

    def relayout(w, h):
        nonlocal dims, screen, render
        new_dims = compute_dims(w, h, game.cols, game.rows)
        if new_dims != dims:
            dims = new_dims
            screen = recreate_window(dims)
            render = RenderAssets(dims, font)
            log.debug("layout: cell %d px, window %dx%d", dims.cell, dims.total_w, dims.total_h)

    try:
        while True:
            dt = clock.tick(CONFIG["FPS"])

            for e in pygame.event.get():
                if e.type == pygame.QUIT:
                    return
                if e.type == pygame.VIDEORESIZE:
                    relayout(e.w, e.h)
                elif e.type == pygame.KEYDOWN:
                    action = key_action(game, e.key)
                    if action:
                        dispatch(game, action)
                        repeat.press(action)
                elif e.type == pygame.KEYUP:
                    action = key_action(game, e.key)
                    if action in REPEATABLE:
                        repeat.release(action)
                elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                    action = render.pad.hit(e.pos)
                    if action:
                        dispatch(game, action)

            if game.running:
                held = repeat.update(dt)
                if held:
                    dispatch(game, held)
            game.tick(dt)

            snap = game.snapshot()
            render.draw(screen, snap)
            overlay.draw(screen, render.board_rect, snap)
            pygame.display.flip()
    except KeyboardInterrupt:
        log.info("interrupted")
    finally:
        pygame.quit()


if __name__ == '__main__':
    main()
    sys.exit()
