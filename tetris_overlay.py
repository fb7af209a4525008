import pygame
from tetris_game import Snapshot, State

def message_for(snap: Snapshot):
    """Title and message for the board overlay, or None while playing."""
    if snap.state is State.IDLE:
        return "Tetris", "Press Start"
    if snap.state is State.PAUSED:
        return "Paused", "Press Resume to continue"
    if snap.state is State.GAME_OVER:
        return "Game Over", f"Final Score: {snap.score:,}"
    return None

class Overlay:
    def __init__(self, font, big_font):
        self.font=font; self.big_font=big_font
        self._key=None; self._surf=None

    def draw(self,screen,rect,snap):
        msg=message_for(snap)
        if msg is None: return
        if (msg,rect.size)!=self._key:
            self._key=(msg,rect.size)
            s=pygame.Surface(rect.size,pygame.SRCALPHA); s.fill((10,13,34,200))
            title,body=msg
            t=self.big_font.render(title,True,(255,255,255))
            b=self.font.render(body,True,(200,210,235))
            cx,cy=rect.w//2,rect.h//2
            s.blit(t,t.get_rect(center=(cx,cy-18)))
            s.blit(b,b.get_rect(center=(cx,cy+18)))
            self._surf=s
        screen.blit(self._surf,rect.topleft)
