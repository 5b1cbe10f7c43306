import math
import pygame
from config import CFG
from core import clamp

LEFT, RIGHT = "left", "right"

KEYS_LEFT = (pygame.K_LEFT, pygame.K_a)
KEYS_RIGHT = (pygame.K_RIGHT, pygame.K_d)
KEYS_PAUSE = (pygame.K_p,)


class InputTracker:
    """Latest desired goalie X, fed by pointer samples and held arrow keys."""

    def __init__(self, cfg=CFG):
        self.cfg = cfg
        self.speed = cfg.keyboard_speed
        self.reset()

    def reset(self):
        self.target_x = self.cfg.width / 2
        self.keys = {LEFT: False, RIGHT: False}

    def set_pointer(self, x):
        try:
            x = float(x)
        except (TypeError, ValueError):
            return
        if not math.isfinite(x):
            return
        self.target_x = clamp(x, 0.0, float(self.cfg.width))

    def set_key(self, direction, pressed):
        if direction in self.keys:
            self.keys[direction] = bool(pressed)

    def update(self):
        if self.keys[LEFT]:
            self.target_x -= self.speed
        if self.keys[RIGHT]:
            self.target_x += self.speed
        self.target_x = clamp(self.target_x, 0.0, float(self.cfg.width))
        return self.target_x

    def get_target_x(self):
        return self.target_x


def apply_event(tracker, event, scale_x=1.0):
    """Feed one pygame event into the tracker.

    `scale_x` converts window pixels to field pixels when the window is
    scaled. Returns "pause" for the pause key, otherwise None.
    """
    if event.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN):
        tracker.set_pointer(event.pos[0] * scale_x)
    elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
        tracker.set_pointer(event.x * tracker.cfg.width)
    elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
        pressed = event.type == pygame.KEYDOWN
        if event.key in KEYS_LEFT:
            tracker.set_key(LEFT, pressed)
        elif event.key in KEYS_RIGHT:
            tracker.set_key(RIGHT, pressed)
        elif pressed and event.key in KEYS_PAUSE:
            return "pause"
    return None
