from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config import CFG
from core import decay


class GameStatus(Enum):
    IDLE = "idle"
    PLAYING = "playing"
    PAUSED = "paused"
    ENDED = "ended"


@dataclass
class CatchText:
    x: float
    y: float
    ttl: float
    value: int


class Difficulty:
    """Stepped ramp of spawn interval and fall speed."""

    def __init__(self, cfg=CFG):
        self.cfg = cfg
        self.reset()

    def reset(self):
        self.spawn_interval = self.cfg.initial_spawn_interval
        self.fall_speed = self.cfg.initial_speed
        self.timer = 0.0

    def update(self, elapsed_ms):
        self.timer += elapsed_ms
        if self.timer < self.cfg.difficulty_ramp_interval:
            return False
        self.timer = 0.0
        self.spawn_interval = max(self.cfg.min_spawn_interval,
                                  self.spawn_interval - self.cfg.spawn_interval_decrease)
        self.fall_speed = min(self.cfg.max_speed, self.fall_speed + self.cfg.speed_increase)
        return True


class GameSession:
    """Score, lives and lifecycle status of one playthrough.

    `reset()` reinitialises everything except `best_score`. Lifecycle methods
    return True when they changed the status and False when the call was not
    valid from the current status.
    """

    def __init__(self, cfg=CFG):
        self.cfg = cfg
        self.best_score = 0
        self.difficulty = Difficulty(cfg)
        self.reset()

    def reset(self):
        self.status = GameStatus.IDLE
        self.score = 0
        self.lives = self.cfg.initial_lives
        self.frame_count = 0.0
        self.difficulty.reset()
        self.catch_flash = 0.0
        self.catch_text: Optional[CatchText] = None

    @property
    def is_running(self):
        return self.status is GameStatus.PLAYING

    @property
    def is_paused(self):
        return self.status is GameStatus.PAUSED

    @property
    def is_ended(self):
        return self.status is GameStatus.ENDED

    @property
    def is_idle(self):
        return self.status is GameStatus.IDLE

    def _move(self, allowed, to):
        if self.status not in allowed:
            return False
        self.status = to
        return True

    def start(self):
        return self._move((GameStatus.IDLE,), GameStatus.PLAYING)

    def pause(self):
        return self._move((GameStatus.PLAYING,), GameStatus.PAUSED)

    def resume(self):
        return self._move((GameStatus.PAUSED,), GameStatus.PLAYING)

    def toggle_pause(self):
        return self.pause() or self.resume()

    def end(self):
        return self._move((GameStatus.PLAYING, GameStatus.PAUSED), GameStatus.ENDED)

    def increment_score(self, x, y):
        self.score += 1
        self.catch_flash = 1.0
        self.catch_text = CatchText(x, y, self.cfg.catch_text_duration, self.score)

    def lose_life(self):
        """Take one life; True when none are left."""
        self.lives = max(0, self.lives - 1)
        return self.lives == 0

    def update_effects(self, delta=1.0):
        self.catch_flash = decay(self.catch_flash, self.cfg.catch_flash_decay, delta)
        if self.catch_text is not None:
            self.catch_text.ttl -= delta
            if self.catch_text.ttl <= 0:
                self.catch_text = None

    def tick(self, delta=1.0):
        self.frame_count += delta

    def set_best_score(self, score):
        self.best_score = max(self.best_score, int(score))

    def update_best_score(self):
        if self.score > self.best_score:
            self.best_score = self.score
            return True
        return False
