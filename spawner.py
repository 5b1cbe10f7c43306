import random
from config import CFG
from core import Vec2, aim_velocity
from entities import Puck


class Spawner:
    def __init__(self, cfg=CFG, rng=None):
        self.cfg = cfg
        self.rng = rng or random
        self.timer = 0.0

    def reset(self):
        self.timer = 0.0

    def difficulty_factor(self, frame_count):
        frames = max(0.0, frame_count - self.cfg.horizontal_start_delay)
        return min(1.0, frames / self.cfg.horizontal_ramp_frames)

    def aim_spread(self, factor):
        return self.cfg.aim_spread_base + factor * self.cfg.aim_spread_ramp

    def update(self, elapsed_ms, difficulty, frame_count, goal):
        self.timer += elapsed_ms
        if self.timer < difficulty.spawn_interval:
            return None
        self.timer = 0.0
        return self.spawn(difficulty.fall_speed, self.difficulty_factor(frame_count), goal)

    def spawn_position(self):
        cfg = self.cfg
        if self.rng.random() < cfg.side_spawn_chance:
            x = -cfg.puck_r if self.rng.random() < 0.5 else cfg.width + cfg.puck_r
            y = self.rng.uniform(cfg.spawn_margin, cfg.height / 3)
        else:
            x = self.rng.uniform(cfg.spawn_margin, cfg.width - cfg.spawn_margin)
            y = cfg.spawn_y
        return Vec2(x, y)

    def spawn(self, speed_base, factor, goal, pos=None, deviation=None):
        """Create a puck aimed at the goal centre.

        `pos` and `deviation` override the random spawn point and aim error.
        The downward component is never below `speed_base * min_fall_ratio`.
        """
        if pos is None:
            pos = self.spawn_position()
        speed = speed_base + self.rng.random() * self.cfg.speed_variance
        if deviation is None:
            deviation = (self.rng.random() - 0.5) * self.aim_spread(factor)

        vel = aim_velocity(pos, goal.center(), speed, deviation)
        min_vy = speed_base * self.cfg.min_fall_ratio
        if vel.y < min_vy:
            vel.y = min_vy
        return Puck(pos, vel, self.cfg)
