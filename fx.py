import math
import random
from config import CFG, BRAND

# olympic rings + brand pink
RING_COLORS = [(0, 133, 199), (0, 0, 0), (223, 0, 36), (244, 195, 0), (0, 159, 61), BRAND]
GOLD_COLORS = [(255, 213, 74), (255, 193, 7), (255, 179, 0), (255, 238, 88), (249, 168, 37)]

GRAVITY = 0.26
FADE_FRAMES = 20.0


class ConfettiParticle:
    __slots__ = ("x", "y", "vx", "vy", "gravity", "size", "angle", "spin", "color", "life")

    def __init__(self, x, y, record=False, rng=random):
        power = 1.35 if record else 1.0
        self.x = float(x)
        self.y = float(y)
        self.vx = (rng.random() - 0.5) * 2.2 * power
        self.vy = rng.uniform(-13.5, -4.5) * power
        self.gravity = GRAVITY
        self.size = rng.uniform(2, 5) * (1.25 if record else 1.0)
        self.angle = rng.random() * math.pi
        self.spin = (rng.random() - 0.5) * 0.35
        self.color = rng.choice(GOLD_COLORS if record else RING_COLORS)
        self.life = (62 if record else 42) + rng.random() * 22

    def update(self, delta=1.0):
        self.x += self.vx * delta
        self.y += self.vy * delta
        self.vy += self.gravity * delta
        self.angle += self.spin * delta
        self.life -= delta

    @property
    def alive(self):
        return self.life > 0

    @property
    def opacity(self):
        return max(0.0, min(1.0, self.life / FADE_FRAMES))


class Confetti:
    def __init__(self, cfg=CFG, rng=None):
        self.cfg = cfg
        self.rng = rng or random
        self.parts = []

    def burst(self, x, y, record=False):
        n = self.cfg.confetti_count_gold if record else self.cfg.confetti_count
        for _ in range(n):
            self.parts.append(ConfettiParticle(x, y, record, self.rng))

    def update(self, delta=1.0):
        alive = []
        for p in self.parts:
            p.update(delta)
            if p.alive:
                alive.append(p)
        self.parts = alive

    def clear(self):
        self.parts = []

    @property
    def count(self):
        return len(self.parts)
