import math
from dataclasses import dataclass


class Vec2:
    __slots__ = ("x", "y")
    def __init__(self, x=0.0, y=0.0):
        self.x = float(x)
        self.y = float(y)
    def __add__(self, o): return Vec2(self.x + o.x, self.y + o.y)
    def __sub__(self, o): return Vec2(self.x - o.x, self.y - o.y)
    def __mul__(self, k): return Vec2(self.x * k, self.y * k)
    def __repr__(self): return f"Vec2({self.x:.2f}, {self.y:.2f})"
    def length(self): return math.hypot(self.x, self.y)
    def angle(self): return math.atan2(self.y, self.x)

    @staticmethod
    def from_angle(a, length=1.0):
        return Vec2(math.cos(a) * length, math.sin(a) * length)


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float

    @property
    def width(self):
        return self.right - self.left

    @property
    def height(self):
        return self.bottom - self.top

    def contains(self, x, y):
        return self.left <= x <= self.right and self.top <= y <= self.bottom


def clamp(v, a, b):
    return max(a, min(b, v))


def lerp(a, b, t):
    return a + (b - a) * t


def eased(easing, delta):
    # per-frame blend factor that converges at the same speed at any frame rate
    return 1.0 - (1.0 - easing) ** delta


def decay(value, rate, delta):
    return max(0.0, value - rate * delta)


def check_puck_in_goal(puck, goal):
    return goal.bounds().contains(puck.pos.x, puck.pos.y)


def check_goalie_catch(puck, goalie):
    return goalie.catch_bounds().contains(puck.pos.x, puck.pos.y)


def calculate_squash(puck, goal, cfg, delta=1.0):
    """Ease the puck's squash toward its proximity to the goal line.

    Proximity is 0 when the puck's leading edge is `squash_distance` or more
    away from the goal top and 1 when touching it. The result is clamped to
    [0, squash_max].
    """
    distance = abs(goal.bounds().top - (puck.pos.y + puck.r))
    proximity = max(0.0, 1.0 - distance / cfg.squash_distance)
    target = min(cfg.squash_max, proximity * cfg.squash_max)
    squash = lerp(puck.squash, target, eased(cfg.squash_easing, delta))
    return clamp(squash, 0.0, cfg.squash_max)


def aim_velocity(origin: Vec2, target: Vec2, speed: float, deviation: float = 0.0) -> Vec2:
    """Velocity of magnitude `speed` pointing from origin to target, rotated by `deviation` radians."""
    return Vec2.from_angle((target - origin).angle() + deviation, speed)
