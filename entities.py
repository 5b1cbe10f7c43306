from config import CFG
from core import Vec2, Rect, clamp, lerp, eased, decay


class Puck:
    def __init__(self, pos: Vec2, vel: Vec2, cfg=CFG, radius=None):
        self.cfg = cfg
        self.pos = pos
        self.vel = vel
        self.r = float(cfg.puck_r if radius is None else radius)
        self.prev_y = pos.y
        self.squash = 0.0
        self.caught = False
        self.scored = False
        self.marked_for_removal = False

    @property
    def resolved(self):
        return self.caught or self.scored

    def update(self, delta=1.0):
        self.prev_y = self.pos.y
        self.pos = self.pos + self.vel * delta

        left = self.r
        right = self.cfg.width - self.r
        if self.pos.x < left:
            self.pos.x = left
            self.vel.x = abs(self.vel.x)
        elif self.pos.x > right:
            self.pos.x = right
            self.vel.x = -abs(self.vel.x)

    def is_offscreen(self):
        m = self.cfg.offscreen_margin
        return (self.pos.y > self.cfg.height + m
                or self.pos.x < -m
                or self.pos.x > self.cfg.width + m)

    def catch(self):
        self.caught = True
        self.marked_for_removal = True

    def score(self):
        self.scored = True
        self.marked_for_removal = True


class Goalie:
    def __init__(self, cfg=CFG):
        self.cfg = cfg
        self.w = cfg.goalie_w
        self.h = cfg.goalie_h
        self.y = cfg.height - cfg.goalie_y_offset
        self.reset()

    def reset(self):
        self.x = self.cfg.width / 2
        self.target_x = self.x
        self.catch_flash = 0.0
        self.catch_animation = 0.0

    def update(self, target_x, delta=1.0):
        margin = self.cfg.goalie_margin
        self.target_x = clamp(target_x, margin, self.cfg.width - margin)
        self.x = lerp(self.x, self.target_x, eased(self.cfg.goalie_easing, delta))

    def update_effects(self, delta=1.0):
        self.catch_animation = decay(self.catch_animation, self.cfg.catch_anim_decay, delta)
        self.catch_flash = decay(self.catch_flash, self.cfg.catch_flash_decay, delta)

    def trigger_catch(self):
        self.catch_animation = 1.0
        self.catch_flash = 1.0

    def catch_bounds(self):
        half = self.cfg.catch_w / 2
        top = self.y - self.h / 2
        return Rect(self.x - half, top, self.x + half, top + self.cfg.catch_h)

    def bounds(self):
        return Rect(self.x - self.w / 2, self.y - self.h / 2, self.x + self.w / 2, self.y + self.h / 2)


class Goal:
    def __init__(self, cfg=CFG):
        self.cfg = cfg
        self.w = cfg.goal_w
        self.h = cfg.goal_h
        self.x = cfg.width / 2
        self.y = cfg.height - cfg.goal_y_offset
        self.flash = 0.0

    def reset(self):
        self.flash = 0.0

    def trigger(self):
        self.flash = 1.0

    def update(self, delta=1.0):
        self.flash = decay(self.flash, self.cfg.catch_flash_decay, delta)

    def bounds(self):
        return Rect(self.x - self.w / 2, self.y, self.x + self.w / 2, self.y + self.h)

    def center(self):
        return Vec2(self.x, self.y + self.h / 2)
