from dataclasses import dataclass

W, H = 600, 600

BG = (14, 18, 28)
ICE = (226, 236, 245)
WHITE = (235, 235, 235)
BLACK = (0, 0, 0)
RED = (204, 0, 0)
GRAY = (130, 130, 130)
YELLOW = (245, 220, 80)
BRAND = (229, 0, 125)
BRAND_2 = (122, 44, 255)

TARGET_FPS = 60
MAX_FRAME_MS = 50.0

# difficulty ramp (ms / px per 60fps frame)
INITIAL_LIVES = 3
INITIAL_SPAWN_INTERVAL = 800.0
INITIAL_SPEED = 7.0
DIFFICULTY_RAMP_INTERVAL = 6000.0
SPAWN_INTERVAL_DECREASE = 50.0
SPEED_INCREASE = 0.35
MIN_SPAWN_INTERVAL = 400.0
MAX_SPEED = 16.0

PUCK_R = 7
SPEED_VARIANCE = 1.25
SPAWN_MARGIN = 60
SPAWN_Y = -30
OFFSCREEN_MARGIN = 40
SIDE_SPAWN_CHANCE = 0.3
AIM_SPREAD_BASE = 0.15
AIM_SPREAD_RAMP = 0.25
HORIZONTAL_START_DELAY = 180
HORIZONTAL_RAMP_FRAMES = 600
MIN_FALL_RATIO = 0.5

SQUASH_MAX = 0.24
SQUASH_DISTANCE = 60.0
SQUASH_EASING = 0.25

GOAL_W = 240
GOAL_H = 80
GOAL_Y_OFFSET = 80
GOAL_POST_W = 10

GOALIE_W = 178
GOALIE_H = 91
GOALIE_Y_OFFSET = 130
GOALIE_EASING = 0.18
GOALIE_MARGIN = 60
CATCH_W = 110
CATCH_H = 60

KEYBOARD_SPEED = 10.0

CONFETTI_COUNT = 18
CONFETTI_COUNT_GOLD = 44
RECORD_BURSTS = 3
CATCH_FLASH_DECAY = 0.09
CATCH_ANIM_DECAY = 0.08
CATCH_TEXT_DURATION = 30.0


@dataclass(frozen=True)
class GameConfig:
    """Tuning for one engine instance.

    Distances are pixels, speeds are pixels per 60fps frame, intervals are
    milliseconds, decay rates are units per 60fps frame.
    """
    width: int = W
    height: int = H
    target_fps: int = TARGET_FPS
    max_frame_ms: float = MAX_FRAME_MS

    initial_lives: int = INITIAL_LIVES
    initial_spawn_interval: float = INITIAL_SPAWN_INTERVAL
    initial_speed: float = INITIAL_SPEED
    difficulty_ramp_interval: float = DIFFICULTY_RAMP_INTERVAL
    spawn_interval_decrease: float = SPAWN_INTERVAL_DECREASE
    speed_increase: float = SPEED_INCREASE
    min_spawn_interval: float = MIN_SPAWN_INTERVAL
    max_speed: float = MAX_SPEED

    puck_r: float = PUCK_R
    speed_variance: float = SPEED_VARIANCE
    spawn_margin: float = SPAWN_MARGIN
    spawn_y: float = SPAWN_Y
    offscreen_margin: float = OFFSCREEN_MARGIN
    side_spawn_chance: float = SIDE_SPAWN_CHANCE
    aim_spread_base: float = AIM_SPREAD_BASE
    aim_spread_ramp: float = AIM_SPREAD_RAMP
    horizontal_start_delay: float = HORIZONTAL_START_DELAY
    horizontal_ramp_frames: float = HORIZONTAL_RAMP_FRAMES
    min_fall_ratio: float = MIN_FALL_RATIO

    squash_max: float = SQUASH_MAX
    squash_distance: float = SQUASH_DISTANCE
    squash_easing: float = SQUASH_EASING

    goal_w: float = GOAL_W
    goal_h: float = GOAL_H
    goal_y_offset: float = GOAL_Y_OFFSET

    goalie_w: float = GOALIE_W
    goalie_h: float = GOALIE_H
    goalie_y_offset: float = GOALIE_Y_OFFSET
    goalie_easing: float = GOALIE_EASING
    goalie_margin: float = GOALIE_MARGIN
    catch_w: float = CATCH_W
    catch_h: float = CATCH_H

    keyboard_speed: float = KEYBOARD_SPEED

    confetti_count: int = CONFETTI_COUNT
    confetti_count_gold: int = CONFETTI_COUNT_GOLD
    record_bursts: int = RECORD_BURSTS
    catch_flash_decay: float = CATCH_FLASH_DECAY
    catch_anim_decay: float = CATCH_ANIM_DECAY
    catch_text_duration: float = CATCH_TEXT_DURATION

    def __post_init__(self):
        positive = (
            "width", "height", "target_fps", "max_frame_ms", "initial_lives",
            "initial_spawn_interval", "initial_speed", "difficulty_ramp_interval",
            "min_spawn_interval", "max_speed", "puck_r", "squash_distance",
            "goal_w", "goal_h", "goalie_w", "goalie_h", "catch_w", "catch_h",
            "catch_flash_decay", "catch_anim_decay", "catch_text_duration",
            "horizontal_ramp_frames",
        )
        for name in positive:
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)!r}")
        if self.min_spawn_interval > self.initial_spawn_interval:
            raise ValueError("min_spawn_interval is above initial_spawn_interval")
        if self.max_speed < self.initial_speed:
            raise ValueError("max_speed is below initial_speed")
        if self.spawn_interval_decrease < 0 or self.speed_increase < 0:
            raise ValueError("difficulty steps must not be negative")
        if self.catch_w > self.goalie_w or self.catch_h > self.goalie_h:
            raise ValueError("catch zone must fit inside the goalie")
        if 2 * self.goalie_margin >= self.width:
            raise ValueError("goalie_margin leaves no room to move")
        for name in ("side_spawn_chance", "goalie_easing", "squash_easing", "min_fall_ratio"):
            v = getattr(self, name)
            if not 0.0 <= v <= 1.0:
                raise ValueError(f"{name} must be within [0, 1], got {v!r}")

    @property
    def target_frame_ms(self):
        return 1000.0 / self.target_fps


CFG = GameConfig()
