import pytest

from core import Vec2
from entities import Goal
from spawner import Spawner
from state import Difficulty


def test_spawns_once_interval_is_reached(cfg, rng):
    sp, d, goal = Spawner(cfg, rng), Difficulty(cfg), Goal(cfg)
    for _ in range(15):
        assert sp.update(50.0, d, 0, goal) is None
    puck = sp.update(50.0, d, 0, goal)
    assert puck is not None
    assert sp.timer == 0.0


def test_difficulty_factor_ramp(cfg, rng):
    sp = Spawner(cfg, rng)
    assert sp.difficulty_factor(0) == 0.0
    assert sp.difficulty_factor(cfg.horizontal_start_delay) == 0.0
    assert sp.difficulty_factor(cfg.horizontal_start_delay + 300) == pytest.approx(0.5)
    assert sp.difficulty_factor(100000) == 1.0
    assert sp.aim_spread(0.0) == pytest.approx(0.15)
    assert sp.aim_spread(1.0) == pytest.approx(0.40)


def test_spawn_positions_and_min_fall_speed(cfg, rng):
    sp, goal = Spawner(cfg, rng), Goal(cfg)
    sides = 0
    for _ in range(300):
        p = sp.spawn(cfg.initial_speed, 1.0, goal)
        assert p.vel.y >= cfg.initial_speed * cfg.min_fall_ratio
        if p.pos.y == cfg.spawn_y:
            assert cfg.spawn_margin <= p.pos.x <= cfg.width - cfg.spawn_margin
        else:
            sides += 1
            assert p.pos.x in (-cfg.puck_r, cfg.width + cfg.puck_r)
            assert cfg.spawn_margin <= p.pos.y <= cfg.height / 3
    assert 0 < sides < 300


def test_shallow_aim_gets_minimum_downward_velocity(cfg, rng):
    sp, goal = Spawner(cfg, rng), Goal(cfg)
    p = sp.spawn(8.0, 0.0, goal, pos=Vec2(-cfg.puck_r, goal.center().y), deviation=0.0)
    assert p.vel.y == 4.0


@pytest.mark.parametrize("x", [60, 200, 300, 460, 540])
def test_zero_deviation_puck_reaches_goal_centre(cfg, rng, x):
    sp, goal = Spawner(cfg, rng), Goal(cfg)
    p = sp.spawn(cfg.initial_speed, 0.0, goal, pos=Vec2(x, cfg.spawn_y), deviation=0.0)
    top = goal.bounds().top
    while p.pos.y < top:
        p.update(1.0)
    assert abs(p.pos.x - goal.x) < 30
