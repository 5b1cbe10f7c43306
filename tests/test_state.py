import pytest

from config import GameConfig
from state import Difficulty, GameSession, GameStatus


def test_difficulty_steps_after_ramp_interval(cfg):
    d = Difficulty(cfg)
    for _ in range(119):
        assert d.update(50.0) is False
    assert d.spawn_interval == 800
    assert d.update(50.0) is True
    assert d.spawn_interval == max(cfg.min_spawn_interval, 800 - cfg.spawn_interval_decrease)
    assert d.fall_speed == pytest.approx(cfg.initial_speed + cfg.speed_increase)
    assert d.timer == 0.0


def test_difficulty_is_monotonic_and_bounded(cfg):
    d = Difficulty(cfg)
    last_interval, last_speed = d.spawn_interval, d.fall_speed
    for _ in range(100):
        d.update(cfg.difficulty_ramp_interval)
        assert cfg.min_spawn_interval <= d.spawn_interval <= last_interval
        assert last_speed <= d.fall_speed <= cfg.max_speed
        last_interval, last_speed = d.spawn_interval, d.fall_speed
    assert d.spawn_interval == cfg.min_spawn_interval
    assert d.fall_speed == cfg.max_speed


def test_lifecycle_ignores_invalid_transitions(cfg):
    s = GameSession(cfg)
    assert s.status is GameStatus.IDLE
    assert s.pause() is False
    assert s.resume() is False
    assert s.toggle_pause() is False
    assert s.end() is False
    assert s.is_idle

    assert s.start() is True
    assert s.start() is False
    assert s.is_running


def test_pause_twice_keeps_status(cfg):
    s = GameSession(cfg)
    s.start()
    assert s.pause() is True
    assert s.pause() is False
    assert s.status is GameStatus.PAUSED
    assert s.toggle_pause() is True
    assert s.is_running
    assert s.toggle_pause() is True
    assert s.is_paused


def test_end_happens_once(cfg):
    s = GameSession(cfg)
    s.start()
    assert s.end() is True
    assert s.end() is False
    assert s.is_ended
    assert s.start() is False


def test_lives_never_go_negative(cfg):
    s = GameSession(cfg)
    assert [s.lose_life() for _ in range(5)] == [False, False, True, True, True]
    assert s.lives == 0


def test_catch_sets_flash_and_text(cfg):
    s = GameSession(cfg)
    s.increment_score(120, 340)
    assert s.score == 1
    assert s.catch_flash == 1.0
    assert s.catch_text.value == 1
    assert (s.catch_text.x, s.catch_text.y) == (120, 340)
    assert s.catch_text.ttl == cfg.catch_text_duration


def test_effects_decay_to_zero(cfg):
    s = GameSession(cfg)
    s.increment_score(0, 0)
    frames = 0
    while s.catch_flash > 0:
        s.update_effects(1.0)
        frames += 1
    assert frames <= int(1 / cfg.catch_flash_decay) + 1
    for _ in range(int(cfg.catch_text_duration)):
        s.update_effects(1.0)
    assert s.catch_text is None


def test_reset_keeps_best_score(cfg):
    s = GameSession(cfg)
    s.start()
    for _ in range(4):
        s.increment_score(0, 0)
    s.lose_life()
    s.tick(3.0)
    s.difficulty.update(cfg.difficulty_ramp_interval)
    assert s.update_best_score() is True

    s.reset()
    assert s.best_score == 4
    assert (s.score, s.lives, s.frame_count) == (0, cfg.initial_lives, 0.0)
    assert s.difficulty.spawn_interval == cfg.initial_spawn_interval
    assert s.catch_text is None
    assert s.is_idle


def test_external_best_never_lowers():
    s = GameSession(GameConfig())
    s.set_best_score(12)
    s.set_best_score(3)
    assert s.best_score == 12
