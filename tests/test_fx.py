import pytest

from fx import GOLD_COLORS, RING_COLORS, Confetti, ConfettiParticle


def test_burst_sizes(cfg, rng):
    c = Confetti(cfg, rng)
    c.burst(100, 200)
    assert c.count == cfg.confetti_count
    c.burst(100, 200, record=True)
    assert c.count == cfg.confetti_count + cfg.confetti_count_gold


def test_record_burst_uses_gold_palette(cfg, rng):
    c = Confetti(cfg, rng)
    c.burst(0, 0, record=True)
    assert {p.color for p in c.parts} <= set(GOLD_COLORS)
    assert all(p.life >= 62 for p in c.parts)
    c.clear()
    c.burst(0, 0)
    assert {p.color for p in c.parts} <= set(RING_COLORS)
    assert all(42 <= p.life <= 64 for p in c.parts)


def test_particle_integration(rng):
    p = ConfettiParticle(10, 20, rng=rng)
    p.vx, p.vy, p.gravity, p.spin, p.angle, p.life = 2.0, -4.0, 0.5, 0.1, 0.0, 30.0
    p.update(2.0)
    assert (p.x, p.y) == (14.0, 12.0)
    assert p.vy == pytest.approx(-3.0)
    assert p.angle == pytest.approx(0.2)
    assert p.life == 28.0
    assert p.opacity == 1.0
    p.life = 5.0
    assert p.opacity == pytest.approx(0.25)


def test_dead_particles_are_removed(cfg, rng):
    c = Confetti(cfg, rng)
    c.burst(0, 0, record=True)
    for _ in range(100):
        c.update(1.0)
    assert c.count == 0
