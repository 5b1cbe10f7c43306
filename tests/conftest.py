import random

import pytest

from config import GameConfig
from core import Vec2
from entities import Puck
from game import Game
from loop import FrameScheduler

FRAME_MS = 1000.0 / 60


class Driver:
    """Fires the game's scheduler with synthetic timestamps."""

    def __init__(self, game, step=FRAME_MS):
        self.game = game
        self.step = step
        self.t = 0.0

    def frame(self, step=None):
        fired = self.game.scheduler.fire(self.t)
        self.t += self.step if step is None else step
        return fired

    def frames(self, n, step=None):
        for _ in range(n):
            self.frame(step)


@pytest.fixture
def cfg():
    return GameConfig()


@pytest.fixture
def quiet_cfg():
    # spawner effectively off so tests place pucks by hand
    return GameConfig(initial_spawn_interval=1e9)


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def outcomes():
    return []


@pytest.fixture
def make_game(rng, outcomes):
    def factory(cfg=None, **kw):
        kw.setdefault("on_game_over", outcomes.append)
        return Game(cfg or GameConfig(), FrameScheduler(), rng=rng, **kw)
    return factory


@pytest.fixture
def driver():
    return Driver


def still_puck(cfg, x, y):
    return Puck(Vec2(x, y), Vec2(0, 0), cfg)


@pytest.fixture
def place():
    return still_puck
