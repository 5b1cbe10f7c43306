import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from config import BG
from game import Game
from ui import AGAIN_BTN, draw_frame, draw_leaderboard, draw_pause_icon


@pytest.fixture(scope="module")
def fonts():
    pygame.font.init()
    yield (pygame.font.Font(None, 56), pygame.font.Font(None, 30), pygame.font.Font(None, 18))
    pygame.font.quit()


def blank(cfg):
    surf = pygame.Surface((cfg.width, cfg.height))
    surf.fill(BG)
    return surf


def test_empty_leaderboard_draws_nothing(cfg, fonts):
    surf = blank(cfg)
    before = pygame.image.tostring(surf, "RGB")
    draw_leaderboard(surf, fonts[2], [], 400, cfg)
    assert pygame.image.tostring(surf, "RGB") == before


def test_leaderboard_rows_are_drawn(cfg, fonts):
    surf = blank(cfg)
    before = pygame.image.tostring(surf, "RGB")
    draw_leaderboard(surf, fonts[2], [{"name": "ana", "score": 12}, {"name": "bo", "score": 3}], 400, cfg)
    assert pygame.image.tostring(surf, "RGB") != before


def test_end_screen_offers_play_again(cfg, quiet_cfg, fonts):
    game = Game(quiet_cfg)
    game.start()
    game.session.score = 4
    game.end()
    surf = blank(cfg)
    board = ({"name": "ana", "score": 4},)
    assert draw_frame(surf, fonts, game.snapshot(), game.outcome, None, quiet_cfg, board) is AGAIN_BTN


def test_pause_icon_differs_between_states(cfg):
    rect = pygame.Rect(10, 10, 34, 34)
    playing, paused = blank(cfg), blank(cfg)
    draw_pause_icon(playing, rect, False)
    draw_pause_icon(paused, rect, True)
    assert pygame.image.tostring(playing, "RGB") != pygame.image.tostring(paused, "RGB")
