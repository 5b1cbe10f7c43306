import logging
import os
import pygame

from config import CFG
from controls import InputTracker, apply_event
from game import Game
from loop import FrameScheduler
from scores import ScoreBook, ScoreReporter, standing_of
from ui import draw_frame, try_set_window_icon

logger = logging.getLogger(__name__)

FPS_CAP = 0  # 0 = let the display decide
SCORES_PATH = os.path.join(os.path.expanduser("~"), ".goalie_rush", "scores.json")


def main(cfg=CFG, scores_path=SCORES_PATH, player_name=None):
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    base_dir = os.path.dirname(os.path.abspath(__file__))
    screen = pygame.display.set_mode((cfg.width, cfg.height))
    pygame.display.set_caption("Goalie Rush")
    try_set_window_icon(base_dir)
    clock = pygame.time.Clock()

    big = pygame.font.SysFont("consolas", 56)
    font = pygame.font.SysFont("consolas", 30)
    small = pygame.font.SysFont("consolas", 18)
    fonts = (big, font, small)

    book = ScoreBook(scores_path)
    name = player_name or os.environ.get("GOALIE_RUSH_NAME", "")
    reporter = ScoreReporter(lambda outcome: book.add(name, outcome.final_score))

    scheduler = FrameScheduler()
    tracker = InputTracker(cfg)
    game = Game(cfg, scheduler, tracker, on_game_over=reporter.submit)
    saved = book.load()
    standing = standing_of(saved)
    game.set_best_score(standing.best_score)
    logger.info("loaded %d saved score(s) from %s", len(saved), scores_path)

    pause_icon = pygame.Rect(cfg.width - 48, 10, 34, 34)
    button = None

    running = True
    while running:
        clock.tick(FPS_CAP)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                running = False
                continue

            if apply_event(tracker, e) == "pause":
                game.toggle_pause()

            if e.type == pygame.KEYDOWN and e.key in (pygame.K_RETURN, pygame.K_SPACE):
                if game.session.is_idle:
                    game.start()
                elif game.session.is_ended:
                    game.restart()
                    game.start()

            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if pause_icon.collidepoint(e.pos):
                    game.toggle_pause()
                elif button is not None and button.collidepoint(e.pos):
                    if game.session.is_ended:
                        game.restart()
                    game.start()

        fresh = reporter.poll()
        if fresh is not None:
            standing = fresh
            game.set_best_score(standing.best_score)

        scheduler.fire(pygame.time.get_ticks())

        icon = pause_icon if (game.session.is_running or game.session.is_paused) else None
        button = draw_frame(screen, fonts, game.snapshot(), game.outcome, icon, cfg, standing.top)
        pygame.display.flip()

    game.destroy()
    logger.info("shutting down (best=%d)", game.session.best_score)
    pygame.quit()


if __name__ == "__main__":
    main()
