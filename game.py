import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from config import CFG
from core import calculate_squash, check_goalie_catch, check_puck_in_goal
from controls import InputTracker
from entities import Goal, Goalie
from fx import Confetti
from loop import FrameClock, FrameScheduler
from spawner import Spawner
from state import CatchText, GameSession, GameStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameOutcome:
    final_score: int
    is_new_record: bool
    previous_best: int


@dataclass(frozen=True)
class PuckView:
    x: float
    y: float
    r: float
    squash: float


@dataclass(frozen=True)
class GoalieView:
    x: float
    y: float
    catch_animation: float
    catch_flash: float


@dataclass(frozen=True)
class ParticleView:
    x: float
    y: float
    size: float
    angle: float
    color: Tuple[int, int, int]
    opacity: float


@dataclass(frozen=True)
class GameSnapshot:
    status: GameStatus
    score: int
    lives: int
    best_score: int
    pucks: Tuple[PuckView, ...]
    goalie: GoalieView
    goal_flash: float
    particles: Tuple[ParticleView, ...]
    catch_text: Optional[CatchText]
    catch_flash: float


class Game:
    """Simulation engine: lifecycle commands, frame loop and per-tick update.

    The engine never draws. A host fires `scheduler` once per display frame
    and reads `snapshot()` afterwards. `on_game_over` receives one
    `GameOutcome` per finished game and must not block.
    """

    def __init__(self, cfg=CFG, scheduler=None, tracker=None,
                 on_game_over: Optional[Callable[[GameOutcome], None]] = None, rng=None):
        self.cfg = cfg
        self.scheduler = scheduler or FrameScheduler()
        self.tracker = tracker or InputTracker(cfg)
        self.on_game_over = on_game_over
        self.clock = FrameClock(cfg.target_fps, cfg.max_frame_ms)

        self.session = GameSession(cfg)
        self.goalie = Goalie(cfg)
        self.goal = Goal(cfg)
        self.confetti = Confetti(cfg, rng)
        self.spawner = Spawner(cfg, rng)
        self.pucks = []
        self.outcome: Optional[GameOutcome] = None

        self._frame = None
        self._generation = 0
        self._destroyed = False

    # lifecycle

    def start(self):
        if self._destroyed or not self.session.start():
            return False
        logger.info("game started (best=%d)", self.session.best_score)
        self.clock.reset()
        self._schedule()
        return True

    def pause(self):
        if not self.session.pause():
            return False
        self._cancel()
        logger.info("game paused at score=%d", self.session.score)
        return True

    def resume(self):
        if self._destroyed or not self.session.resume():
            return False
        self.clock.reset()
        self._schedule()
        logger.info("game resumed")
        return True

    def toggle_pause(self):
        if self.session.is_running:
            return self.pause()
        if self.session.is_paused:
            return self.resume()
        return False

    def restart(self):
        self._cancel()
        self.session.reset()
        self.pucks = []
        self.confetti.clear()
        self.goalie.reset()
        self.goal.reset()
        self.tracker.reset()
        self.spawner.reset()
        self.outcome = None
        logger.info("game reset to idle")

    def destroy(self):
        self._cancel()
        self._destroyed = True

    def end(self):
        previous_best = self.session.best_score
        was_paused = self.session.is_paused
        if not self.session.end():
            return None
        is_record = self.session.score > previous_best
        self.session.update_best_score()
        if is_record:
            for _ in range(self.cfg.record_bursts):
                self.confetti.burst(self.goalie.x, self.goalie.y - 50, record=True)

        self.outcome = GameOutcome(self.session.score, is_record, previous_best)
        logger.info("game over: score=%d record=%s", self.outcome.final_score, is_record)
        if self.on_game_over is not None:
            self.on_game_over(self.outcome)
        if not self._destroyed:
            # keep ticking so end-of-game confetti drains
            if was_paused:
                self.clock.reset()
            self._schedule()
        return self.outcome

    def set_best_score(self, score):
        self.session.set_best_score(score)

    # loop

    def _schedule(self):
        if self._frame is not None:
            return
        generation = self._generation
        self._frame = self.scheduler.request(lambda ts: self._tick(ts, generation))

    def _cancel(self):
        # a callback already handed to the host must not run after this
        self._generation += 1
        if self._frame is not None:
            self.scheduler.cancel(self._frame)
            self._frame = None

    @property
    def scheduled(self):
        return self._frame is not None

    def _tick(self, timestamp, generation):
        if generation != self._generation:
            return
        self._frame = None
        elapsed_ms, delta = self.clock.step(timestamp)

        if self.session.is_running:
            self.update(delta, elapsed_ms)
            self._schedule()
        elif self.session.is_ended:
            self.confetti.update(delta)
            if self.confetti.count > 0:
                self._schedule()

    def update(self, delta, elapsed_ms):
        target_x = self.tracker.update()
        self.goalie.update(target_x, delta)

        if self.session.difficulty.update(elapsed_ms):
            d = self.session.difficulty
            logger.debug("difficulty step: interval=%.0fms speed=%.2f", d.spawn_interval, d.fall_speed)

        spawned = self.spawner.update(elapsed_ms, self.session.difficulty,
                                      self.session.frame_count, self.goal)

        for puck in self.pucks:
            if puck.marked_for_removal:
                continue
            puck.update(delta)
            puck.squash = calculate_squash(puck, self.goal, self.cfg, delta)
            self._resolve(puck)
            if not self.session.is_running:
                break

        self.pucks = [p for p in self.pucks if not p.marked_for_removal and not p.is_offscreen()]
        if spawned is not None:
            self.pucks.append(spawned)

        self.confetti.update(delta)
        self.goal.update(delta)
        self.goalie.update_effects(delta)
        self.session.update_effects(delta)
        self.session.tick(delta)

    def _resolve(self, puck):
        if puck.resolved:
            return
        if check_puck_in_goal(puck, self.goal):
            puck.score()
            self.goal.trigger()
            if self.session.lose_life():
                self.end()
            return
        if check_goalie_catch(puck, self.goalie):
            puck.catch()
            self.goalie.trigger_catch()
            self.confetti.burst(puck.pos.x, puck.pos.y)
            self.session.increment_score(puck.pos.x, self.goalie.y - 60)

    # output

    def snapshot(self):
        s = self.session
        text = s.catch_text
        return GameSnapshot(
            status=s.status,
            score=s.score,
            lives=s.lives,
            best_score=s.best_score,
            pucks=tuple(PuckView(p.pos.x, p.pos.y, p.r, p.squash) for p in self.pucks),
            goalie=GoalieView(self.goalie.x, self.goalie.y,
                              self.goalie.catch_animation, self.goalie.catch_flash),
            goal_flash=self.goal.flash,
            particles=tuple(ParticleView(p.x, p.y, p.size, p.angle, p.color, p.opacity)
                            for p in self.confetti.parts),
            catch_text=CatchText(text.x, text.y, text.ttl, text.value) if text else None,
            catch_flash=s.catch_flash,
        )
