import itertools
from typing import Callable, Dict

from config import CFG


class FrameClock:
    """Turns frame timestamps (ms) into clamped elapsed time and a speed multiplier.

    `delta` is 1.0 for a frame of exactly `1000 / target_fps` ms, 0.5 at
    twice that rate, 2.0 at half of it. Elapsed time is capped at
    `max_frame_ms` so a suspended window does not produce one huge step.
    """

    def __init__(self, target_fps=CFG.target_fps, max_frame_ms=CFG.max_frame_ms):
        self.target_frame_ms = 1000.0 / target_fps
        self.max_frame_ms = max_frame_ms
        self.last = None

    def reset(self, timestamp=None):
        self.last = timestamp

    def step(self, timestamp):
        if self.last is None:
            self.last = timestamp
            return 0.0, 0.0
        elapsed = min(max(0.0, timestamp - self.last), self.max_frame_ms)
        self.last = timestamp
        return elapsed, elapsed / self.target_frame_ms


class FrameScheduler:
    """One-shot per-frame callbacks, fired by whoever owns the display loop.

    A callback requested while `fire()` runs waits for the next `fire()`.
    Cancelled handles never fire.
    """

    def __init__(self):
        self._ids = itertools.count(1)
        self._pending: Dict[int, Callable[[float], None]] = {}

    def request(self, callback):
        handle = next(self._ids)
        self._pending[handle] = callback
        return handle

    def cancel(self, handle):
        self._pending.pop(handle, None)

    @property
    def pending(self):
        return len(self._pending)

    def fire(self, timestamp):
        batch = list(self._pending.keys())
        fired = 0
        for handle in batch:
            callback = self._pending.pop(handle, None)
            if callback is None:
                continue
            callback(timestamp)
            fired += 1
        return fired
