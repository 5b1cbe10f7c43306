import json
import logging
import os
import queue
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

MAX_ENTRIES = 200
DISPLAY_LIMIT = 10
ANONYMOUS = "Anonym"


class ScoreBook:
    """Local leaderboard kept in a JSON file, best scores first."""

    def __init__(self, path, max_entries=MAX_ENTRIES):
        self.path = path
        self.max_entries = max_entries
        self._lock = threading.Lock()

    def load(self) -> List[Dict[str, Any]]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            logger.warning("failed to load scores from %s: %s", self.path, e)
            return []
        if not isinstance(data, list):
            return []
        return [e for e in data if isinstance(e, dict) and isinstance(e.get("score"), int)]

    def save(self, entries):
        try:
            folder = os.path.dirname(self.path)
            if folder:
                os.makedirs(folder, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(entries[: self.max_entries], f, indent=1)
        except OSError as e:
            logger.warning("failed to save scores to %s: %s", self.path, e)

    def add(self, name, score):
        entry = {"name": (name or "").strip() or ANONYMOUS, "score": int(score), "date": int(time.time())}
        with self._lock:
            entries = self.load()
            entries.append(entry)
            entries.sort(key=lambda e: (-e["score"], e.get("date", 0)))
            self.save(entries)
        return entries[: self.max_entries]

    def best_score(self):
        return max((e["score"] for e in self.load()), default=0)


@dataclass(frozen=True)
class Standing:
    best_score: int
    top: Tuple[Dict[str, Any], ...]


def standing_of(entries, limit=DISPLAY_LIMIT):
    """Best score and the shown slice of a best-first leaderboard."""
    entries = list(entries or [])
    best = max((int(e.get("score", 0)) for e in entries), default=0)
    return Standing(best, tuple(entries[:limit]))


class ScoreReporter:
    """Runs score submissions on detached threads.

    `submit_fn(outcome)` returns the leaderboard after submitting, best
    first. Results land in an inbox that the frame loop drains with
    `poll()`; a failing submission is logged and produces nothing.
    """

    def __init__(self, submit_fn: Callable[[Any], Optional[List[Dict[str, Any]]]], limit=DISPLAY_LIMIT):
        self.submit_fn = submit_fn
        self.limit = limit
        self.inbox: "queue.Queue[Standing]" = queue.Queue()

    def submit(self, outcome):
        t = threading.Thread(target=self._run, args=(outcome,), daemon=True)
        t.start()
        return t

    def _run(self, outcome):
        try:
            entries = self.submit_fn(outcome)
        except Exception:
            logger.warning("score submission failed", exc_info=True)
            return
        if entries is not None:
            self.inbox.put(standing_of(entries, self.limit))

    def poll(self) -> Optional[Standing]:
        """Latest delivered leaderboard, carrying the best score seen in this drain."""
        latest = None
        while True:
            try:
                value = self.inbox.get_nowait()
            except queue.Empty:
                break
            if latest is not None and latest.best_score > value.best_score:
                value = Standing(latest.best_score, value.top)
            latest = value
        return latest
