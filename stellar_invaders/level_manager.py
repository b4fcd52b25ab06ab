"""Runs the spawn events of the current level against a game clock."""

from __future__ import annotations

import copy
import time
from typing import Any, Callable, List, Optional

from .level import Level

Callback = Callable[[], None]


class LevelManager:
    """Drives a level: executes its spawn events and reports its end conditions.

    ``add_object`` receives every spawned game object. ``reached_bottom``
    reports how many enemy ships have reached the bottom edge so far. The
    ``on_enemy_limit_reached`` and ``on_spawn_events_finished`` callbacks are
    called from ``progress_level`` whenever their condition holds.
    """

    def __init__(
        self,
        add_object: Callable[[Any], None],
        reached_bottom: Callable[[], int] = lambda: 0,
        *,
        clock: Callable[[], float] = time.monotonic,
        on_enemy_limit_reached: Optional[Callback] = None,
        on_spawn_events_finished: Optional[Callback] = None,
    ) -> None:
        self._add_object = add_object
        self._reached_bottom = reached_bottom
        self._clock = clock
        self._enemy_limit_callbacks: List[Callback] = []
        self._finished_callbacks: List[Callback] = []
        if on_enemy_limit_reached is not None:
            self._enemy_limit_callbacks.append(on_enemy_limit_reached)
        if on_spawn_events_finished is not None:
            self._finished_callbacks.append(on_spawn_events_finished)
        self.current_level = Level()
        self._start_time = clock()
        self._in_progress = False

    @property
    def in_progress(self) -> bool:
        return self._in_progress

    def elapsed_ms(self) -> int:
        """Milliseconds since the level was started."""
        return int((self._clock() - self._start_time) * 1000)

    def set_level(self, level: Level) -> None:
        """Use a private copy of ``level``; the original stays untouched."""
        self.current_level = copy.deepcopy(level)

    def start_level(self) -> None:
        self._in_progress = True
        self._start_time = self._clock()

    def stop_level(self) -> None:
        self._in_progress = False

    def progress_level(self) -> None:
        """Run due spawn events and check whether the level has ended."""
        if not self._in_progress:
            return

        elapsed = self.elapsed_ms()
        events = self.current_level.spawn_events
        for event in events:
            event.execute(elapsed, self._add_object)
        events[:] = [event for event in events if not event.finished]

        limit = self.current_level.enemy_limit
        if limit >= 0 and self._reached_bottom() > limit:
            for callback in list(self._enemy_limit_callbacks):
                callback()

        if not events:
            for callback in list(self._finished_callbacks):
                callback()