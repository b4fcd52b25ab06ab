"""Level data and timed spawn events."""

from __future__ import annotations

import copy
import random
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Tuple

from .formation import Formation

Point = Tuple[int, int]


def _clone(prototype: Any) -> Any:
    clone = getattr(prototype, "clone", None)
    if callable(clone):
        return clone()
    return copy.deepcopy(prototype)


@dataclass
class Enemy:
    """Description of an enemy entry in a level."""

    type: str = ""
    position: Point = (0, 0)
    behavior: str = ""
    interval_ms: int = 0
    count: int = 0


class SpawnEvent:
    """Spawns copies of a game object in a formation at timed intervals.

    The game object is a prototype: each spawned object is made with its
    ``clone()`` method if it has one, otherwise as a deep copy, and is then
    given a ``position``.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.game_object: Any = None
        self.formation = Formation()
        self.position_range: Tuple[Point, Point] = ((0, 0), (0, 0))
        self.trigger_ms = 0
        self.count = 1
        self.interval_ms = 0
        self.rng = rng
        self._triggered = False
        self._finished = False
        self._last_spawn_ms = 0
        self._spawned = 0

    @property
    def finished(self) -> bool:
        return self._finished

    def with_trigger_time(self, trigger_ms: int) -> "SpawnEvent":
        self.trigger_ms = trigger_ms
        return self

    def with_position(self, position: Point) -> "SpawnEvent":
        self.position_range = (tuple(position), tuple(position))
        return self

    def with_position_range(self, min_position: Point, max_position: Point) -> "SpawnEvent":
        self.position_range = (tuple(min_position), tuple(max_position))
        return self

    def with_count(self, count: int) -> "SpawnEvent":
        self.count = count
        return self

    def with_interval(self, interval_ms: int) -> "SpawnEvent":
        self.interval_ms = interval_ms
        return self

    def with_formation(self, formation: Formation) -> "SpawnEvent":
        self.formation = copy.copy(formation)
        return self

    def with_game_object(self, game_object: Any) -> "SpawnEvent":
        self.game_object = game_object
        return self

    def execute(self, elapsed_ms: int, add_object: Callable[[Any], None]) -> None:
        """Spawn the next wave if it is due at ``elapsed_ms``."""
        if self._finished:
            return

        if not self._triggered:
            self._triggered = elapsed_ms >= self.trigger_ms

        if (
            self._triggered
            and self.count > self._spawned
            and elapsed_ms - self._last_spawn_ms >= self.interval_ms
        ):
            if self.game_object is None:
                raise RuntimeError("spawn event has no game object to spawn")
            (min_x, min_y), (max_x, max_y) = self.position_range
            rng = self.rng if self.rng is not None else random
            x = rng.randint(min(min_x, max_x), max(min_x, max_x))
            y = rng.randint(min(min_y, max_y), max(min_y, max_y))
            for point in self.formation.points((x, y)):
                spawned = _clone(self.game_object)
                spawned.position = point
                add_object(spawned)
            self._last_spawn_ms = elapsed_ms
            self._spawned += 1

        self._finished = self._spawned == self.count


@dataclass
class Level:
    """A playable level: metadata plus its spawn events."""

    level_number: int = -1
    enemy_limit: int = 1
    name: str = ""
    description: str = ""
    spawn_events: List[SpawnEvent] = field(default_factory=list)