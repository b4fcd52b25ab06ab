"""Movement strategies for game objects.

Each axis is driven by a chain of axis movements. An axis movement maps
``(current, anchor, dt)`` to a new ``(current, anchor)`` pair. A
``MovementStrategy`` holds one chain per axis and applies both to a point.
"""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from typing import Iterable, Sequence, Tuple, Union

Point = Tuple[float, float]
AxisResult = Tuple[float, float]


@dataclass
class LinearMovement:
    """Constant-speed movement along one axis."""

    speed: float
    direction: int = 1
    update_anchor: bool = False

    def move(self, current: float, anchor: float, dt: float) -> AxisResult:
        delta = self.speed * dt * self.direction
        if self.update_anchor:
            anchor += delta
        return current + delta, anchor


@dataclass
class SinusoidMovement:
    """Oscillation around the anchor position."""

    amplitude: float
    frequency: float
    phase: float
    direction: int = 1
    update_anchor: bool = False
    elapsed: float = 0.0

    def move(self, current: float, anchor: float, dt: float) -> AxisResult:
        self.elapsed += dt
        delta = (
            self.amplitude
            * math.sin(2 * math.pi * self.frequency * self.elapsed + self.phase * math.pi)
            * self.direction
        )
        if self.update_anchor:
            anchor += delta
        return anchor + delta, anchor


@dataclass
class StationaryMovement:
    """Leaves the axis untouched."""

    def move(self, current: float, anchor: float, dt: float) -> AxisResult:
        return current, anchor


class IntervalMovement:
    """Cycles through axis movements, switching after each interval elapses.

    The active movement is run on a fresh copy every step, so movements with
    internal state start over each time they are used.
    """

    def __init__(
        self,
        strategies: Iterable["AxisMovement"],
        intervals: Union[float, Sequence[float]],
    ) -> None:
        self.strategies = list(strategies)
        if isinstance(intervals, (int, float)):
            self.intervals = [float(intervals)]
        else:
            self.intervals = [float(value) for value in intervals]
        if not self.strategies:
            raise ValueError("interval movement needs at least one strategy")
        if not self.intervals:
            raise ValueError("interval movement needs at least one interval")
        self._since_change = 0.0
        self._strategy_index = 0
        self._interval_index = 0

    def move(self, current: float, anchor: float, dt: float) -> AxisResult:
        self._since_change += dt
        active = copy.deepcopy(self.strategies[self._strategy_index])
        if self._since_change > self.intervals[self._interval_index]:
            self._since_change = 0.0
            self._strategy_index = (self._strategy_index + 1) % len(self.strategies)
            self._interval_index = (self._interval_index + 1) % len(self.intervals)
        return active.move(current, anchor, dt)


AxisMovement = Union[LinearMovement, SinusoidMovement, StationaryMovement, IntervalMovement]


class MovementStrategy:
    """A pair of axis movement chains applied to a 2D position."""

    def __init__(
        self,
        x_strategies: Iterable[AxisMovement] = (),
        y_strategies: Iterable[AxisMovement] = (),
    ) -> None:
        self._x = list(x_strategies)
        self._y = list(y_strategies)

    @property
    def x_strategies(self) -> list:
        """Copies of the x-axis movements."""
        return copy.deepcopy(self._x)

    @property
    def y_strategies(self) -> list:
        """Copies of the y-axis movements."""
        return copy.deepcopy(self._y)

    def move(self, pos: Point, anchor: Point, dt: float) -> Tuple[Point, Point]:
        x, y = pos
        anchor_x, anchor_y = anchor
        for strategy in self._x:
            x, anchor_x = strategy.move(x, anchor_x, dt)
        for strategy in self._y:
            y, anchor_y = strategy.move(y, anchor_y, dt)
        return (x, y), (anchor_x, anchor_y)

    def clear(self) -> None:
        self._x.clear()
        self._y.clear()

    def __add__(self, other: "MovementStrategy") -> "MovementStrategy":
        if not isinstance(other, MovementStrategy):
            return NotImplemented
        return MovementStrategy(
            copy.deepcopy(self._x) + copy.deepcopy(other._x),
            copy.deepcopy(self._y) + copy.deepcopy(other._y),
        )


def stationary() -> MovementStrategy:
    return MovementStrategy([StationaryMovement()], [StationaryMovement()])


def vertical(speed: float = 1, direction: int = 1) -> MovementStrategy:
    return MovementStrategy(y_strategies=[LinearMovement(speed, direction)])


def horizontal(speed: float = 1, direction: int = 1) -> MovementStrategy:
    return MovementStrategy(x_strategies=[LinearMovement(speed, direction)])


def angled(speed: float = 1, direction: int = 1, angle_deg: int = 0) -> MovementStrategy:
    angle = angle_deg * math.pi / 180.0
    return MovementStrategy(
        [LinearMovement(math.cos(angle) * speed, direction)],
        [LinearMovement(math.sin(angle) * speed, direction)],
    )


def circular(
    amplitude: float, frequency: float, direction: int = 1, update_anchor: bool = False
) -> MovementStrategy:
    return MovementStrategy(
        [SinusoidMovement(amplitude, frequency, 0, direction, update_anchor)],
        [SinusoidMovement(amplitude, frequency, 0.5, direction, False)],
    )


def interval(strategy: MovementStrategy, interval_s: float) -> MovementStrategy:
    """Cycle through the movements of ``strategy``, one per interval, per axis."""
    xs = strategy.x_strategies
    ys = strategy.y_strategies
    return MovementStrategy(
        [IntervalMovement(xs, interval_s)] if xs else [],
        [IntervalMovement(ys, interval_s)] if ys else [],
    )


def interval_sequence(pairs: Iterable[Tuple[MovementStrategy, float]]) -> MovementStrategy:
    """Cycle through strategies, each lasting its own interval."""
    xs: list = []
    ys: list = []
    x_intervals: list = []
    y_intervals: list = []
    for strategy, seconds in pairs:
        px = strategy.x_strategies
        py = strategy.y_strategies
        xs.extend(px)
        ys.extend(py)
        x_intervals.extend([seconds] * len(px))
        y_intervals.extend([seconds] * len(py))
    return MovementStrategy(
        [IntervalMovement(xs, x_intervals)] if xs else [],
        [IntervalMovement(ys, y_intervals)] if ys else [],
    )


def downward_circular(
    amplitude: float, frequency: float, speed: float, direction: int = 1
) -> MovementStrategy:
    return MovementStrategy(
        [SinusoidMovement(amplitude, frequency, 0, direction, False)],
        [
            SinusoidMovement(amplitude, frequency, 0.5, direction, False),
            LinearMovement(speed, 1, True),
        ],
    )