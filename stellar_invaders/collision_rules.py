"""Collision primitives: object types, rectangles, collision rules and brute force."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, List, Sequence, Tuple


class ObjectType(Enum):
    PLAYER_SHIP = "PLAYER_SHIP"
    ENEMY_SHIP = "ENEMY_SHIP"
    PLAYER_PROJECTILE = "PLAYER_PROJECTILE"
    ENEMY_PROJECTILE = "ENEMY_PROJECTILE"
    COLLECTABLE = "COLLECTABLE"


COLLISION_MAP: Dict[ObjectType, FrozenSet[ObjectType]] = {
    ObjectType.PLAYER_SHIP: frozenset({ObjectType.ENEMY_PROJECTILE, ObjectType.COLLECTABLE}),
    ObjectType.ENEMY_SHIP: frozenset({ObjectType.PLAYER_PROJECTILE}),
}


def _span(start: float, size: float) -> Tuple[float, float]:
    return (start + size, start) if size < 0 else (start, start + size)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def left(self) -> float:
        return self.x

    @property
    def top(self) -> float:
        return self.y

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    @property
    def is_null(self) -> bool:
        return self.width == 0 and self.height == 0

    def intersects(self, other: "Rect") -> bool:
        """True when the interiors overlap; touching edges do not count."""
        l1, r1 = _span(self.x, self.width)
        l2, r2 = _span(other.x, other.width)
        if l1 == r1 or l2 == r2:
            return False
        if l1 >= r2 or l2 >= r1:
            return False
        t1, b1 = _span(self.y, self.height)
        t2, b2 = _span(other.y, other.height)
        if t1 == b1 or t2 == b2:
            return False
        if t1 >= b2 or t2 >= b1:
            return False
        return True

    def united(self, other: "Rect") -> "Rect":
        """Smallest rectangle holding both; a null rectangle is ignored."""
        if self.is_null:
            return other
        if other.is_null:
            return self
        l1, r1 = _span(self.x, self.width)
        l2, r2 = _span(other.x, other.width)
        t1, b1 = _span(self.y, self.height)
        t2, b2 = _span(other.y, other.height)
        left, right = min(l1, l2), max(r1, r2)
        top, bottom = min(t1, t2), max(b1, b2)
        return Rect(left, top, right - left, bottom - top)


@dataclass(eq=False)
class Collidable:
    """A minimal object taking part in collision detection."""

    id: int
    bounding_box: Rect
    object_types: FrozenSet[ObjectType] = frozenset()
    collidable: bool = True
    collisions: List["Collidable"] = field(default_factory=list)

    @property
    def center(self) -> Tuple[float, float]:
        return self.bounding_box.center

    def is_colliding_with(self, other: "Collidable") -> bool:
        return self.bounding_box.intersects(other.bounding_box)

    def collide(self, other: "Collidable") -> None:
        self.collisions.append(other)


def can_collide(types1: Iterable[ObjectType], types2: Iterable[ObjectType]) -> bool:
    """True if any type of the first set is allowed to hit any of the second."""
    second = list(types2)
    return any(
        t2 in COLLISION_MAP.get(t1, frozenset()) for t1 in types1 for t2 in second
    )


class BruteForce:
    """Checks every ordered pair (earlier, later) of objects."""

    def detect(self, objects: Sequence[Collidable]) -> None:
        for i, first in enumerate(objects):
            for second in objects[i + 1:]:
                if can_collide(first.object_types, second.object_types):
                    if first.is_colliding_with(second):
                        first.collide(second)