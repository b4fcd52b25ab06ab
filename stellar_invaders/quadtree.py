"""Region quadtree for broad-phase collision queries."""

from __future__ import annotations

from typing import List, Optional

from .collision_rules import Collidable, Rect, can_collide


class Quadtree:
    """Quadtree node; splits when it holds more than ``MAX_OBJECTS``."""

    MAX_OBJECTS = 20
    MAX_LEVELS = 5

    def __init__(self, bounds: Rect, level: int = 0) -> None:
        self.level = level
        self.bounds = bounds
        self._objects: List[Collidable] = []
        self._nodes: Optional[List["Quadtree"]] = None

    def clear(self) -> None:
        self._objects.clear()
        if self._nodes:
            for node in self._nodes:
                node.clear()
        self._nodes = None

    def insert(self, obj: Collidable) -> None:
        if self._nodes:
            index = self._index(obj.bounding_box)
            if index != -1:
                self._nodes[index].insert(obj)
                return

        self._objects.append(obj)

        if len(self._objects) > self.MAX_OBJECTS and self.level < self.MAX_LEVELS:
            if not self._nodes:
                self._split()
            assert self._nodes is not None
            kept = []
            for item in self._objects:
                index = self._index(item.bounding_box)
                if index != -1:
                    self._nodes[index].insert(item)
                else:
                    kept.append(item)
            self._objects = kept

    def query(self, query_obj: Collidable) -> List[Collidable]:
        """Objects whose boxes overlap ``query_obj`` and that it may hit."""
        area = query_obj.bounding_box
        if not self.bounds.intersects(area):
            return []
        found = [
            obj
            for obj in self._objects
            if can_collide(query_obj.object_types, obj.object_types)
            and area.intersects(obj.bounding_box)
        ]
        if self._nodes:
            for node in self._nodes:
                found.extend(node.query(query_obj))
        return found

    def _split(self) -> None:
        half_w = self.bounds.width / 2
        half_h = self.bounds.height / 2
        x, y = self.bounds.x, self.bounds.y
        level = self.level + 1
        self._nodes = [
            Quadtree(Rect(x + half_w, y, half_w, half_h), level),
            Quadtree(Rect(x, y, half_w, half_h), level),
            Quadtree(Rect(x, y + half_h, half_w, half_h), level),
            Quadtree(Rect(x + half_w, y + half_h, half_w, half_h), level),
        ]

    def _index(self, box: Rect) -> int:
        vertical_mid = self.bounds.x + self.bounds.width / 2
        horizontal_mid = self.bounds.y + self.bounds.height / 2

        top = box.bottom < horizontal_mid
        bottom = box.top >= horizontal_mid
        left = box.right < vertical_mid
        right = box.left >= vertical_mid

        if left:
            if top:
                return 1
            if bottom:
                return 2
        elif right:
            if top:
                return 0
            if bottom:
                return 3
        return -1