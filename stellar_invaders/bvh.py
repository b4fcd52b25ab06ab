"""Bounding volume hierarchy for collision queries."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Set, Tuple

from .collision_rules import Collidable, Rect, can_collide

LEAF_SIZE = 4

PairSet = Set[Tuple[int, int]]


@dataclass(eq=False)
class BVHNode:
    """Tree node; leaves hold objects, inner nodes hold two children."""

    bbox: Rect = field(default_factory=Rect)
    left: Optional["BVHNode"] = None
    right: Optional["BVHNode"] = None
    objects: List[Collidable] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return self.left is None or self.right is None


class BVHTree:
    """Builds a median-split BVH and queries it for colliding objects."""

    def __init__(self) -> None:
        self._split_x = True
        self.processed_pairs: PairSet = set()

    def build(self, objects: Sequence[Collidable]) -> Optional[BVHNode]:
        if not objects:
            return None
        self.processed_pairs.clear()
        self._split_x = self._should_split_x(objects)

        if len(objects) <= LEAF_SIZE:
            items = list(objects)
            return BVHNode(bbox=self._bounding_box(items), objects=items)

        left_objects, right_objects = self._split(objects, self._split_x)
        left = self.build(left_objects)
        right = self.build(right_objects)
        assert left is not None and right is not None
        return BVHNode(bbox=left.bbox.united(right.bbox), left=left, right=right)

    def query(
        self,
        node: Optional[BVHNode],
        query_obj: Collidable,
        processed_pairs: Optional[PairSet] = None,
    ) -> List[Collidable]:
        """Objects under ``node`` that ``query_obj`` collides with.

        Pairs already in ``processed_pairs`` are skipped; every pair looked
        at is added to it.
        """
        if processed_pairs is None:
            processed_pairs = set()
        results: List[Collidable] = []
        self._query(node, query_obj, processed_pairs, results)
        return results

    def clear_processed_pairs(self) -> None:
        self.processed_pairs.clear()

    def _query(
        self,
        node: Optional[BVHNode],
        query_obj: Collidable,
        processed: PairSet,
        results: List[Collidable],
    ) -> None:
        box = query_obj.bounding_box
        if node is None or not node.bbox.intersects(box):
            return

        if node.left is not None and node.right is not None:
            if node.left.bbox.intersects(box):
                self._query(node.left, query_obj, processed, results)
            if node.right.bbox.intersects(box):
                self._query(node.right, query_obj, processed, results)
            return

        for obj in node.objects:
            pair = (min(query_obj.id, obj.id), max(query_obj.id, obj.id))
            if pair in processed:
                continue
            if (
                query_obj.collidable
                and obj.collidable
                and can_collide(query_obj.object_types, obj.object_types)
                and obj.bounding_box.intersects(box)
            ):
                results.append(obj)
            processed.add(pair)

    @staticmethod
    def _bounding_box(objects: Sequence[Collidable]) -> Rect:
        box = Rect()
        for obj in objects:
            box = box.united(obj.bounding_box)
        return box

    @staticmethod
    def _split(
        objects: Sequence[Collidable], split_x: bool
    ) -> Tuple[List[Collidable], List[Collidable]]:
        axis = 0 if split_x else 1
        ordered = sorted(objects, key=lambda obj: obj.center[axis])
        middle = len(ordered) // 2
        return ordered[:middle], ordered[middle:]

    @staticmethod
    def _should_split_x(objects: Sequence[Collidable]) -> bool:
        if not objects:
            return True
        boxes = [obj.bounding_box for obj in objects]
        range_x = max(b.right for b in boxes) - min(b.left for b in boxes)
        range_y = max(b.bottom for b in boxes) - min(b.top for b in boxes)
        return range_x >= range_y