"""Collision detection front-end combining the broad-phase structures."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from .bvh import BVHTree
from .collision_rules import BruteForce, Collidable, ObjectType, Rect, can_collide
from .quadtree import Quadtree

IdPair = Tuple[int, int]
CollisionData = Mapping[int, Tuple[Rect, Iterable[ObjectType]]]


def _sorted_ids(first: Collidable, second: Collidable) -> IdPair:
    return (first.id, second.id) if first.id < second.id else (second.id, first.id)


class CollisionDetector:
    """Runs collision detection over a live sequence of game objects.

    The sequence is held by reference, so objects added to or removed from it
    later are seen by the next detection pass.
    """

    def __init__(
        self,
        objects: Sequence[Collidable],
        screen_rect: Rect,
        max_workers: Optional[int] = None,
    ) -> None:
        self.objects = objects
        self._brute_force = BruteForce()
        self._quadtree = Quadtree(screen_rect)
        self._bvh = BVHTree()
        self._max_workers = max_workers

    def detect_quadtree(self) -> None:
        self._quadtree.clear()
        for obj in self.objects:
            self._quadtree.insert(obj)

        checked: Set[IdPair] = set()
        for obj in self.objects:
            for candidate in self._quadtree.query(obj):
                pair = _sorted_ids(obj, candidate)
                if pair in checked:
                    continue
                if obj.is_colliding_with(candidate):
                    obj.collide(candidate)
                checked.add(pair)

    def detect_brute_force(self) -> None:
        self._brute_force.detect(self.objects)

    def detect_bvh(self) -> None:
        objects = list(self.objects)
        root = self._bvh.build(objects)
        for obj in objects:
            self._bvh.clear_processed_pairs()
            for hit in self._bvh.query(root, obj, set()):
                obj.collide(hit)

    def detect_bvh_parallel(self) -> None:
        """Query the tree concurrently, then resolve each pair once.

        Each pair collides from its lower-id member towards the higher one.
        """
        objects = list(self.objects)
        root = self._bvh.build(objects)

        def find(obj: Collidable) -> List[Tuple[Collidable, Collidable]]:
            hits = self._bvh.query(root, obj, set())
            return [(obj, hit) if obj.id < hit.id else (hit, obj) for hit in hits]

        with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
            found = list(pool.map(find, objects))

        seen: Set[IdPair] = set()
        for group in found:
            for first, second in group:
                pair = _sorted_ids(first, second)
                if pair in seen:
                    continue
                seen.add(pair)
                first.collide(second)


class ThreadedCollisionDetector:
    """Checks snapshots of object boxes for colliding id pairs.

    A snapshot maps object ids to their bounding box and object types. Each
    call to ``handle_collisions`` consumes the latest snapshot.
    """

    def __init__(
        self,
        on_collisions: Optional[Callable[[List[IdPair]], None]] = None,
        lock: Optional[threading.Lock] = None,
    ) -> None:
        self._lock = lock if lock is not None else threading.Lock()
        self._on_collisions = on_collisions
        self._data: Dict[int, Tuple[Rect, frozenset]] = {}

    def submit(self, data: CollisionData) -> None:
        self._data = {key: (box, frozenset(types)) for key, (box, types) in data.items()}

    def handle_collisions(self) -> List[IdPair]:
        with self._lock:
            if not self._data:
                return []
            items = list(self._data.items())
            pairs: List[IdPair] = []
            for index, (first_id, (first_box, first_types)) in enumerate(items):
                for second_id, (second_box, second_types) in items[index + 1:]:
                    if can_collide(first_types, second_types) and first_box.intersects(
                        second_box
                    ):
                        pairs.append((first_id, second_id))
            self._data = {}
        if pairs and self._on_collisions is not None:
            self._on_collisions(pairs)
        return pairs