from stellar_invaders.bvh import LEAF_SIZE, BVHTree
from stellar_invaders.collision_rules import Collidable, ObjectType, Rect


def make(obj_id, x, y, w, h, *types, collidable=True):
    return Collidable(obj_id, Rect(x, y, w, h), frozenset(types), collidable)


def leaves(node):
    if node is None:
        return []
    if node.left is None and node.right is None:
        return [node]
    return leaves(node.left) + leaves(node.right)


def walk(node):
    if node is None:
        return
    yield node
    yield from walk(node.left)
    yield from walk(node.right)


def contains(outer, inner):
    return (
        outer.left <= inner.left
        and outer.right >= inner.right
        and outer.top <= inner.top
        and outer.bottom >= inner.bottom
    )


def grid(count, start_id=100):
    return [
        make(start_id + i, (i % 8) * 40, (i // 8) * 40, 10, 10, ObjectType.ENEMY_PROJECTILE)
        for i in range(count)
    ]


def test_build_empty_returns_none():
    assert BVHTree().build([]) is None


def test_small_build_is_single_leaf():
    objects = grid(3)
    root = BVHTree().build(objects)
    assert root.left is None and root.right is None
    assert root.objects == objects
    assert root.is_leaf


def test_large_build_partitions_objects_into_small_leaves():
    objects = grid(30)
    root = BVHTree().build(objects)
    found = [obj for leaf in leaves(root) for obj in leaf.objects]
    assert sorted(o.id for o in found) == sorted(o.id for o in objects)
    assert all(0 < len(leaf.objects) <= LEAF_SIZE for leaf in leaves(root))


def test_node_boxes_contain_children():
    objects = grid(30)
    root = BVHTree().build(objects)
    nodes = list(walk(root))
    assert len(nodes) > 1
    assert all(
        contains(node.bbox, obj.bounding_box) for node in nodes for obj in node.objects
    )
    assert all(
        node.bbox.united(child.bbox) == node.bbox
        for node in nodes
        for child in (node.left, node.right)
        if child is not None
    )
    assert all(contains(root.bbox, obj.bounding_box) for obj in objects)


def test_query_returns_overlapping_targets():
    ship = make(1, 0, 0, 50, 50, ObjectType.PLAYER_SHIP)
    objects = [ship, *grid(30)]
    tree = BVHTree()
    root = tree.build(objects)
    found = tree.query(root, ship)
    # grid cells at (0,0), (40,0), (0,40), (40,40) overlap the ship
    assert sorted(o.id for o in found) == [100, 101, 108, 109]


def test_processed_pairs_prevent_duplicates():
    ship = make(1, 0, 0, 50, 50, ObjectType.PLAYER_SHIP)
    tree = BVHTree()
    root = tree.build([ship, *grid(30)])
    pairs = set()
    first = tree.query(root, ship, pairs)
    assert first
    assert (1, first[0].id) in pairs
    assert tree.query(root, ship, pairs) == []


def test_non_collidable_objects_are_skipped():
    ship = make(1, 0, 0, 50, 50, ObjectType.PLAYER_SHIP)
    ghost = make(2, 10, 10, 5, 5, ObjectType.ENEMY_PROJECTILE, collidable=False)
    solid = make(3, 20, 20, 5, 5, ObjectType.ENEMY_PROJECTILE)
    tree = BVHTree()
    root = tree.build([ship, ghost, solid])
    assert tree.query(root, ship) == [solid]


def test_query_is_directional():
    enemy = make(1, 0, 0, 50, 50, ObjectType.ENEMY_SHIP)
    shot = make(2, 10, 10, 5, 5, ObjectType.PLAYER_PROJECTILE)
    tree = BVHTree()
    root = tree.build([enemy, shot])
    assert tree.query(root, enemy) == [shot]
    assert tree.query(root, shot) == []


def test_query_on_missing_node_is_empty():
    ship = make(1, 0, 0, 50, 50, ObjectType.PLAYER_SHIP)
    assert BVHTree().query(None, ship) == []


def test_clear_processed_pairs_empties_tree_set():
    tree = BVHTree()
    tree.processed_pairs.add((1, 2))
    tree.clear_processed_pairs()
    assert tree.processed_pairs == set()