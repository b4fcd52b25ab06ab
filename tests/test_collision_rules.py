import pytest

from stellar_invaders.collision_rules import (
    BruteForce,
    Collidable,
    ObjectType,
    Rect,
    can_collide,
)


def make(obj_id, x, y, w, h, *types):
    return Collidable(obj_id, Rect(x, y, w, h), frozenset(types))


def test_overlapping_rects_intersect():
    assert Rect(0, 0, 10, 10).intersects(Rect(9, 9, 5, 5))
    assert Rect(9, 9, 5, 5).intersects(Rect(0, 0, 10, 10))


def test_touching_rects_do_not_intersect():
    assert not Rect(0, 0, 10, 10).intersects(Rect(10, 0, 5, 5))
    assert not Rect(0, 0, 10, 10).intersects(Rect(0, 10, 5, 5))


def test_zero_sized_rect_never_intersects():
    assert not Rect(0, 0, 10, 10).intersects(Rect(5, 5, 0, 3))
    assert not Rect(5, 5, 3, 0).intersects(Rect(0, 0, 10, 10))


def test_negative_size_is_normalised():
    assert Rect(10, 10, -5, -5).intersects(Rect(6, 6, 2, 2))


def test_united_with_null_returns_other():
    r = Rect(3, 4, 5, 6)
    assert Rect().united(r) == r
    assert r.united(Rect()) == r


def test_united_contains_both():
    a = Rect(0, 0, 10, 10)
    b = Rect(5, 20, 10, 5)
    u = a.united(b)
    for r in (a, b):
        assert u.left <= r.left and u.top <= r.top
        assert u.right >= r.right and u.bottom >= r.bottom
    assert u == Rect(0, 0, 15, 25)


def test_center():
    assert Rect(0, 0, 10, 20).center == (5, 10)


@pytest.mark.parametrize(
    "first,second,expected",
    [
        ({ObjectType.PLAYER_SHIP}, {ObjectType.ENEMY_PROJECTILE}, True),
        ({ObjectType.PLAYER_SHIP}, {ObjectType.COLLECTABLE}, True),
        ({ObjectType.ENEMY_SHIP}, {ObjectType.PLAYER_PROJECTILE}, True),
        ({ObjectType.ENEMY_PROJECTILE}, {ObjectType.PLAYER_SHIP}, False),
        ({ObjectType.PLAYER_SHIP}, {ObjectType.PLAYER_PROJECTILE}, False),
        ({ObjectType.ENEMY_SHIP}, {ObjectType.ENEMY_PROJECTILE}, False),
        (set(), {ObjectType.PLAYER_SHIP}, False),
    ],
)
def test_can_collide(first, second, expected):
    assert can_collide(first, second) is expected


def test_can_collide_with_mixed_sets():
    assert can_collide(
        {ObjectType.COLLECTABLE, ObjectType.PLAYER_SHIP}, {ObjectType.COLLECTABLE}
    )


def test_brute_force_collides_overlapping_pair():
    ship = make(1, 0, 0, 10, 10, ObjectType.PLAYER_SHIP)
    bullet = make(2, 5, 5, 2, 2, ObjectType.ENEMY_PROJECTILE)
    far = make(3, 100, 100, 2, 2, ObjectType.ENEMY_PROJECTILE)
    BruteForce().detect([ship, bullet, far])
    assert ship.collisions == [bullet]
    assert bullet.collisions == []
    assert far.collisions == []


def test_brute_force_respects_order():
    ship = make(1, 0, 0, 10, 10, ObjectType.PLAYER_SHIP)
    bullet = make(2, 5, 5, 2, 2, ObjectType.ENEMY_PROJECTILE)
    BruteForce().detect([bullet, ship])
    assert ship.collisions == []
    assert bullet.collisions == []


def test_brute_force_ignores_disallowed_types():
    enemy = make(1, 0, 0, 10, 10, ObjectType.ENEMY_SHIP)
    bullet = make(2, 5, 5, 2, 2, ObjectType.ENEMY_PROJECTILE)
    BruteForce().detect([enemy, bullet])
    assert enemy.collisions == []