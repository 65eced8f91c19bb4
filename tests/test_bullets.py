import math
import random

import pytest

from neonshooter.bullets import (
    WHITE,
    Bullet,
    EnemyBulletPool,
    PlayerBullet,
    PlayerBulletPool,
)
from neonshooter.circle import SCREEN_HEIGHT, SCREEN_WIDTH, Circle
from neonshooter.vector2 import Vector2

CENTER = Vector2(SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2)


def test_bullet_defaults_from_source():
    bullet = Bullet()
    assert bullet.radius == 5
    assert bullet.speed == 500
    assert bullet.color == (255, 255, 255)
    assert bullet.direction == Vector2.up()


def test_player_bullet_radius():
    assert PlayerBullet().radius == 7


def test_bullet_fire_normalizes_and_copies_position():
    bullet = Bullet()
    pos = CENTER.copy()
    bullet.fire(pos, Vector2(3.0, 4.0), (1, 2, 3))
    pos.x = -50.0
    assert bullet.active
    assert bullet.center == CENTER
    assert bullet.direction.magnitude() == pytest.approx(1.0)
    assert bullet.color == (1, 2, 3)


def test_bullet_moves_speed_times_dt():
    bullet = Bullet()
    bullet.fire(CENTER.copy(), Vector2.right())
    bullet.speed = 100.0
    bullet.update(0.5)
    assert (bullet.center - CENTER).magnitude() == pytest.approx(bullet.speed * 0.5)
    assert bullet.active


def test_bullet_zero_direction_raises():
    with pytest.raises(ZeroDivisionError):
        Bullet().fire(CENTER.copy(), Vector2.zero())


def test_bullet_leaving_screen_deactivates():
    bullet = Bullet()
    bullet.fire(Vector2(SCREEN_WIDTH / 2, 1.0))
    bullet.update(1.0)
    assert not bullet.active


def test_player_bullet_leaving_screen_deactivates():
    bullet = PlayerBullet()
    bullet.fire(Vector2(SCREEN_WIDTH - 1.0, SCREEN_HEIGHT / 2), Vector2.right())
    bullet.update(1.0)
    assert not bullet.active


def test_enemy_pool_starts_inactive():
    pool = EnemyBulletPool()
    assert len(pool.bullets) == 300
    assert pool.active_bullets() == []


def test_enemy_pool_fire_returns_bullet_with_default_color():
    pool = EnemyBulletPool()
    bullet = pool.fire(CENTER.copy())
    assert bullet is pool.bullets[0]
    assert bullet.color == WHITE
    assert pool.active_bullets() == [bullet]


def test_enemy_pool_exhaustion_returns_none():
    pool = EnemyBulletPool()
    for _ in range(EnemyBulletPool.POOL_SIZE):
        assert pool.fire(CENTER.copy()) is not None
    assert pool.fire(CENTER.copy()) is None


def test_enemy_pool_hits_consumes_one_bullet():
    pool = EnemyBulletPool()
    pool.fire(CENTER.copy())
    pool.fire(CENTER.copy())
    target = Circle(10, CENTER.copy())
    assert pool.hits(target)
    assert len(pool.active_bullets()) == 1
    assert pool.hits(target)
    assert not pool.hits(target)


def test_enemy_pool_miss():
    pool = EnemyBulletPool()
    pool.fire(CENTER.copy())
    assert not pool.hits(Circle(10, Vector2(0.0, 0.0)))
    assert len(pool.active_bullets()) == 1


def test_player_pool_fire_goes_up_and_down():
    pool = PlayerBulletPool()
    pool.fire(CENTER.copy())
    pool.down_fire(CENTER.copy())
    up, down = pool.active_bullets()
    pool.update(0.1)
    assert up.center.y < CENTER.y
    assert down.center.y > CENTER.y


def test_player_pool_cross_fire_four_directions():
    pool = PlayerBulletPool()
    pool.cross_fire(CENTER.copy())
    dirs = [b.direction for b in pool.active_bullets()]
    assert len(dirs) == 4
    expected = [Vector2.right(), Vector2.down(), Vector2.left(), Vector2.up()]
    for got, want in zip(dirs, expected):
        assert got.x == pytest.approx(want.x, abs=1e-5)
        assert got.y == pytest.approx(want.y, abs=1e-5)


def test_player_pool_circle_fire_twelve_unit_directions():
    pool = PlayerBulletPool()
    pool.circle_fire(CENTER.copy())
    active = pool.active_bullets()
    assert len(active) == 12
    assert all(b.direction.magnitude() == pytest.approx(1.0) for b in active)
    total = Vector2()
    for b in active:
        total += b.direction
    assert total.magnitude() == pytest.approx(0.0, abs=1e-4)


def test_player_pool_shotgun_fires_five_upward():
    pool = PlayerBulletPool()
    pool.shotgun_fire(CENTER.copy())
    active = pool.active_bullets()
    assert len(active) == 5
    assert all(b.direction.y < 0 for b in active)
    assert active[2].direction.x == pytest.approx(0.0, abs=1e-5)


def test_player_pool_crazy_fire_lower_half():
    pool = PlayerBulletPool(random.Random(7))
    for _ in range(20):
        pool.crazy_fire(CENTER.copy())
    active = pool.active_bullets()
    assert len(active) == 20
    assert all(b.direction.y >= -1e-6 for b in active)


def test_player_pool_fan_limited_by_free_bullets():
    pool = PlayerBulletPool()
    for _ in range(PlayerBulletPool.POOL_SIZE - 3):
        pool.fire(CENTER.copy())
    pool.circle_fire(CENTER.copy())
    assert len(pool.active_bullets()) == PlayerBulletPool.POOL_SIZE


def test_player_pool_hits():
    pool = PlayerBulletPool()
    pool.fire(CENTER.copy())
    assert pool.hits(Circle(20, CENTER.copy()))
    assert pool.active_bullets() == []


def test_player_pool_update_clears_offscreen():
    pool = PlayerBulletPool()
    pool.fire(Vector2(SCREEN_WIDTH / 2, 2.0))
    pool.update(1.0)
    assert pool.active_bullets() == []
    assert math.isclose(len(pool.bullets), 100)