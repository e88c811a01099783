from game.asteroids.entities import Bounds
from game.asteroids.pool import BulletPool
from game.asteroids.weapons import WeaponKind

BOUNDS = Bounds(800, 600)


def spawn(pool, x=400.0, y=300.0, vx=0.0, vy=0.0, life=40):
    return pool.spawn(x, y, vx, vy, life=life, radius=3, weapon=WeaponKind.PLASMA, damage=3, angle=0.0)


def test_pool_never_grows_past_capacity():
    pool = BulletPool(capacity=100)
    bullets = [spawn(pool) for _ in range(150)]
    assert len(pool) == 150
    assert pool.size == 100

    for b in bullets:
        pool.release(b)

    assert len(pool) == 0
    assert pool.size == 100
    assert pool.free_count == 100


def test_released_slot_is_reused():
    pool = BulletPool()
    first = spawn(pool)
    pool.release(first)
    second = spawn(pool, x=10.0)
    assert second is first
    assert second.x == 10.0
    assert list(second.trail) == [(10.0, 300.0)]
    assert pool.size == 1


def test_double_release_is_ignored():
    pool = BulletPool()
    b = spawn(pool)
    pool.release(b)
    pool.release(b)
    assert pool.free_count == 1
    assert len(pool) == 0


def test_bullets_leaving_the_screen_are_retired():
    pool = BulletPool()
    spawn(pool, x=795.0, vx=20.0)
    kept = spawn(pool, x=400.0, vx=5.0)
    assert pool.update(BOUNDS) == 1
    assert pool.active == [kept]
    assert kept.x == 405.0


def test_bullets_expire_with_life():
    pool = BulletPool()
    spawn(pool, life=3)
    pool.update(BOUNDS)
    pool.update(BOUNDS)
    assert len(pool) == 1
    pool.update(BOUNDS)
    assert len(pool) == 0


def test_trail_keeps_most_recent_positions():
    pool = BulletPool()
    b = spawn(pool, x=100.0, vx=1.0, life=100)
    for _ in range(20):
        pool.update(BOUNDS)
    assert len(b.trail) == 8
    assert b.trail[-1] == (119.0, 300.0)
    assert b.trail[0] == (112.0, 300.0)


def test_clear_releases_everything():
    pool = BulletPool()
    for _ in range(5):
        spawn(pool)
    pool.clear()
    assert len(pool) == 0
    assert pool.free_count == 5
