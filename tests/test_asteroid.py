import math
import random

from game.asteroids.asteroid import (
    create_asteroid,
    generate_visual,
    resolve_collisions,
    spawn_field,
    split_asteroid,
    update_asteroids,
)
from game.asteroids.entities import Bounds

BOUNDS = Bounds(800, 600)


def make(rng, x, y, radius=25.0, tier=2, vx=0.0, vy=0.0):
    a = create_asteroid(rng, BOUNDS, radius, tier, 1, x, y)
    a.vx, a.vy = vx, vy
    return a


def test_health_is_twice_the_tier():
    rng = random.Random(1)
    for tier in (1, 2, 3):
        a = create_asteroid(rng, BOUNDS, 50.0, tier, 1)
        assert a.health == a.max_health == 2 * tier


def test_random_position_inside_bounds():
    rng = random.Random(2)
    for _ in range(50):
        a = create_asteroid(rng, BOUNDS, 50.0, 3, 1)
        assert 0 <= a.x <= BOUNDS.width
        assert 0 <= a.y <= BOUNDS.height


def test_speed_grows_with_level_and_shrinks_with_tier():
    rng = random.Random(3)
    for _ in range(50):
        a = create_asteroid(rng, BOUNDS, 50.0, 3, 5)
        limit = 1.5 * (4 - 3) * 0.5 * (1 + 5 * 0.1)
        assert abs(a.vx) <= limit and abs(a.vy) <= limit


def test_visual_descriptor_ranges():
    rng = random.Random(4)
    for _ in range(30):
        v = generate_visual(rng, 50.0, 3)
        assert 8 <= v.vertex_count <= 14
        assert all(0.8 <= k <= 1.2 for k in v.offsets)
        assert 6 <= len(v.craters) <= 8
        assert 9 <= len(v.cracks) <= 12
        assert len(v.patches) == 10
        for crack in v.cracks:
            assert 3 <= len(crack.points) <= 5


def test_visual_is_baked_once():
    rng = random.Random(5)
    a = make(rng, 400, 300, vx=1.0)
    visual = a.visual
    for _ in range(10):
        update_asteroids([a], BOUNDS)
    assert a.visual is visual


def test_split_large_gives_two_medium():
    rng = random.Random(6)
    parent = make(rng, 200, 150, radius=50.0, tier=3)
    children = split_asteroid(rng, BOUNDS, parent, 1)
    assert len(children) == 2
    for c in children:
        assert c.tier == 2
        assert c.radius == 25.0
        assert (c.x, c.y) == (200, 150)
        assert c.health == 4


def test_split_small_gives_nothing():
    rng = random.Random(7)
    assert split_asteroid(rng, BOUNDS, make(rng, 10, 10, radius=12.5, tier=1), 1) == []


def test_head_on_collision_exchanges_momentum():
    rng = random.Random(8)
    a1 = make(rng, 100, 100, vx=1.0)
    a2 = make(rng, 140, 100, vx=-1.0)
    assert resolve_collisions([a1, a2]) == 1
    assert math.isclose(a1.vx, -0.6)
    assert math.isclose(a2.vx, 0.6)
    assert math.isclose(a1.x, 95.0)
    assert math.isclose(a2.x, 145.0)
    assert a2.x - a1.x == a1.radius + a2.radius


def test_separating_pair_is_untouched():
    rng = random.Random(9)
    a1 = make(rng, 100, 100, vx=-1.0)
    a2 = make(rng, 140, 100, vx=1.0)
    assert resolve_collisions([a1, a2]) == 0
    assert (a1.x, a1.vx, a2.x, a2.vx) == (100, -1.0, 140, 1.0)


def test_coincident_centers_are_skipped():
    rng = random.Random(10)
    a1 = make(rng, 100, 100, vx=1.0)
    a2 = make(rng, 100, 100, vx=-1.0)
    assert resolve_collisions([a1, a2]) == 0


def test_update_wraps_past_left_edge():
    rng = random.Random(11)
    a = make(rng, -49.0, 300, radius=50.0, tier=3, vx=-2.0)
    a.spin = 0.01
    angle = a.angle
    update_asteroids([a], BOUNDS)
    assert a.x == BOUNDS.width + 50.0
    assert math.isclose(a.angle, angle + 0.01)


def test_update_wraps_past_bottom_edge():
    rng = random.Random(12)
    a = make(rng, 400, 600 + 24.0, vy=2.0)
    update_asteroids([a], BOUNDS)
    assert a.y == -25.0


def test_field_size_and_safe_zone():
    rng = random.Random(13)
    for level in (1, 2, 4):
        field = spawn_field(rng, BOUNDS, level, 400, 300, 150.0)
        assert len(field) == 3 + 2 * level
        for a in field:
            assert a.tier == 3
            assert a.radius == 50.0
            assert math.hypot(a.x - 400, a.y - 300) >= 150.0
