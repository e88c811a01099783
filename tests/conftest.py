import pytest

from game.asteroids.asteroid import create_asteroid
from game.asteroids.world import GameWorld


def place_asteroid(world, x, y, tier=3, radius=None):
    """Stationary asteroid at an exact spot"""
    if radius is None:
        radius = {3: 50.0, 2: 25.0, 1: 12.5}[tier]
    a = create_asteroid(world.rng, world.bounds, radius, tier, world.session.level, x, y)
    a.vx = 0.0
    a.vy = 0.0
    a.spin = 0.0
    world.asteroids.append(a)
    return a


@pytest.fixture
def world():
    """800x600 world with an empty field and a vulnerable ship at the center"""
    w = GameWorld(width=800, height=600, seed=1234)
    w.asteroids.clear()
    w.ship.invulnerability = 0
    w.ship.visible = True
    return w
