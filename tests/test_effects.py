import random

from game.asteroids.effects import EffectsState
from game.asteroids.entities import Bounds

BOUNDS = Bounds(800, 600)


def test_explosion_particles_expire():
    fx = EffectsState(random.Random(1))
    assert fx.explosion(100, 100, 12, "white", 3, 40) == 12
    assert len(fx.particles) == 12
    for p in fx.particles:
        assert 10 <= p.life <= 50
        assert 1 <= p.size <= 4
    for _ in range(50):
        fx.update(BOUNDS)
    assert fx.particles == []


def test_popup_rises_and_expires():
    fx = EffectsState(random.Random(2))
    fx.popup(100, 100, 20)
    fx.update(BOUNDS)
    assert fx.popups[0].y == 98
    for _ in range(59):
        fx.update(BOUNDS)
    assert fx.popups == []


def test_shake_and_flash_decay():
    fx = EffectsState(random.Random(3))
    fx.shake(2, 10)
    fx.flash("red")
    fx.update(BOUNDS)
    assert fx.shake_duration == 1
    assert abs(fx.shake_offset[0]) <= 5
    fx.update(BOUNDS)
    fx.update(BOUNDS)
    assert fx.shake_offset == (0.0, 0.0)
    for _ in range(30):
        fx.update(BOUNDS)
    assert fx.flash_alpha == 0.0
    assert fx.flash_color == "red"


def test_dust_drifts_and_expires():
    fx = EffectsState(random.Random(4))
    assert fx.emit_dust(400, 300) == 6
    for d in fx.dust:
        assert 3.0 <= d.radius <= 6.0
    for _ in range(180):
        fx.update(BOUNDS)
    assert fx.dust == []


def test_clear():
    fx = EffectsState(random.Random(5))
    fx.explosion(0, 0, 3)
    fx.popup(0, 0, 10)
    fx.emit_dust(0, 0)
    fx.flash()
    fx.clear()
    assert not fx.particles and not fx.popups and not fx.dust
    assert fx.flash_alpha == 0.0
