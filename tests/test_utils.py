from game.asteroids.utils import circle_collide, clamp, distance, wrap_position


def test_clamp():
    assert clamp(5, 0, 3) == 3
    assert clamp(-1, 0, 3) == 0
    assert clamp(2, 0, 3) == 2


def test_circle_collide_is_strict():
    assert circle_collide(0, 0, 5, 9, 0, 5)
    assert not circle_collide(0, 0, 5, 10, 0, 5)
    assert distance(0, 0, 3, 4) == 5


def test_wrap_each_edge():
    w, h, r = 800, 600, 10
    assert wrap_position(-11, 300, r, w, h) == (w + r, 300)
    assert wrap_position(w + 11, 300, r, w, h) == (-r, 300)
    assert wrap_position(400, -11, r, w, h) == (400, h + r)
    assert wrap_position(400, h + 11, r, w, h) == (400, -r)


def test_no_wrap_within_one_radius():
    assert wrap_position(-9, 300, 10, 800, 600) == (-9, 300)
    assert wrap_position(809, 300, 10, 800, 600) == (809, 300)
