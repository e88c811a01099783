from game.asteroids.weapons import (
    WEAPON_TYPES,
    WeaponKind,
    get_weapon,
    next_unlocked_weapon,
    unlocked_weapons,
)


def test_catalog_is_indexed_by_kind():
    assert len(WEAPON_TYPES) == 4
    for kind in WeaponKind:
        assert get_weapon(kind) is WEAPON_TYPES[kind]
    assert get_weapon(WeaponKind.SPREAD).count == 3
    assert get_weapon(WeaponKind.LASER).damage == 7


def test_unlocking_follows_score():
    assert unlocked_weapons(0) == [WeaponKind.PLASMA]
    assert unlocked_weapons(500) == [WeaponKind.PLASMA, WeaponKind.MISSILE]
    assert unlocked_weapons(2999) == [WeaponKind.PLASMA, WeaponKind.MISSILE, WeaponKind.LASER]
    assert unlocked_weapons(3000) == list(WeaponKind)


def test_cycle_wraps_through_unlocked():
    assert next_unlocked_weapon(WeaponKind.PLASMA, 0) == WeaponKind.PLASMA
    assert next_unlocked_weapon(WeaponKind.PLASMA, 600) == WeaponKind.MISSILE
    assert next_unlocked_weapon(WeaponKind.MISSILE, 600) == WeaponKind.PLASMA
    assert next_unlocked_weapon(WeaponKind.SPREAD, 5000) == WeaponKind.PLASMA


def test_cycle_from_locked_weapon_falls_back():
    assert next_unlocked_weapon(WeaponKind.LASER, 600) == WeaponKind.PLASMA
