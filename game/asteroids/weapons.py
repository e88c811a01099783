"""
Weapon catalog

Weapons are unlocked by score and indexed directly by WeaponKind.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple


class WeaponKind(IntEnum):
    PLASMA = 0
    MISSILE = 1
    LASER = 2
    SPREAD = 3


@dataclass(frozen=True)
class WeaponType:
    """Static weapon configuration"""
    name: str
    speed: float
    size: float         # projectile radius
    life: int           # ticks
    cooldown: int       # ticks between shots
    spread: float       # radians between sibling projectiles
    count: int          # projectiles per shot
    damage: float
    unlock_score: int
    color: Tuple[int, int, int]
    glow_color: Tuple[int, int, int, int]


WEAPON_TYPES: Tuple[WeaponType, ...] = (
    WeaponType("PLASMA", speed=6, size=5, life=40, cooldown=25, spread=0.0, count=1,
               damage=3, unlock_score=0, color=(255, 0, 255), glow_color=(255, 0, 255, 128)),
    WeaponType("MISSILE", speed=5, size=4, life=120, cooldown=35, spread=0.0, count=1,
               damage=5, unlock_score=500, color=(255, 102, 0), glow_color=(255, 100, 0, 128)),
    WeaponType("LASER", speed=8, size=3, life=90, cooldown=15, spread=0.0, count=1,
               damage=7, unlock_score=1500, color=(0, 255, 255), glow_color=(0, 255, 255, 128)),
    WeaponType("SPREAD", speed=7, size=2, life=60, cooldown=20, spread=0.3, count=3,
               damage=2, unlock_score=3000, color=(255, 255, 0), glow_color=(255, 255, 0, 102)),
)


def get_weapon(kind: WeaponKind) -> WeaponType:
    return WEAPON_TYPES[kind]


def unlocked_weapons(score: int) -> List[WeaponKind]:
    """Weapons available at the given score, in catalog order"""
    return [k for k in WeaponKind if score >= WEAPON_TYPES[k].unlock_score]


def next_unlocked_weapon(current: WeaponKind, score: int) -> WeaponKind:
    """Cycle to the next unlocked weapon, wrapping around"""
    available = unlocked_weapons(score)
    if current not in available:
        return available[0]
    idx = available.index(current)
    return available[(idx + 1) % len(available)]
