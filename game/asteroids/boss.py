"""
Boss planet subsystem
"""

from __future__ import annotations

import colorsys
import math
import random
from typing import Optional

from .config import BOSS_CONFIG
from .entities import Bounds, Continent, Planet


def _hsl(hue: float, saturation: float, lightness: float):
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness, saturation)
    return int(r * 255), int(g * 255), int(b * 255)


def create_planet(rng: random.Random, bounds: Bounds, level: int) -> Planet:
    """Boss for the given level; radius and health grow linearly with it"""
    cx, cy = bounds.center
    health = BOSS_CONFIG["base_health"] + BOSS_CONFIG["health_per_level"] * level
    lo, hi = BOSS_CONFIG["continent_range"]
    continents = tuple(
        Continent(
            angle=rng.random() * math.tau,
            dist=rng.random() * 0.6,
            size=0.15 + rng.random() * 0.2,
            color=_hsl(100 + rng.random() * 60, 0.6, 0.3 + rng.random() * 0.2),
        )
        for _ in range(rng.randint(lo, hi))
    )
    return Planet(
        x=cx,
        y=cy,
        radius=BOSS_CONFIG["base_radius"] + BOSS_CONFIG["radius_per_level"] * level,
        health=health,
        max_health=health,
        continents=continents,
        atmosphere_hue=(200 + level * 30) % 360,
        spin=BOSS_CONFIG["spin"],
    )


def update_planet(planet: Optional[Planet]):
    if planet is None or planet.destroyed:
        return
    planet.angle += planet.spin


def damage_planet(planet: Planet, damage: float) -> bool:
    """Apply damage. Returns True exactly once, on the hit that destroys it."""
    if planet.destroyed:
        return False
    planet.health -= damage
    if planet.health <= 0:
        planet.destroyed = True
        return True
    return False
