"""
Asteroid subsystem: procedural generation, movement with pairwise elastic
collisions, and splitting.
"""

from __future__ import annotations

import math
import random
from typing import List, Optional

from .config import ASTEROID_CONFIG, WORLD_CONFIG
from .entities import Asteroid, AsteroidVisual, Bounds, Crack, Crater, SurfacePatch
from .utils import distance, wrap_position


def generate_visual(rng: random.Random, radius: float, tier: int) -> AsteroidVisual:
    """Bake the outline, craters, cracks and surface patches of one asteroid"""
    lo, hi = ASTEROID_CONFIG["vertex_range"]
    jlo, jhi = ASTEROID_CONFIG["vertex_jitter"]
    offsets = tuple(rng.uniform(jlo, jhi) for _ in range(rng.randint(lo, hi)))

    craters = []
    for _ in range(int(tier * 2 + rng.random() * 3)):
        angle = rng.random() * math.tau
        dist = rng.random() * radius * 0.6
        is_large = rng.random() < ASTEROID_CONFIG["large_crater_chance"]
        if is_large:
            size = radius * (0.12 + rng.random() * 0.08)
        else:
            size = radius * (0.03 + rng.random() * 0.04)
        craters.append(Crater(math.cos(angle) * dist, math.sin(angle) * dist, size, is_large))

    cracks = []
    for _ in range(int(tier * 3 + rng.random() * 4)):
        start_angle = rng.random() * math.tau
        start_dist = rng.random() * radius * 0.7
        length = radius * (0.15 + rng.random() * 0.35)
        curve = (rng.random() - 0.5) * 1.2
        segments = rng.randint(2, 4)

        x = math.cos(start_angle) * start_dist
        y = math.sin(start_angle) * start_dist
        points = [(x, y)]
        seg_len = length / segments
        heading = start_angle + curve
        for _ in range(segments):
            heading += (rng.random() - 0.5) * 0.8
            x += math.cos(heading) * seg_len
            y += math.sin(heading) * seg_len
            points.append((x, y))
        cracks.append(Crack(tuple(points)))

    patches = []
    patch_count = min(int(radius / 5), 10)
    for i in range(patch_count):
        p_angle = (i / patch_count) * math.tau + rng.random() * 0.5
        p_dist = radius * (0.25 + rng.random() * 0.4)
        shade = 90 + rng.randrange(70)
        patches.append(SurfacePatch(
            x=math.cos(p_angle) * p_dist,
            y=math.sin(p_angle) * p_dist,
            size=radius * (0.08 + rng.random() * 0.04),
            color=(shade + 20, shade, shade - 20),
        ))

    return AsteroidVisual(offsets, tuple(craters), tuple(cracks), tuple(patches))


def create_asteroid(
    rng: random.Random,
    bounds: Bounds,
    radius: float,
    tier: int,
    level: int,
    x: Optional[float] = None,
    y: Optional[float] = None,
) -> Asteroid:
    """
    Create an asteroid. Omitted coordinates are drawn uniformly inside bounds.
    Smaller tiers and higher levels move faster.
    """
    if x is None:
        x = rng.random() * bounds.width
    if y is None:
        y = rng.random() * bounds.height

    speed = (ASTEROID_CONFIG["base_speed"] * (4 - tier) * 0.5
             * (1 + level * ASTEROID_CONFIG["level_speed_bonus"]))
    max_spin = ASTEROID_CONFIG["max_spin"]
    health = float(tier * 2)

    return Asteroid(
        x=x,
        y=y,
        vx=(rng.random() * 2 - 1) * speed,
        vy=(rng.random() * 2 - 1) * speed,
        radius=radius,
        tier=tier,
        health=health,
        max_health=health,
        visual=generate_visual(rng, radius, tier),
        angle=rng.random() * math.tau,
        spin=(rng.random() * 2 - 1) * max_spin,
    )


def spawn_field(
    rng: random.Random,
    bounds: Bounds,
    level: int,
    avoid_x: float,
    avoid_y: float,
    safe_radius: float = WORLD_CONFIG["safe_spawn_radius"],
) -> List[Asteroid]:
    """Initial field for a level, kept clear of the ship's spawn point"""
    count = ASTEROID_CONFIG["field_base"] + ASTEROID_CONFIG["field_per_level"] * level
    radius = ASTEROID_CONFIG["initial_radius"]
    tier = ASTEROID_CONFIG["initial_tier"]

    field = []
    for _ in range(count):
        # A tiny arena may have no point outside the safe zone; keep the last try then
        for _ in range(WORLD_CONFIG["spawn_attempts"]):
            x = rng.random() * bounds.width
            y = rng.random() * bounds.height
            if distance(x, y, avoid_x, avoid_y) >= safe_radius:
                break
        field.append(create_asteroid(rng, bounds, radius, tier, level, x, y))
    return field


def split_asteroid(rng: random.Random, bounds: Bounds, asteroid: Asteroid, level: int) -> List[Asteroid]:
    """Children of a destroyed asteroid: two of the next tier down, or none"""
    if asteroid.tier <= 1:
        return []
    radius = asteroid.radius / 2
    tier = asteroid.tier - 1
    return [
        create_asteroid(rng, bounds, radius, tier, level, asteroid.x, asteroid.y)
        for _ in range(2)
    ]


def resolve_collisions(asteroids: List[Asteroid]) -> int:
    """
    Equal-mass, lossy elastic response between every overlapping pair that is
    closing. Returns the number of resolved contacts.
    """
    restitution = ASTEROID_CONFIG["restitution"]
    contacts = 0
    n = len(asteroids)
    for i in range(n):
        a1 = asteroids[i]
        for j in range(i + 1, n):
            a2 = asteroids[j]
            dx = a2.x - a1.x
            dy = a2.y - a1.y
            dist = math.hypot(dx, dy)
            min_dist = a1.radius + a2.radius

            # Coincident centers have no contact normal
            if dist >= min_dist or dist == 0:
                continue

            nx = dx / dist
            ny = dy / dist
            dvn = (a1.vx - a2.vx) * nx + (a1.vy - a2.vy) * ny
            if dvn <= 0:
                continue

            impulse = dvn * restitution
            a1.vx -= impulse * nx
            a1.vy -= impulse * ny
            a2.vx += impulse * nx
            a2.vy += impulse * ny

            overlap = (min_dist - dist) / 2
            a1.x -= overlap * nx
            a1.y -= overlap * ny
            a2.x += overlap * nx
            a2.y += overlap * ny
            contacts += 1
    return contacts


def update_asteroids(asteroids: List[Asteroid], bounds: Bounds) -> int:
    """Move, spin and wrap every asteroid, then resolve contacts"""
    for a in asteroids:
        a.x += a.vx
        a.y += a.vy
        a.angle += a.spin
        a.x, a.y = wrap_position(a.x, a.y, a.radius, bounds.width, bounds.height)
    return resolve_collisions(asteroids)
