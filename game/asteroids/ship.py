"""
Ship subsystem: kinematics, firing and respawn
"""

from __future__ import annotations

import math
from typing import List

from .config import SHIP_CONFIG
from .entities import Bounds, Bullet, Ship
from .inputs import InputState
from .pool import BulletPool
from .utils import wrap_position
from .weapons import get_weapon


def new_ship(bounds: Bounds) -> Ship:
    cx, cy = bounds.center
    return Ship(x=cx, y=cy)


def tick_invulnerability(ship: Ship):
    """Count the invulnerability window down and blink while it runs"""
    if ship.invulnerability > 0:
        ship.invulnerability -= 1
        ship.visible = (ship.invulnerability // SHIP_CONFIG["blink_period"]) % 2 == 0
    else:
        ship.visible = True


def update_ship(ship: Ship, inputs: InputState, bounds: Bounds, game_over: bool):
    tick_invulnerability(ship)
    if game_over:
        ship.thrusting = False
        ship.braking = False
        return

    if inputs.turn_left:
        ship.angle -= SHIP_CONFIG["turn_speed"]
    if inputs.turn_right:
        ship.angle += SHIP_CONFIG["turn_speed"]

    ship.thrusting = inputs.thrust
    if ship.thrusting:
        ship.vx += math.cos(ship.angle) * SHIP_CONFIG["thrust"]
        ship.vy += math.sin(ship.angle) * SHIP_CONFIG["thrust"]

    ship.braking = inputs.brake
    if ship.braking:
        ship.vx *= SHIP_CONFIG["brake"]
        ship.vy *= SHIP_CONFIG["brake"]

    ship.vx *= SHIP_CONFIG["drag"]
    ship.vy *= SHIP_CONFIG["drag"]

    ship.x += ship.vx
    ship.y += ship.vy
    ship.x, ship.y = wrap_position(ship.x, ship.y, ship.radius, bounds.width, bounds.height)


def shoot(ship: Ship, pool: BulletPool) -> List[Bullet]:
    """
    Fire the active weapon from the ship's nose. Multi-projectile weapons fan
    out symmetrically around the facing angle. Cooldown is the caller's job.
    """
    weapon = get_weapon(ship.weapon)
    inherit = SHIP_CONFIG["velocity_inheritance"]
    start_x = ship.x + math.cos(ship.angle) * ship.radius
    start_y = ship.y + math.sin(ship.angle) * ship.radius

    fired = []
    for i in range(weapon.count):
        offset = weapon.spread * (i - (weapon.count - 1) / 2) if weapon.count > 1 else 0.0
        angle = ship.angle + offset
        fired.append(pool.spawn(
            start_x,
            start_y,
            math.cos(angle) * weapon.speed + ship.vx * inherit,
            math.sin(angle) * weapon.speed + ship.vy * inherit,
            life=weapon.life,
            radius=weapon.size,
            weapon=ship.weapon,
            damage=weapon.damage,
            angle=angle,
        ))
    return fired


def reset_ship(ship: Ship, bounds: Bounds):
    """Respawn at the center, at rest, with full HP and a grace period"""
    ship.x, ship.y = bounds.center
    ship.vx = 0.0
    ship.vy = 0.0
    ship.angle = SHIP_CONFIG["start_angle"]
    ship.hp = ship.max_hp
    ship.invulnerability = SHIP_CONFIG["respawn_invulnerability"]
    ship.visible = True
    ship.shoot_cooldown = 0
