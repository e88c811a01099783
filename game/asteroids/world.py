"""
GameWorld - the per-tick asteroids simulation
---------------------------------------------
- One aggregate owns the session, ship, bullet pool, asteroid field, boss
  planet and effects, so several worlds can run side by side
- Fixed tick order: input -> ship -> bullets -> asteroids/boss -> effects
  -> collisions and scoring -> level progression
- Every gameplay side effect is counted in `events` for the tick, in the
  same spirit as the reward events of an RL environment
- Rendering is somebody else's job: call `snapshot()` after `step()`

Quick test:
    python -m game.asteroids.play --headless
"""

from __future__ import annotations

import copy
from collections import deque
from typing import Any, Dict, List, Optional

from .asteroid import spawn_field, split_asteroid, update_asteroids
from .boss import create_planet, damage_planet, update_planet
from .config import DAMAGE_CONFIG, SHIP_CONFIG, WORLD_CONFIG
from .effects import EffectsState
from .entities import Asteroid, Bounds, Bullet, GameSession, Planet
from .inputs import InputState
from .pool import BulletPool
from .ship import new_ship, reset_ship, shoot, update_ship
from .utils import circle_collide, make_rng
from .weapons import WeaponKind, get_weapon, next_unlocked_weapon

EVENT_KEYS = (
    "shot", "hit", "kill", "split", "boss_hit", "boss_kill", "boss_spawn",
    "ship_hit", "damage", "life_lost", "game_over", "level_up",
    "explosion", "shake", "flash", "popup", "dust",
)


class GameWorld:
    """Asteroids game session with a boss planet at the end of every level"""

    def __init__(
        self,
        width: float = WORLD_CONFIG["width"],
        height: float = WORLD_CONFIG["height"],
        seed: Optional[int] = None,
        safe_spawn_radius: float = WORLD_CONFIG["safe_spawn_radius"],
        dust_on_split: bool = WORLD_CONFIG["dust_on_split"],
    ):
        self.bounds = Bounds(width, height)
        self.rng = make_rng(seed)
        self.safe_spawn_radius = safe_spawn_radius
        self.dust_on_split = dust_on_split

        # World state
        self.session = GameSession()
        self.ship = new_ship(self.bounds)
        self.bullets = BulletPool()
        self.asteroids: List[Asteroid] = []
        self.boss: Optional[Planet] = None
        self.effects = EffectsState(self.rng)

        # Step state
        self.tick_count = 0
        self._cycle_held = False

        # Event counters for the current tick
        self.events: Dict[str, float] = {}
        self._reset_events()

        self.reset()

    # ----------------------------
    # Session control
    # ----------------------------

    def reset(self):
        """Back to level 1 with a fresh field, score 0 and full lives"""
        self.session.reset()
        reset_ship(self.ship, self.bounds)
        self.ship.weapon = WeaponKind.PLASMA
        self.bullets.clear()
        self.effects.clear()
        self.boss = None
        self.asteroids = self._spawn_field()
        self._cycle_held = False

    def step(self, inputs: Optional[InputState] = None, bounds: Optional[Bounds] = None) -> Dict[str, float]:
        """Advance one tick. Returns the events raised during it."""
        self._reset_events()
        if bounds is not None:
            self.bounds = bounds
        if inputs is None:
            inputs = InputState()

        if inputs.restart and self.session.game_over:
            self.reset()

        self._apply_weapon_cycle(inputs)
        update_ship(self.ship, inputs, self.bounds, self.session.game_over)
        self._apply_fire(inputs)

        self.bullets.update(self.bounds)
        update_asteroids(self.asteroids, self.bounds)
        update_planet(self.boss)
        self.effects.update(self.bounds)

        self.handle_collisions()
        self.check_level_progression()

        self.tick_count += 1
        return self.events

    # ----------------------------
    # Core mechanics
    # ----------------------------

    def _reset_events(self):
        self.events = {key: 0.0 for key in EVENT_KEYS}

    def _spawn_field(self) -> List[Asteroid]:
        return spawn_field(
            self.rng, self.bounds, self.session.level,
            self.ship.x, self.ship.y, self.safe_spawn_radius,
        )

    def _apply_weapon_cycle(self, inputs: InputState):
        pressed = inputs.cycle_weapon and not self._cycle_held
        self._cycle_held = inputs.cycle_weapon
        if pressed and not self.session.game_over:
            self.ship.weapon = next_unlocked_weapon(self.ship.weapon, self.session.score)

    def _apply_fire(self, inputs: InputState):
        ship = self.ship
        if ship.shoot_cooldown > 0:
            ship.shoot_cooldown -= 1
        if not inputs.fire or ship.shoot_cooldown > 0 or self.session.game_over:
            return
        fired = shoot(ship, self.bullets)
        ship.shoot_cooldown = get_weapon(ship.weapon).cooldown
        self.events["shot"] += len(fired)

    def _burst(self, x: float, y: float, count: int, color: str = "white",
               speed: float = 3.0, life: float = 40.0):
        self.effects.explosion(x, y, count, color, speed, life)
        self.events["explosion"] += 1

    def _shake(self, duration: int, intensity: float):
        self.effects.shake(duration, intensity)
        self.events["shake"] += 1

    def _flash(self, color: str):
        self.effects.flash(color)
        self.events["flash"] += 1

    def _award(self, x: float, y: float, points: int):
        self.session.score += points
        self.effects.popup(x, y, points)
        self.events["popup"] += 1

    # ----------------------------
    # Collisions and scoring
    # ----------------------------

    def handle_collisions(self):
        if self.session.game_over:
            return
        self._collide_bullets_asteroids()
        self._collide_bullets_boss()
        self._collide_ship_hazards()

    def _collide_bullets_asteroids(self):
        active = self.bullets.active
        for i in range(len(active) - 1, -1, -1):
            if i >= len(active):
                continue
            b = active[i]
            for a in self.asteroids:
                if circle_collide(b.x, b.y, b.radius, a.x, a.y, a.radius):
                    self.bullets.release(b)
                    self.damage_asteroid(a, b.damage, b.x, b.y)
                    break

    def damage_asteroid(self, asteroid: Asteroid, damage: float,
                        hit_x: Optional[float] = None, hit_y: Optional[float] = None):
        asteroid.health -= damage
        self.events["hit"] += 1
        self._burst(asteroid.x if hit_x is None else hit_x,
                    asteroid.y if hit_y is None else hit_y,
                    5, "yellow", 2, 15)

        if asteroid.health > 0:
            self._burst(asteroid.x, asteroid.y, 3, "orange", 1.5, 20)
            return
        self.destroy_asteroid(asteroid)

    def destroy_asteroid(self, asteroid: Asteroid):
        """Score, explode and split a dead asteroid"""
        tier = asteroid.tier
        self._award(asteroid.x, asteroid.y, (4 - tier) * 10)
        self._burst(asteroid.x, asteroid.y, tier * 8, "white", 2 + tier)
        if tier == 3:
            self._shake(8, asteroid.radius * 0.1)

        children = split_asteroid(self.rng, self.bounds, asteroid, self.session.level)
        self.asteroids.remove(asteroid)
        self.asteroids.extend(children)
        self.events["kill"] += 1
        if children:
            self.events["split"] += 1

        if tier == 3 and self.session.level >= 2 and self.dust_on_split:
            self.events["dust"] += self.effects.emit_dust(asteroid.x, asteroid.y)

    def _collide_bullets_boss(self):
        boss = self.boss
        if boss is None or boss.destroyed:
            return
        active = self.bullets.active
        for i in range(len(active) - 1, -1, -1):
            if boss.destroyed:
                break
            if i >= len(active):
                continue
            b = active[i]
            if not circle_collide(b.x, b.y, b.radius, boss.x, boss.y, boss.radius):
                continue
            self.bullets.release(b)
            self.events["boss_hit"] += 1
            self._burst(b.x, b.y, 8, "orange", 3, 20)
            if damage_planet(boss, b.damage):
                self._destroy_boss(boss)

    def _destroy_boss(self, boss: Planet):
        level = self.session.level
        points = DAMAGE_CONFIG["boss_base_points"] + DAMAGE_CONFIG["boss_points_per_level"] * level
        self._award(boss.x, boss.y, points)
        self._burst(boss.x, boss.y, 60, "orange", 6, 60)
        self._burst(boss.x, boss.y, 40, "yellow", 4, 50)
        self._burst(boss.x, boss.y, 30, "white", 8, 40)
        self._shake(30, 15)
        self._flash("white")
        self.events["boss_kill"] += 1

    def _collide_ship_hazards(self):
        ship = self.ship
        if not ship.visible or ship.invulnerability > 0:
            return

        for a in self.asteroids:
            if circle_collide(ship.x, ship.y, ship.radius, a.x, a.y, a.radius):
                self.ship_hit(DAMAGE_CONFIG["asteroid_contact"])
                return

        boss = self.boss
        if boss is not None and not boss.destroyed:
            if circle_collide(ship.x, ship.y, ship.radius, boss.x, boss.y, boss.radius):
                self.ship_hit(DAMAGE_CONFIG["boss_contact"])
                return

        for d in self.effects.dust:
            if circle_collide(ship.x, ship.y, ship.radius, d.x, d.y, d.radius):
                self.effects.dust.remove(d)
                self.ship_hit(DAMAGE_CONFIG["dust_contact"])
                return

    def ship_hit(self, damage: float) -> bool:
        """
        Damage the ship. Returns False when the hit was ignored (grace period,
        hidden ship or game already over).
        """
        ship = self.ship
        if self.session.game_over or ship.invulnerability > 0 or not ship.visible:
            return False

        self._burst(ship.x, ship.y, 30, "orange", 4, 50)
        self._shake(20, 10)
        self._flash("red")
        self.events["ship_hit"] += 1
        self.events["damage"] += damage

        ship.hp -= damage
        if ship.hp > 0:
            ship.invulnerability = SHIP_CONFIG["hit_invulnerability"]
            return True

        self.session.lives -= 1
        ship.hp = ship.max_hp
        self.events["life_lost"] += 1
        if self.session.lives > 0:
            reset_ship(ship, self.bounds)
        else:
            self.session.game_over = True
            self._burst(ship.x, ship.y, 50, "yellow", 5, 60)
            self.events["game_over"] += 1
        return True

    # ----------------------------
    # Level progression
    # ----------------------------

    def check_level_progression(self):
        """An empty field summons the boss; a dead boss opens the next level"""
        if self.asteroids or self.session.game_over:
            return
        if self.boss is None:
            self.boss = create_planet(self.rng, self.bounds, self.session.level)
            self.events["boss_spawn"] += 1
        elif self.boss.destroyed:
            self.boss = None
            self.session.level += 1
            self.asteroids = self._spawn_field()
            self.events["level_up"] += 1

    # ----------------------------
    # Read-only views
    # ----------------------------

    def snapshot(self) -> Dict[str, Any]:
        """Copies of everything a renderer needs for one frame"""
        return {
            "bounds": self.bounds,
            "ship": copy.copy(self.ship),
            "asteroids": tuple(copy.copy(a) for a in self.asteroids),
            "bullets": tuple(_copy_bullet(b) for b in self.bullets),
            "boss": copy.copy(self.boss),
            "particles": tuple(copy.copy(p) for p in self.effects.particles),
            "popups": tuple(copy.copy(p) for p in self.effects.popups),
            "dust": tuple(copy.copy(d) for d in self.effects.dust),
            "shake_offset": self.effects.shake_offset,
            "flash": (self.effects.flash_alpha, self.effects.flash_color),
            "score": self.session.score,
            "lives": self.session.lives,
            "level": self.session.level,
            "game_over": self.session.game_over,
        }

    def get_info(self) -> Dict[str, Any]:
        return {
            "score": self.session.score,
            "lives": self.session.lives,
            "level": self.session.level,
            "game_over": self.session.game_over,
            "hp": self.ship.hp,
            "weapon": self.ship.weapon.name,
            "num_asteroids": len(self.asteroids),
            "num_bullets": len(self.bullets),
            "boss_health": None if self.boss is None else self.boss.health,
            "tick": self.tick_count,
        }


def _copy_bullet(b: Bullet) -> Bullet:
    dup = copy.copy(b)
    dup.trail = deque(b.trail, maxlen=b.trail.maxlen)
    return dup
