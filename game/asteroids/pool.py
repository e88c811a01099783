"""
Bullet pool
-----------
Fixed-capacity arena of bullet slots plus a stack of free slot indices.

- acquire() hands out a free slot, grows the arena up to capacity, and past
  that returns an unpooled bullet that is simply dropped on release.
- release() returns a bullet's slot to the free stack. Releasing a bullet
  that is already dead is a no-op.
- `active` holds the live bullets in spawn order; the world iterates it
  back-to-front so removals never disturb pending indices.
"""

from __future__ import annotations

from typing import Iterator, List

from .config import BULLET_CONFIG
from .entities import Bullet, Bounds
from .weapons import WeaponKind


class BulletPool:
    """Free-list backed bullet storage"""

    def __init__(self, capacity: int = BULLET_CONFIG["pool_capacity"]):
        if capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self._slots: List[Bullet] = []
        self._free: List[int] = []
        self.active: List[Bullet] = []

    # --- Collection Protocol -------------------------------------------------
    def __len__(self) -> int:
        return len(self.active)

    def __iter__(self) -> Iterator[Bullet]:
        return iter(self.active)

    @property
    def size(self) -> int:
        """Number of slots backing the pool"""
        return len(self._slots)

    @property
    def free_count(self) -> int:
        return len(self._free)

    # --- Arena ---------------------------------------------------------------
    def acquire(self) -> Bullet:
        if self._free:
            return self._slots[self._free.pop()]
        if len(self._slots) < self.capacity:
            bullet = Bullet(slot=len(self._slots))
            self._slots.append(bullet)
            return bullet
        return Bullet()

    def release(self, bullet: Bullet):
        if not bullet.alive:
            return
        bullet.alive = False
        self.active.remove(bullet)
        if 0 <= bullet.slot < len(self._slots) and len(self._free) < self.capacity:
            self._free.append(bullet.slot)

    def clear(self):
        for bullet in list(self.active):
            self.release(bullet)

    # --- Simulation ----------------------------------------------------------
    def spawn(
        self,
        x: float,
        y: float,
        vx: float,
        vy: float,
        life: int,
        radius: float,
        weapon: WeaponKind,
        damage: float,
        angle: float,
    ) -> Bullet:
        b = self.acquire()
        b.x, b.y = x, y
        b.vx, b.vy = vx, vy
        b.life = life
        b.radius = radius
        b.weapon = weapon
        b.damage = damage
        b.angle = angle
        b.trail.clear()
        b.trail.append((x, y))
        b.alive = True
        self.active.append(b)
        return b

    def update(self, bounds: Bounds) -> int:
        """Advance all bullets one tick. Returns how many were retired."""
        margin = BULLET_CONFIG["offscreen_margin"]
        retired = 0
        for i in range(len(self.active) - 1, -1, -1):
            b = self.active[i]
            b.trail.append((b.x, b.y))
            b.x += b.vx
            b.y += b.vy
            b.life -= 1

            # Bullets do not wrap: leaving the screen retires them
            off = (b.x < -margin or b.x > bounds.width + margin
                   or b.y < -margin or b.y > bounds.height + margin)
            if off or b.life <= 0:
                self.release(b)
                retired += 1
        return retired
