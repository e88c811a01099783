"""
Game entity dataclasses
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Tuple

from .config import BULLET_CONFIG, SHIP_CONFIG, WORLD_CONFIG
from .weapons import WeaponKind


@dataclass(frozen=True)
class Bounds:
    """Play area size, supplied by the host every tick"""
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Bounds must be positive, got {self.width}x{self.height}")

    @property
    def center(self) -> Tuple[float, float]:
        return self.width * 0.5, self.height * 0.5


@dataclass
class Ship:
    """Player ship, a singleton owned by the world"""
    x: float
    y: float
    vx: float = 0.0
    vy: float = 0.0
    angle: float = SHIP_CONFIG["start_angle"]
    radius: float = SHIP_CONFIG["radius"]
    hp: float = SHIP_CONFIG["max_hp"]
    max_hp: float = SHIP_CONFIG["max_hp"]
    weapon: WeaponKind = WeaponKind.PLASMA
    shoot_cooldown: int = 0
    invulnerability: int = 0  # ticks left
    visible: bool = True
    thrusting: bool = False
    braking: bool = False


# Asteroid visual descriptor, baked once at creation

@dataclass(frozen=True)
class Crater:
    offset_x: float
    offset_y: float
    size: float
    is_large: bool


@dataclass(frozen=True)
class Crack:
    points: Tuple[Tuple[float, float], ...]  # polyline in asteroid-local space


@dataclass(frozen=True)
class SurfacePatch:
    x: float
    y: float
    size: float
    color: Tuple[int, int, int]


@dataclass(frozen=True)
class AsteroidVisual:
    offsets: Tuple[float, ...]  # per-vertex radius multipliers
    craters: Tuple[Crater, ...]
    cracks: Tuple[Crack, ...]
    patches: Tuple[SurfacePatch, ...]

    @property
    def vertex_count(self) -> int:
        return len(self.offsets)


@dataclass(eq=False)
class Asteroid:
    """Asteroid; tier 3 is large, 2 medium, 1 small"""
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    tier: int
    health: float
    max_health: float
    visual: AsteroidVisual
    angle: float = 0.0
    spin: float = 0.0


@dataclass(eq=False)
class Bullet:
    """Bullet projectile entity, recycled through BulletPool"""
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    life: int = 0  # ticks
    radius: float = 2.0
    weapon: WeaponKind = WeaponKind.PLASMA
    damage: float = 1.0
    angle: float = 0.0
    trail: Deque[Tuple[float, float]] = field(
        default_factory=lambda: deque(maxlen=BULLET_CONFIG["trail_length"])
    )
    alive: bool = False
    slot: int = -1  # arena index, -1 when the bullet lives outside the pool


@dataclass(frozen=True)
class Continent:
    angle: float
    dist: float
    size: float
    color: Tuple[int, int, int]


@dataclass
class Planet:
    """Boss planet guarding the next level"""
    x: float
    y: float
    radius: float
    health: float
    max_health: float
    continents: Tuple[Continent, ...]
    atmosphere_hue: float
    angle: float = 0.0
    spin: float = 0.002
    destroyed: bool = False


@dataclass
class Particle:
    x: float
    y: float
    vx: float
    vy: float
    life: float
    max_life: float
    color: str
    size: float


@dataclass(eq=False)
class Dust:
    """Drifting debris that damages the ship on contact"""
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    life: int


@dataclass
class ScorePopup:
    x: float
    y: float
    score: int
    life: int
    vy: float


@dataclass
class GameSession:
    score: int = 0
    lives: int = WORLD_CONFIG["start_lives"]
    level: int = WORLD_CONFIG["start_level"]
    game_over: bool = False

    def reset(self):
        self.score = 0
        self.lives = WORLD_CONFIG["start_lives"]
        self.level = WORLD_CONFIG["start_level"]
        self.game_over = False
