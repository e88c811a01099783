"""2D Game module - Asteroids with a boss planet"""

from .world import GameWorld
from .env import AsteroidsEnv, run_random_episode
from .inputs import InputState, TouchControls
from .weapons import WeaponKind, WEAPON_TYPES

__all__ = [
    'GameWorld',
    'AsteroidsEnv',
    'run_random_episode',
    'InputState',
    'TouchControls',
    'WeaponKind',
    'WEAPON_TYPES',
]
