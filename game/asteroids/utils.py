"""
Utility functions for game mechanics
"""

from __future__ import annotations
import math
import random
from typing import Tuple, Optional
import numpy as np


def clamp(x: float, lo: float, hi: float) -> float:
    """Clamp value between low and high bounds"""
    return lo if x < lo else hi if x > hi else x


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between two points"""
    return math.hypot(x1 - x2, y1 - y2)


def circle_collide(x1, y1, r1, x2, y2, r2) -> bool:
    """Check if two circles overlap (strict, touching circles do not collide)"""
    return distance(x1, y1, x2, y2) < r1 + r2


def wrap_position(x: float, y: float, radius: float, width: float, height: float) -> Tuple[float, float]:
    """
    Toroidal wraparound. A body that is more than one radius past an edge
    reappears one radius beyond the opposite edge.
    """
    if x < -radius:
        x = width + radius
    elif x > width + radius:
        x = -radius
    if y < -radius:
        y = height + radius
    elif y > height + radius:
        y = -radius
    return x, y


def make_rng(seed: Optional[int] = None) -> random.Random:
    """Independent random source so parallel worlds never share state"""
    return random.Random(seed)


def seed_everything(py_seed: Optional[int]):
    """Seed all random number generators"""
    if py_seed is None:
        return
    random.seed(py_seed)
    np.random.seed(py_seed)
