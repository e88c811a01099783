"""
Visual feedback state: particles, score popups, dust, screen shake and flash

Nothing here is drawn; the renderer reads it. Dust is the one effect that
feeds back into gameplay (the world checks it against the ship).
"""

from __future__ import annotations

import math
import random
from typing import List

from .config import EFFECTS_CONFIG
from .entities import Bounds, Dust, Particle, ScorePopup
from .utils import wrap_position


class EffectsState:

    def __init__(self, rng: random.Random):
        self.rng = rng
        self.particles: List[Particle] = []
        self.popups: List[ScorePopup] = []
        self.dust: List[Dust] = []

        self.shake_duration = 0
        self.shake_intensity = 0.0
        self.shake_offset = (0.0, 0.0)

        self.flash_alpha = 0.0
        self.flash_color = "white"

    def clear(self):
        self.particles.clear()
        self.popups.clear()
        self.dust.clear()
        self.shake_duration = 0
        self.shake_intensity = 0.0
        self.shake_offset = (0.0, 0.0)
        self.flash_alpha = 0.0

    # ----------------------------
    # Emitters
    # ----------------------------

    def explosion(self, x: float, y: float, count: int, color: str = "white",
                  speed: float = 3.0, life: float = 40.0) -> int:
        rng = self.rng
        for _ in range(count):
            angle = rng.random() * math.tau
            s = rng.random() * speed
            p_life = rng.random() * life + 10
            self.particles.append(Particle(
                x=x,
                y=y,
                vx=math.cos(angle) * s,
                vy=math.sin(angle) * s,
                life=p_life,
                max_life=p_life,
                color=color,
                size=rng.random() * 3 + 1,
            ))
        return count

    def popup(self, x: float, y: float, score: int):
        self.popups.append(ScorePopup(
            x=x, y=y, score=score,
            life=EFFECTS_CONFIG["popup_life"],
            vy=-EFFECTS_CONFIG["popup_rise"],
        ))

    def shake(self, duration: int, intensity: float):
        self.shake_duration = duration
        self.shake_intensity = intensity

    def flash(self, color: str = "white"):
        self.flash_alpha = EFFECTS_CONFIG["flash_alpha"]
        self.flash_color = color

    def emit_dust(self, x: float, y: float) -> int:
        rng = self.rng
        lo, hi = EFFECTS_CONFIG["dust_radius"]
        count = EFFECTS_CONFIG["dust_count"]
        for _ in range(count):
            angle = rng.random() * math.tau
            s = rng.random() * EFFECTS_CONFIG["dust_speed"]
            self.dust.append(Dust(
                x=x,
                y=y,
                vx=math.cos(angle) * s,
                vy=math.sin(angle) * s,
                radius=rng.uniform(lo, hi),
                life=EFFECTS_CONFIG["dust_life"],
            ))
        return count

    # ----------------------------
    # Per-tick update
    # ----------------------------

    def update(self, bounds: Bounds):
        drag = EFFECTS_CONFIG["particle_drag"]
        for p in self.particles:
            p.x += p.vx
            p.y += p.vy
            p.vx *= drag
            p.vy *= drag
            p.life -= 1
        self.particles = [p for p in self.particles if p.life > 0]

        for pop in self.popups:
            pop.y += pop.vy
            pop.life -= 1
        self.popups = [pop for pop in self.popups if pop.life > 0]

        for d in self.dust:
            d.x += d.vx
            d.y += d.vy
            d.x, d.y = wrap_position(d.x, d.y, d.radius, bounds.width, bounds.height)
            d.life -= 1
        self.dust = [d for d in self.dust if d.life > 0]

        if self.shake_duration > 0:
            self.shake_offset = (
                (self.rng.random() - 0.5) * self.shake_intensity,
                (self.rng.random() - 0.5) * self.shake_intensity,
            )
            self.shake_duration -= 1
        else:
            self.shake_offset = (0.0, 0.0)

        if self.flash_alpha > 0:
            self.flash_alpha = max(0.0, self.flash_alpha - EFFECTS_CONFIG["flash_decay"])
