"""
Arcade window: draws world snapshots and turns keyboard/mouse events into
InputState. The simulation uses screen coordinates (y down); arcade's y
axis points up, so every y is flipped on the way out.
"""

from __future__ import annotations

import math
from typing import Set

import arcade

from .entities import Bounds
from .inputs import InputState, TouchControls
from .utils import clamp
from .weapons import WEAPON_TYPES, unlocked_weapons
from .world import GameWorld

NAMED_COLORS = {
    "white": (255, 255, 255),
    "yellow": (255, 230, 80),
    "orange": (255, 150, 40),
    "red": (255, 0, 0),
}


class AsteroidsWindow(arcade.Window):
    """Rendering collaborator and keyboard/pointer input source"""

    def __init__(self, world: GameWorld, width: int, height: int, interactive: bool = True):
        super().__init__(width, height, "Asteroids - Arcade", resizable=interactive)
        self.world = world
        self.interactive = interactive
        self.keys_down: Set[int] = set()
        self.touch = TouchControls(width, height)

        # Colors
        self.BG = (5, 5, 15)
        self.SHIP_C = (0, 200, 255)
        self.ASTEROID_C = (200, 180, 150)
        self.CRACK_C = (20, 15, 10)
        self.DUST_C = (150, 130, 110)
        self.PLANET_C = (51, 102, 136)
        self.HUD_C = (220, 220, 220)

    # ----------------------------
    # Input
    # ----------------------------

    def sample_input(self) -> InputState:
        keys = self.keys_down
        touch = self.touch.sample()
        return InputState(
            turn_left=arcade.key.LEFT in keys or touch.turn_left,
            turn_right=arcade.key.RIGHT in keys or touch.turn_right,
            thrust=arcade.key.UP in keys or touch.thrust,
            brake=arcade.key.DOWN in keys,
            fire=arcade.key.SPACE in keys or touch.fire,
            cycle_weapon=arcade.key.Q in keys or touch.cycle_weapon,
            restart=arcade.key.R in keys or touch.restart,
        )

    def on_key_press(self, symbol: int, modifiers: int):
        if symbol == arcade.key.ESCAPE:
            self.close()
            return
        self.keys_down.add(symbol)

    def on_key_release(self, symbol: int, modifiers: int):
        self.keys_down.discard(symbol)

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.touch.touch_start(0, x, self.height - y, game_over=self.world.session.game_over)

    def on_mouse_drag(self, x: float, y: float, dx: float, dy: float, buttons: int, modifiers: int):
        self.touch.touch_move(0, x, self.height - y)

    def on_mouse_release(self, x: float, y: float, button: int, modifiers: int):
        self.touch.touch_end(0)

    def on_resize(self, width: int, height: int):
        super().on_resize(width, height)
        self.touch.resize(width, height)

    def on_update(self, delta_time: float):
        if self.interactive:
            self.world.step(self.sample_input(), Bounds(self.width, self.height))

    # ----------------------------
    # Drawing
    # ----------------------------

    def on_draw(self):
        self.clear()
        arcade.set_background_color(self.BG)
        snap = self.world.snapshot()
        ox, oy = snap["shake_offset"]
        h = self.height

        def to_screen(x, y):
            return x + ox, h - (y + oy)

        boss = snap["boss"]
        if boss is not None and not boss.destroyed:
            bx, by = to_screen(boss.x, boss.y)
            arcade.draw_circle_filled(bx, by, boss.radius, self.PLANET_C)
            for c in boss.continents:
                ang = c.angle + boss.angle
                cx = bx + math.cos(ang) * boss.radius * c.dist
                cy = by - math.sin(ang) * boss.radius * c.dist
                arcade.draw_circle_filled(cx, cy, boss.radius * c.size, c.color)
            frac = clamp(boss.health / boss.max_health, 0, 1)
            bar_w = boss.radius * 2
            top = by + boss.radius + 25
            arcade.draw_lrbt_rectangle_filled(bx - bar_w / 2, bx + bar_w / 2, top - 8, top, (100, 0, 0))
            if frac > 0:
                arcade.draw_lrbt_rectangle_filled(bx - bar_w / 2, bx - bar_w / 2 + bar_w * frac,
                                                  top - 8, top, (255, int(255 * frac), 0))

        for a in snap["asteroids"]:
            n = a.visual.vertex_count
            outline = []
            for i, k in enumerate(a.visual.offsets):
                ang = a.angle + i / n * math.tau
                outline.append(to_screen(a.x + math.cos(ang) * a.radius * k,
                                         a.y + math.sin(ang) * a.radius * k))
            arcade.draw_polygon_outline(outline, self.ASTEROID_C, 2)

            cos_a, sin_a = math.cos(a.angle), math.sin(a.angle)
            for crater in a.visual.craters:
                cx = a.x + crater.offset_x * cos_a - crater.offset_y * sin_a
                cy = a.y + crater.offset_x * sin_a + crater.offset_y * cos_a
                arcade.draw_circle_filled(*to_screen(cx, cy), crater.size, (0, 0, 0, 150))
            for crack in a.visual.cracks:
                pts = [to_screen(a.x + px * cos_a - py * sin_a, a.y + px * sin_a + py * cos_a)
                       for px, py in crack.points]
                arcade.draw_line_strip(pts, self.CRACK_C, 1.5)

        for d in snap["dust"]:
            arcade.draw_circle_filled(*to_screen(d.x, d.y), d.radius, self.DUST_C)

        for b in snap["bullets"]:
            weapon = WEAPON_TYPES[b.weapon]
            if len(b.trail) > 1:
                arcade.draw_line_strip([to_screen(x, y) for x, y in b.trail],
                                       weapon.glow_color, max(1.0, b.radius / 2))
            arcade.draw_circle_filled(*to_screen(b.x, b.y), b.radius, weapon.color)

        ship = snap["ship"]
        if ship.visible:
            r = ship.radius
            nose = (ship.x + math.cos(ship.angle) * r * 1.2, ship.y + math.sin(ship.angle) * r * 1.2)
            left = (ship.x + math.cos(ship.angle + math.pi * 3 / 4) * r,
                    ship.y + math.sin(ship.angle + math.pi * 3 / 4) * r)
            right = (ship.x + math.cos(ship.angle - math.pi * 3 / 4) * r,
                     ship.y + math.sin(ship.angle - math.pi * 3 / 4) * r)
            arcade.draw_polygon_outline([to_screen(*nose), to_screen(*left), to_screen(*right)],
                                        self.SHIP_C, 2)

        for p in snap["particles"]:
            color = NAMED_COLORS.get(p.color, NAMED_COLORS["white"])
            alpha = int(255 * clamp(p.life / p.max_life, 0, 1))
            arcade.draw_circle_filled(*to_screen(p.x, p.y), p.size, (*color, alpha))

        for pop in snap["popups"]:
            alpha = int(255 * clamp(pop.life / 60, 0, 1))
            px, py = to_screen(pop.x, pop.y)
            arcade.draw_text(f"+{pop.score}", px, py, (255, 255, 100, alpha), 14, anchor_x="center")

        alpha, color = snap["flash"]
        if alpha > 0:
            rgb = NAMED_COLORS.get(color, NAMED_COLORS["white"])
            arcade.draw_lrbt_rectangle_filled(0, self.width, 0, self.height, (*rgb, int(255 * alpha)))

        self._draw_hud(snap)

    def _draw_hud(self, snap):
        h = self.height
        arcade.draw_text(f"SCORE: {snap['score']}", 20, h - 30, self.HUD_C, 16)
        arcade.draw_text(f"LIVES: {snap['lives']}", 20, h - 55, self.HUD_C, 16)
        arcade.draw_text(f"LEVEL: {snap['level']}", 20, h - 80, (255, 204, 0), 16)

        # HP bar
        ship = snap["ship"]
        frac = clamp(ship.hp / ship.max_hp, 0, 1)
        arcade.draw_lrbt_rectangle_filled(20, 120, h - 105, h - 95, (100, 0, 0))
        if frac > 0:
            arcade.draw_lrbt_rectangle_filled(20, 20 + 100 * frac, h - 105, h - 95, (80, 200, 120))

        weapon = WEAPON_TYPES[ship.weapon]
        unlocked = len(unlocked_weapons(snap["score"]))
        arcade.draw_text(f"{weapon.name}  [Q] {unlocked}/{len(WEAPON_TYPES)}",
                         20, h - 130, weapon.color, 12)

        if snap["game_over"]:
            arcade.draw_text("GAME OVER", self.width / 2, h / 2, self.HUD_C, 48, anchor_x="center")
            arcade.draw_text('PRESS "R" TO RESTART', self.width / 2, h / 2 - 50, self.HUD_C, 16,
                             anchor_x="center")


def run_game(width: int = 800, height: int = 600, seed=None):
    """Open a window and play with the keyboard (arrows, Space, Q, R)"""
    world = GameWorld(width=width, height=height, seed=seed)
    AsteroidsWindow(world, width, height)
    arcade.run()
