"""
Input state and the touch/pointer adapter

The simulation only ever reads an InputState. Keyboards, touch screens and
agents each translate their own events into one.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import Dict, Optional


@dataclass
class InputState:
    """Logical controls sampled once per tick"""
    turn_left: bool = False
    turn_right: bool = False
    thrust: bool = False
    brake: bool = False
    fire: bool = False
    cycle_weapon: bool = False
    restart: bool = False

    def copy(self) -> "InputState":
        return replace(self)


@dataclass
class _Button:
    radius: float
    x: float = 0.0
    y: float = 0.0
    pressed: bool = False
    touch_id: Optional[int] = None


class TouchControls:
    """
    Virtual joystick on the left half of the screen, FIRE and WPN buttons on
    the right half.

    Held controls (turn, thrust, fire) stay set while the touch lasts. WPN
    and restart are one-shot requests: they are reported by the next
    `sample()` and then cleared.
    """

    JOYSTICK_RADIUS = 60.0
    DEAD_ZONE = 0.3

    def __init__(self, width: float, height: float):
        self.width = width
        self.height = height
        self.state = InputState()

        self.joystick_active = False
        self.joystick_id: Optional[int] = None
        self.base_x = self.base_y = 0.0
        self.knob_x = self.knob_y = 0.0

        self.buttons: Dict[str, _Button] = {
            "fire": _Button(radius=45.0),
            "switch": _Button(radius=35.0),
        }
        self._layout()

    def resize(self, width: float, height: float):
        self.width = width
        self.height = height
        self._layout()

    def _layout(self):
        self.buttons["fire"].x = self.width - 80
        self.buttons["fire"].y = self.height - 80
        self.buttons["switch"].x = self.width - 180
        self.buttons["switch"].y = self.height - 60

    # ----------------------------
    # Touch events
    # ----------------------------

    def touch_start(self, touch_id: int, x: float, y: float, game_over: bool = False):
        if game_over:
            self.state.restart = True
            return

        if x < self.width / 2:
            if not self.joystick_active:
                self.joystick_active = True
                self.joystick_id = touch_id
                self.base_x = self.knob_x = x
                self.base_y = self.knob_y = y
            return

        for name, btn in self.buttons.items():
            if math.hypot(x - btn.x, y - btn.y) < btn.radius:
                btn.pressed = True
                btn.touch_id = touch_id
                if name == "fire":
                    self.state.fire = True
                elif name == "switch":
                    self.state.cycle_weapon = True

    def touch_move(self, touch_id: int, x: float, y: float):
        if touch_id != self.joystick_id:
            return

        dx = x - self.base_x
        dy = y - self.base_y
        dist = math.hypot(dx, dy)
        max_dist = self.JOYSTICK_RADIUS
        angle = math.atan2(dy, dx)
        if dist > max_dist:
            self.knob_x = self.base_x + math.cos(angle) * max_dist
            self.knob_y = self.base_y + math.sin(angle) * max_dist
        else:
            self.knob_x = x
            self.knob_y = y

        engaged = min(dist / max_dist, 1.0) > self.DEAD_ZONE
        self.state.thrust = engaged
        self.state.turn_left = False
        self.state.turn_right = False
        if not engaged:
            return

        # Screen y grows downwards: -90 degrees points up
        deg = math.degrees(angle)
        if -135 < deg < -45 or 45 < deg < 135:
            return
        if -45 <= deg <= 45:
            self.state.turn_right = True
        else:
            self.state.turn_left = True

    def touch_end(self, touch_id: int):
        if touch_id == self.joystick_id:
            self.joystick_active = False
            self.joystick_id = None
            self.state.thrust = False
            self.state.turn_left = False
            self.state.turn_right = False

        for name, btn in self.buttons.items():
            if btn.touch_id == touch_id:
                btn.pressed = False
                btn.touch_id = None
                if name == "fire":
                    self.state.fire = False

    # ----------------------------
    # Sampling
    # ----------------------------

    def sample(self) -> InputState:
        snapshot = self.state.copy()
        self.state.cycle_weapon = False
        self.state.restart = False
        return snapshot
