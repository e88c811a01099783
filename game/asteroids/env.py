"""
AsteroidsEnv - Gymnasium wrapper around GameWorld
-------------------------------------------------
- 1 agent flying the ship: MultiDiscrete action [turn(3), thrust(2), brake(2), fire(2), cycle(2)]
- Vector observation: ship state + top-K nearest asteroids + boss
- Reward shaped from the world's per-tick events
- Episode terminates on game over, truncates after max_steps

Install:
    pip install gymnasium arcade numpy
"""

from __future__ import annotations

import math
from typing import Any, Dict, Optional

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import ENV_CONFIG, REWARD_CONFIG, SHIP_CONFIG
from .entities import Bounds
from .inputs import InputState
from .utils import clamp, seed_everything
from .weapons import get_weapon
from .world import GameWorld

MAX_SPEED = 8.0  # normalizer for velocities in the observation


def action_to_input(action) -> InputState:
    """Decode a MultiDiscrete action into logical controls"""
    turn, thrust, brake, fire, cycle = (int(a) for a in action)
    return InputState(
        turn_left=turn == 1,
        turn_right=turn == 2,
        thrust=thrust == 1,
        brake=brake == 1,
        fire=fire == 1,
        cycle_weapon=cycle == 1,
    )


class AsteroidsEnv(gym.Env):
    """Asteroids-with-a-boss environment for agents"""

    metadata = {"render_modes": ["human"], "render_fps": 60}

    def __init__(
        self,
        render_mode: Optional[str] = None,
        width: int = ENV_CONFIG["width"],
        height: int = ENV_CONFIG["height"],
        max_steps: int = ENV_CONFIG["max_steps"],
        k_asteroids: int = ENV_CONFIG["k_asteroids"],
        reward_config: Optional[Dict[str, float]] = None,
    ):
        super().__init__()

        if render_mode is not None and render_mode not in self.metadata["render_modes"]:
            raise ValueError(f"Unknown render mode: {render_mode}")
        self.render_mode = render_mode

        self.width = width
        self.height = height
        self.max_steps = max_steps
        self.k_asteroids = k_asteroids
        self.reward_config = dict(REWARD_CONFIG if reward_config is None else reward_config)

        # turn: 0 none, 1 left, 2 right
        self.action_space = spaces.MultiDiscrete([3, 2, 2, 2, 2])

        # Ship: pos(2) vel(2) heading(2) hp(1) cooldown(1) invulnerable(1)
        # Each asteroid: rel pos(2) rel vel(2) radius(1)
        # Boss: present(1) rel pos(2) health(1)
        obs_dim = 9 + self.k_asteroids * 5 + 4
        self.observation_space = spaces.Box(
            low=-1.0, high=1.0, shape=(obs_dim,), dtype=np.float32
        )

        self.world: GameWorld = None  # type: ignore
        self._window = None
        self._step_count = 0

    # ----------------------------
    # Gym API
    # ----------------------------

    def reset(self, seed: Optional[int] = None, options: Optional[dict] = None):
        super().reset(seed=seed)
        seed_everything(seed)

        world_seed = seed if seed is not None else int(self.np_random.integers(0, 2**31 - 1))
        self.world = GameWorld(width=self.width, height=self.height, seed=world_seed)
        self._step_count = 0

        return self._get_obs(), self._get_info()

    def step(self, action):
        events = self.world.step(action_to_input(action), Bounds(self.width, self.height))

        reward = self._compute_reward(events)

        terminated = self.world.session.game_over
        self._step_count += 1
        truncated = self._step_count >= self.max_steps

        obs = self._get_obs()
        info = self._get_info()

        if self.render_mode == "human":
            self.render()

        return obs, reward, terminated, truncated, info

    # ----------------------------
    # Observation / reward / info
    # ----------------------------

    def _get_obs(self) -> np.ndarray:
        w = self.world
        ship = w.ship
        cooldown_max = max(1, get_weapon(ship.weapon).cooldown)
        grace_max = SHIP_CONFIG["respawn_invulnerability"]

        obs_parts = [
            clamp(ship.x / self.width * 2 - 1, -1, 1),
            clamp(ship.y / self.height * 2 - 1, -1, 1),
            clamp(ship.vx / MAX_SPEED, -1, 1),
            clamp(ship.vy / MAX_SPEED, -1, 1),
            math.cos(ship.angle),
            math.sin(ship.angle),
            ship.hp / ship.max_hp * 2 - 1,
            clamp(ship.shoot_cooldown / cooldown_max, 0, 1),
            clamp(ship.invulnerability / grace_max, 0, 1),
        ]

        # Asteroids: top-K nearest
        nearest = sorted(
            w.asteroids,
            key=lambda a: (a.x - ship.x) ** 2 + (a.y - ship.y) ** 2
        )
        for i in range(self.k_asteroids):
            if i < len(nearest):
                a = nearest[i]
                obs_parts += [
                    clamp((a.x - ship.x) / self.width, -1, 1),
                    clamp((a.y - ship.y) / self.height, -1, 1),
                    clamp((a.vx - ship.vx) / MAX_SPEED, -1, 1),
                    clamp((a.vy - ship.vy) / MAX_SPEED, -1, 1),
                    clamp(a.radius / 50.0, 0, 1),
                ]
            else:
                obs_parts += [0.0, 0.0, 0.0, 0.0, 0.0]

        boss = w.boss
        if boss is not None and not boss.destroyed:
            obs_parts += [
                1.0,
                clamp((boss.x - ship.x) / self.width, -1, 1),
                clamp((boss.y - ship.y) / self.height, -1, 1),
                clamp(boss.health / boss.max_health, 0, 1),
            ]
        else:
            obs_parts += [0.0, 0.0, 0.0, 0.0]

        return np.array(obs_parts, dtype=np.float32)

    def _compute_reward(self, events: Dict[str, float]) -> float:
        rc = self.reward_config
        reward = 0.0

        reward += rc["R_HIT"] * (events.get("hit", 0.0) + events.get("boss_hit", 0.0))
        reward += rc["R_KILL"] * events.get("kill", 0.0)
        reward += rc["R_BOSS"] * events.get("boss_kill", 0.0)
        reward += rc["R_LEVEL"] * events.get("level_up", 0.0)

        reward -= rc["R_DAMAGE"] * events.get("damage", 0.0)
        reward -= rc["R_LIFE"] * events.get("life_lost", 0.0)
        reward -= rc["R_SHOT"] * events.get("shot", 0.0)
        reward -= rc["R_TIME"]
        reward -= rc["R_GAME_OVER"] * events.get("game_over", 0.0)

        return float(reward)

    def _get_info(self) -> Dict[str, Any]:
        info = self.world.get_info()
        info["step"] = self._step_count
        return info

    # ----------------------------
    # Rendering with Arcade
    # ----------------------------

    def render(self):
        if self.render_mode is None:
            return None

        if self._window is None:
            from .render import AsteroidsWindow
            self._window = AsteroidsWindow(self.world, self.width, self.height, interactive=False)

        self._window.world = self.world
        self._window.dispatch_events()
        self._window.on_draw()
        self._window.flip()
        return None

    def close(self):
        if self._window is not None:
            self._window.close()
            self._window = None


# ----------------------------
# Quick sanity test
# ----------------------------

def run_random_episode(render: bool = False, seed: int = 42, max_steps: Optional[int] = None,
                       verbose: bool = True) -> float:
    """Run one episode with random actions and return its total reward"""
    kwargs = {"render_mode": "human" if render else None}
    if max_steps is not None:
        kwargs["max_steps"] = max_steps
    env = AsteroidsEnv(**kwargs)
    obs, info = env.reset(seed=seed)
    env.action_space.seed(seed)

    terminated = False
    truncated = False
    total = 0.0

    while not (terminated or truncated):
        action = env.action_space.sample()
        obs, reward, terminated, truncated, info = env.step(action)
        total += reward

    if verbose:
        print(f"Random episode return: {total:.2f}  "
              f"score={info['score']} level={info['level']} steps={info['step']}")

    env.close()
    return total
