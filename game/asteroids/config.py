"""
Gameplay configuration for the asteroids simulation
All values are per tick; the game is tuned for 60 ticks per second.
"""

import math

# ==============================================================================
# WORLD
# ==============================================================================

WORLD_CONFIG = {
    "width": 800,
    "height": 600,
    "fps": 60,
    "start_lives": 3,
    "start_level": 1,
    "safe_spawn_radius": 150.0,   # no initial asteroid this close to the ship
    "spawn_attempts": 100,        # placement retries before giving up on the safe zone
    "dust_on_split": True,        # tier-3 splits at level >= 2 release dust
}

# ==============================================================================
# SHIP
# ==============================================================================

SHIP_CONFIG = {
    "radius": 15.0,
    "start_angle": -math.pi / 2,  # facing up
    "turn_speed": 0.1,            # rad per tick
    "thrust": 0.1,                # acceleration per tick
    "brake": 0.95,                # extra velocity decay while braking
    "drag": 0.99,                 # ambient velocity decay, every tick
    "max_hp": 100.0,
    "respawn_invulnerability": 120,
    "hit_invulnerability": 60,
    "blink_period": 10,
    "velocity_inheritance": 0.3,  # fraction of ship velocity added to bullets
}

# ==============================================================================
# BULLETS
# ==============================================================================

BULLET_CONFIG = {
    "pool_capacity": 100,
    "trail_length": 8,
    "offscreen_margin": 10.0,
}

# ==============================================================================
# ASTEROIDS
# ==============================================================================

ASTEROID_CONFIG = {
    "base_speed": 1.5,
    "level_speed_bonus": 0.1,     # +10% speed per level
    "max_spin": 0.02,
    "initial_radius": 50.0,
    "initial_tier": 3,
    "vertex_range": (8, 14),
    "vertex_jitter": (0.8, 1.2),
    "large_crater_chance": 0.1,
    "restitution": 0.8,
    "field_base": 3,              # field size = field_base + field_per_level * level
    "field_per_level": 2,
}

# ==============================================================================
# BOSS PLANET
# ==============================================================================

BOSS_CONFIG = {
    "base_radius": 80.0,
    "radius_per_level": 10.0,
    "base_health": 20.0,
    "health_per_level": 10.0,
    "spin": 0.002,
    "continent_range": (5, 7),
}

# ==============================================================================
# DAMAGE AND SCORING
# ==============================================================================

DAMAGE_CONFIG = {
    "asteroid_contact": 34.0,
    "boss_contact": 50.0,
    "dust_contact": 10.0,
    "boss_base_points": 100,
    "boss_points_per_level": 50,
}

# ==============================================================================
# EFFECTS
# ==============================================================================

EFFECTS_CONFIG = {
    "particle_drag": 0.98,
    "popup_life": 60,
    "popup_rise": 2.0,
    "flash_alpha": 0.5,
    "flash_decay": 0.02,
    "dust_count": 6,
    "dust_radius": (3.0, 6.0),
    "dust_life": 180,
    "dust_speed": 0.6,
}

# ==============================================================================
# GYMNASIUM ENVIRONMENT
# ==============================================================================

ENV_CONFIG = {
    "width": 800,
    "height": 600,
    "max_steps": 3600,  # 60s at 60 FPS
    "k_asteroids": 5,
}

REWARD_CONFIG = {
    "name": "baseline",
    "R_HIT": 0.1,        # bullet connects with an asteroid or the boss
    "R_KILL": 1.0,       # asteroid destroyed
    "R_BOSS": 5.0,       # boss destroyed
    "R_LEVEL": 2.0,      # level cleared
    "R_DAMAGE": 0.02,    # per HP lost
    "R_LIFE": 2.0,       # life lost
    "R_SHOT": 0.005,     # shooting costs a little
    "R_TIME": 0.0005,
    "R_GAME_OVER": 5.0,
}
