from __future__ import annotations

# ==============================================================================
# Play Area
# ==============================================================================

# Playfield in play-space units (EGA-era screen layout).
GAME_WIDTH = 640
GAME_HEIGHT = 350

# Buildings stand on this line; y grows downward.
BOTTOM_LINE = 335

# ==============================================================================
# Physics
# ==============================================================================

GRAVITY = 9.8
WIND_DIVISOR = 5.0
TIME_STEP_S = 0.1  # Simulated seconds per tick

# Gravity is scaled by screen height / 350.
GRAVITY_SCALE = GAME_HEIGHT / 350

# ==============================================================================
# Actors
# ==============================================================================

PLAYER_ONE = 1
PLAYER_TWO = 2

AVATAR_WIDTH = 30
AVATAR_HEIGHT = 28

SUN_X = GAME_WIDTH / 2
SUN_Y = 25.0
SUN_RADIUS = 12.0

EXPLOSION_RADIUS = 30.0

# Velocities below this drop the banana on the thrower.
SELF_KILL_VELOCITY = 2.0

# Controller-side input bounds (inclusive).
ANGLE_MIN_DEG = 1
ANGLE_MAX_DEG = 179
VELOCITY_MIN = 1
VELOCITY_MAX = 200

BUILDING_COLORS = ("#AA0000", "#AA00AA", "#AA5500", "#AAAAAA")
